from __future__ import annotations

from fastapi import APIRouter, HTTPException

from staffpay.application import RecordNotFoundError, get_payroll_service
from staffpay.core.money import json_number
from staffpay.core.schema import WorkWeek

router = APIRouter(tags=["payroll"])


@router.post("/payroll/preview")
def preview_week(week: WorkWeek) -> dict:
    """Running totals for the hours-entry form; nothing is stored."""
    summary = get_payroll_service().preview(week)
    return {
        "success": True,
        "data": {
            "staffId": week.staff_id,
            "startDate": week.week_start.isoformat(),
            "totalHours": json_number(summary.total_hours),
            "grossPay": json_number(summary.gross_pay),
            "netPay": json_number(summary.net_pay),
        },
    }


@router.post("/staff/work-record", status_code=201)
def submit_work_record(week: WorkWeek) -> dict:
    record = get_payroll_service().submit(week)
    return {"success": True, "data": record.to_wire()}


@router.get("/staff/{staff_id}/work-records")
def list_work_records(staff_id: str) -> dict:
    records = get_payroll_service().history(staff_id)
    return {"success": True, "data": [record.to_wire() for record in records]}


@router.get("/staff/work-record/{record_id}")
def get_work_record(record_id: str) -> dict:
    try:
        record = get_payroll_service().get_record(record_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail="work record not found") from exc
    return {"success": True, "data": record.to_wire()}


@router.get("/staff/work-record/{record_id}/receipt")
def get_work_record_receipt(record_id: str) -> dict:
    try:
        receipt = get_payroll_service().receipt(record_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail="work record not found") from exc
    return {"success": True, "data": receipt.model_dump()}
