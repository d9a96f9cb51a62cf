from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from staffpay.application import get_payroll_service
from staffpay.core.schema import StaffCreate, StaffUpdate

router = APIRouter(prefix="/staff", tags=["staff"])


@router.get("")
def list_staff(
    first_name: str | None = Query(default=None, alias="firstName"),
    dni: str | None = Query(default=None),
    cuit: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> dict:
    members = get_payroll_service().list_staff(first_name=first_name, dni=dni, cuit=cuit, page=page, limit=limit)
    return {"success": True, "data": [member.to_wire() for member in members]}


@router.post("", status_code=201)
def create_staff(payload: StaffCreate) -> dict:
    member = get_payroll_service().create_staff(payload)
    return {"success": True, "data": member.to_wire()}


@router.get("/{staff_id}")
def get_staff(staff_id: str) -> dict:
    member = get_payroll_service().get_staff(staff_id)
    if member is None:
        raise HTTPException(status_code=404, detail="staff member not found")
    return {"success": True, "data": member.to_wire()}


@router.patch("/{staff_id}")
def update_staff(staff_id: str, payload: StaffUpdate) -> dict:
    member = get_payroll_service().update_staff(staff_id, payload)
    if member is None:
        raise HTTPException(status_code=404, detail="staff member not found")
    return {"success": True, "data": member.to_wire()}


@router.delete("/{staff_id}")
def delete_staff(staff_id: str) -> dict:
    if not get_payroll_service().delete_staff(staff_id):
        raise HTTPException(status_code=404, detail="staff member not found")
    return {"success": True, "data": {"id": staff_id}}
