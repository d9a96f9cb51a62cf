"""Work-record persistence over the dashboard REST API."""
from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlparse

import httpx
from pydantic import ValidationError

from staffpay.core.calculator import summarize_week
from staffpay.core.schema import PayrollRecord, PaySummary, WorkWeek
from staffpay.core.validation import InvalidInputError, validate_work_week

from .work_records import PersistenceError, newest_first

logger = logging.getLogger(__name__)


def format_error_message(payload: Any) -> str:
    """Flatten an API error body into a single user-facing message."""

    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, list):
            return "\n".join(str(item) for item in message)
        if isinstance(message, str) and message:
            return message
        if payload.get("error"):
            return str(payload["error"])
    if isinstance(payload, str) and payload:
        return payload
    return "Unknown error"


def record_from_wire(data: dict[str, Any]) -> PayrollRecord:
    """Build a record from a backend row, recomputing the pay summary.

    Stored ``total`` values are not trusted: older rows hold gross pay, newer
    ones net pay. The summary is always derived again from the day values.
    Rows outside the entry limits are kept so history stays complete.
    """

    week = WorkWeek.model_validate(data)
    try:
        validate_work_week(week)
    except InvalidInputError as exc:
        logger.warning("record %s is outside entry limits: %s", data.get("id"), exc)
    summary = summarize_week(week)
    return PayrollRecord.from_week(
        str(data["id"]),
        week,
        summary,
        created_at=data.get("createdAt") or data.get("created_at"),
    )


class HttpWorkRecordRepository:
    """Persists payroll weeks through ``/staff/work-record`` endpoints."""

    def __init__(
        self,
        api_base: str,
        *,
        timeout: float = 15.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        parsed = urlparse(api_base)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("api_base must include scheme and host")

        self._api_base = api_base.rstrip("/")
        self._client = http_client or httpx.Client(timeout=timeout)
        self._owns_client = http_client is None

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self._api_base}{path}"
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise PersistenceError(f"could not reach payroll API: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = response.text

        if response.is_error:
            message = format_error_message(body)
            logger.error("%s %s returned %s: %s", method, url, response.status_code, message)
            raise PersistenceError(message, status_code=response.status_code)
        if isinstance(body, dict) and body.get("success") is False:
            raise PersistenceError(format_error_message(body), status_code=response.status_code)
        return body

    @staticmethod
    def _unwrap(body: Any) -> Any:
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body

    @staticmethod
    def _parse(row: Any) -> PayrollRecord:
        if not isinstance(row, dict):
            raise PersistenceError("payroll API returned a malformed record")
        try:
            return record_from_wire(row)
        except (KeyError, ValidationError, InvalidInputError) as exc:
            raise PersistenceError(f"payroll API returned an invalid record: {exc}") from exc

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def submit(self, week: WorkWeek, summary: PaySummary) -> PayrollRecord:
        body = self._request("POST", "/staff/work-record", json=week.to_wire())
        record = self._parse(self._unwrap(body))
        if record.net_pay != summary.net_pay:
            logger.warning(
                "server copy of record %s pays %s, expected %s",
                record.id,
                record.net_pay,
                summary.net_pay,
            )
        return record

    def list_by_staff(self, staff_id: str) -> list[PayrollRecord]:
        body = self._request("GET", f"/staff/{staff_id}/work-records")
        rows = self._unwrap(body)
        if rows is None:
            rows = []
        if not isinstance(rows, list):
            raise PersistenceError("payroll API returned a malformed record list")
        return newest_first([self._parse(row) for row in rows])

    def get(self, record_id: str) -> PayrollRecord | None:
        try:
            body = self._request("GET", f"/staff/work-record/{record_id}")
        except PersistenceError as exc:
            if exc.status_code == 404:
                return None
            raise
        return self._parse(self._unwrap(body))

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


__all__ = ["HttpWorkRecordRepository", "format_error_message", "record_from_wire"]
