"""Application services."""

from .payroll import (
    PayrollService,
    RecordNotFoundError,
    configure_payroll_service,
    get_payroll_service,
    reset_payroll_state,
)

__all__ = [
    "PayrollService",
    "RecordNotFoundError",
    "configure_payroll_service",
    "get_payroll_service",
    "reset_payroll_state",
]
