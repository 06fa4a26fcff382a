"""Leave service: resolves employees and dates, then delegates to the accrual engine."""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from fastapi import status

from leave_service.config import get_settings
from leave_service.exceptions import EmployeeNotFoundError, InvalidLeavePeriodError
from leave_service.schemas.leave import (
    EligibilityResponse,
    EntitlementResponse,
    GrantEventResponse,
    GrantHistoryResponse,
    LeaveBalanceResponse,
    LeaveCalculationRequest,
    LeaveCalculationResponse,
    NextGrantResponse,
)
from leave_service.services import leave_calculator as calc
from leave_service.services.employee import get_employee_service

if TYPE_CHECKING:
    from leave_service.services.clock import Clock
    from leave_service.services.employee import EmployeeInfo

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _get_hired_employee(company_id: uuid.UUID, employee_id: uuid.UUID) -> tuple[EmployeeInfo, date]:
    """Fetch the employee and their hire date, or raise."""
    employee = await get_employee_service().get_employee(company_id, employee_id)
    if employee is None:
        raise EmployeeNotFoundError
    if employee.hire_date is None:
        raise InvalidLeavePeriodError(
            "Employee has no hire date on record",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )
    return employee, employee.hire_date


def _resolve_as_of(hire_date: date, as_of: date | None, clock: Clock, tz_name: str | None = None) -> date:
    """Default as_of to today in the employee's timezone and reject reversed ranges."""
    if as_of is None:
        as_of = clock.today(ZoneInfo(tz_name or get_settings().default_timezone))

    if as_of < hire_date:
        raise InvalidLeavePeriodError(f"Calculation date {as_of} precedes hire date {hire_date}")

    return as_of


def _to_balance_response(balance: calc.LeaveBalance) -> LeaveBalanceResponse:
    return LeaveBalanceResponse(
        total_annual_leave=balance.total_annual_leave,
        used_annual_leave=balance.used_annual_leave,
        remaining_annual_leave=balance.remaining_annual_leave,
        calculation_date=balance.calculation_date,
        work_years=balance.work_years,
        work_months=balance.work_months,
    )


def _to_event_responses(events: list[calc.GrantEvent]) -> list[GrantEventResponse]:
    return [
        GrantEventResponse(grant_date=e.date, granted_leave=e.granted_leave, reason=e.reason) for e in events
    ]


# ---------------------------------------------------------------------------
# Employee-scoped queries
# ---------------------------------------------------------------------------


async def get_entitlement(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    as_of: date | None,
    clock: Clock,
) -> EntitlementResponse:
    """Current annual entitlement for an employee."""
    employee, hire_date = await _get_hired_employee(company_id, employee_id)
    as_of = _resolve_as_of(hire_date, as_of, clock, employee.timezone)

    duration = calc.compute_work_duration(hire_date, as_of)
    regime = calc.classify_regime(hire_date, as_of)

    return EntitlementResponse(
        hire_date=hire_date,
        calculation_date=as_of,
        total_annual_leave=regime.entitlement(),
        regime=regime.kind,
        work_years=duration.years,
        work_months=duration.months,
        first_anniversary=calc.first_anniversary(hire_date),
    )


async def get_balance(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    as_of: date | None,
    used: float,
    clock: Clock,
) -> LeaveBalanceResponse:
    """Entitlement minus the caller-supplied used figure."""
    employee, hire_date = await _get_hired_employee(company_id, employee_id)
    as_of = _resolve_as_of(hire_date, as_of, clock, employee.timezone)
    return _to_balance_response(calc.compute_leave_balance(hire_date, as_of, used))


async def check_eligibility(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    as_of: date | None,
    used: float,
    requested: float,
    clock: Clock,
) -> EligibilityResponse:
    """Whether the employee can take `requested` more days."""
    employee, hire_date = await _get_hired_employee(company_id, employee_id)
    as_of = _resolve_as_of(hire_date, as_of, clock, employee.timezone)

    balance = calc.compute_leave_balance(hire_date, as_of, used)
    can_use = calc.can_use_leave(hire_date, used, requested, as_of)
    if not can_use:
        logger.info(
            "Insufficient leave for employee=%s: requested=%s remaining=%s",
            employee_id,
            requested,
            balance.remaining_annual_leave,
        )

    return EligibilityResponse(
        can_use=can_use,
        requested_days=requested,
        remaining_annual_leave=balance.remaining_annual_leave,
        calculation_date=as_of,
    )


async def get_next_grant(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    as_of: date | None,
    clock: Clock,
) -> NextGrantResponse:
    """Next date on which the employee's entitlement changes."""
    employee, hire_date = await _get_hired_employee(company_id, employee_id)
    as_of = _resolve_as_of(hire_date, as_of, clock, employee.timezone)
    return NextGrantResponse(calculation_date=as_of, next_grant_date=calc.next_leave_grant_date(hire_date, as_of))


async def get_grant_history(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    as_of: date | None,
    clock: Clock,
) -> GrantHistoryResponse:
    """Every accrual event from hire up to the calculation date."""
    employee, hire_date = await _get_hired_employee(company_id, employee_id)
    as_of = _resolve_as_of(hire_date, as_of, clock, employee.timezone)

    items = _to_event_responses(calc.generate_leave_grant_history(hire_date, as_of))
    return GrantHistoryResponse(
        items=items,
        total=len(items),
        total_granted=sum(item.granted_leave for item in items),
        calculation_date=as_of,
    )


# ---------------------------------------------------------------------------
# Stateless calculation
# ---------------------------------------------------------------------------


def calculate(payload: LeaveCalculationRequest, clock: Clock) -> LeaveCalculationResponse:
    """Full leave picture for an explicit hire date, without an employee lookup."""
    as_of = _resolve_as_of(payload.hire_date, payload.as_of_date, clock)

    balance = calc.compute_leave_balance(payload.hire_date, as_of, payload.used_leave)
    can_use: bool | None = None
    if payload.requested_days is not None:
        can_use = calc.can_use_leave(payload.hire_date, payload.used_leave, payload.requested_days, as_of)

    return LeaveCalculationResponse(
        balance=_to_balance_response(balance),
        regime=calc.classify_regime(payload.hire_date, as_of).kind,
        next_grant_date=calc.next_leave_grant_date(payload.hire_date, as_of),
        can_use=can_use,
        history=_to_event_responses(calc.generate_leave_grant_history(payload.hire_date, as_of)),
    )
