# ruff: noqa: B008, TC001, TC003
"""Read-only leave endpoints backed by the accrual engine."""

from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Depends, Query

from leave_service.api.deps import ClockDep, require_self_or_admin, validate_company_scope
from leave_service.schemas.leave import (
    EligibilityResponse,
    EntitlementResponse,
    GrantHistoryResponse,
    LeaveBalanceResponse,
    LeaveCalculationRequest,
    LeaveCalculationResponse,
    NextGrantResponse,
)
from leave_service.services import leave as leave_service

# ---------------------------------------------------------------------------
# Employee leave: /companies/{company_id}/employees/{employee_id}/leave
# ---------------------------------------------------------------------------

employee_leave_router = APIRouter(
    prefix="/companies/{company_id}/employees/{employee_id}/leave",
    tags=["leave"],
    dependencies=[Depends(validate_company_scope), Depends(require_self_or_admin)],
)


@employee_leave_router.get("/entitlement", response_model=EntitlementResponse)
async def get_entitlement(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    clock: ClockDep,
    as_of: date | None = Query(default=None),
) -> EntitlementResponse:
    """Annual entitlement and the accrual regime in force on `as_of` (default: today)."""
    return await leave_service.get_entitlement(company_id, employee_id, as_of, clock)


@employee_leave_router.get("/balance", response_model=LeaveBalanceResponse)
async def get_balance(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    clock: ClockDep,
    as_of: date | None = Query(default=None),
    used: float = Query(default=0, ge=0),
) -> LeaveBalanceResponse:
    """Entitlement minus the days already used, as reported by the caller."""
    return await leave_service.get_balance(company_id, employee_id, as_of, used, clock)


@employee_leave_router.get("/eligibility", response_model=EligibilityResponse)
async def check_eligibility(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    clock: ClockDep,
    requested: float = Query(gt=0),
    as_of: date | None = Query(default=None),
    used: float = Query(default=0, ge=0),
) -> EligibilityResponse:
    """Whether `requested` more days fit into the remaining balance."""
    return await leave_service.check_eligibility(company_id, employee_id, as_of, used, requested, clock)


@employee_leave_router.get("/next-grant", response_model=NextGrantResponse)
async def get_next_grant(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    clock: ClockDep,
    as_of: date | None = Query(default=None),
) -> NextGrantResponse:
    """Next date on which the entitlement changes."""
    return await leave_service.get_next_grant(company_id, employee_id, as_of, clock)


@employee_leave_router.get("/history", response_model=GrantHistoryResponse)
async def get_grant_history(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    clock: ClockDep,
    as_of: date | None = Query(default=None),
) -> GrantHistoryResponse:
    """Accrual events from hire up to `as_of`, oldest first."""
    return await leave_service.get_grant_history(company_id, employee_id, as_of, clock)


# ---------------------------------------------------------------------------
# Stateless calculation: POST /leave/calculate
# ---------------------------------------------------------------------------

leave_calculation_router = APIRouter(
    prefix="/leave",
    tags=["leave"],
)


@leave_calculation_router.post("/calculate", response_model=LeaveCalculationResponse)
async def calculate_leave(
    payload: LeaveCalculationRequest,
    clock: ClockDep,
) -> LeaveCalculationResponse:
    """Compute balance, next grant date, and history for an explicit hire date.

    For internal services that keep their own employee records and only need
    the accrual rules applied.
    """
    return leave_service.calculate(payload, clock)
