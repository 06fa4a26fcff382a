# ruff: noqa: TC001, TC003
from __future__ import annotations

from datetime import date
from typing import Self

from pydantic import BaseModel, Field, model_validator

from leave_service.models.enums import RegimeKind

# ---------------------------------------------------------------------------
# Entitlement and balance
# ---------------------------------------------------------------------------


class EntitlementResponse(BaseModel):
    """Annual entitlement and the regime that produced it."""

    hire_date: date
    calculation_date: date
    total_annual_leave: float
    regime: RegimeKind
    work_years: int
    work_months: int
    first_anniversary: date


class LeaveBalanceResponse(BaseModel):
    """Entitlement minus caller-supplied usage."""

    total_annual_leave: float
    used_annual_leave: float
    remaining_annual_leave: float = Field(ge=0)
    calculation_date: date
    work_years: int
    work_months: int


class EligibilityResponse(BaseModel):
    """Whether a requested number of days fits in the remaining balance."""

    can_use: bool
    requested_days: float
    remaining_annual_leave: float
    calculation_date: date


# ---------------------------------------------------------------------------
# Projection and history
# ---------------------------------------------------------------------------


class NextGrantResponse(BaseModel):
    """Next date on which the entitlement changes."""

    calculation_date: date
    next_grant_date: date | None


class GrantEventResponse(BaseModel):
    """A single historical accrual event."""

    grant_date: date
    granted_leave: float
    reason: str


class GrantHistoryResponse(BaseModel):
    """All accrual events from hire up to the calculation date."""

    items: list[GrantEventResponse]
    total: int
    total_granted: float
    calculation_date: date


# ---------------------------------------------------------------------------
# Stateless calculation
# ---------------------------------------------------------------------------


class LeaveCalculationRequest(BaseModel):
    """Request body for POST /leave/calculate."""

    hire_date: date
    as_of_date: date | None = None
    used_leave: float = Field(default=0, ge=0)
    requested_days: float | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _validate_dates(self) -> Self:
        if self.as_of_date is not None and self.as_of_date < self.hire_date:
            msg = "as_of_date must be >= hire_date"
            raise ValueError(msg)
        return self


class LeaveCalculationResponse(BaseModel):
    """Balance, projection, and history for an explicit hire date."""

    balance: LeaveBalanceResponse
    regime: RegimeKind
    next_grant_date: date | None
    can_use: bool | None = None
    history: list[GrantEventResponse]
