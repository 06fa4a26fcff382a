"""Unit tests for Pydantic request/response schemas."""

from __future__ import annotations

import uuid
from datetime import date

import pytest
from pydantic import ValidationError

from leave_service.models.enums import RegimeKind, Role
from leave_service.schemas.auth import AuthContext
from leave_service.schemas.employee import UpsertEmployeeRequest
from leave_service.schemas.leave import LeaveBalanceResponse, LeaveCalculationRequest

# ---------------------------------------------------------------------------
# LeaveCalculationRequest
# ---------------------------------------------------------------------------


def test_calculation_request_defaults() -> None:
    req = LeaveCalculationRequest(hire_date=date(2019, 5, 1))
    assert req.as_of_date is None
    assert req.used_leave == 0
    assert req.requested_days is None


def test_calculation_request_same_day_allowed() -> None:
    req = LeaveCalculationRequest(hire_date=date(2019, 5, 1), as_of_date=date(2019, 5, 1))
    assert req.as_of_date == req.hire_date


def test_calculation_request_rejects_reversed_range() -> None:
    with pytest.raises(ValidationError, match="as_of_date must be >= hire_date"):
        LeaveCalculationRequest(hire_date=date(2019, 5, 1), as_of_date=date(2019, 4, 30))


def test_calculation_request_rejects_negative_used() -> None:
    with pytest.raises(ValidationError):
        LeaveCalculationRequest(hire_date=date(2019, 5, 1), used_leave=-1)


def test_calculation_request_rejects_zero_requested() -> None:
    with pytest.raises(ValidationError):
        LeaveCalculationRequest(hire_date=date(2019, 5, 1), requested_days=0)


def test_balance_response_rejects_negative_remaining() -> None:
    with pytest.raises(ValidationError):
        LeaveBalanceResponse(
            total_annual_leave=15,
            used_annual_leave=16,
            remaining_annual_leave=-1,
            calculation_date=date(2022, 3, 1),
            work_years=2,
            work_months=10,
        )


# ---------------------------------------------------------------------------
# UpsertEmployeeRequest / AuthContext
# ---------------------------------------------------------------------------


def test_upsert_employee_accepts_iana_timezone() -> None:
    req = UpsertEmployeeRequest(first_name="A", last_name="B", email="a@b.c", timezone="Asia/Seoul")
    assert req.timezone == "Asia/Seoul"


def test_upsert_employee_rejects_unknown_timezone() -> None:
    with pytest.raises(ValidationError, match="Unknown timezone"):
        UpsertEmployeeRequest(first_name="A", last_name="B", email="a@b.c", timezone="Nowhere/Special")


def test_upsert_employee_requires_names() -> None:
    with pytest.raises(ValidationError):
        UpsertEmployeeRequest(first_name="", last_name="B", email="a@b.c")


def test_auth_context_admin_flag() -> None:
    admin = AuthContext(company_id=uuid.uuid4(), user_id=uuid.uuid4(), role=Role.ADMIN)
    employee = AuthContext(company_id=uuid.uuid4(), user_id=uuid.uuid4())
    assert admin.is_admin is True
    assert employee.is_admin is False


def test_regime_kind_values() -> None:
    assert {k.value for k in RegimeKind} == {"FIRST_YEAR", "ANNIVERSARY_YEAR", "STEADY_STATE"}
