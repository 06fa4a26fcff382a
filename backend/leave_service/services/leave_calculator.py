"""Annual-leave accrual engine.

Policy:
- First year of service: one day per completed month since hire.
- First-anniversary year: 12 legacy monthly days plus the 15-day base grant
  prorated over the months remaining in that calendar year.
- Every later year: 15 days plus half a day per calendar year elapsed since
  the anniversary year. Entitlement resets each January 1st.

Every function is pure; the as-of date is always supplied by the caller.
"""

from __future__ import annotations

import logging
from calendar import monthrange
from dataclasses import dataclass
from datetime import date

from leave_service.models.enums import RegimeKind

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
BASE_ANNUAL_DAYS = 15
ANNUAL_INCREMENT_DAYS = 0.5
MONTHLY_ACCRUAL_DAYS = 1

# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WorkDuration:
    """Completed years and remainder months of service."""

    years: int
    months: int


@dataclass(frozen=True)
class LeaveBalance:
    """Entitlement, usage, and remaining balance as of a calculation date."""

    total_annual_leave: float
    used_annual_leave: float
    remaining_annual_leave: float
    calculation_date: date
    work_years: int
    work_months: int


@dataclass(frozen=True)
class GrantEvent:
    """One historical accrual event."""

    date: date
    granted_leave: float
    reason: str


@dataclass(frozen=True)
class FirstYear:
    """Monthly accrual before the first full year of service."""

    months: int

    kind = RegimeKind.FIRST_YEAR

    def entitlement(self) -> float:
        return float(self.months * MONTHLY_ACCRUAL_DAYS)


@dataclass(frozen=True)
class AnniversaryYear:
    """Calendar year containing the first anniversary."""

    remaining_months: int

    kind = RegimeKind.ANNIVERSARY_YEAR

    def entitlement(self) -> float:
        return MONTHS_PER_YEAR * MONTHLY_ACCRUAL_DAYS + BASE_ANNUAL_DAYS * self.remaining_months / MONTHS_PER_YEAR


@dataclass(frozen=True)
class SteadyState:
    """Any calendar year after the anniversary year."""

    years_since_anniversary: int

    kind = RegimeKind.STEADY_STATE

    def entitlement(self) -> float:
        return BASE_ANNUAL_DAYS + self.years_since_anniversary * ANNUAL_INCREMENT_DAYS


LeaveRegime = FirstYear | AnniversaryYear | SteadyState

# ---------------------------------------------------------------------------
# Date helpers
# ---------------------------------------------------------------------------


def _add_months(start: date, months: int) -> date:
    """Return the date on which `months` full months since `start` are complete.

    Keeps the day of month when the target month has it; otherwise the month
    completes on the 1st of the following month.
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // MONTHS_PER_YEAR
    month = month_index % MONTHS_PER_YEAR + 1
    _, days_in_month = monthrange(year, month)
    if start.day <= days_in_month:
        return date(year, month, start.day)
    # Only Feb-Nov can be short of the hire day, so month + 1 stays in range.
    return date(year, month + 1, 1)


def first_anniversary(hire_date: date) -> date:
    """First day of the hire month, one year after hire."""
    return date(hire_date.year + 1, hire_date.month, 1)


def _remaining_months_after_anniversary(hire_date: date) -> int:
    return MONTHS_PER_YEAR - (hire_date.month - 1)


# ---------------------------------------------------------------------------
# Core operations
# ---------------------------------------------------------------------------


def compute_work_duration(hire_date: date, as_of_date: date) -> WorkDuration:
    """Elapsed (years, months) between hire and as-of, day-of-month aware.

    A partial month below the hire day does not count. A reversed range
    (as-of before hire) is clamped to zero service.
    """
    if as_of_date < hire_date:
        logger.warning("as_of_date %s precedes hire_date %s; clamping service to zero", as_of_date, hire_date)
        return WorkDuration(years=0, months=0)

    years = as_of_date.year - hire_date.year
    months = as_of_date.month - hire_date.month

    if as_of_date.day < hire_date.day:
        months -= 1

    if months < 0:
        years -= 1
        months += MONTHS_PER_YEAR

    return WorkDuration(years=years, months=months)


def classify_regime(hire_date: date, as_of_date: date) -> LeaveRegime:
    """Select the accrual regime in force on as_of_date.

    Keys on the calendar year of as_of_date, so a new regime value applies
    from January 1st rather than from the anniversary day.
    """
    duration = compute_work_duration(hire_date, as_of_date)
    if duration.years < 1:
        return FirstYear(months=duration.months)

    anniversary_year = first_anniversary(hire_date).year
    if as_of_date.year == anniversary_year:
        return AnniversaryYear(remaining_months=_remaining_months_after_anniversary(hire_date))

    return SteadyState(years_since_anniversary=as_of_date.year - anniversary_year)


def compute_annual_entitlement(hire_date: date, as_of_date: date) -> float:
    """Total leave days owed as of as_of_date, independent of usage."""
    regime = classify_regime(hire_date, as_of_date)
    logger.debug("Leave regime for hire_date=%s as_of=%s: %s", hire_date, as_of_date, regime)
    return regime.entitlement()


def compute_leave_balance(hire_date: date, as_of_date: date, used_leave: float = 0) -> LeaveBalance:
    """Combine entitlement with a caller-supplied used figure.

    `used_leave` is not checked against any ledger; negative values simply
    increase the remaining balance.
    """
    duration = compute_work_duration(hire_date, as_of_date)
    total = compute_annual_entitlement(hire_date, as_of_date)

    return LeaveBalance(
        total_annual_leave=total,
        used_annual_leave=used_leave,
        remaining_annual_leave=max(0.0, total - used_leave),
        calculation_date=as_of_date,
        work_years=duration.years,
        work_months=duration.months,
    )


def can_use_leave(hire_date: date, used_leave: float, requested_days: float, as_of_date: date) -> bool:
    """Whether the remaining balance covers requested_days."""
    balance = compute_leave_balance(hire_date, as_of_date, used_leave)
    return balance.remaining_annual_leave >= requested_days


def next_leave_grant_date(hire_date: date, as_of_date: date) -> date | None:
    """Next date on which the entitlement changes.

    During the first year this is the next monthly accrual date. Afterwards
    it is the earliest of this year's January 1st, this year's hire-month
    anniversary, and next year's January 1st that lies after as_of_date.
    """
    duration = compute_work_duration(hire_date, as_of_date)

    if duration.years < 1:
        return _add_months(hire_date, duration.months + 1)

    candidates = (
        date(as_of_date.year, 1, 1),
        date(as_of_date.year, hire_date.month, 1),
        date(as_of_date.year + 1, 1, 1),
    )
    return min((c for c in candidates if c > as_of_date), default=None)


def generate_leave_grant_history(hire_date: date, as_of_date: date) -> list[GrantEvent]:
    """Replay the policy from hire to as_of_date as discrete grant events."""
    duration = compute_work_duration(hire_date, as_of_date)

    if duration.years < 1:
        return [
            GrantEvent(
                date=_add_months(hire_date, month),
                granted_leave=float(MONTHLY_ACCRUAL_DAYS),
                reason=f"month {month} accrual",
            )
            for month in range(1, duration.months + 1)
        ]

    anniversary = first_anniversary(hire_date)
    history = [
        GrantEvent(
            date=anniversary,
            granted_leave=AnniversaryYear(_remaining_months_after_anniversary(hire_date)).entitlement(),
            reason="first anniversary grant",
        )
    ]

    for year in range(anniversary.year + 1, as_of_date.year + 1):
        grant_date = date(year, 1, 1)
        if grant_date > as_of_date:
            break
        history.append(
            GrantEvent(
                date=grant_date,
                granted_leave=SteadyState(year - anniversary.year).entitlement(),
                reason=f"year {year} annual grant",
            )
        )

    return history


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


class LeaveCalculator:
    """Stateless facade over the accrual functions."""

    calculate_work_duration = staticmethod(compute_work_duration)
    calculate_annual_leave = staticmethod(compute_annual_entitlement)
    calculate_leave_balance = staticmethod(compute_leave_balance)
    can_use_leave = staticmethod(can_use_leave)
    get_next_leave_grant_date = staticmethod(next_leave_grant_date)
    generate_leave_grant_history = staticmethod(generate_leave_grant_history)
