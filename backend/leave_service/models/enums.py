from __future__ import annotations

import enum


class RegimeKind(enum.StrEnum):
    """Which annual-leave accrual rule applies on a given date."""

    FIRST_YEAR = "FIRST_YEAR"
    ANNIVERSARY_YEAR = "ANNIVERSARY_YEAR"
    STEADY_STATE = "STEADY_STATE"


class Role(enum.StrEnum):
    """Caller role carried in the dev auth headers."""

    ADMIN = "admin"
    EMPLOYEE = "employee"
