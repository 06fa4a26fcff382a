from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from leave_service.main import app
from leave_service.services.clock import FixedClock, get_clock
from leave_service.services.employee import InMemoryEmployeeService, set_employee_service

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator

# 2022-03-01 01:00 in Asia/Seoul, still 2022-02-28 in UTC.
FROZEN_NOW = datetime(2022, 2, 28, 16, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _reset_employee_service() -> Iterator[None]:
    """Give every test an empty in-memory employee service."""
    set_employee_service(InMemoryEmployeeService())
    yield
    set_employee_service(InMemoryEmployeeService())


@pytest.fixture
def frozen_clock() -> FixedClock:
    return FixedClock(FROZEN_NOW)


@pytest.fixture
async def async_client(frozen_clock: FixedClock) -> AsyncIterator[AsyncClient]:
    """Async HTTP client with "today" pinned to FROZEN_NOW."""
    app.dependency_overrides[get_clock] = lambda: frozen_clock
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
