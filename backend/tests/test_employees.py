"""Integration tests for employee management API (upsert, get, list)."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from httpx import AsyncClient

COMPANY_ID = uuid.uuid4()
USER_ID = uuid.uuid4()
EMPLOYEE_ID = uuid.uuid4()
AUTH_HEADERS = {
    "X-Company-Id": str(COMPANY_ID),
    "X-User-Id": str(USER_ID),
    "X-Role": "admin",
}
EMPLOYEE_HEADERS = {
    "X-Company-Id": str(COMPANY_ID),
    "X-User-Id": str(USER_ID),
    "X-Role": "employee",
}
EMPLOYEES_URL = f"/companies/{COMPANY_ID}/employees"


def _employee_payload(
    first_name: str = "John",
    last_name: str = "Doe",
    email: str = "john@example.com",
    department: str | None = "Finance",
    timezone: str | None = "Asia/Seoul",
    hire_date: str | None = "2024-01-01",
) -> dict:
    return {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "department": department,
        "timezone": timezone,
        "hire_date": hire_date,
    }


# ---------------------------------------------------------------------------
# Upsert tests
# ---------------------------------------------------------------------------


async def test_upsert_employee(async_client: AsyncClient) -> None:
    """PUT creates an employee and returns expected fields."""
    resp = await async_client.put(
        f"{EMPLOYEES_URL}/{EMPLOYEE_ID}",
        json=_employee_payload(),
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == str(EMPLOYEE_ID)
    assert data["company_id"] == str(COMPANY_ID)
    assert data["first_name"] == "John"
    assert data["department"] == "Finance"
    assert data["timezone"] == "Asia/Seoul"
    assert data["hire_date"] == "2024-01-01"


async def test_upsert_employee_update(async_client: AsyncClient) -> None:
    """PUT twice updates the employee fields on the second call."""
    url = f"{EMPLOYEES_URL}/{EMPLOYEE_ID}"

    resp1 = await async_client.put(url, json=_employee_payload(), headers=AUTH_HEADERS)
    assert resp1.status_code == 200
    assert resp1.json()["hire_date"] == "2024-01-01"

    resp2 = await async_client.put(url, json=_employee_payload(hire_date="2023-07-15"), headers=AUTH_HEADERS)
    assert resp2.status_code == 200
    assert resp2.json()["hire_date"] == "2023-07-15"


async def test_upsert_employee_rejects_unknown_timezone(async_client: AsyncClient) -> None:
    resp = await async_client.put(
        f"{EMPLOYEES_URL}/{EMPLOYEE_ID}",
        json=_employee_payload(timezone="Mars/Olympus_Mons"),
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 422
    assert "Unknown timezone" in resp.json()["detail"]


async def test_upsert_then_query_leave(async_client: AsyncClient) -> None:
    """An employee created via PUT is immediately visible to the leave endpoints."""
    put_resp = await async_client.put(
        f"{EMPLOYEES_URL}/{EMPLOYEE_ID}",
        json=_employee_payload(hire_date="2019-05-01"),
        headers=AUTH_HEADERS,
    )
    assert put_resp.status_code == 200

    resp = await async_client.get(
        f"{EMPLOYEES_URL}/{EMPLOYEE_ID}/leave/entitlement",
        params={"as_of": "2020-06-01"},
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 200
    assert resp.json()["total_annual_leave"] == 22


# ---------------------------------------------------------------------------
# Get and list tests
# ---------------------------------------------------------------------------


async def test_get_employee(async_client: AsyncClient) -> None:
    """GET returns the employee created by PUT."""
    url = f"{EMPLOYEES_URL}/{EMPLOYEE_ID}"
    put_resp = await async_client.put(url, json=_employee_payload(), headers=AUTH_HEADERS)
    assert put_resp.status_code == 200

    get_resp = await async_client.get(url, headers=EMPLOYEE_HEADERS)
    assert get_resp.status_code == 200
    data = get_resp.json()
    assert data["id"] == str(EMPLOYEE_ID)
    assert data["last_name"] == "Doe"
    assert data["email"] == "john@example.com"


async def test_get_employee_not_found(async_client: AsyncClient) -> None:
    """GET for a non-existent employee returns 404."""
    resp = await async_client.get(f"{EMPLOYEES_URL}/{uuid.uuid4()}", headers=AUTH_HEADERS)
    assert resp.status_code == 404
    assert resp.json()["error"] == "EmployeeNotFoundError"


async def test_list_employees_empty(async_client: AsyncClient) -> None:
    resp = await async_client.get(EMPLOYEES_URL, headers=AUTH_HEADERS)
    assert resp.status_code == 200
    assert resp.json() == {"items": [], "total": 0}


async def test_list_employees_returns_created(async_client: AsyncClient) -> None:
    """GET list returns all employees created via PUT."""
    emp1_id = uuid.uuid4()
    emp2_id = uuid.uuid4()

    for emp_id, name in ((emp1_id, "Alice"), (emp2_id, "Bob")):
        resp = await async_client.put(
            f"{EMPLOYEES_URL}/{emp_id}",
            json=_employee_payload(first_name=name, email=f"{name.lower()}@example.com"),
            headers=AUTH_HEADERS,
        )
        assert resp.status_code == 200

    list_resp = await async_client.get(EMPLOYEES_URL, headers=EMPLOYEE_HEADERS)
    assert list_resp.status_code == 200
    data = list_resp.json()
    assert data["total"] == 2
    assert {item["id"] for item in data["items"]} == {str(emp1_id), str(emp2_id)}


# ---------------------------------------------------------------------------
# Authorization tests
# ---------------------------------------------------------------------------


async def test_upsert_employee_non_admin_forbidden(async_client: AsyncClient) -> None:
    """PUT with employee role returns 403."""
    resp = await async_client.put(
        f"{EMPLOYEES_URL}/{EMPLOYEE_ID}",
        json=_employee_payload(),
        headers=EMPLOYEE_HEADERS,
    )
    assert resp.status_code == 403


async def test_invalid_role_rejected(async_client: AsyncClient) -> None:
    resp = await async_client.get(EMPLOYEES_URL, headers={**AUTH_HEADERS, "X-Role": "superuser"})
    assert resp.status_code == 422
