from fastapi import APIRouter

from leave_service.api.employees import employees_router
from leave_service.api.leave import employee_leave_router, leave_calculation_router

api_router = APIRouter()
api_router.include_router(employees_router)
api_router.include_router(employee_leave_router)
api_router.include_router(leave_calculation_router)
