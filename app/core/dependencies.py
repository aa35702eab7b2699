from __future__ import annotations

from fastapi import Request

from app.services.employee_service import EmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service
