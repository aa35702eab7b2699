from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from app.core.dependencies import get_employee_service
from app.models.employee import EmployeeRecord, EmployeeResponse, MessageResponse
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=dict[str, EmployeeRecord])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return service.list_employees()


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    record = service.get_employee(employee_id)
    return EmployeeResponse.from_record(employee_id, record)


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    service.delete_employee(employee_id)
    return MessageResponse(message=f"Employee {employee_id} has been deleted")


@router.post("", response_model=EmployeeResponse)
async def create_employee(
    payload: Any = Body(None),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return await service.create_employee(payload)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    payload: Any = Body(None),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return service.update_employee(employee_id, payload)
