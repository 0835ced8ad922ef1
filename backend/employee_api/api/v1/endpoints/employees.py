from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from employee_api.core.dependencies import get_employee_controller
from employee_api.models.employee import Employee
from employee_api.models.results import EmployeeNotFound
from employee_api.services.employee_controller import EmployeeController

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employee", tags=["employees"])


@router.get("", response_model=list[Employee])
async def list_employees(
    controller: EmployeeController = Depends(get_employee_controller),  # noqa: B008
):
    try:
        return await controller.list_employees()
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err


@router.get("/{uuid}", response_model=Employee)
async def get_employee(
    uuid: UUID,
    controller: EmployeeController = Depends(get_employee_controller),  # noqa: B008
):
    try:
        result = await controller.get_employee(uuid)
    except Exception as err:
        logger.exception("Failed to get employee %s", uuid)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employee",
        ) from err

    if isinstance(result, EmployeeNotFound):
        raise HTTPException(status_code=result.status_code, detail=result.detail)

    return result


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee: Employee,
    controller: EmployeeController = Depends(get_employee_controller),  # noqa: B008
):
    try:
        return await controller.create_employee(employee)
    except Exception as err:
        logger.exception("Failed to create employee")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create employee",
        ) from err
