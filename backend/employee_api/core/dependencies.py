from __future__ import annotations

from fastapi import HTTPException, Request, status

from employee_api.services.employee_controller import EmployeeController


def get_employee_controller(request: Request) -> EmployeeController:
    controller: EmployeeController | None = getattr(request.app.state, "employee_controller", None)
    if controller is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee store not initialized",
        )
    return controller
