"""Lookup results passed between the repository and the controller."""

from __future__ import annotations

from dataclasses import dataclass

from employee_api.models.employee import Employee

EMPLOYEE_NOT_FOUND_MESSAGE = "Employee not found"


@dataclass(frozen=True)
class Found:
    employee: Employee


@dataclass(frozen=True)
class NotFound:
    pass


LookupResult = Found | NotFound


@dataclass(frozen=True)
class EmployeeNotFound:
    """Returned by the controller when no employee matches the identifier."""

    detail: str = EMPLOYEE_NOT_FOUND_MESSAGE
    status_code: int = 404
