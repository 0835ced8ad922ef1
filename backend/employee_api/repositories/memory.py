"""Process-local employee store."""

from __future__ import annotations

import logging
from uuid import UUID

from employee_api.models.employee import Employee
from employee_api.models.results import Found, LookupResult, NotFound
from employee_api.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: list[Employee] | None = None) -> None:
        self._employees: dict[UUID, Employee] = {}
        for employee in employees or []:
            self._store(employee)

    def _store(self, employee: Employee) -> Employee:
        if employee.id is None:
            raise ValueError("Cannot store an employee without an id")
        # copies keep callers from mutating stored records
        stored = employee.model_copy(deep=True)
        self._employees[stored.id] = stored
        return stored.model_copy(deep=True)

    async def find_all(self) -> list[Employee]:
        return [employee.model_copy(deep=True) for employee in self._employees.values()]

    async def find_by_id(self, employee_id: UUID) -> LookupResult:
        employee = self._employees.get(employee_id)
        if employee is None:
            return NotFound()
        return Found(employee.model_copy(deep=True))

    async def save(self, employee: Employee) -> Employee:
        saved = self._store(employee)
        logger.debug("Stored employee %s (total=%d)", saved.id, len(self._employees))
        return saved
