"""Persistence contract for employee records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from employee_api.models.employee import Employee
from employee_api.models.results import LookupResult


class EmployeeRepository(ABC):
    """Storage of employee records keyed by their identifier.

    Implementations must not raise for a missing record: ``find_by_id``
    returns ``NotFound()`` instead. Storage failures are propagated
    unchanged to the caller.
    """

    @abstractmethod
    async def find_all(self) -> list[Employee]:
        """Return every stored employee, or an empty list."""

    @abstractmethod
    async def find_by_id(self, employee_id: UUID) -> LookupResult:
        """Return ``Found(employee)`` for an exact id match, else ``NotFound()``."""

    @abstractmethod
    async def save(self, employee: Employee) -> Employee:
        """Insert or replace the record with the employee's id and return it."""

    async def check_connection(self) -> bool:
        return True

    async def close(self) -> None:
        return None
