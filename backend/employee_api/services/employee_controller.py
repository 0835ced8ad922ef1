"""Employee operations exposed by the HTTP layer."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from uuid import UUID

from employee_api.models.employee import Employee
from employee_api.models.results import EmployeeNotFound, Found
from employee_api.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeController:
    """Binds list/get/create to an :class:`EmployeeRepository`.

    Identifiers are generated here on creation; client-supplied ids are
    discarded. A failed lookup is returned as an :class:`EmployeeNotFound`
    value for the HTTP layer to translate.
    """

    def __init__(
        self,
        repository: EmployeeRepository,
        id_factory: Callable[[], UUID] = uuid.uuid4,
    ) -> None:
        self.repository = repository
        self._id_factory = id_factory

    async def list_employees(self) -> list[Employee]:
        return await self.repository.find_all()

    async def get_employee(self, employee_id: UUID) -> Employee | EmployeeNotFound:
        result = await self.repository.find_by_id(employee_id)
        if isinstance(result, Found):
            return result.employee
        logger.info("Employee %s not found", employee_id)
        return EmployeeNotFound()

    async def create_employee(self, payload: Employee) -> Employee:
        employee = payload.model_copy(update={"id": self._id_factory()})
        saved = await self.repository.save(employee)
        logger.info("Created employee %s", saved.id)
        return saved
