from __future__ import annotations

import logging

from employee_api.core.config import Settings
from employee_api.repositories.cosmos import CosmosEmployeeRepository
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.repositories.memory import InMemoryEmployeeRepository

logger = logging.getLogger(__name__)

SUPPORTED_STORES = ("memory", "cosmos")


async def build_repository(settings: Settings) -> EmployeeRepository:
    store = settings.EMPLOYEE_STORE.strip().lower()
    if store == "memory":
        logger.info("Using in-memory employee store")
        return InMemoryEmployeeRepository()
    if store == "cosmos":
        repository = CosmosEmployeeRepository()
        await repository.initialize(settings)
        return repository
    raise ValueError(f"Unsupported EMPLOYEE_STORE: {settings.EMPLOYEE_STORE!r}. Allowed: {', '.join(SUPPORTED_STORES)}")
