"""Cosmos DB employee repository."""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from azure.cosmos.aio import CosmosClient
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from employee_api.core.config import Settings
from employee_api.models.employee import Employee
from employee_api.models.results import Found, LookupResult, NotFound
from employee_api.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)

# Cosmos system properties, not part of the employee document
_SYSTEM_KEYS = ("_rid", "_self", "_etag", "_attachments", "_ts")


class CosmosEmployeeRepository(EmployeeRepository):
    """Stores employees as camelCase JSON documents partitioned by ``/id``."""

    def __init__(self) -> None:
        self.client: CosmosClient | None = None
        self.container: Any = None
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        endpoint = settings.COSMOS_DB_ENDPOINT
        key = settings.COSMOS_DB_KEY
        database_name = settings.COSMOS_DB_DATABASE
        container_name = settings.COSMOS_DB_EMPLOYEES_CONTAINER

        if not endpoint or not key:
            raise RuntimeError("Cosmos DB credentials missing: set COSMOS_DB_ENDPOINT and COSMOS_DB_KEY")

        self.client = CosmosClient(endpoint, key)
        db = self.client.get_database_client(database_name)
        self.container = db.get_container_client(container_name)
        self.initialized = True
        logger.info("CosmosEmployeeRepository initialized (container=%s)", container_name)

    async def close(self) -> None:
        if self.client:
            await self.client.close()
            self.client = None
            self.container = None
            self.initialized = False

    def _require_container(self) -> Any:
        if not self.container:
            raise RuntimeError("CosmosEmployeeRepository not initialized")
        return self.container

    async def find_all(self) -> list[Employee]:
        container = self._require_container()

        results: list[Employee] = []
        async for item in container.query_items(query="SELECT * FROM c"):
            results.append(self._from_document(item))
        return results

    async def find_by_id(self, employee_id: UUID) -> LookupResult:
        container = self._require_container()
        key = str(employee_id)
        try:
            item = await container.read_item(item=key, partition_key=key)
        except CosmosResourceNotFoundError:
            return NotFound()
        return Found(self._from_document(item))

    async def save(self, employee: Employee) -> Employee:
        container = self._require_container()
        if employee.id is None:
            raise ValueError("Cannot store an employee without an id")
        item = await container.upsert_item(body=self._to_document(employee))
        return self._from_document(item)

    async def check_connection(self) -> bool:
        if not self.container:
            return False
        try:
            query = "SELECT VALUE COUNT(1) FROM c"
            async for _ in self.container.query_items(query=query):
                return True
            return True
        except Exception:
            logger.exception("Cosmos DB connection check failed")
            return False

    @staticmethod
    def _to_document(employee: Employee) -> dict[str, Any]:
        return employee.model_dump(mode="json", by_alias=True)

    @staticmethod
    def _from_document(raw: dict[str, Any]) -> Employee:
        data = {k: v for k, v in raw.items() if k not in _SYSTEM_KEYS}
        return Employee.model_validate(data)
