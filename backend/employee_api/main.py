from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from employee_api.api.v1.router import api_router
from employee_api.core.config import settings
from employee_api.core.logging_config import configure_logging
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.repositories.factory import build_repository
from employee_api.services.employee_controller import EmployeeController

logger = logging.getLogger(__name__)


def create_app(repository: EmployeeRepository | None = None) -> FastAPI:
    """Build the API. Without ``repository`` the store is chosen from settings."""
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(application: FastAPI) -> AsyncIterator[None]:
        repo = repository if repository is not None else await build_repository(settings)
        application.state.employee_controller = EmployeeController(repo)
        logger.info("Employee API started (store=%s)", type(repo).__name__)
        try:
            yield
        finally:
            application.state.employee_controller = None
            await repo.close()

    application = FastAPI(
        title="Employee API",
        description="Create, list and look up employee records",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    application.include_router(api_router)

    @application.get("/")
    async def root():
        return {"message": "Employee API"}

    return application


app = create_app()
