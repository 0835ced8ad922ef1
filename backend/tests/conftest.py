from __future__ import annotations

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from employee_api.main import create_app
from employee_api.models.employee import Employee
from employee_api.repositories.memory import InMemoryEmployeeRepository

HIRE_DATE = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


def make_employee(**overrides) -> Employee:
    data = {
        "first_name": "John",
        "last_name": "Doe",
        "full_name": "John Doe",
        "salary": 80000,
        "age": 30,
        "job_title": "Software Engineer",
        "email": "john.doe@example.com",
        "contract_hire_date": HIRE_DATE,
    }
    data.update(overrides)
    return Employee(**data)


@pytest.fixture
def repository():
    return InMemoryEmployeeRepository()


@pytest.fixture
def app(repository):
    return create_app(repository)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client(app):
    transport = ASGITransport(app=app)
    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
