from __future__ import annotations

import uuid

import pytest

from conftest import make_employee
from employee_api.models.results import Found, NotFound
from employee_api.repositories.memory import InMemoryEmployeeRepository


@pytest.mark.anyio
async def test_find_all_empty_store():
    repository = InMemoryEmployeeRepository()
    assert await repository.find_all() == []


@pytest.mark.anyio
async def test_find_all_returns_every_saved_employee():
    repository = InMemoryEmployeeRepository()
    for _ in range(3):
        await repository.save(make_employee(id=uuid.uuid4()))

    results = await repository.find_all()

    assert len(results) == 3
    assert len({e.id for e in results}) == 3


@pytest.mark.anyio
async def test_find_all_keeps_insertion_order():
    ids = [uuid.uuid4() for _ in range(4)]
    repository = InMemoryEmployeeRepository([make_employee(id=i) for i in ids])

    assert [e.id for e in await repository.find_all()] == ids


@pytest.mark.anyio
async def test_find_by_id_found():
    repository = InMemoryEmployeeRepository()
    employee = make_employee(id=uuid.uuid4())
    await repository.save(employee)

    result = await repository.find_by_id(employee.id)

    assert isinstance(result, Found)
    assert result.employee == employee


@pytest.mark.anyio
async def test_find_by_id_not_found():
    repository = InMemoryEmployeeRepository()
    await repository.save(make_employee(id=uuid.uuid4()))

    assert await repository.find_by_id(uuid.uuid4()) == NotFound()


@pytest.mark.anyio
async def test_save_replaces_existing_record():
    repository = InMemoryEmployeeRepository()
    employee_id = uuid.uuid4()
    await repository.save(make_employee(id=employee_id, salary=50000))
    await repository.save(make_employee(id=employee_id, salary=60000))

    results = await repository.find_all()

    assert len(results) == 1
    assert results[0].salary == 60000


@pytest.mark.anyio
async def test_returned_records_are_copies():
    repository = InMemoryEmployeeRepository()
    employee = make_employee(id=uuid.uuid4())
    saved = await repository.save(employee)

    saved.first_name = "Changed"
    employee.first_name = "Changed too"

    result = await repository.find_by_id(employee.id)
    assert result.employee.first_name == "John"


@pytest.mark.anyio
async def test_save_without_id_is_rejected():
    repository = InMemoryEmployeeRepository()
    with pytest.raises(ValueError):
        await repository.save(make_employee())


@pytest.mark.anyio
async def test_check_connection_always_ok():
    assert await InMemoryEmployeeRepository().check_connection() is True
