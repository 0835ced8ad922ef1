"""Employee resource model."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Employee(BaseModel):
    """An employee record as exchanged over the API.

    JSON uses camelCase keys (``firstName``, ``contractHireDate``); snake_case
    attribute names are accepted on input as well. ``id`` is assigned by the
    server on creation and ignored when supplied by a client.
    A missing ``contract_termination_date`` means the employee is still
    under contract.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID | None = None
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    salary: int | None = None
    age: int | None = None
    job_title: str | None = None
    email: str | None = None
    contract_hire_date: datetime | None = None
    contract_termination_date: datetime | None = None
