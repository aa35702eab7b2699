"""Employee record models. Field names are camelCase on the wire."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Role(str, Enum):
    CEO = "CEO"
    VP = "VP"
    MANAGER = "MANAGER"
    INDIVIDUAL_CONTRIBUTOR = "INDIVIDUAL CONTRIBUTOR"


class EmployeeRecord(BaseModel):
    """A stored employee. ``picture_url`` and ``quote`` come from enrichment."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str
    hire_date: date
    role: Role
    picture_url: str | None = None
    quote: str | None = None


class EmployeeResponse(EmployeeRecord):
    """A stored employee together with its identifier."""

    id: str

    @classmethod
    def from_record(cls, employee_id: str, record: EmployeeRecord) -> EmployeeResponse:
        return cls(id=employee_id, **record.model_dump())


class Enrichment(BaseModel):
    picture_url: str | None = None
    quote: str | None = None


class MessageResponse(BaseModel):
    message: str
