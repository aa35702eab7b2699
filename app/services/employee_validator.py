"""Validation of incoming employee payloads.

Checks run in a fixed order: required fields, then role, then hire date.
The first failing check decides the error.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from app.core.errors import (
    EmployeeValidationError,
    InvalidHireDateError,
    InvalidRoleError,
    MalformedHireDateError,
    MissingFieldsError,
)
from app.models.employee import EmployeeRecord, Role

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = ("firstName", "lastName", "hireDate", "role")
ROLES: tuple[str, ...] = tuple(role.value for role in Role)
HIRE_DATE_FORMAT = "%Y-%m-%d"

INVALID_ROLE_MESSAGE = f"The value for role must be one of {','.join(ROLES)}"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _optional_text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _extract_employee(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict) or not payload:
        raise MissingFieldsError()

    employee = payload.get("employee")
    if not isinstance(employee, dict) or not employee:
        raise MissingFieldsError()

    if any(_is_blank(employee.get(key)) for key in REQUIRED_FIELDS):
        raise MissingFieldsError()

    # Names are free text; anything else is treated as not supplied.
    if not isinstance(employee["firstName"], str) or not isinstance(employee["lastName"], str):
        raise MissingFieldsError()

    return employee


def normalize_role(value: Any) -> Role:
    if not isinstance(value, str) or value.strip().upper() not in ROLES:
        raise InvalidRoleError(INVALID_ROLE_MESSAGE)
    return Role(value.strip().upper())


def parse_hire_date(value: Any, today: date | None = None) -> date:
    if not isinstance(value, str):
        raise MalformedHireDateError()
    text = value.strip()
    try:
        hire_date = datetime.strptime(text, HIRE_DATE_FORMAT).date()  # noqa: DTZ007
    except ValueError as e:
        raise MalformedHireDateError() from e

    # strptime accepts unpadded months and days; only zero-padded dates pass.
    if hire_date.isoformat() != text:
        raise MalformedHireDateError()

    if hire_date > (today or date.today()):
        raise InvalidHireDateError()
    return hire_date


def validate_employee_payload(payload: Any, today: date | None = None) -> EmployeeRecord:
    """Validate a request body of the form ``{"employee": {...}}``.

    Returns the employee as a record with ``role`` upper-cased and
    ``hireDate`` parsed. Raises an ``EmployeeValidationError`` subclass on the
    first failed check.
    """
    try:
        employee = _extract_employee(payload)
        role = normalize_role(employee["role"])
        hire_date = parse_hire_date(employee["hireDate"], today=today)
    except EmployeeValidationError as e:
        logger.warning("Rejected employee payload: %s", e.message)
        raise

    return EmployeeRecord(
        first_name=employee["firstName"],
        last_name=employee["lastName"],
        hire_date=hire_date,
        role=role,
        picture_url=_optional_text(employee.get("pictureUrl")),
        quote=_optional_text(employee.get("quote")),
    )
