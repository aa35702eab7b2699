"""Error hierarchy for the employee records API.

Every error carries a user-facing ``message`` and an HTTP ``status_code``.
The status code falls back to 500 when a subclass does not set one.
"""

from __future__ import annotations

from fastapi import status


class EmployeeAPIError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_response(self) -> dict[str, str]:
        return {"message": self.message}


class EmployeeNotFoundError(EmployeeAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "No employee with this ID has been found"


class EmployeeValidationError(EmployeeAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid employee data"

    def with_prefix(self, prefix: str) -> EmployeeValidationError:
        """Return a copy of this error whose message starts with ``prefix``."""
        return type(self)(f"{prefix}{self.message}", self.status_code)


class MissingFieldsError(EmployeeValidationError):
    default_message = "You must include all required fields in your request"


class InvalidRoleError(EmployeeValidationError):
    pass


class InvalidHireDateError(EmployeeValidationError):
    default_message = "Date must be in the past"


class MalformedHireDateError(EmployeeValidationError):
    default_message = "Hire date must be in the format of YYYY-MM-DD"


class UpstreamLookupError(EmployeeAPIError):
    """Raised by enrichment lookups. Never reaches an HTTP response."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Upstream lookup failed"
