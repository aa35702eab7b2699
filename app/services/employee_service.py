"""Create/read/update/delete workflow over the in-memory employee store."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from app.core.errors import EmployeeNotFoundError, EmployeeValidationError
from app.models.employee import EmployeeRecord, EmployeeResponse
from app.services.employee_store import EmployeeStore
from app.services.employee_validator import validate_employee_payload
from app.services.enrichment_service import EnrichmentService

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, store: EmployeeStore, enrichment: EnrichmentService) -> None:
        self.store = store
        self.enrichment = enrichment

    def list_employees(self) -> dict[str, EmployeeRecord]:
        return self.store.all()

    def get_employee(self, employee_id: str) -> EmployeeRecord:
        record = self.store.get(employee_id)
        if record is None:
            raise EmployeeNotFoundError()
        return record

    def delete_employee(self, employee_id: str) -> None:
        if not self.store.remove(employee_id):
            raise EmployeeNotFoundError()
        logger.info("Deleted employee %s", employee_id)

    async def create_employee(self, payload: Any) -> EmployeeResponse:
        try:
            record = validate_employee_payload(payload)
        except EmployeeValidationError as e:
            raise e.with_prefix("Unable to save new employee\n") from e

        employee_id = str(uuid.uuid4())
        enrichment = await self.enrichment.enrich()
        record = record.model_copy(
            update={"picture_url": enrichment.picture_url, "quote": enrichment.quote},
        )

        self.store.put(employee_id, record)
        logger.info(
            "Created employee %s (picture=%s, quote=%s)",
            employee_id,
            record.picture_url is not None,
            record.quote is not None,
        )
        return EmployeeResponse.from_record(employee_id, record)

    def update_employee(self, employee_id: str, payload: Any) -> EmployeeResponse:
        self.get_employee(employee_id)

        try:
            record = validate_employee_payload(payload)
        except EmployeeValidationError as e:
            raise e.with_prefix(f"Unable to update employee {employee_id}.\n") from e

        self.store.put(employee_id, record)
        logger.info("Replaced employee %s", employee_id)
        return EmployeeResponse.from_record(employee_id, record)
