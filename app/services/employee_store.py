"""In-memory employee store, keyed by identifier. Lives as long as the process."""

from __future__ import annotations

from collections.abc import Iterator

from app.models.employee import EmployeeRecord


class EmployeeStore:
    def __init__(self) -> None:
        self._records: dict[str, EmployeeRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def all(self) -> dict[str, EmployeeRecord]:
        return dict(self._records)

    def get(self, employee_id: str) -> EmployeeRecord | None:
        return self._records.get(employee_id)

    def put(self, employee_id: str, record: EmployeeRecord) -> None:
        self._records[employee_id] = record

    def remove(self, employee_id: str) -> bool:
        return self._records.pop(employee_id, None) is not None

    def clear(self) -> None:
        self._records.clear()
