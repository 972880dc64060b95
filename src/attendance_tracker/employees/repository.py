from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        department_id: int,
        name: str,
        address: str,
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def update(self, *, id: int, department_id: int, name: str, address: str, updated_at: datetime) -> None:
        raise NotImplementedError

    def delete_by_id(self, id: int) -> bool:
        raise NotImplementedError

    def count_attendance(self, employee_id: str) -> int:
        raise NotImplementedError
