from __future__ import annotations

from datetime import time
from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_id(self, department_id: int) -> Optional[Department]:
        raise NotImplementedError

    def create(self, *, department_name: str, max_clock_in_time: time, max_clock_out_time: time) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        department_id: int,
        department_name: str,
        max_clock_in_time: time,
        max_clock_out_time: time,
    ) -> None:
        raise NotImplementedError

    def delete_by_id(self, department_id: int) -> bool:
        """Raises DeleteBlockedError if employees still reference the row."""

        raise NotImplementedError

    def count_employees(self, department_id: int) -> int:
        raise NotImplementedError
