from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..departments.model import Department


@dataclass(frozen=True)
class Employee:
    """Employee entity.

    ``id`` is the surrogate row id used in URLs; ``employee_id`` is the
    business identifier used for clocking in/out and never changes.
    """

    id: int
    employee_id: str
    department_id: int
    name: str
    address: str
    created_at: datetime
    updated_at: datetime
    department: Optional[Department] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "employee_id": self.employee_id,
            "departement_id": self.department_id,
            "name": self.name,
            "address": self.address,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
        if self.department is not None:
            data["department"] = self.department.to_dict()
        return data
