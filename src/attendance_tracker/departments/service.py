from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import parse_time_of_day
from ..common.validators import require_non_empty, require_time_of_day
from ..core.exceptions import DeleteBlockedError, NotFoundError
from .model import Department
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    """Use case: manage departments and their clock-in/clock-out cutoffs."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_all(self) -> Sequence[Department]:
        return self._departments.list_all()

    def get(self, department_id: int) -> Department:
        department = self._departments.get_by_id(int(department_id))
        if not department:
            raise NotFoundError("Department not found")
        return department

    def create(
        self,
        *,
        department_name: Optional[str],
        max_clock_in_time: Optional[str],
        max_clock_out_time: Optional[str],
    ) -> Department:
        name = require_non_empty(department_name, "departement_name")
        clock_in = parse_time_of_day(require_time_of_day(max_clock_in_time, "max_clock_in_time"))
        clock_out = parse_time_of_day(require_time_of_day(max_clock_out_time, "max_clock_out_time"))

        department_id = self._departments.create(
            department_name=name,
            max_clock_in_time=clock_in,
            max_clock_out_time=clock_out,
        )
        logger.info("Department %s created (%s)", department_id, name)
        return Department(
            department_id=department_id,
            department_name=name,
            max_clock_in_time=clock_in,
            max_clock_out_time=clock_out,
        )

    def update(
        self,
        department_id: int,
        *,
        department_name: Optional[str],
        max_clock_in_time: Optional[str],
        max_clock_out_time: Optional[str],
    ) -> Department:
        self.get(department_id)

        name = require_non_empty(department_name, "departement_name")
        clock_in = parse_time_of_day(require_time_of_day(max_clock_in_time, "max_clock_in_time"))
        clock_out = parse_time_of_day(require_time_of_day(max_clock_out_time, "max_clock_out_time"))

        self._departments.update(
            department_id=int(department_id),
            department_name=name,
            max_clock_in_time=clock_in,
            max_clock_out_time=clock_out,
        )
        return Department(
            department_id=int(department_id),
            department_name=name,
            max_clock_in_time=clock_in,
            max_clock_out_time=clock_out,
        )

    def delete(self, department_id: int) -> None:
        self.get(department_id)

        if self._departments.count_employees(int(department_id)) > 0:
            logger.warning("Refusing to delete department %s: employees still assigned", department_id)
            raise DeleteBlockedError("Cannot delete department with employees")

        if not self._departments.delete_by_id(int(department_id)):
            raise NotFoundError("Department not found")
        logger.info("Department %s deleted", department_id)
