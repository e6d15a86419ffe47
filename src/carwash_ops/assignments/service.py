from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import day_key, now_local, today_local
from ..core.enums import AssignmentStatus
from ..core.exceptions import NotFoundError
from .model import WorkAssignment
from .repository import AssignmentRepository

logger = logging.getLogger(__name__)


class AssignmentService:
    def __init__(self, assignments: AssignmentRepository):
        self._assignments = assignments

    def add_assignment(self, assignment: WorkAssignment) -> None:
        self._assignments.add(assignment)

    def update_assignment(self, assignment: WorkAssignment) -> bool:
        return self._assignments.update(assignment)

    def _finish(self, assignment_id: str, status: AssignmentStatus, now: Optional[datetime]) -> WorkAssignment:
        current = self._assignments.get_by_id(assignment_id)
        if not current:
            raise NotFoundError("Assignment not found")
        updated = replace(current, status=status, end_time=now or now_local())
        self._assignments.update(updated)
        logger.info("Assignment %s -> %s", assignment_id, status.value)
        return updated

    def complete_assignment(self, assignment_id: str, *, now: Optional[datetime] = None) -> WorkAssignment:
        return self._finish(assignment_id, AssignmentStatus.COMPLETED, now)

    def cancel_assignment(self, assignment_id: str, *, now: Optional[datetime] = None) -> WorkAssignment:
        return self._finish(assignment_id, AssignmentStatus.CANCELLED, now)

    def get_assignments_for_date(self, work_date: date) -> Sequence[WorkAssignment]:
        return [a for a in self._assignments.list_all() if day_key(a.start_time) == work_date]

    def get_today_assignments(self, today: Optional[date] = None) -> Sequence[WorkAssignment]:
        return self.get_assignments_for_date(today or today_local())

    def get_employee_assignments(self, employee_id: str, work_date: Optional[date] = None) -> Sequence[WorkAssignment]:
        target = work_date or today_local()
        return [
            a
            for a in self._assignments.list_all()
            if a.employee_id == employee_id and day_key(a.start_time) == target
        ]
