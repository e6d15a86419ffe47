from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import day_key, now_local, today_local
from ..common.ids import new_id
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import DailyAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Daily presence marks and the eligibility rule built on them.

    Only employees that are both active and marked present today may receive
    new customer or carpet assignments.
    """

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def mark_attendance(
        self,
        employee_id: str,
        is_present: bool,
        notes: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
    ) -> DailyAttendance:
        """Last write wins per (employee, day); never updates in place."""
        now = now or now_local()
        record = DailyAttendance(
            attendance_id=new_id(),
            employee_id=employee_id,
            work_date=day_key(now),
            is_present=bool(is_present),
            check_in_time=now if is_present else None,
            notes=notes,
        )
        self._attendance.replace_for_employee_and_date(record)
        logger.info(
            "Marked employee %s %s on %s", employee_id, "present" if is_present else "absent", record.work_date
        )
        return record

    def get_attendance_for_date(self, work_date: date) -> Sequence[DailyAttendance]:
        return self._attendance.list_for_date(work_date)

    def get_today_attendance(self, today: Optional[date] = None) -> Sequence[DailyAttendance]:
        return self.get_attendance_for_date(today or today_local())

    def get_present_employees_today(self, today: Optional[date] = None) -> Sequence[Employee]:
        present_ids = {r.employee_id for r in self.get_today_attendance(today) if r.is_present}
        return [e for e in self._employees.list_active() if e.employee_id in present_ids]

    def is_eligible_for_assignment(self, employee_id: str, today: Optional[date] = None) -> bool:
        return any(e.employee_id == employee_id for e in self.get_present_employees_today(today))
