from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import DailyAttendance


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[DailyAttendance]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[DailyAttendance]:
        raise NotImplementedError

    def replace_for_employee_and_date(self, record: DailyAttendance) -> None:
        """Drop any record for (employee, date) and append ``record``."""

        raise NotImplementedError
