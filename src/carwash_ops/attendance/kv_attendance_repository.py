from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.constants import ATTENDANCE_KEY
from ..storage.collection import JsonCollection
from ..storage.kv import KeyValueStore
from .model import DailyAttendance
from .repository import AttendanceRepository


class KeyValueAttendanceRepository(AttendanceRepository):
    def __init__(self, store: KeyValueStore):
        self._attendance = JsonCollection(
            store,
            ATTENDANCE_KEY,
            from_dict=DailyAttendance.from_dict,
            to_dict=DailyAttendance.to_dict,
            get_id=lambda r: r.attendance_id,
        )

    def list_all(self) -> Sequence[DailyAttendance]:
        return self._attendance.load()

    def list_for_date(self, work_date: date) -> Sequence[DailyAttendance]:
        return [r for r in self._attendance.load() if r.work_date == work_date]

    def replace_for_employee_and_date(self, record: DailyAttendance) -> None:
        kept = [
            r
            for r in self._attendance.load()
            if not (r.employee_id == record.employee_id and r.work_date == record.work_date)
        ]
        kept.append(record)
        self._attendance.save(kept)
