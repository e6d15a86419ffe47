from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_day, from_iso, parse_iso_date, to_iso


@dataclass(frozen=True)
class DailyAttendance:
    """Domain entity: one employee's attendance mark for one day.

    ``check_out_time`` is kept for stored-data compatibility; nothing writes it.
    """

    attendance_id: str
    employee_id: str
    work_date: date
    is_present: bool
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.attendance_id,
            "employeeId": self.employee_id,
            "date": format_day(self.work_date),
            "isPresent": self.is_present,
            "checkInTime": to_iso(self.check_in_time),
            "checkOutTime": to_iso(self.check_out_time),
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyAttendance":
        return cls(
            attendance_id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            work_date=parse_iso_date(str(data["date"])),
            is_present=bool(data.get("isPresent")),
            check_in_time=from_iso(data.get("checkInTime")),
            check_out_time=from_iso(data.get("checkOutTime")),
            notes=data.get("notes"),
        )
