from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import List

from carwash_ops.attendance.model import DailyAttendance
from carwash_ops.attendance.service import AttendanceService
from carwash_ops.employees.model import Employee


def _employee(employee_id: str, *, is_active: bool = True) -> Employee:
    return Employee(
        employee_id=employee_id,
        first_name=employee_id.upper(),
        last_name="Test",
        email=f"{employee_id}@example.com",
        phone="555",
        national_id=f"N-{employee_id}",
        national_id_image="data:image/png;base64,AA==",
        created_at=datetime(2026, 1, 1, 8, 0),
        is_active=is_active,
    )


@dataclass
class InMemoryEmployees:
    employees: List[Employee]

    def list_active(self):
        return [e for e in self.employees if e.is_active]


@dataclass
class InMemoryAttendance:
    records: List[DailyAttendance] = field(default_factory=list)

    def list_all(self):
        return list(self.records)

    def list_for_date(self, work_date: date):
        return [r for r in self.records if r.work_date == work_date]

    def replace_for_employee_and_date(self, record: DailyAttendance) -> None:
        self.records = [
            r
            for r in self.records
            if not (r.employee_id == record.employee_id and r.work_date == record.work_date)
        ]
        self.records.append(record)


def test_mark_twice_same_day_keeps_last(fixed_now):
    repo = InMemoryAttendance()
    svc = AttendanceService(repo, InMemoryEmployees([_employee("e1")]))

    svc.mark_attendance("e1", True, now=fixed_now)
    svc.mark_attendance("e1", False, "sick", now=fixed_now + timedelta(hours=2))

    today = svc.get_today_attendance(fixed_now.date())
    assert len(today) == 1
    assert today[0].is_present is False
    assert today[0].check_in_time is None
    assert today[0].notes == "sick"


def test_present_mark_stamps_check_in(fixed_now):
    svc = AttendanceService(InMemoryAttendance(), InMemoryEmployees([_employee("e1")]))
    record = svc.mark_attendance("e1", True, now=fixed_now)
    assert record.check_in_time == fixed_now
    assert record.work_date == date(2026, 1, 31)
    assert record.check_out_time is None


def test_marks_on_different_days_are_kept(fixed_now):
    repo = InMemoryAttendance()
    svc = AttendanceService(repo, InMemoryEmployees([_employee("e1")]))

    svc.mark_attendance("e1", True, now=fixed_now - timedelta(days=1))
    svc.mark_attendance("e1", True, now=fixed_now)

    assert len(repo.list_all()) == 2


def test_present_today_requires_active_and_present(fixed_now):
    employees = InMemoryEmployees([_employee("e1"), _employee("e2", is_active=False), _employee("e3")])
    svc = AttendanceService(InMemoryAttendance(), employees)

    svc.mark_attendance("e1", True, now=fixed_now)
    svc.mark_attendance("e2", True, now=fixed_now)
    svc.mark_attendance("e3", False, now=fixed_now)

    today = fixed_now.date()
    assert [e.employee_id for e in svc.get_present_employees_today(today)] == ["e1"]
    assert svc.is_eligible_for_assignment("e1", today) is True
    assert svc.is_eligible_for_assignment("e2", today) is False
    assert svc.is_eligible_for_assignment("e3", today) is False


def test_yesterdays_presence_does_not_count(fixed_now):
    svc = AttendanceService(InMemoryAttendance(), InMemoryEmployees([_employee("e1")]))
    svc.mark_attendance("e1", True, now=fixed_now - timedelta(days=1))

    assert svc.get_present_employees_today(fixed_now.date()) == []


def test_attendance_for_employee_unknown_to_directory_is_stored(fixed_now):
    svc = AttendanceService(InMemoryAttendance(), InMemoryEmployees([]))
    svc.mark_attendance("ghost", True, now=fixed_now)

    assert len(svc.get_today_attendance(fixed_now.date())) == 1
    assert svc.get_present_employees_today(fixed_now.date()) == []
