from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..assignments.service import AssignmentService
from ..attendance.service import AttendanceService
from ..common.datetime_utils import today_local
from ..core.enums import AssignmentStatus
from .calculator.base import ServiceTimeCalculator
from .calculator.standard_calculator import StandardServiceTimeCalculator
from .model import EmployeePerformance, PerformanceSummary


class PerformanceReportService:
    def __init__(
        self,
        assignments: AssignmentService,
        attendance: AttendanceService,
        *,
        calculator: Optional[ServiceTimeCalculator] = None,
    ):
        self._assignments = assignments
        self._attendance = attendance
        self._calculator = calculator or StandardServiceTimeCalculator()

    def calculate_daily_performance(self, employee_id: str, work_date: Optional[date] = None) -> EmployeePerformance:
        target = work_date or today_local()
        assignments = self._assignments.get_employee_assignments(employee_id, target)
        completed = [a for a in assignments if a.status == AssignmentStatus.COMPLETED]

        # A completed assignment without an end time adds 0 minutes but still
        # counts in the divisor.
        total_minutes = sum(self._calculator.service_minutes(a) for a in completed)
        average = total_minutes / len(completed) if completed else 0.0

        return EmployeePerformance(
            employee_id=employee_id,
            work_date=target,
            total_assignments=len(assignments),
            completed_assignments=len(completed),
            total_revenue=0.0,
            average_service_time=average,
        )

    def get_daily_performance_report(
        self, work_date: Optional[date] = None, *, today: Optional[date] = None
    ) -> Sequence[EmployeePerformance]:
        """Rollups for ``work_date``, restricted to employees present *today*.

        Employees absent today are left out even when ``work_date`` is in the
        past.
        """
        target = work_date or today_local()
        present = self._attendance.get_present_employees_today(today)
        return [self.calculate_daily_performance(e.employee_id, target) for e in present]

    @staticmethod
    def summarize(report: Sequence[EmployeePerformance]) -> PerformanceSummary:
        total = sum(p.total_assignments for p in report)
        completed = sum(p.completed_assignments for p in report)
        return PerformanceSummary(
            total_assignments=total,
            total_completed=completed,
            average_completion=(completed / total * 100) if total > 0 else 0.0,
            active_employees_count=sum(1 for p in report if p.total_assignments > 0),
        )
