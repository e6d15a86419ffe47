from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional, Tuple

from ..common.datetime_utils import format_day


@dataclass(frozen=True)
class EmployeePerformance:
    """Read-model: one employee's rollup for one day."""

    employee_id: str
    work_date: date
    total_assignments: int
    completed_assignments: int
    total_revenue: float
    average_service_time: float
    customer_ratings: Tuple[float, ...] = field(default_factory=tuple)
    notes: Optional[str] = None

    @property
    def completion_rate(self) -> float:
        if self.total_assignments <= 0:
            return 0.0
        return self.completed_assignments / self.total_assignments * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "employeeId": self.employee_id,
            "date": format_day(self.work_date),
            "totalAssignments": self.total_assignments,
            "completedAssignments": self.completed_assignments,
            "totalRevenue": self.total_revenue,
            "averageServiceTime": self.average_service_time,
            "customerRatings": list(self.customer_ratings),
            "notes": self.notes,
        }


@dataclass(frozen=True)
class PerformanceSummary:
    total_assignments: int
    total_completed: int
    average_completion: float
    active_employees_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalAssignments": self.total_assignments,
            "totalCompleted": self.total_completed,
            "averageCompletion": self.average_completion,
            "activeEmployeesCount": self.active_employees_count,
        }
