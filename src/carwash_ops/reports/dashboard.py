from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..assignments.service import AssignmentService
from ..attendance.service import AttendanceService
from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_RECENT_CUSTOMERS
from ..core.enums import AssignmentStatus
from ..customers.model import Customer
from ..customers.service import CustomerService
from ..employees.service import EmployeeService


@dataclass(frozen=True)
class DashboardStats:
    total_customers: int
    total_visits: int
    average_visits: float
    recent_customers: Sequence[Customer]
    total_employees: int
    present_today: int
    active_assignments: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalCustomers": self.total_customers,
            "totalVisits": self.total_visits,
            "averageVisits": self.average_visits,
            "recentCustomers": [c.to_dict() for c in self.recent_customers],
            "totalEmployees": self.total_employees,
            "presentToday": self.present_today,
            "activeAssignments": self.active_assignments,
        }


class DashboardService:
    def __init__(
        self,
        customers: CustomerService,
        employees: EmployeeService,
        attendance: AttendanceService,
        assignments: AssignmentService,
    ):
        self._customers = customers
        self._employees = employees
        self._attendance = attendance
        self._assignments = assignments

    def build(self, today: Optional[date] = None, *, recent_limit: int = DEFAULT_RECENT_CUSTOMERS) -> DashboardStats:
        today = today or today_local()
        customers = list(self._customers.list_customers())
        total_visits = sum(c.total_visits for c in customers)
        recent = sorted(customers, key=lambda c: c.last_visit, reverse=True)[:recent_limit]

        # presentToday counts attendance marks, not only active employees.
        present = sum(1 for r in self._attendance.get_today_attendance(today) if r.is_present)
        in_progress = sum(
            1 for a in self._assignments.get_today_assignments(today) if a.status == AssignmentStatus.IN_PROGRESS
        )

        return DashboardStats(
            total_customers=len(customers),
            total_visits=total_visits,
            average_visits=(total_visits / len(customers)) if customers else 0.0,
            recent_customers=recent,
            total_employees=len(self._employees.get_active_employees()),
            present_today=present,
            active_assignments=in_progress,
        )
