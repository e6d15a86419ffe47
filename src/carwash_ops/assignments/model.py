from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..common.datetime_utils import from_iso, to_iso
from ..core.enums import AssignmentStatus


@dataclass(frozen=True)
class WorkAssignment:
    """Domain entity: an employee working on a customer's vehicle for one visit."""

    assignment_id: str
    employee_id: str
    customer_id: str
    vehicle_license_plate: str
    services: Tuple[str, ...]
    start_time: datetime
    status: AssignmentStatus
    end_time: Optional[datetime] = None
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.assignment_id,
            "employeeId": self.employee_id,
            "customerId": self.customer_id,
            "vehicleLicensePlate": self.vehicle_license_plate,
            "services": list(self.services),
            "startTime": to_iso(self.start_time),
            "endTime": to_iso(self.end_time),
            "status": self.status.value,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkAssignment":
        return cls(
            assignment_id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            customer_id=str(data["customerId"]),
            vehicle_license_plate=str(data.get("vehicleLicensePlate") or ""),
            services=tuple(data.get("services") or ()),
            start_time=from_iso(data["startTime"]),
            end_time=from_iso(data.get("endTime")),
            status=AssignmentStatus(data["status"]),
            notes=data.get("notes"),
        )
