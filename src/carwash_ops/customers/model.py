from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..common.datetime_utils import from_iso, to_iso


@dataclass(frozen=True)
class Vehicle:
    make: str
    model: str
    year: int
    license_plate: str
    color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "make": self.make,
            "model": self.model,
            "year": self.year,
            "licensePlate": self.license_plate,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Vehicle":
        return cls(
            make=str(data.get("make") or ""),
            model=str(data.get("model") or ""),
            year=int(data.get("year") or 0),
            license_plate=str(data.get("licensePlate") or ""),
            color=data.get("color"),
        )


@dataclass(frozen=True)
class Customer:
    """Domain entity: a carwash customer with one vehicle."""

    customer_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    vehicle: Vehicle
    services: Tuple[str, ...]
    created_at: datetime
    last_visit: datetime
    total_visits: int = 1
    assigned_employee_id: Optional[str] = None
    notes: Optional[str] = None
    preferred_services: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.customer_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "vehicle": self.vehicle.to_dict(),
            "services": list(self.services),
            "assignedEmployeeId": self.assigned_employee_id,
            "notes": self.notes,
            "createdAt": to_iso(self.created_at),
            "lastVisit": to_iso(self.last_visit),
            "totalVisits": self.total_visits,
            "preferredServices": list(self.preferred_services),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Customer":
        return cls(
            customer_id=str(data["id"]),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            email=str(data.get("email") or ""),
            phone=str(data.get("phone") or ""),
            vehicle=Vehicle.from_dict(data.get("vehicle") or {}),
            services=tuple(data.get("services") or ()),
            assigned_employee_id=data.get("assignedEmployeeId") or None,
            notes=data.get("notes"),
            created_at=from_iso(data["createdAt"]),
            last_visit=from_iso(data["lastVisit"]),
            total_visits=int(data.get("totalVisits") or 0),
            preferred_services=tuple(data.get("preferredServices") or ()),
        )


@dataclass(frozen=True)
class CustomerFormData:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    vehicle_make: str = ""
    vehicle_model: str = ""
    vehicle_year: int = 0
    license_plate: str = ""
    vehicle_color: Optional[str] = None
    services: Tuple[str, ...] = field(default_factory=tuple)
    assigned_employee_id: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "CustomerFormData":
        try:
            year = int(data.get("vehicleYear") or 0)
        except (TypeError, ValueError):
            year = 0
        return cls(
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            email=str(data.get("email") or ""),
            phone=str(data.get("phone") or ""),
            vehicle_make=str(data.get("vehicleMake") or ""),
            vehicle_model=str(data.get("vehicleModel") or ""),
            vehicle_year=year,
            license_plate=str(data.get("licensePlate") or ""),
            vehicle_color=data.get("vehicleColor"),
            services=tuple(data.get("services") or ()),
            assigned_employee_id=data.get("assignedEmployeeId") or None,
            notes=data.get("notes"),
        )
