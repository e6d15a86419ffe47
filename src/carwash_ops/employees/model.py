from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from ..common.datetime_utils import from_iso, to_iso


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    ``national_id_image`` is the scanned ID card as a data URI string.
    """

    employee_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    national_id: str
    national_id_image: str
    created_at: datetime
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.employee_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "nationalId": self.national_id,
            "nationalIdImage": self.national_id_image,
            "createdAt": to_iso(self.created_at),
            "isActive": self.is_active,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Employee":
        return cls(
            employee_id=str(data["id"]),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            email=str(data.get("email") or ""),
            phone=str(data.get("phone") or ""),
            national_id=str(data.get("nationalId") or ""),
            national_id_image=str(data.get("nationalIdImage") or ""),
            created_at=from_iso(data["createdAt"]),
            is_active=bool(data.get("isActive", True)),
        )


@dataclass(frozen=True)
class EmployeeFormData:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    national_id: str = ""
    national_id_image: str = ""

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "EmployeeFormData":
        return cls(
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            email=str(data.get("email") or ""),
            phone=str(data.get("phone") or ""),
            national_id=str(data.get("nationalId") or ""),
            national_id_image=str(data.get("nationalIdImage") or ""),
        )
