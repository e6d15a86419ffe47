from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..common.datetime_utils import from_iso, to_iso
from ..core.enums import (
    CarpetCondition,
    CarpetStatus,
    CarpetType,
    CleaningService,
    DryingService,
    ProtectionService,
    SizeUnit,
)


@dataclass(frozen=True)
class CarpetSize:
    length: float
    width: float
    unit: SizeUnit = SizeUnit.FEET

    @property
    def area(self) -> float:
        # Raw product; feet and meters are not normalized.
        return self.length * self.width


@dataclass(frozen=True)
class CarpetDetails:
    carpet_type: CarpetType
    size: CarpetSize
    material: str
    color: str
    condition: CarpetCondition
    stains: Tuple[str, ...] = field(default_factory=tuple)
    notes: Optional[str] = None


@dataclass(frozen=True)
class CarpetServices:
    cleaning: CleaningService
    drying: DryingService
    protection: ProtectionService


@dataclass(frozen=True)
class CarpetTimeline:
    drop_off: datetime
    estimated_completion: Optional[datetime] = None
    actual_completion: Optional[datetime] = None
    pickup: Optional[datetime] = None


@dataclass(frozen=True)
class CarpetPricing:
    base_price: float
    additional_services: float
    total_price: float
    deposit: Optional[float] = None
    balance: Optional[float] = None


@dataclass(frozen=True)
class Carpet:
    """Domain entity: a carpet-cleaning job."""

    carpet_id: str
    customer_id: str
    employee_id: str
    details: CarpetDetails
    services: CarpetServices
    status: CarpetStatus
    timeline: CarpetTimeline
    pricing: CarpetPricing
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        d = self.details
        return {
            "id": self.carpet_id,
            "customerId": self.customer_id,
            "employeeId": self.employee_id,
            "carpetDetails": {
                "type": d.carpet_type.value,
                "size": {"length": d.size.length, "width": d.size.width, "unit": d.size.unit.value},
                "material": d.material,
                "color": d.color,
                "condition": d.condition.value,
                "stains": list(d.stains),
                "notes": d.notes,
            },
            "services": {
                "cleaning": self.services.cleaning.value,
                "drying": self.services.drying.value,
                "protection": self.services.protection.value,
            },
            "status": self.status.value,
            "timeline": {
                "dropOff": to_iso(self.timeline.drop_off),
                "estimatedCompletion": to_iso(self.timeline.estimated_completion),
                "actualCompletion": to_iso(self.timeline.actual_completion),
                "pickup": to_iso(self.timeline.pickup),
            },
            "pricing": {
                "basePrice": self.pricing.base_price,
                "additionalServices": self.pricing.additional_services,
                "totalPrice": self.pricing.total_price,
                "deposit": self.pricing.deposit,
                "balance": self.pricing.balance,
            },
            "createdAt": to_iso(self.created_at),
            "updatedAt": to_iso(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Carpet":
        d = data["carpetDetails"]
        size = d.get("size") or {}
        s = data["services"]
        t = data["timeline"]
        p = data["pricing"]
        return cls(
            carpet_id=str(data["id"]),
            customer_id=str(data["customerId"]),
            employee_id=str(data["employeeId"]),
            details=CarpetDetails(
                carpet_type=CarpetType(d["type"]),
                size=CarpetSize(
                    length=float(size.get("length") or 0),
                    width=float(size.get("width") or 0),
                    unit=SizeUnit(size.get("unit") or SizeUnit.FEET.value),
                ),
                material=str(d.get("material") or ""),
                color=str(d.get("color") or ""),
                condition=CarpetCondition(d["condition"]),
                stains=tuple(d.get("stains") or ()),
                notes=d.get("notes"),
            ),
            services=CarpetServices(
                cleaning=CleaningService(s["cleaning"]),
                drying=DryingService(s["drying"]),
                protection=ProtectionService(s["protection"]),
            ),
            status=CarpetStatus(data["status"]),
            timeline=CarpetTimeline(
                drop_off=from_iso(t["dropOff"]),
                estimated_completion=from_iso(t.get("estimatedCompletion")),
                actual_completion=from_iso(t.get("actualCompletion")),
                pickup=from_iso(t.get("pickup")),
            ),
            pricing=CarpetPricing(
                base_price=float(p.get("basePrice") or 0),
                additional_services=float(p.get("additionalServices") or 0),
                total_price=float(p.get("totalPrice") or 0),
                deposit=float(p["deposit"]) if p.get("deposit") is not None else None,
                balance=float(p["balance"]) if p.get("balance") is not None else None,
            ),
            created_at=from_iso(data["createdAt"]),
            updated_at=from_iso(data["updatedAt"]),
        )


@dataclass(frozen=True)
class CarpetStats:
    """Read-model for the carpet statistics board."""

    total_carpets: int
    today_carpets: int
    pending_carpets: int
    in_progress_carpets: int
    completed_carpets: int
    delivered_carpets: int
    total_revenue: float
    today_revenue: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalCarpets": self.total_carpets,
            "todayCarpets": self.today_carpets,
            "pendingCarpets": self.pending_carpets,
            "inProgressCarpets": self.in_progress_carpets,
            "completedCarpets": self.completed_carpets,
            "deliveredCarpets": self.delivered_carpets,
            "totalRevenue": self.total_revenue,
            "todayRevenue": self.today_revenue,
        }


@dataclass(frozen=True)
class CarpetFormData:
    customer_id: str = ""
    employee_id: str = ""
    carpet_type: str = CarpetType.AREA.value
    length: Any = 0
    width: Any = 0
    unit: str = SizeUnit.FEET.value
    material: str = ""
    color: str = ""
    condition: str = CarpetCondition.GOOD.value
    stains: Tuple[str, ...] = field(default_factory=tuple)
    cleaning_service: str = CleaningService.BASIC.value
    drying_service: str = DryingService.AIR_DRY.value
    protection_service: str = ProtectionService.NONE.value
    notes: Optional[str] = None
    deposit: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "CarpetFormData":
        deposit = data.get("deposit")
        return cls(
            customer_id=str(data.get("customerId") or ""),
            employee_id=str(data.get("employeeId") or ""),
            carpet_type=str(data.get("carpetType") or CarpetType.AREA.value),
            length=data.get("length") or 0,
            width=data.get("width") or 0,
            unit=str(data.get("unit") or SizeUnit.FEET.value),
            material=str(data.get("material") or ""),
            color=str(data.get("color") or ""),
            condition=str(data.get("condition") or CarpetCondition.GOOD.value),
            stains=tuple(data.get("stains") or ()),
            cleaning_service=str(data.get("cleaningService") or CleaningService.BASIC.value),
            drying_service=str(data.get("dryingService") or DryingService.AIR_DRY.value),
            protection_service=str(data.get("protectionService") or ProtectionService.NONE.value),
            notes=data.get("notes"),
            deposit=float(deposit) if deposit not in (None, "") else None,
        )
