from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Dict, Optional, Sequence

from ..attendance.service import AttendanceService
from ..common.datetime_utils import day_key, now_local, today_local
from ..common.ids import new_id
from ..common.validators import require_choice, require_non_empty, require_positive
from ..core.constants import (
    ACTIVE_CARPET_STATUSES,
    DEFAULT_ESTIMATED_COMPLETION_HOURS,
    IN_PROGRESS_CARPET_STATUSES,
)
from ..core.enums import (
    CarpetCondition,
    CarpetStatus,
    CarpetType,
    CleaningService,
    DryingService,
    ProtectionService,
    SizeUnit,
)
from ..core.exceptions import ValidationError
from ..customers.repository import CustomerRepository
from . import pricing
from .model import (
    Carpet,
    CarpetDetails,
    CarpetFormData,
    CarpetServices,
    CarpetSize,
    CarpetStats,
    CarpetTimeline,
)
from .repository import CarpetRepository

logger = logging.getLogger(__name__)


def validate_carpet_form(form: CarpetFormData) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    require_non_empty(errors, form.customer_id, "customerId", "Customer is required")
    require_non_empty(errors, form.employee_id, "employeeId", "Employee is required")
    require_positive(errors, form.length, "length", "Valid length is required")
    require_positive(errors, form.width, "width", "Valid width is required")
    require_non_empty(errors, form.material, "material", "Material is required")
    require_non_empty(errors, form.color, "color", "Color is required")
    require_choice(errors, form.carpet_type, "carpetType", CarpetType)
    require_choice(errors, form.unit, "unit", SizeUnit)
    require_choice(errors, form.condition, "condition", CarpetCondition)
    require_choice(errors, form.cleaning_service, "cleaningService", CleaningService)
    require_choice(errors, form.drying_service, "dryingService", DryingService)
    require_choice(errors, form.protection_service, "protectionService", ProtectionService)
    if form.deposit is not None and form.deposit < 0:
        errors["deposit"] = "Deposit cannot be negative"
    return errors


class CarpetService:
    """Carpet jobs: intake, status tracking, search and statistics."""

    def __init__(
        self,
        carpets: CarpetRepository,
        customers: CustomerRepository,
        attendance: AttendanceService,
        *,
        estimated_completion_hours: int = DEFAULT_ESTIMATED_COMPLETION_HOURS,
    ):
        self._carpets = carpets
        self._customers = customers
        self._attendance = attendance
        self._estimated_completion = timedelta(hours=int(estimated_completion_hours))

    def create_carpet_job(self, form: CarpetFormData, *, now: Optional[datetime] = None) -> Carpet:
        now = now or now_local()
        errors = validate_carpet_form(form)
        if not errors:
            if not self._customers.get_by_id(form.customer_id):
                errors["customerId"] = "Invalid customer selection"
            if not self._attendance.is_eligible_for_assignment(form.employee_id, today=day_key(now)):
                errors["employeeId"] = "Employee is not active or not present today"
        if errors:
            raise ValidationError("Carpet form is invalid", errors)

        size = CarpetSize(length=float(form.length), width=float(form.width), unit=SizeUnit(form.unit))
        services = CarpetServices(
            cleaning=CleaningService(form.cleaning_service),
            drying=DryingService(form.drying_service),
            protection=ProtectionService(form.protection_service),
        )
        carpet = Carpet(
            carpet_id=new_id(),
            customer_id=form.customer_id,
            employee_id=form.employee_id,
            details=CarpetDetails(
                carpet_type=CarpetType(form.carpet_type),
                size=size,
                material=form.material.strip(),
                color=form.color.strip(),
                condition=CarpetCondition(form.condition),
                stains=tuple(form.stains),
                notes=form.notes.strip() if form.notes else form.notes,
            ),
            services=services,
            status=CarpetStatus.PENDING,
            timeline=CarpetTimeline(drop_off=now, estimated_completion=now + self._estimated_completion),
            pricing=pricing.quote(services, size, deposit=form.deposit),
            created_at=now,
            updated_at=now,
        )
        self._carpets.add(carpet)
        logger.info(
            "Carpet job %s created for customer %s, total %.2f",
            carpet.carpet_id,
            carpet.customer_id,
            carpet.pricing.total_price,
        )
        return carpet

    def update_carpet(self, carpet: Carpet, *, now: Optional[datetime] = None) -> bool:
        return self._carpets.update(replace(carpet, updated_at=now or now_local()))

    def delete_carpet(self, carpet_id: str) -> bool:
        return self._carpets.delete_by_id(carpet_id)

    def update_carpet_status(
        self, carpet_id: str, status: CarpetStatus, *, now: Optional[datetime] = None
    ) -> Optional[Carpet]:
        """Set any status; stamps depend only on the new value. Unknown id is a no-op."""
        carpet = self._carpets.get_by_id(carpet_id)
        if not carpet:
            logger.warning("Status update for unknown carpet %s ignored", carpet_id)
            return None

        now = now or now_local()
        status = CarpetStatus(status)
        timeline = carpet.timeline
        if status == CarpetStatus.COMPLETED:
            timeline = replace(timeline, actual_completion=now)
        elif status == CarpetStatus.DELIVERED:
            timeline = replace(timeline, pickup=now)

        updated = replace(carpet, status=status, timeline=timeline, updated_at=now)
        self._carpets.update(updated)
        logger.info("Carpet %s: %s -> %s", carpet_id, carpet.status.value, status.value)
        return updated

    def list_carpets(self) -> Sequence[Carpet]:
        return self._carpets.list_all()

    def get_carpet(self, carpet_id: str) -> Optional[Carpet]:
        return self._carpets.get_by_id(carpet_id)

    def get_carpets_by_status(self, status: CarpetStatus) -> Sequence[Carpet]:
        return [c for c in self._carpets.list_all() if c.status == status]

    def get_carpets_by_customer(self, customer_id: str) -> Sequence[Carpet]:
        return [c for c in self._carpets.list_all() if c.customer_id == customer_id]

    def get_carpets_by_employee(self, employee_id: str) -> Sequence[Carpet]:
        return [c for c in self._carpets.list_all() if c.employee_id == employee_id]

    def get_employee_carpet_workload(self, employee_id: str) -> Sequence[Carpet]:
        return [
            c
            for c in self._carpets.list_all()
            if c.employee_id == employee_id and c.status in ACTIVE_CARPET_STATUSES
        ]

    def get_tracking_board(self, employee_id: Optional[str] = None) -> Sequence[Carpet]:
        if employee_id:
            return self.get_employee_carpet_workload(employee_id)
        return [c for c in self._carpets.list_all() if c.status in ACTIVE_CARPET_STATUSES]

    def search_carpets(self, query: str) -> Sequence[Carpet]:
        q = query.lower()
        return [
            c
            for c in self._carpets.list_all()
            if q in c.details.material.lower()
            or q in c.details.color.lower()
            or q in c.details.carpet_type.value.lower()
            or q in c.status.value.lower()
        ]

    def get_today_carpets(self, today: Optional[date] = None) -> Sequence[Carpet]:
        target = today or today_local()
        return [c for c in self._carpets.list_all() if day_key(c.timeline.drop_off) == target]

    def get_carpet_stats(self, today: Optional[date] = None) -> CarpetStats:
        target = today or today_local()
        carpets = self._carpets.list_all()
        todays = [c for c in carpets if day_key(c.timeline.drop_off) == target]

        # Revenue is only realised on delivery.
        delivered = [c for c in carpets if c.status == CarpetStatus.DELIVERED]
        today_delivered = [c for c in todays if c.status == CarpetStatus.DELIVERED]

        return CarpetStats(
            total_carpets=len(carpets),
            today_carpets=len(todays),
            pending_carpets=sum(1 for c in carpets if c.status == CarpetStatus.PENDING),
            in_progress_carpets=sum(1 for c in carpets if c.status in IN_PROGRESS_CARPET_STATUSES),
            completed_carpets=sum(1 for c in carpets if c.status == CarpetStatus.COMPLETED),
            delivered_carpets=len(delivered),
            total_revenue=sum(c.pricing.total_price for c in delivered),
            today_revenue=sum(c.pricing.total_price for c in today_delivered),
        )
