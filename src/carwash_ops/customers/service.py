from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Optional, Sequence

from ..assignments.model import WorkAssignment
from ..assignments.service import AssignmentService
from ..attendance.service import AttendanceService
from ..common.datetime_utils import day_key, now_local
from ..common.ids import new_id
from ..common.validators import require_email, require_int_between, require_non_empty
from ..core.constants import MIN_VEHICLE_YEAR, UNKNOWN_CUSTOMER
from ..core.enums import AssignmentStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Customer, CustomerFormData, Vehicle
from .repository import CustomerRepository

logger = logging.getLogger(__name__)


def validate_customer_form(form: CustomerFormData, *, current_year: int) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    require_non_empty(errors, form.first_name, "firstName", "First name is required")
    require_non_empty(errors, form.last_name, "lastName", "Last name is required")
    require_email(errors, form.email)
    require_non_empty(errors, form.phone, "phone", "Phone is required")
    require_non_empty(errors, form.vehicle_make, "vehicleMake", "Vehicle make is required")
    require_non_empty(errors, form.vehicle_model, "vehicleModel", "Vehicle model is required")
    require_int_between(
        errors, form.vehicle_year, "vehicleYear", MIN_VEHICLE_YEAR, current_year + 1, "Valid vehicle year is required"
    )
    require_non_empty(errors, form.license_plate, "licensePlate", "License plate is required")
    if not form.services:
        errors["services"] = "At least one service must be selected"
    if not form.assigned_employee_id:
        errors["assignedEmployeeId"] = "Please assign an employee to this vehicle"
    return errors


class CustomerService:
    """Use case: register and look up carwash customers."""

    def __init__(
        self,
        customers: CustomerRepository,
        attendance: AttendanceService,
        assignments: AssignmentService,
    ):
        self._customers = customers
        self._attendance = attendance
        self._assignments = assignments

    def register_customer(self, form: CustomerFormData, *, now: Optional[datetime] = None) -> Customer:
        """Store a new customer and open an in-progress assignment for the visit."""
        now = now or now_local()
        errors = validate_customer_form(form, current_year=now.year)
        if not errors and not self._attendance.is_eligible_for_assignment(
            form.assigned_employee_id, today=day_key(now)
        ):
            errors["assignedEmployeeId"] = "Employee is not active or not present today"
        if errors:
            raise ValidationError("Customer form is invalid", errors)

        plate = form.license_plate.strip().upper()
        notes = form.notes.strip() if form.notes else form.notes
        customer = Customer(
            customer_id=new_id(),
            first_name=form.first_name.strip(),
            last_name=form.last_name.strip(),
            email=form.email.strip(),
            phone=form.phone.strip(),
            vehicle=Vehicle(
                make=form.vehicle_make.strip(),
                model=form.vehicle_model.strip(),
                year=int(form.vehicle_year),
                license_plate=plate,
                color=form.vehicle_color.strip() if form.vehicle_color else form.vehicle_color,
            ),
            services=tuple(form.services),
            assigned_employee_id=form.assigned_employee_id,
            notes=notes,
            created_at=now,
            last_visit=now,
            total_visits=1,
            preferred_services=tuple(form.services),
        )
        self._customers.add(customer)

        self._assignments.add_assignment(
            WorkAssignment(
                assignment_id=new_id(),
                employee_id=form.assigned_employee_id,
                customer_id=customer.customer_id,
                vehicle_license_plate=plate,
                services=tuple(form.services),
                start_time=now,
                status=AssignmentStatus.IN_PROGRESS,
                notes=notes,
            )
        )
        logger.info("Registered customer %s assigned to employee %s", customer.customer_id, form.assigned_employee_id)
        return customer

    def list_customers(self) -> Sequence[Customer]:
        return self._customers.list_all()

    def search_customers(self, query: str) -> Sequence[Customer]:
        return self._customers.search(query)

    def get_customer(self, customer_id: str) -> Customer:
        customer = self._customers.get_by_id(customer_id)
        if not customer:
            raise NotFoundError("Customer not found")
        return customer

    def update_customer(self, customer: Customer) -> bool:
        return self._customers.update(customer)

    def delete_customer(self, customer_id: str) -> bool:
        # Carpets and assignments keep the dangling id.
        return self._customers.delete_by_id(customer_id)

    def customer_name(self, customer_id: Optional[str]) -> str:
        customer = self._customers.get_by_id(customer_id) if customer_id else None
        return customer.full_name if customer else UNKNOWN_CUSTOMER
