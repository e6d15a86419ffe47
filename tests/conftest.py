from __future__ import annotations

from datetime import datetime

import pytest

from carwash_ops.carpets.model import CarpetFormData
from carwash_ops.container import Container, build_container
from carwash_ops.customers.model import CustomerFormData
from carwash_ops.employees.model import EmployeeFormData
from carwash_ops.main import create_app
from carwash_ops.storage.kv import InMemoryKeyValueStore

ID_IMAGE = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 31, 9, 30)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def container(store) -> Container:
    return build_container(store=store)


@pytest.fixture
def employee_form():
    def _make(**overrides) -> EmployeeFormData:
        values = dict(
            first_name="Alex",
            last_name="Moreno",
            email="alex@example.com",
            phone="555-0101",
            national_id="ID-1001",
            national_id_image=ID_IMAGE,
        )
        values.update(overrides)
        return EmployeeFormData(**values)

    return _make


@pytest.fixture
def present_employee(container, employee_form, fixed_now):
    """Register an employee and mark them present on ``fixed_now``'s day."""

    def _make(**overrides):
        employee = container.employee_service.register_employee(employee_form(**overrides), now=fixed_now)
        container.attendance_service.mark_attendance(employee.employee_id, True, now=fixed_now)
        return employee

    return _make


@pytest.fixture
def customer_form():
    def _make(**overrides) -> CustomerFormData:
        values = dict(
            first_name="Jordan",
            last_name="Lee",
            email="jordan@example.com",
            phone="555-0199",
            vehicle_make="Toyota",
            vehicle_model="Corolla",
            vehicle_year=2019,
            license_plate="abc-123",
            services=("Basic Wash",),
        )
        values.update(overrides)
        return CustomerFormData(**values)

    return _make


@pytest.fixture
def carpet_form():
    def _make(**overrides) -> CarpetFormData:
        values = dict(
            length=8,
            width=10,
            material="Wool",
            color="Red",
            cleaning_service="deep",
            drying_service="dehumidifier",
            protection_service="none",
        )
        values.update(overrides)
        return CarpetFormData(**values)

    return _make


@pytest.fixture
def app(container):
    return create_app(settings_module="carwash_ops.config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()
