"""Populate the configured store with a small demo dataset.

Two employees are registered and marked present today, then one carwash
customer and one carpet job are created for them.
"""
from __future__ import annotations

import importlib

from carwash_ops.carpets.model import CarpetFormData
from carwash_ops.config import get_settings_module
from carwash_ops.container import build_container, build_store
from carwash_ops.core.logging import configure_logging
from carwash_ops.customers.model import CustomerFormData
from carwash_ops.employees.model import EmployeeFormData

# 1x1 transparent PNG
DEMO_ID_IMAGE = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", None))
    store = build_store(
        backend=str(getattr(settings, "STORAGE_BACKEND", "json")),
        data_dir=str(getattr(settings, "DATA_DIR", "data")),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    c = build_container(store=store)

    washer = c.employee_service.register_employee(
        EmployeeFormData(
            first_name="Alex",
            last_name="Moreno",
            email="alex.moreno@example.com",
            phone="555-0101",
            national_id="ID-1001",
            national_id_image=DEMO_ID_IMAGE,
        )
    )
    cleaner = c.employee_service.register_employee(
        EmployeeFormData(
            first_name="Sam",
            last_name="Okafor",
            email="sam.okafor@example.com",
            phone="555-0102",
            national_id="ID-1002",
            national_id_image=DEMO_ID_IMAGE,
        )
    )
    c.attendance_service.mark_attendance(washer.employee_id, True)
    c.attendance_service.mark_attendance(cleaner.employee_id, True)

    customer = c.customer_service.register_customer(
        CustomerFormData(
            first_name="Jordan",
            last_name="Lee",
            email="jordan.lee@example.com",
            phone="555-0199",
            vehicle_make="Toyota",
            vehicle_model="Corolla",
            vehicle_year=2019,
            license_plate="abc-123",
            services=("Basic Wash", "Tire Shine"),
            assigned_employee_id=washer.employee_id,
        )
    )
    carpet = c.carpet_service.create_carpet_job(
        CarpetFormData(
            customer_id=customer.customer_id,
            employee_id=cleaner.employee_id,
            length=8,
            width=10,
            material="Wool",
            color="Red",
            stains=("Coffee",),
            cleaning_service="deep",
            drying_service="dehumidifier",
            deposit=20,
        )
    )

    print(
        f"OK: Seeded 2 employees, customer {customer.customer_id}, "
        f"carpet job {carpet.carpet_id} (total ${carpet.pricing.total_price:.2f})"
    )


if __name__ == "__main__":
    main()
