"""Flat CSV / Excel projections of the stored collections.

Every CSV field is quoted. Names of referenced people are resolved through the
services, so dangling ids come out as the "Unknown ..." placeholders.
"""
from __future__ import annotations

import csv
import io
from typing import Callable, Iterable, List, Optional, Sequence

import pandas as pd

from ..carpets.model import Carpet
from ..common.datetime_utils import format_day
from ..customers.model import Customer
from ..employees.model import Employee
from ..performance.model import EmployeePerformance

CUSTOMER_HEADERS = [
    "First Name",
    "Last Name",
    "Email",
    "Phone",
    "Vehicle Make",
    "Vehicle Model",
    "Vehicle Year",
    "License Plate",
    "Vehicle Color",
    "Services",
    "Assigned Employee",
    "Total Visits",
    "Last Visit",
    "Notes",
]

EMPLOYEE_HEADERS = ["First Name", "Last Name", "Email", "Phone", "National ID", "Status", "Created Date"]

CARPET_HEADERS = [
    "ID",
    "Customer",
    "Employee",
    "Type",
    "Size",
    "Material",
    "Color",
    "Status",
    "Drop-off Date",
    "Completion Date",
    "Total Price",
]

PERFORMANCE_HEADERS = [
    "Employee Name",
    "Total Assignments",
    "Completed Assignments",
    "Completion Rate (%)",
    "Average Service Time (min)",
    "Date",
]

NameLookup = Callable[[Optional[str]], str]


def _fmt_number(value: float) -> str:
    return f"{value:g}"


def customer_rows(customers: Iterable[Customer], employee_name: NameLookup) -> List[list]:
    return [
        [
            c.first_name,
            c.last_name,
            c.email,
            c.phone,
            c.vehicle.make,
            c.vehicle.model,
            c.vehicle.year,
            c.vehicle.license_plate,
            c.vehicle.color or "",
            "; ".join(c.services),
            employee_name(c.assigned_employee_id),
            c.total_visits,
            format_day(c.last_visit),
            c.notes or "",
        ]
        for c in customers
    ]


def employee_rows(employees: Iterable[Employee]) -> List[list]:
    return [
        [
            e.first_name,
            e.last_name,
            e.email,
            e.phone,
            e.national_id,
            "Active" if e.is_active else "Inactive",
            format_day(e.created_at),
        ]
        for e in employees
    ]


def carpet_rows(carpets: Iterable[Carpet], customer_name: NameLookup, employee_name: NameLookup) -> List[list]:
    rows = []
    for c in carpets:
        size = c.details.size
        completion = c.timeline.actual_completion
        rows.append(
            [
                c.carpet_id,
                customer_name(c.customer_id),
                employee_name(c.employee_id),
                c.details.carpet_type.value,
                f"{_fmt_number(size.length)}x{_fmt_number(size.width)} {size.unit.value}",
                c.details.material,
                c.details.color,
                c.status.value,
                format_day(c.timeline.drop_off),
                format_day(completion) if completion else "",
                f"${c.pricing.total_price:.2f}",
            ]
        )
    return rows


def performance_rows(report: Iterable[EmployeePerformance], employee_name: NameLookup) -> List[list]:
    return [
        [
            employee_name(p.employee_id),
            p.total_assignments,
            p.completed_assignments,
            f"{p.completion_rate:.1f}" if p.total_assignments > 0 else "0",
            f"{p.average_service_time:.1f}",
            format_day(p.work_date),
        ]
        for p in report
    ]


def write_csv(headers: Sequence[str], rows: Iterable[Sequence[object]]) -> str:
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return out.getvalue()


def write_excel(headers: Sequence[str], rows: Iterable[Sequence[object]], *, sheet_name: str) -> bytes:
    df = pd.DataFrame(list(rows), columns=list(headers))
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return out.getvalue()
