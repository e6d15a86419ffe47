from __future__ import annotations

from dataclasses import dataclass

from .assignments.kv_assignment_repository import KeyValueAssignmentRepository
from .assignments.service import AssignmentService
from .attendance.kv_attendance_repository import KeyValueAttendanceRepository
from .attendance.service import AttendanceService
from .carpets.kv_carpet_repository import KeyValueCarpetRepository
from .carpets.service import CarpetService
from .customers.kv_customer_repository import KeyValueCustomerRepository
from .customers.service import CustomerService
from .employees.kv_employee_repository import KeyValueEmployeeRepository
from .employees.service import EmployeeService
from .performance.service import PerformanceReportService
from .reports.dashboard import DashboardService
from .storage.connection import DBConfig, DatabaseConnection
from .storage.kv import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from .storage.mysql_kv_store import MySQLKeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    customers_repo: KeyValueCustomerRepository
    employees_repo: KeyValueEmployeeRepository
    attendance_repo: KeyValueAttendanceRepository
    assignments_repo: KeyValueAssignmentRepository
    carpets_repo: KeyValueCarpetRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    assignment_service: AssignmentService
    customer_service: CustomerService
    carpet_service: CarpetService
    performance_service: PerformanceReportService
    dashboard_service: DashboardService


def build_store(*, backend: str, data_dir: str = "data", db_config: dict | None = None) -> KeyValueStore:
    backend = (backend or "json").lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "json":
        return JsonFileKeyValueStore(data_dir)
    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        return MySQLKeyValueStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(*, store: KeyValueStore) -> Container:
    customers_repo = KeyValueCustomerRepository(store)
    employees_repo = KeyValueEmployeeRepository(store)
    attendance_repo = KeyValueAttendanceRepository(store)
    assignments_repo = KeyValueAssignmentRepository(store)
    carpets_repo = KeyValueCarpetRepository(store)

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(attendance_repo, employees_repo)
    assignment_service = AssignmentService(assignments_repo)
    customer_service = CustomerService(customers_repo, attendance_service, assignment_service)
    carpet_service = CarpetService(carpets_repo, customers_repo, attendance_service)
    performance_service = PerformanceReportService(assignment_service, attendance_service)
    dashboard_service = DashboardService(customer_service, employee_service, attendance_service, assignment_service)

    return Container(
        store=store,
        customers_repo=customers_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        assignments_repo=assignments_repo,
        carpets_repo=carpets_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        assignment_service=assignment_service,
        customer_service=customer_service,
        carpet_service=carpet_service,
        performance_service=performance_service,
        dashboard_service=dashboard_service,
    )
