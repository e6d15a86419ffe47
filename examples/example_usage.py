"""Using the service layer directly, without Flask.

Controllers stay thin; everything below goes straight to the services.
"""

import importlib

from carwash_ops.config import get_settings_module
from carwash_ops.container import build_container, build_store


def main():
    settings = importlib.import_module(get_settings_module())
    store = build_store(backend=settings.STORAGE_BACKEND, data_dir=settings.DATA_DIR, db_config=settings.DB_CONFIG)
    container = build_container(store=store)

    print(container.carpet_service.get_carpet_stats().to_dict())
    for employee in container.attendance_service.get_present_employees_today():
        perf = container.performance_service.calculate_daily_performance(employee.employee_id)
        print(employee.full_name, perf.completed_assignments, "/", perf.total_assignments)


if __name__ == "__main__":
    main()
