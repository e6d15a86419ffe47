from __future__ import annotations

from datetime import timedelta


def test_dashboard_on_empty_store(container, fixed_now):
    stats = container.dashboard_service.build(fixed_now.date())

    assert stats.total_customers == 0
    assert stats.average_visits == 0
    assert stats.recent_customers == []
    assert stats.present_today == 0


def test_dashboard_counts(container, present_employee, employee_form, customer_form, fixed_now):
    worker = present_employee()
    inactive = present_employee(first_name="Off")
    container.employee_service.set_active(inactive.employee_id, is_active=False)

    for minutes in range(3):
        container.customer_service.register_customer(
            customer_form(first_name=f"C{minutes}", assigned_employee_id=worker.employee_id),
            now=fixed_now + timedelta(minutes=minutes),
        )
    [first] = [a for a in container.assignment_service.get_today_assignments(fixed_now.date()) if a.start_time == fixed_now]
    container.assignment_service.complete_assignment(first.assignment_id, now=fixed_now + timedelta(hours=1))

    stats = container.dashboard_service.build(fixed_now.date(), recent_limit=2)

    assert stats.total_customers == 3
    assert stats.total_visits == 3
    assert stats.average_visits == 1
    assert [c.first_name for c in stats.recent_customers] == ["C2", "C1"]
    assert stats.total_employees == 1
    # Attendance marks are counted even for inactive employees.
    assert stats.present_today == 2
    assert stats.active_assignments == 2
