from __future__ import annotations

from datetime import date, timedelta

import pytest

from carwash_ops.assignments.model import WorkAssignment
from carwash_ops.core.enums import AssignmentStatus
from carwash_ops.performance.model import EmployeePerformance
from carwash_ops.performance.service import PerformanceReportService


def _assignment(assignment_id, employee_id, start, *, status=AssignmentStatus.IN_PROGRESS, end=None):
    return WorkAssignment(
        assignment_id=assignment_id,
        employee_id=employee_id,
        customer_id="c1",
        vehicle_license_plate="ABC-123",
        services=("Basic Wash",),
        start_time=start,
        status=status,
        end_time=end,
    )


def test_daily_rollup_averages_completed_minutes(container, fixed_now):
    svc = container.assignment_service
    svc.add_assignment(_assignment("a1", "e1", fixed_now, status=AssignmentStatus.COMPLETED, end=fixed_now + timedelta(minutes=30)))
    svc.add_assignment(_assignment("a2", "e1", fixed_now, status=AssignmentStatus.COMPLETED, end=fixed_now + timedelta(minutes=60)))
    svc.add_assignment(_assignment("a3", "e1", fixed_now))
    svc.add_assignment(_assignment("a4", "e1", fixed_now - timedelta(days=1), status=AssignmentStatus.COMPLETED))

    perf = container.performance_service.calculate_daily_performance("e1", fixed_now.date())

    assert perf.total_assignments == 3
    assert perf.completed_assignments == 2
    assert perf.average_service_time == pytest.approx(45)
    assert perf.total_revenue == 0
    assert perf.completion_rate == pytest.approx(200 / 3)


def test_completed_without_end_time_still_counts_in_divisor(container, fixed_now):
    svc = container.assignment_service
    svc.add_assignment(_assignment("a1", "e1", fixed_now, status=AssignmentStatus.COMPLETED, end=fixed_now + timedelta(minutes=40)))
    svc.add_assignment(_assignment("a2", "e1", fixed_now, status=AssignmentStatus.COMPLETED))

    perf = container.performance_service.calculate_daily_performance("e1", fixed_now.date())

    assert perf.average_service_time == pytest.approx(20)


def test_no_assignments_gives_zero_rollup(container, fixed_now):
    perf = container.performance_service.calculate_daily_performance("e1", fixed_now.date())
    assert (perf.total_assignments, perf.completed_assignments, perf.average_service_time) == (0, 0, 0)
    assert perf.completion_rate == 0


def test_complete_assignment_feeds_rollup(container, fixed_now):
    container.assignment_service.add_assignment(_assignment("a1", "e1", fixed_now))
    container.assignment_service.complete_assignment("a1", now=fixed_now + timedelta(minutes=25))

    perf = container.performance_service.calculate_daily_performance("e1", fixed_now.date())
    assert perf.completed_assignments == 1
    assert perf.average_service_time == pytest.approx(25)


def test_report_only_covers_employees_present_today(container, present_employee, employee_form, fixed_now):
    present = present_employee(first_name="Here")
    absent = container.employee_service.register_employee(employee_form(first_name="Away"), now=fixed_now)
    yesterday = fixed_now - timedelta(days=1)
    container.assignment_service.add_assignment(_assignment("a1", absent.employee_id, yesterday))

    report = container.performance_service.get_daily_performance_report(yesterday.date(), today=fixed_now.date())

    assert [p.employee_id for p in report] == [present.employee_id]
    assert report[0].work_date == yesterday.date()


def test_summary_totals():
    report = [
        EmployeePerformance("e1", date(2026, 1, 31), 4, 3, 0.0, 20.0),
        EmployeePerformance("e2", date(2026, 1, 31), 0, 0, 0.0, 0.0),
    ]
    summary = PerformanceReportService.summarize(report)

    assert summary.total_assignments == 4
    assert summary.total_completed == 3
    assert summary.average_completion == pytest.approx(75)
    assert summary.active_employees_count == 1
