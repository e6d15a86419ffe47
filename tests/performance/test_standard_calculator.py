from datetime import datetime

from carwash_ops.assignments.model import WorkAssignment
from carwash_ops.core.enums import AssignmentStatus
from carwash_ops.performance.calculator.standard_calculator import StandardServiceTimeCalculator


def test_standard_calculator_measures_start_to_end():
    assignment = WorkAssignment(
        assignment_id="a1",
        employee_id="e1",
        customer_id="c1",
        vehicle_license_plate="ABC-123",
        services=("Basic Wash",),
        start_time=datetime(2026, 1, 31, 9, 0),
        end_time=datetime(2026, 1, 31, 9, 45),
        status=AssignmentStatus.COMPLETED,
    )

    assert StandardServiceTimeCalculator().service_minutes(assignment) == 45


def test_standard_calculator_is_zero_without_end_time():
    assignment = WorkAssignment(
        assignment_id="a1",
        employee_id="e1",
        customer_id="c1",
        vehicle_license_plate="ABC-123",
        services=(),
        start_time=datetime(2026, 1, 31, 9, 0),
        status=AssignmentStatus.COMPLETED,
    )

    assert StandardServiceTimeCalculator().service_minutes(assignment) == 0
