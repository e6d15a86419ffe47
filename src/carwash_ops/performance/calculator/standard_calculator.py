from __future__ import annotations

from .base import ServiceTimeCalculator
from ...assignments.model import WorkAssignment


class StandardServiceTimeCalculator(ServiceTimeCalculator):
    """Standard rule: end - start in minutes, 0 while there is no end time."""

    def service_minutes(self, assignment: WorkAssignment) -> float:
        if not assignment.end_time:
            return 0.0
        return (assignment.end_time - assignment.start_time).total_seconds() / 60
