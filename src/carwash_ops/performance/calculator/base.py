from __future__ import annotations

from abc import ABC, abstractmethod

from ...assignments.model import WorkAssignment


class ServiceTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for service durations)."""

    @abstractmethod
    def service_minutes(self, assignment: WorkAssignment) -> float:
        raise NotImplementedError
