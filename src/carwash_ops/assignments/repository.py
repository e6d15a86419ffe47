from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import WorkAssignment


class AssignmentRepository(Protocol):
    def list_all(self) -> Sequence[WorkAssignment]:
        raise NotImplementedError

    def get_by_id(self, assignment_id: str) -> Optional[WorkAssignment]:
        raise NotImplementedError

    def add(self, assignment: WorkAssignment) -> None:
        raise NotImplementedError

    def update(self, assignment: WorkAssignment) -> bool:
        raise NotImplementedError
