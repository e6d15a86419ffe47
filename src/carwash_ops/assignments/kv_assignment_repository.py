from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import ASSIGNMENTS_KEY
from ..storage.collection import JsonCollection
from ..storage.kv import KeyValueStore
from .model import WorkAssignment
from .repository import AssignmentRepository


class KeyValueAssignmentRepository(AssignmentRepository):
    def __init__(self, store: KeyValueStore):
        self._assignments = JsonCollection(
            store,
            ASSIGNMENTS_KEY,
            from_dict=WorkAssignment.from_dict,
            to_dict=WorkAssignment.to_dict,
            get_id=lambda a: a.assignment_id,
        )

    def list_all(self) -> Sequence[WorkAssignment]:
        return self._assignments.load()

    def get_by_id(self, assignment_id: str) -> Optional[WorkAssignment]:
        return self._assignments.get(assignment_id)

    def add(self, assignment: WorkAssignment) -> None:
        self._assignments.add(assignment)

    def update(self, assignment: WorkAssignment) -> bool:
        return self._assignments.update(assignment)
