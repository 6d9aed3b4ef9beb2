from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from app.schemas.assignment import Assignment
from app.schemas.common import UpsertResult


class AssignmentRepo(ABC):
    @abstractmethod
    async def list_all(self) -> Sequence[Assignment]:
        """Return every assignment."""
        raise NotImplementedError

    @abstractmethod
    async def find_one(self, assignment_id: str) -> Optional[Assignment]:
        """Return an assignment by id, or None if it does not exist."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, doc: dict) -> str:
        """Insert a new assignment and return the generated id."""
        raise NotImplementedError

    @abstractmethod
    async def upsert(self, assignment_id: str, fields: dict, on_insert: dict) -> UpsertResult:
        """Merge `fields` into the assignment, creating it if missing.
        `on_insert` is only written when the record is created."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, assignment_id: str) -> bool:
        """Delete an assignment. True if something was removed."""
        raise NotImplementedError
