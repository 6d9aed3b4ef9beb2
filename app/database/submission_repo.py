from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from app.schemas.common import UpsertResult
from app.schemas.submission import Submission


class SubmissionRepo(ABC):
    @abstractmethod
    async def find_by_submitter(self, email: str) -> Sequence[Submission]:
        """Submissions whose user_email equals `email`."""
        raise NotImplementedError

    @abstractmethod
    async def find_pending_excluding(self, email: str) -> Sequence[Submission]:
        """Pending submissions made by anyone except `email`."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_assignment(self, assignment_id: str) -> Sequence[Submission]:
        raise NotImplementedError

    @abstractmethod
    async def find_one(self, submission_id: str) -> Optional[Submission]:
        raise NotImplementedError

    @abstractmethod
    async def create(self, doc: dict) -> str:
        """Insert a submission and return the generated id."""
        raise NotImplementedError

    @abstractmethod
    async def upsert(self, submission_id: str, fields: dict) -> UpsertResult:
        """Merge `fields` into the submission, creating it if missing."""
        raise NotImplementedError
