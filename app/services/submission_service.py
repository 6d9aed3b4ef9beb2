import logging
from typing import Sequence

from app.core.errors import InvalidTransition
from app.core.ids import validate_id
from app.database.submission_repo import SubmissionRepo
from app.schemas.common import InsertResult, UpsertResult
from app.schemas.context import UserContext
from app.schemas.submission import (
    Submission,
    SubmissionCreate,
    SubmissionStatus,
    SubmissionUpdate,
    can_transition,
)

logger = logging.getLogger(__name__)


def _current_status(doc: Submission) -> SubmissionStatus:
    try:
        return SubmissionStatus(doc.status)
    except (ValueError, TypeError):
        # records written before statuses were enforced
        return SubmissionStatus.PENDING


class SubmissionService:

    @staticmethod
    async def list_mine(user: UserContext, repo: SubmissionRepo) -> Sequence[Submission]:
        return await repo.find_by_submitter(user.email)

    @staticmethod
    async def list_pending_for_review(user: UserContext, repo: SubmissionRepo) -> Sequence[Submission]:
        return await repo.find_pending_excluding(user.email)

    @staticmethod
    async def list_for_assignment(assignment_id: str, repo: SubmissionRepo) -> Sequence[Submission]:
        return await repo.find_by_assignment(assignment_id)

    @staticmethod
    async def create_submission(data: SubmissionCreate, repo: SubmissionRepo) -> InsertResult:
        if data.status != SubmissionStatus.PENDING:
            raise InvalidTransition("New submissions must start as Pending")
        inserted_id = await repo.create(data.model_dump(mode="json"))
        return InsertResult(insertedId=inserted_id)

    @staticmethod
    async def update_submission(
        submission_id: str, data: SubmissionUpdate, repo: SubmissionRepo
    ) -> UpsertResult:
        """
        Merge the update into the submission, creating it if the id is unused.
        Status moves Pending -> Completed | Rejected only.
        """
        validate_id(submission_id)
        fields = data.model_dump(mode="json", exclude_unset=True)
        target = data.status

        current = await repo.find_one(submission_id)
        if current is None:
            if target not in (None, SubmissionStatus.PENDING):
                raise InvalidTransition("New submissions must start as Pending")
            fields.setdefault("status", SubmissionStatus.PENDING.value)
        elif target is not None:
            source = _current_status(current)
            if not can_transition(source, target):
                raise InvalidTransition(
                    f"Cannot move submission from {source.value} to {target.value}"
                )
            logger.debug("Submission %s: %s -> %s", submission_id, source.value, target.value)

        return await repo.upsert(submission_id, fields)
