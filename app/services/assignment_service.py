import logging
from typing import Optional, Sequence

from app.core.errors import Forbidden, InternalFailure, NotFound
from app.core.ids import validate_id
from app.database.assignment_repo import AssignmentRepo
from app.schemas.assignment import Assignment, AssignmentCreate, AssignmentUpdate
from app.schemas.common import InsertResult, UpsertResult
from app.schemas.context import UserContext

logger = logging.getLogger(__name__)


class AssignmentService:

    @staticmethod
    async def list_assignments(repo: AssignmentRepo) -> Sequence[Assignment]:
        return await repo.list_all()

    @staticmethod
    async def get_assignment(assignment_id: str, repo: AssignmentRepo) -> Assignment:
        validate_id(assignment_id)
        doc = await repo.find_one(assignment_id)
        if doc is None:
            raise NotFound("Assignment not found")
        return doc

    @staticmethod
    async def create_assignment(data: AssignmentCreate, repo: AssignmentRepo) -> InsertResult:
        doc = data.owner_free_fields(exclude_none=True)
        doc["creatorEmail"] = data.creatorEmail
        inserted_id = await repo.create(doc)
        return InsertResult(insertedId=inserted_id)

    @staticmethod
    async def replace_assignment(
        assignment_id: str, data: AssignmentUpdate, repo: AssignmentRepo
    ) -> UpsertResult:
        """
        Upsert: an id with no matching record creates it. The creator can only
        be set when the record is created, never rewritten afterwards.
        """
        validate_id(assignment_id)
        fields = data.owner_free_fields(exclude_unset=True)
        on_insert = {"creatorEmail": data.creatorEmail} if data.creatorEmail else {}
        return await repo.upsert(assignment_id, fields, on_insert)

    @staticmethod
    async def delete_assignment(
        assignment_id: str,
        user: UserContext,
        repo: AssignmentRepo,
        claimed_email: Optional[str] = None,
    ) -> None:
        validate_id(assignment_id)
        if claimed_email is not None and claimed_email != user.email:
            raise Forbidden("Email in request does not match the authenticated user")

        doc = await repo.find_one(assignment_id)
        if doc is None:
            raise NotFound("Assignment not found")
        if doc.creatorEmail != user.email:
            logger.warning("%s tried to delete assignment %s owned by %s",
                           user.email, assignment_id, doc.creatorEmail)
            raise Forbidden("You can only delete assignments you created.")

        if not await repo.delete(assignment_id):
            raise InternalFailure("Failed to delete the assignment")
