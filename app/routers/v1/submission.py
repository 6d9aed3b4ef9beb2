from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.deps import get_submission_repo
from app.database.submission_repo import SubmissionRepo
from app.schemas.common import InsertResult, UpsertResult
from app.schemas.context import UserContext
from app.schemas.submission import Submission, SubmissionCreate, SubmissionUpdate
from app.services.auth_service import AuthService
from app.services.submission_service import SubmissionService

router = APIRouter()

RepoDep = Annotated[SubmissionRepo, Depends(get_submission_repo)]
UserDep = Annotated[UserContext, Depends(AuthService.get_current_user)]


# UserDep before RepoDep: a rejected credential never reaches the repository
@router.get("/submissions", response_model=list[Submission])
async def list_my_submissions_endpoint(user: UserDep, repo: RepoDep):
    return await SubmissionService.list_mine(user, repo)


@router.get("/submissions/pending", response_model=list[Submission])
async def list_pending_submissions_endpoint(user: UserDep, repo: RepoDep):
    return await SubmissionService.list_pending_for_review(user, repo)


@router.get("/submissions/{assignment_id}", response_model=list[Submission])
async def list_assignment_submissions_endpoint(assignment_id: str, repo: RepoDep):
    return await SubmissionService.list_for_assignment(assignment_id, repo)


@router.post("/submissions", response_model=InsertResult)
async def create_submission_endpoint(submission: SubmissionCreate, repo: RepoDep):
    return await SubmissionService.create_submission(submission, repo)


@router.put("/submissions/{submission_id}", response_model=UpsertResult)
async def update_submission_endpoint(submission_id: str, submission: SubmissionUpdate, repo: RepoDep):
    return await SubmissionService.update_submission(submission_id, submission, repo)
