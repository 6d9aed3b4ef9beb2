from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends, status

from app.core.deps import get_assignment_repo
from app.database.assignment_repo import AssignmentRepo
from app.schemas.assignment import Assignment, AssignmentCreate, AssignmentDelete, AssignmentUpdate
from app.schemas.common import InsertResult, UpsertResult
from app.schemas.context import UserContext
from app.services.assignment_service import AssignmentService
from app.services.auth_service import AuthService

router = APIRouter()

RepoDep = Annotated[AssignmentRepo, Depends(get_assignment_repo)]
UserDep = Annotated[UserContext, Depends(AuthService.get_current_user)]


@router.get("/assignments", response_model=list[Assignment])
async def list_assignments_endpoint(repo: RepoDep):
    return await AssignmentService.list_assignments(repo)


@router.get("/assignments/{assignment_id}", response_model=Assignment)
async def get_assignment_endpoint(assignment_id: str, repo: RepoDep):
    return await AssignmentService.get_assignment(assignment_id, repo)


@router.post("/assignments", status_code=status.HTTP_201_CREATED, response_model=InsertResult)
async def create_assignment_endpoint(assignment: AssignmentCreate, repo: RepoDep):
    return await AssignmentService.create_assignment(assignment, repo)


@router.put("/assignments/{assignment_id}", response_model=UpsertResult)
async def replace_assignment_endpoint(assignment_id: str, assignment: AssignmentUpdate, repo: RepoDep):
    return await AssignmentService.replace_assignment(assignment_id, assignment, repo)


@router.delete("/assignments/{assignment_id}")
async def delete_assignment_endpoint(
    assignment_id: str,
    user: UserDep,
    repo: RepoDep,
    body: Annotated[Optional[AssignmentDelete], Body()] = None,
):
    claimed = body.email if body else None
    await AssignmentService.delete_assignment(assignment_id, user, repo, claimed_email=claimed)
    return {"message": "Assignment deleted successfully"}
