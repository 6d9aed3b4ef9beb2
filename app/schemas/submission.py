from enum import Enum
from typing import Any, Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class SubmissionStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    REJECTED = "Rejected"


# Completed and Rejected are terminal.
ALLOWED_TRANSITIONS: Dict[SubmissionStatus, FrozenSet[SubmissionStatus]] = {
    SubmissionStatus.PENDING: frozenset({SubmissionStatus.COMPLETED, SubmissionStatus.REJECTED}),
    SubmissionStatus.COMPLETED: frozenset(),
    SubmissionStatus.REJECTED: frozenset(),
}


def can_transition(current: SubmissionStatus, target: SubmissionStatus) -> bool:
    return current == target or target in ALLOWED_TRANSITIONS[current]


class SubmissionCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    assignment_id: str
    user_email: str
    googleDocsLink: Optional[str] = None
    quickNote: Optional[str] = None
    status: SubmissionStatus = SubmissionStatus.PENDING


class SubmissionUpdate(BaseModel):
    """Partial document merged into the stored submission (reviewer marks, feedback...)."""

    model_config = ConfigDict(extra="allow")

    assignment_id: Optional[str] = None
    user_email: Optional[str] = None
    googleDocsLink: Optional[str] = None
    quickNote: Optional[str] = None
    status: Optional[SubmissionStatus] = None

    @field_validator("status", mode="before")
    @classmethod
    def _status_not_null(cls, v):
        # omit the key to leave the status alone; null would wipe it
        if v is None:
            raise ValueError("status cannot be null")
        return v


class Submission(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    assignment_id: Any = None
    user_email: Any = None
    googleDocsLink: Any = None
    quickNote: Any = None
    status: Any = None
