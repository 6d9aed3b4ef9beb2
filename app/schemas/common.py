from typing import Optional

from pydantic import BaseModel


class InsertResult(BaseModel):
    acknowledged: bool = True
    insertedId: str


class UpsertResult(BaseModel):
    """Outcome of a PUT: an unknown id creates the record (upsertedId is then set)."""

    acknowledged: bool = True
    matchedCount: int
    modifiedCount: int
    upsertedId: Optional[str] = None
