from typing import Any, Type, TypeVar

from bson import ObjectId
from pydantic import BaseModel
from pymongo.results import UpdateResult

from app.schemas.common import UpsertResult

M = TypeVar("M", bound=BaseModel)


def _plain(value: Any) -> Any:
    # ObjectId references anywhere in a document are returned as strings
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def from_doc(model: Type[M], d: dict) -> M:
    base = {k: _plain(v) for k, v in d.items() if k != "_id"}
    base["id"] = str(d["_id"])
    return model(**base)


def to_upsert_result(res: UpdateResult) -> UpsertResult:
    return UpsertResult(
        acknowledged=res.acknowledged,
        matchedCount=res.matched_count,
        modifiedCount=res.modified_count,
        upsertedId=str(res.upserted_id) if res.upserted_id is not None else None,
    )
