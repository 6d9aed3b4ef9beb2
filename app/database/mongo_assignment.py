# app/database/mongo_assignment.py
from typing import List, Optional, Sequence

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.assignment_repo import AssignmentRepo
from app.database.mongo_utils import from_doc, to_upsert_result
from app.schemas.assignment import Assignment
from app.schemas.common import UpsertResult


class MongoAssignmentRepository(AssignmentRepo):
    def __init__(self, db: AsyncIOMotorDatabase):
        self.col = db["assignments"]

    async def list_all(self) -> Sequence[Assignment]:
        docs: List[dict] = [d async for d in self.col.find()]
        return [from_doc(Assignment, d) for d in docs]

    async def find_one(self, assignment_id: str) -> Optional[Assignment]:
        d = await self.col.find_one({"_id": ObjectId(assignment_id)})
        return from_doc(Assignment, d) if d else None

    async def create(self, doc: dict) -> str:
        res = await self.col.insert_one(doc)
        return str(res.inserted_id)

    async def upsert(self, assignment_id: str, fields: dict, on_insert: dict) -> UpsertResult:
        update = {}
        if fields:
            update["$set"] = fields
        if on_insert:
            update["$setOnInsert"] = on_insert
        if not update:
            # an empty update document is rejected by the server
            update["$setOnInsert"] = {}
        res = await self.col.update_one({"_id": ObjectId(assignment_id)}, update, upsert=True)
        return to_upsert_result(res)

    async def delete(self, assignment_id: str) -> bool:
        res = await self.col.delete_one({"_id": ObjectId(assignment_id)})
        return res.deleted_count > 0

    async def ensure_indexes(self):
        await self.col.create_index("creatorEmail")
