from typing import List, Optional, Sequence

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.mongo_utils import from_doc, to_upsert_result
from app.database.submission_repo import SubmissionRepo
from app.schemas.common import UpsertResult
from app.schemas.submission import Submission, SubmissionStatus


class MongoSubmissionRepository(SubmissionRepo):
    def __init__(self, db: AsyncIOMotorDatabase):
        self.col = db["submissions"]

    async def _find(self, filt: dict) -> Sequence[Submission]:
        docs: List[dict] = [d async for d in self.col.find(filt)]
        return [from_doc(Submission, d) for d in docs]

    async def find_by_submitter(self, email: str) -> Sequence[Submission]:
        return await self._find({"user_email": email})

    async def find_pending_excluding(self, email: str) -> Sequence[Submission]:
        return await self._find({
            "status": SubmissionStatus.PENDING.value,
            "user_email": {"$ne": email},
        })

    async def find_by_assignment(self, assignment_id: str) -> Sequence[Submission]:
        return await self._find({"assignment_id": assignment_id})

    async def find_one(self, submission_id: str) -> Optional[Submission]:
        d = await self.col.find_one({"_id": ObjectId(submission_id)})
        return from_doc(Submission, d) if d else None

    async def create(self, doc: dict) -> str:
        res = await self.col.insert_one(doc)
        return str(res.inserted_id)

    async def upsert(self, submission_id: str, fields: dict) -> UpsertResult:
        update = {"$set": fields} if fields else {"$setOnInsert": {}}
        res = await self.col.update_one({"_id": ObjectId(submission_id)}, update, upsert=True)
        return to_upsert_result(res)

    async def ensure_indexes(self):
        await self.col.create_index("user_email")
        await self.col.create_index("assignment_id")
        await self.col.create_index([("status", 1), ("user_email", 1)])
