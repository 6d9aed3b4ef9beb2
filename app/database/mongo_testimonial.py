from typing import List, Sequence

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.mongo_utils import from_doc
from app.database.testimonial_repo import TestimonialRepo
from app.schemas.testimonial import Testimonial


class MongoTestimonialRepository(TestimonialRepo):
    def __init__(self, db: AsyncIOMotorDatabase):
        self.col = db["testimonial"]

    async def list_all(self) -> Sequence[Testimonial]:
        docs: List[dict] = [d async for d in self.col.find()]
        return [from_doc(Testimonial, d) for d in docs]

    async def create(self, doc: dict) -> str:
        res = await self.col.insert_one(doc)
        return str(res.inserted_id)
