from typing import Sequence

from app.database.testimonial_repo import TestimonialRepo
from app.schemas.common import InsertResult
from app.schemas.testimonial import Testimonial, TestimonialCreate


class TestimonialService:

    @staticmethod
    async def list_testimonials(repo: TestimonialRepo) -> Sequence[Testimonial]:
        return await repo.list_all()

    @staticmethod
    async def create_testimonial(data: TestimonialCreate, repo: TestimonialRepo) -> InsertResult:
        inserted_id = await repo.create(data.model_dump(exclude_none=True))
        return InsertResult(insertedId=inserted_id)
