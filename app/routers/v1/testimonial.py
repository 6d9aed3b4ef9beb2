from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.deps import get_testimonial_repo
from app.database.testimonial_repo import TestimonialRepo
from app.schemas.common import InsertResult
from app.schemas.testimonial import Testimonial, TestimonialCreate
from app.services.testimonial_service import TestimonialService

router = APIRouter()

RepoDep = Annotated[TestimonialRepo, Depends(get_testimonial_repo)]


@router.get("/testimonial", response_model=list[Testimonial])
async def list_testimonials_endpoint(repo: RepoDep):
    return await TestimonialService.list_testimonials(repo)


@router.post("/testimonial", response_model=InsertResult)
async def create_testimonial_endpoint(testimonial: TestimonialCreate, repo: RepoDep):
    return await TestimonialService.create_testimonial(testimonial, repo)
