from typing import Any

from pydantic import BaseModel, ConfigDict


class TestimonialCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Any = None
    text: Any = None
    rating: Any = None


class Testimonial(TestimonialCreate):
    id: str
