from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from app.schemas.testimonial import Testimonial


class TestimonialRepo(ABC):
    @abstractmethod
    async def list_all(self) -> Sequence[Testimonial]:
        raise NotImplementedError

    @abstractmethod
    async def create(self, doc: dict) -> str:
        """Insert a testimonial and return the generated id."""
        raise NotImplementedError
