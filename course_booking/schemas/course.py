from datetime import datetime
from typing import Any

from pydantic import Field

from course_booking.schemas.base import CamelModel


class CourseCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(ge=0)


class CourseUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)


class CourseRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    price: float
    is_active: bool
    created_on: datetime | None = None


class PriceRange(CamelModel):
    # left untyped so the service can answer with its own range messages
    min_price: Any = None
    max_price: Any = None
