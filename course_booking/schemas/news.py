from datetime import datetime

from pydantic import Field

from course_booking.schemas.base import CamelModel


class NewsCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    content: str


class NewsUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = None


class NewsRead(CamelModel):
    id: int
    title: str
    content: str
    is_active: bool
    created_on: datetime | None = None
