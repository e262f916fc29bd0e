from datetime import datetime

from pydantic import Field

from course_booking.schemas.base import CamelModel


class EnrolledCourse(CamelModel):
    course_id: int


class EnrollmentCreate(CamelModel):
    enrolled_courses: list[EnrolledCourse] = Field(default_factory=list)
    total_price: float = Field(default=0, ge=0)


class EnrollmentOut(CamelModel):
    id: int
    user_id: int
    enrolled_courses: list[EnrolledCourse]
    total_price: float
    enrolled_on: datetime
    status: str
