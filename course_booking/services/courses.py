import logging
import math
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from course_booking.core.errors import Conflict, InvalidInput, NotFound
from course_booking.models.course import Course
from course_booking.schemas.course import CourseCreate, CourseUpdate, PriceRange

logger = logging.getLogger(__name__)


def _commit_or_conflict(db: Session) -> None:
    # the unique name constraint settles races the existence check cannot
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Course already exists")


def add_course(db: Session, payload: CourseCreate) -> Course:
    if db.query(Course).filter(Course.name == payload.name).first():
        raise Conflict("Course already exists")

    course = Course(
        name=payload.name,
        description=payload.description,
        price=payload.price,
    )
    db.add(course)
    _commit_or_conflict(db)
    db.refresh(course)
    logger.info("Course %s created", course.id)
    return course


def get_all_courses(db: Session) -> list[Course]:
    courses = db.query(Course).order_by(Course.id.asc()).all()
    if not courses:
        raise NotFound("No courses found")
    return courses


def get_all_active(db: Session) -> list[Course]:
    courses = (
        db.query(Course)
        .filter(Course.is_active.is_(True))
        .order_by(Course.id.asc())
        .all()
    )
    if not courses:
        raise NotFound()
    return courses


def get_course(db: Session, course_id: int) -> Course:
    course = db.get(Course, course_id)
    if course is None:
        raise NotFound()
    return course


def update_course(db: Session, course_id: int, payload: CourseUpdate) -> bool:
    course = db.get(Course, course_id)
    if course is None:
        raise NotFound()

    for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(course, field, value)

    _commit_or_conflict(db)
    return True


def _set_active(db: Session, course_id: int, active: bool, already: str) -> bool | str:
    course = db.get(Course, course_id)
    if course is None:
        raise NotFound()

    # an unchanged course answers with a message instead of True
    if course.is_active == active:
        return already

    course.is_active = active
    db.commit()
    return True


def archive_course(db: Session, course_id: int) -> bool | str:
    return _set_active(db, course_id, False, "Course already archived")


def activate_course(db: Session, course_id: int) -> bool | str:
    return _set_active(db, course_id, True, "Course already activated")


def _as_price(value: Any) -> float | None:
    """Numbers and numeric strings pass, anything else (bools included) is None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(number) else number


def search_courses_by_price(db: Session, payload: PriceRange) -> list[Course]:
    min_price = _as_price(payload.min_price)
    max_price = _as_price(payload.max_price)

    if min_price is None or max_price is None:
        raise InvalidInput(
            "Invalid price range. Ensure minPrice and maxPrice are valid numbers."
        )
    if min_price > max_price:
        raise InvalidInput("minPrice cannot be greater than maxPrice.")

    courses = (
        db.query(Course)
        .filter(Course.price >= min_price, Course.price <= max_price)
        .order_by(Course.id.asc())
        .all()
    )
    if not courses:
        raise NotFound("No courses found within the specified price range.")
    return courses
