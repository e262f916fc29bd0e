import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from course_booking.core.errors import Forbidden, NotFound
from course_booking.models.course import Course
from course_booking.models.enrollment import EnrolledCourse, Enrollment
from course_booking.schemas.auth import Identity
from course_booking.schemas.enrollment import EnrollmentCreate

logger = logging.getLogger(__name__)


def enroll(db: Session, identity: Identity, payload: EnrollmentCreate) -> bool:
    # admins manage courses, they do not take them
    if identity.is_admin:
        raise Forbidden()

    course_ids = {item.course_id for item in payload.enrolled_courses}
    known = {
        row.id for row in db.query(Course.id).filter(Course.id.in_(course_ids)).all()
    }
    if known != course_ids:
        logger.info(
            "Enrollment by user %s names unknown courses %s",
            identity.id,
            sorted(course_ids - known),
        )
        raise NotFound("Course not found")

    enrollment = Enrollment(
        user_id=identity.id,
        total_price=payload.total_price,
        enrolled_courses=[
            EnrolledCourse(course_id=item.course_id, position=position)
            for position, item in enumerate(payload.enrolled_courses)
        ],
    )
    db.add(enrollment)

    try:
        db.commit()
    except IntegrityError:
        # a course deleted between the lookup and the insert
        db.rollback()
        raise NotFound("Course not found")

    logger.info(
        "User %s enrolled in %d course(s)", identity.id, len(payload.enrolled_courses)
    )
    return True
