# Import all the models, so that Base has them before being
# imported by init_db, Alembic and the test suite.
from course_booking.db.base_class import Base  # noqa: F401
from course_booking.models.course import Course  # noqa: F401
from course_booking.models.enrollment import EnrolledCourse, Enrollment  # noqa: F401
from course_booking.models.news import News  # noqa: F401
from course_booking.models.user import User  # noqa: F401
