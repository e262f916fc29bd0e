from course_booking.db.base import Base
from course_booking.db.session import engine


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
