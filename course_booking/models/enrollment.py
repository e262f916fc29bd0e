from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from course_booking.db.base_class import Base


class Enrollment(Base):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    total_price = Column(Float, nullable=False, default=0)
    enrolled_on = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    status = Column(String(50), nullable=False, default="Enrolled")

    user = relationship("User", back_populates="enrollments")
    enrolled_courses = relationship(
        "EnrolledCourse",
        back_populates="enrollment",
        cascade="all, delete-orphan",
        order_by="EnrolledCourse.position",
    )


class EnrolledCourse(Base):
    __tablename__ = "enrolled_courses"

    id = Column(Integer, primary_key=True, index=True)
    enrollment_id = Column(
        Integer,
        ForeignKey("enrollments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    # keeps the submitted order of the course list
    position = Column(Integer, nullable=False, default=0)

    enrollment = relationship("Enrollment", back_populates="enrolled_courses")
