from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from course_booking.core.deps import get_db
from course_booking.core.permissions import require_admin
from course_booking.schemas.auth import Identity
from course_booking.schemas.course import CourseCreate, CourseRead, CourseUpdate, PriceRange
from course_booking.services import courses as course_service

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Course already exists"}},
)
def add_course(
    payload: CourseCreate,
    db: Session = Depends(get_db),
    admin: Identity = Depends(require_admin),
):
    course = course_service.add_course(db, payload)
    return {
        "success": True,
        "message": "Course added successfully",
        "result": CourseRead.model_validate(course),
    }


@router.get("", response_model=list[CourseRead])
def list_courses(
    db: Session = Depends(get_db),
    admin: Identity = Depends(require_admin),
):
    return course_service.get_all_courses(db)


@router.get("/active", response_model=list[CourseRead])
def list_active_courses(db: Session = Depends(get_db)):
    return course_service.get_all_active(db)


@router.get("/specific/{course_id}", response_model=CourseRead)
def get_course(course_id: int, db: Session = Depends(get_db)):
    return course_service.get_course(db, course_id)


@router.post("/search", response_model=list[CourseRead])
def search_courses_by_price(payload: PriceRange | None = None, db: Session = Depends(get_db)):
    # no body at all is the same as an empty one
    return course_service.search_courses_by_price(db, payload or PriceRange())


@router.patch("/{course_id}")
def update_course(
    course_id: int,
    payload: CourseUpdate,
    db: Session = Depends(get_db),
    admin: Identity = Depends(require_admin),
):
    return course_service.update_course(db, course_id, payload)


# both answer True when the flag flipped, or a message when it was already set
@router.patch("/{course_id}/archive")
def archive_course(
    course_id: int,
    db: Session = Depends(get_db),
    admin: Identity = Depends(require_admin),
):
    return course_service.archive_course(db, course_id)


@router.patch("/{course_id}/activate")
def activate_course(
    course_id: int,
    db: Session = Depends(get_db),
    admin: Identity = Depends(require_admin),
):
    return course_service.activate_course(db, course_id)
