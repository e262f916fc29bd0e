from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from course_booking.core.current_user import get_current_user
from course_booking.core.deps import get_db
from course_booking.schemas.auth import Identity, LoginRequest
from course_booking.schemas.enrollment import EnrollmentOut
from course_booking.schemas.user import (
    AdminPromotion,
    EmailCheck,
    PasswordReset,
    ProfileUpdate,
    UserProfile,
    UserRead,
    UserRegister,
)
from course_booking.services import users as user_service

router = APIRouter()


@router.post(
    "/check-email",
    responses={
        400: {"description": "Invalid email format"},
        404: {"description": "No duplicate email found"},
        409: {"description": "Duplicate email found"},
    },
)
def check_email(payload: EmailCheck, db: Session = Depends(get_db)):
    user_service.check_email_exists(db, payload.email)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid email, mobile number or password"},
        409: {"description": "Duplicate email found"},
    },
)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    user = user_service.register_user(db, payload)
    return {
        "message": "User registered successfully",
        "user": UserRead.model_validate(user),
    }


@router.post("/login", responses={400: {"description": "Invalid email format"}})
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    return user_service.login_user(db, payload)


@router.get("/details", response_model=UserProfile)
def details(
    db: Session = Depends(get_db),
    me: Identity = Depends(get_current_user),
):
    return user_service.get_profile(db, me)


@router.get(
    "/get-enrollments",
    response_model=list[EnrollmentOut],
    responses={404: {"description": "No enrollments"}},
)
def get_enrollments(
    db: Session = Depends(get_db),
    me: Identity = Depends(get_current_user),
):
    return user_service.get_enrollments(db, me)


@router.post("/reset-password")
def reset_password(
    payload: PasswordReset,
    db: Session = Depends(get_db),
    me: Identity = Depends(get_current_user),
):
    user_service.reset_password(db, me, payload)
    return {"message": "Password reset successfully"}


@router.put("/profile", response_model=UserRead)
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    me: Identity = Depends(get_current_user),
):
    return user_service.update_profile(db, me, payload)


@router.put("/updateAdmin")
def update_admin(
    payload: AdminPromotion,
    db: Session = Depends(get_db),
    me: Identity = Depends(get_current_user),
):
    user_service.make_user_admin(db, payload)
    return {"message": "User updated to admin successfully"}
