import logging

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from course_booking.core.config import MIN_PASSWORD_LENGTH, MOBILE_NO_LENGTH
from course_booking.core.errors import Conflict, InvalidInput, NotFound, persistence_errors
from course_booking.core.security import create_access_token, hash_password, verify_password
from course_booking.models.enrollment import Enrollment
from course_booking.models.user import User
from course_booking.schemas.auth import Identity, LoginRequest
from course_booking.schemas.user import (
    AdminPromotion,
    PasswordReset,
    ProfileUpdate,
    UserProfile,
    UserRead,
    UserRegister,
)

logger = logging.getLogger(__name__)


def _is_email(value: str) -> bool:
    return "@" in value


def create_user_token(user: User) -> str:
    return create_access_token(
        data={"sub": str(user.id), "email": user.email, "isAdmin": user.is_admin},
    )


def check_email_exists(db: Session, email: str) -> None:
    """
    Answers through the status code only:
    409 when the email is taken, 404 when it is free, 400 when it is not an email.
    """
    if not _is_email(email):
        raise InvalidInput("Invalid email format")

    if db.query(User).filter(User.email == email).first():
        raise Conflict("Duplicate email found")
    raise NotFound("No duplicate email found")


def register_user(db: Session, payload: UserRegister) -> User:
    # first failing rule wins
    if not _is_email(payload.email):
        raise InvalidInput("Invalid email format")
    if not isinstance(payload.mobile_no, str) or len(payload.mobile_no) != MOBILE_NO_LENGTH:
        raise InvalidInput("Mobile number is invalid")
    if len(payload.password) < MIN_PASSWORD_LENGTH:
        raise InvalidInput("Password must be atleast 8 characters long")

    user = User(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        mobile_no=payload.mobile_no,
        password=hash_password(payload.password),
    )
    db.add(user)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Duplicate email found")

    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


def login_user(db: Session, payload: LoginRequest) -> dict | bool:
    """Returns ``{"access": token}``, or plain ``False`` for an unknown email or a bad password."""
    if not _is_email(payload.email):
        raise InvalidInput()

    user = db.query(User).filter(User.email == payload.email).first()
    if user is None:
        return False

    if not verify_password(payload.password, user.password):
        return False

    return {"access": create_user_token(user)}


def get_profile(db: Session, identity: Identity) -> UserProfile:
    user = db.get(User, identity.id)
    if user is None:
        raise NotFound("User not found")
    # built from the allow-list projection, so the hash is never copied
    return UserProfile(**UserRead.model_validate(user).model_dump())


def get_enrollments(db: Session, identity: Identity) -> list[Enrollment]:
    enrollments = (
        db.query(Enrollment)
        .filter(Enrollment.user_id == identity.id)
        .order_by(Enrollment.id.asc())
        .all()
    )
    if not enrollments:
        raise NotFound()
    return enrollments


def reset_password(db: Session, identity: Identity, payload: PasswordReset) -> None:
    if not payload.new_password:
        raise InvalidInput("New password is required")

    hashed = hash_password(payload.new_password)
    with persistence_errors(db):
        db.execute(update(User).where(User.id == identity.id).values(password=hashed))
        db.commit()


def update_profile(db: Session, identity: Identity, payload: ProfileUpdate) -> User:
    with persistence_errors(db, "Failed to update profile"):
        user = db.get(User, identity.id)
        if user is None:
            raise NotFound("User not found")

        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(user, field, value)

        db.commit()
        db.refresh(user)
    return user


def make_user_admin(db: Session, payload: AdminPromotion) -> None:
    if not payload.user_id:
        raise InvalidInput("User ID is required")

    user = db.get(User, payload.user_id)
    if user is None:
        raise NotFound("User not found")

    user.is_admin = True
    db.commit()
    logger.info("User %s promoted to admin", user.id)
