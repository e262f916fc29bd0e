from typing import Any

from course_booking.schemas.base import CamelModel


class EmailCheck(CamelModel):
    email: str = ""


class UserRegister(CamelModel):
    # checked in order by the service, so missing or mistyped fields fall through
    first_name: str | None = None
    last_name: str | None = None
    email: str = ""
    mobile_no: Any = ""
    password: str = ""


class UserRead(CamelModel):
    id: int
    first_name: str | None = None
    last_name: str | None = None
    email: str
    mobile_no: str | None = None
    is_admin: bool


class UserProfile(UserRead):
    # always blank, the stored hash never leaves the service
    password: str = ""


class ProfileUpdate(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    mobile_no: str | None = None


class PasswordReset(CamelModel):
    new_password: str | None = None


class AdminPromotion(CamelModel):
    user_id: int | None = None
