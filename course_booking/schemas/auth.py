from pydantic import BaseModel

from course_booking.schemas.base import CamelModel


class LoginRequest(CamelModel):
    email: str = ""
    password: str = ""


class Identity(BaseModel):
    """Caller attached to a request once its bearer token checks out."""

    id: int
    email: str
    is_admin: bool = False


class ExternalProfile(CamelModel):
    """Profile handed over by a third-party identity provider after it authenticated someone."""

    email: str
    first_name: str | None = None
    last_name: str | None = None
