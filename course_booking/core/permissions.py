from fastapi import Depends

from course_booking.core.current_user import get_current_user
from course_booking.core.errors import Forbidden
from course_booking.schemas.auth import Identity


def require_admin(current_user: Identity = Depends(get_current_user)) -> Identity:
    if not current_user.is_admin:
        raise Forbidden(content={"auth": "Failed", "message": "Action Forbidden"})
    return current_user


def require_non_admin(current_user: Identity = Depends(get_current_user)) -> Identity:
    # the enroll body is read only after this passes, so admins get 403 whatever they send
    if current_user.is_admin:
        raise Forbidden()
    return current_user
