import logging

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from course_booking.core.errors import Unauthorized
from course_booking.core.security import decode_access_token
from course_booking.schemas.auth import Identity

logger = logging.getLogger(__name__)

# auto_error is off so a missing header gets our own 401 body
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Identity:
    """Decode the bearer token into the caller's identity. Nothing is looked up."""
    if credentials is None:
        raise Unauthorized(content={"auth": "Failed. No Token"})

    try:
        payload = decode_access_token(credentials.credentials)
        return Identity(
            id=int(payload["sub"]),
            email=payload["email"],
            is_admin=bool(payload.get("isAdmin", False)),
        )
    except (jwt.PyJWTError, KeyError, TypeError, ValueError) as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise Unauthorized(content={"auth": "Failed", "message": "Invalid token"}) from exc
