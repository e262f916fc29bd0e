"""
Login through a third-party identity provider.

The provider (Google OAuth, SAML, ...) does the authenticating and hands back
an :class:`ExternalProfile`. This module only turns that profile into a local
user and an access token, creating the user on first sight.
"""
import logging
import secrets
from typing import Protocol

from sqlalchemy.orm import Session

from course_booking.core.errors import InvalidInput
from course_booking.core.security import hash_password
from course_booking.models.user import User
from course_booking.schemas.auth import ExternalProfile
from course_booking.services.users import create_user_token

logger = logging.getLogger(__name__)


class ExternalIdentityProvider(Protocol):
    def fetch_profile(self, request_data: dict) -> ExternalProfile:
        ...


def login_with_external_profile(db: Session, profile: ExternalProfile) -> dict:
    if "@" not in profile.email:
        raise InvalidInput("Invalid email format")

    user = db.query(User).filter(User.email == profile.email).first()
    if user is None:
        user = User(
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            # random secret nobody knows, password login stays closed
            password=hash_password(secrets.token_urlsafe(32)),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Provisioned user %s from external profile", user.id)

    return {"access": create_user_token(user)}


def login_with_provider(
    db: Session, provider: ExternalIdentityProvider, request_data: dict
) -> dict:
    return login_with_external_profile(db, provider.fetch_profile(request_data))
