import json

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from course_booking.core.deps import get_db
from course_booking.core.errors import invalid_body
from course_booking.core.permissions import require_non_admin
from course_booking.schemas.auth import Identity
from course_booking.schemas.enrollment import EnrollmentCreate
from course_booking.services import enrollments as enrollment_service

router = APIRouter()


async def enrollment_payload(
    request: Request,
    me: Identity = Depends(require_non_admin),
) -> EnrollmentCreate:
    """
    Reads the body only after the role check.

    A declared body parameter would be parsed before any dependency runs,
    and an admin sending a broken body would then get 400 instead of 403.
    """
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise invalid_body(
            [{"type": "json_invalid", "loc": ["body"], "msg": "JSON decode error"}]
        )

    try:
        return EnrollmentCreate.model_validate(data)
    except ValidationError as exc:
        raise invalid_body(exc.errors())


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid request body"},
        403: {"description": "Admins cannot enroll"},
        404: {"description": "Course not found"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": EnrollmentCreate.model_json_schema()}
            },
        }
    },
)
def enroll(
    payload: EnrollmentCreate = Depends(enrollment_payload),
    db: Session = Depends(get_db),
    me: Identity = Depends(require_non_admin),
):
    return enrollment_service.enroll(db, me, payload)
