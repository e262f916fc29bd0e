from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from course_booking.core.deps import get_db
from course_booking.core.permissions import require_admin
from course_booking.schemas.auth import Identity
from course_booking.schemas.news import NewsCreate, NewsRead, NewsUpdate
from course_booking.services import news as news_service

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def add_news(
    payload: NewsCreate,
    db: Session = Depends(get_db),
    admin: Identity = Depends(require_admin),
):
    news = news_service.add_news(db, payload)
    return {
        "success": True,
        "message": "News added successfully",
        "result": NewsRead.model_validate(news),
    }


@router.get("/all", response_model=list[NewsRead])
def list_news(
    db: Session = Depends(get_db),
    admin: Identity = Depends(require_admin),
):
    return news_service.get_all_news(db)


@router.get("", response_model=list[NewsRead])
def list_active_news(db: Session = Depends(get_db)):
    return news_service.get_all_active_news(db)


@router.get("/specific/{news_id}", response_model=NewsRead)
def get_news(news_id: int, db: Session = Depends(get_db)):
    return news_service.get_news(db, news_id)


@router.patch("/{news_id}")
def update_news(
    news_id: int,
    payload: NewsUpdate,
    db: Session = Depends(get_db),
    admin: Identity = Depends(require_admin),
):
    return news_service.update_news(db, news_id, payload)
