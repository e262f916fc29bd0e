from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from course_booking.core.errors import Conflict, NotFound
from course_booking.models.news import News
from course_booking.schemas.news import NewsCreate, NewsUpdate


def add_news(db: Session, payload: NewsCreate) -> News:
    if db.query(News).filter(News.title == payload.title).first():
        raise Conflict("News already exists")

    news = News(title=payload.title, content=payload.content)
    db.add(news)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("News already exists")

    db.refresh(news)
    return news


def get_all_news(db: Session) -> list[News]:
    items = db.query(News).order_by(News.id.asc()).all()
    if not items:
        raise NotFound("No news found")
    return items


def get_all_active_news(db: Session) -> list[News]:
    items = (
        db.query(News)
        .filter(News.is_active.is_(True))
        .order_by(News.created_on.desc(), News.id.desc())
        .all()
    )
    if not items:
        raise NotFound()
    return items


def get_news(db: Session, news_id: int) -> News:
    news = db.get(News, news_id)
    if news is None:
        raise NotFound()
    return news


def update_news(db: Session, news_id: int, payload: NewsUpdate) -> bool:
    news = db.get(News, news_id)
    if news is None:
        raise NotFound()

    for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(news, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("News already exists")
    return True
