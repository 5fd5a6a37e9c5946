"""News article domain service."""

from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session

from voipfit.models.news_article import NewsArticle
from voipfit.schemas.news import NewsArticleCreate, NewsArticleUpdate
from voipfit.services.common import update_payload

REQUIRED_FIELDS = ("title", "excerpt", "content", "published_at", "is_published")


def _newest_first(query):
    return query.order_by(NewsArticle.published_at.desc(), NewsArticle.id.desc())


def list_all_articles(db: Session) -> List[NewsArticle]:
    return _newest_first(db.query(NewsArticle)).all()


def list_published_articles(db: Session) -> List[NewsArticle]:
    query = db.query(NewsArticle).filter(NewsArticle.is_published == True)  # noqa: E712
    return _newest_first(query).all()


def get_article(db: Session, article_id: int) -> NewsArticle:
    row = db.query(NewsArticle).filter(NewsArticle.id == article_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="News article not found")
    return row


def create_article(db: Session, data: NewsArticleCreate) -> NewsArticle:
    payload = data.model_dump(exclude_none=True)
    row = NewsArticle(**payload)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def update_article(db: Session, article_id: int, data: NewsArticleUpdate) -> NewsArticle:
    row = get_article(db, article_id)
    for key, value in update_payload(data, REQUIRED_FIELDS).items():
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    return row


def delete_article(db: Session, article_id: int) -> None:
    row = get_article(db, article_id)
    db.delete(row)
    db.commit()
