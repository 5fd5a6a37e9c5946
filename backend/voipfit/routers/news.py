"""News API router."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from voipfit.database import get_db
from voipfit.schemas.common import RowId, SuccessResponse
from voipfit.schemas.news import NewsArticleCreate, NewsArticleOut, NewsArticleUpdate
from voipfit.services import news_service

router = APIRouter(tags=["news"])


@router.get("/api/news", response_model=List[NewsArticleOut])
def list_published_news(db: Session = Depends(get_db)):
    return news_service.list_published_articles(db)


@router.get("/api/admin/news", response_model=List[NewsArticleOut])
def list_all_news(db: Session = Depends(get_db)):
    return news_service.list_all_articles(db)


@router.post("/api/admin/news", response_model=NewsArticleOut, status_code=status.HTTP_201_CREATED)
def create_news(data: NewsArticleCreate, db: Session = Depends(get_db)):
    return news_service.create_article(db, data)


@router.put("/api/admin/news/{article_id}", response_model=NewsArticleOut)
def update_news(article_id: RowId, data: NewsArticleUpdate, db: Session = Depends(get_db)):
    return news_service.update_article(db, article_id, data)


@router.delete("/api/admin/news/{article_id}", response_model=SuccessResponse)
def delete_news(article_id: RowId, db: Session = Depends(get_db)):
    news_service.delete_article(db, article_id)
    return SuccessResponse()
