"""Site content API: public section reads and admin upserts."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from voipfit.database import get_db
from voipfit.schemas.content import SiteContentOut, SiteContentUpdate
from voipfit.services import content_service

router = APIRouter(tags=["content"])


@router.get("/api/content/{key}", response_model=SiteContentOut)
def get_content(key: str, db: Session = Depends(get_db)):
    return content_service.get_content(db, key)


@router.get("/api/admin/content", response_model=List[SiteContentOut])
def list_content(db: Session = Depends(get_db)):
    return content_service.list_content(db)


@router.put("/api/admin/content", response_model=SiteContentOut)
def update_content(data: SiteContentUpdate, db: Session = Depends(get_db)):
    return content_service.upsert_content(db, data.key, data.content)
