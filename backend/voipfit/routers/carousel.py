"""Carousel API router."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from voipfit.database import get_db
from voipfit.schemas.carousel import (
    CarouselImageCreate,
    CarouselImageOut,
    CarouselImageUpdate,
    CarouselMoveRequest,
)
from voipfit.schemas.common import RowId, SuccessResponse
from voipfit.services import carousel_service

router = APIRouter(tags=["carousel"])


@router.get("/api/carousel", response_model=List[CarouselImageOut])
def list_active_carousel(db: Session = Depends(get_db)):
    return carousel_service.list_active_images(db)


@router.get("/api/admin/carousel", response_model=List[CarouselImageOut])
def list_all_carousel(db: Session = Depends(get_db)):
    return carousel_service.list_all_images(db)


@router.post("/api/admin/carousel", response_model=CarouselImageOut, status_code=status.HTTP_201_CREATED)
def create_carousel_image(data: CarouselImageCreate, db: Session = Depends(get_db)):
    return carousel_service.create_image(db, data)


@router.put("/api/admin/carousel/{image_id}", response_model=CarouselImageOut)
def update_carousel_image(image_id: RowId, data: CarouselImageUpdate, db: Session = Depends(get_db)):
    return carousel_service.update_image(db, image_id, data)


@router.post("/api/admin/carousel/{image_id}/move", response_model=CarouselImageOut)
def move_carousel_image(image_id: RowId, data: CarouselMoveRequest, db: Session = Depends(get_db)):
    return carousel_service.move_image(db, image_id, data.direction)


@router.delete("/api/admin/carousel/{image_id}", response_model=SuccessResponse)
def delete_carousel_image(image_id: RowId, db: Session = Depends(get_db)):
    carousel_service.delete_image(db, image_id)
    return SuccessResponse()
