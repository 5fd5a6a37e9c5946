"""Carousel image domain service."""

from typing import List

from fastapi import HTTPException
from sqlalchemy import update
from sqlalchemy.orm import Session

from voipfit.models.carousel_image import CarouselImage
from voipfit.schemas.carousel import CarouselImageCreate, CarouselImageUpdate
from voipfit.services.common import update_payload

REQUIRED_FIELDS = ("image_url", "order", "is_active")

MOVE_DELTAS = {"up": -1, "down": 1}


def _display_order(query):
    # Equal order values fall back to creation sequence.
    return query.order_by(CarouselImage.order.asc(), CarouselImage.id.asc())


def list_all_images(db: Session) -> List[CarouselImage]:
    return _display_order(db.query(CarouselImage)).all()


def list_active_images(db: Session) -> List[CarouselImage]:
    query = db.query(CarouselImage).filter(CarouselImage.is_active == True)  # noqa: E712
    return _display_order(query).all()


def get_image(db: Session, image_id: int) -> CarouselImage:
    row = db.query(CarouselImage).filter(CarouselImage.id == image_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Carousel image not found")
    return row


def create_image(db: Session, data: CarouselImageCreate) -> CarouselImage:
    row = CarouselImage(**data.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def update_image(db: Session, image_id: int, data: CarouselImageUpdate) -> CarouselImage:
    row = get_image(db, image_id)
    for key, value in update_payload(data, REQUIRED_FIELDS).items():
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    return row


def move_image(db: Session, image_id: int, direction: str) -> CarouselImage:
    """Shift an image one slot up or down with a single in-database increment."""
    delta = MOVE_DELTAS[direction]
    result = db.execute(
        update(CarouselImage)
        .where(CarouselImage.id == image_id)
        .values(order=CarouselImage.order + delta)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        db.rollback()
        raise HTTPException(status_code=404, detail="Carousel image not found")
    db.commit()
    return get_image(db, image_id)


def delete_image(db: Session, image_id: int) -> None:
    row = get_image(db, image_id)
    db.delete(row)
    db.commit()
