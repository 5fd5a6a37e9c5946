"""Service catalog domain service (the offerings listed on the site)."""

from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session

from voipfit.models.service import Service
from voipfit.schemas.service import ServiceCreate, ServiceUpdate
from voipfit.services.common import update_payload

REQUIRED_FIELDS = ("name", "description", "features", "icon", "color", "is_active")


def list_all_services(db: Session) -> List[Service]:
    return db.query(Service).order_by(Service.id.asc()).all()


def list_active_services(db: Session) -> List[Service]:
    return (
        db.query(Service)
        .filter(Service.is_active == True)  # noqa: E712
        .order_by(Service.id.asc())
        .all()
    )


def get_service(db: Session, service_id: int) -> Service:
    row = db.query(Service).filter(Service.id == service_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Service not found")
    return row


def create_service(db: Session, data: ServiceCreate) -> Service:
    row = Service(**data.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def update_service(db: Session, service_id: int, data: ServiceUpdate) -> Service:
    row = get_service(db, service_id)
    for key, value in update_payload(data, REQUIRED_FIELDS).items():
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    return row


def delete_service(db: Session, service_id: int) -> None:
    row = get_service(db, service_id)
    db.delete(row)
    db.commit()
