"""Contact message domain service."""

from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session

from voipfit.models.contact_message import ContactMessage
from voipfit.schemas.contact import ContactMessageCreate


def list_messages(db: Session) -> List[ContactMessage]:
    return (
        db.query(ContactMessage)
        .order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc())
        .all()
    )


def get_message(db: Session, message_id: int) -> ContactMessage:
    row = db.query(ContactMessage).filter(ContactMessage.id == message_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Message not found")
    return row


def create_message(db: Session, data: ContactMessageCreate) -> ContactMessage:
    row = ContactMessage(**data.model_dump(), is_read=False)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def mark_as_read(db: Session, message_id: int) -> ContactMessage:
    row = get_message(db, message_id)
    row.is_read = True
    db.commit()
    db.refresh(row)
    return row


def delete_message(db: Session, message_id: int) -> None:
    row = get_message(db, message_id)
    db.delete(row)
    db.commit()
