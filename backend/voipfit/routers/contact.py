"""Contact form submission and admin inbox routes."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from voipfit.database import get_db
from voipfit.schemas.common import RowId, SuccessResponse
from voipfit.schemas.contact import ContactMessageCreate, ContactMessageOut
from voipfit.services import contact_service

router = APIRouter(tags=["contact"])


@router.post("/api/contact", response_model=ContactMessageOut, status_code=status.HTTP_201_CREATED)
def submit_contact(data: ContactMessageCreate, db: Session = Depends(get_db)):
    return contact_service.create_message(db, data)


@router.get("/api/admin/messages", response_model=List[ContactMessageOut])
def list_messages(db: Session = Depends(get_db)):
    return contact_service.list_messages(db)


@router.put("/api/admin/messages/{message_id}/read", response_model=SuccessResponse)
def mark_message_read(message_id: RowId, db: Session = Depends(get_db)):
    contact_service.mark_as_read(db, message_id)
    return SuccessResponse()


@router.delete("/api/admin/messages/{message_id}", response_model=SuccessResponse)
def delete_message(message_id: RowId, db: Session = Depends(get_db)):
    contact_service.delete_message(db, message_id)
    return SuccessResponse()
