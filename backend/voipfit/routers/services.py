"""Service catalog API router."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from voipfit.database import get_db
from voipfit.schemas.common import RowId, SuccessResponse
from voipfit.schemas.service import ServiceCreate, ServiceOut, ServiceUpdate
from voipfit.services import catalog_service

router = APIRouter(tags=["services"])


@router.get("/api/services", response_model=List[ServiceOut])
def list_active_services(db: Session = Depends(get_db)):
    return catalog_service.list_active_services(db)


@router.get("/api/admin/services", response_model=List[ServiceOut])
def list_all_services(db: Session = Depends(get_db)):
    return catalog_service.list_all_services(db)


@router.post("/api/admin/services", response_model=ServiceOut, status_code=status.HTTP_201_CREATED)
def create_service(data: ServiceCreate, db: Session = Depends(get_db)):
    return catalog_service.create_service(db, data)


@router.put("/api/admin/services/{service_id}", response_model=ServiceOut)
def update_service(service_id: RowId, data: ServiceUpdate, db: Session = Depends(get_db)):
    return catalog_service.update_service(db, service_id, data)


@router.delete("/api/admin/services/{service_id}", response_model=SuccessResponse)
def delete_service(service_id: RowId, db: Session = Depends(get_db)):
    catalog_service.delete_service(db, service_id)
    return SuccessResponse()
