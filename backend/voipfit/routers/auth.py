"""Admin login route. Verifies credentials only; no token or session is issued."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from voipfit.database import get_db
from voipfit.schemas.admin import LoginRequest, LoginResponse
from voipfit.services.auth_service import authenticate

router = APIRouter(prefix="/api/admin", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    admin = authenticate(db, request.username, request.password)
    return LoginResponse(success=True, admin_id=admin.id)
