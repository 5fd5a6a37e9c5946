"""Admin account lookup, creation and password verification."""

import logging
from typing import Optional

import bcrypt
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from voipfit.models.admin_user import AdminUser

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # malformed stored hash or over-long password
        return False


def get_admin_by_username(db: Session, username: str) -> Optional[AdminUser]:
    return db.query(AdminUser).filter(AdminUser.username == username).first()


def create_admin(db: Session, username: str, password: str, rounds: int = 10) -> AdminUser:
    admin = AdminUser(username=username, password=hash_password(password, rounds=rounds))
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


def authenticate(db: Session, username: str, password: str) -> AdminUser:
    admin = get_admin_by_username(db, username)
    if not admin or not verify_password(password, admin.password):
        logger.warning("Admin login failed for username=%s", username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    logger.info("Admin login succeeded for username=%s", username)
    return admin
