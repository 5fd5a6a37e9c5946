"""Administrator accounts for the admin panel."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from voipfit.database import Base


class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
