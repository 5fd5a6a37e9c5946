"""Keyed JSON documents backing the editable page sections."""

from sqlalchemy import Column, DateTime, Integer, JSON, String
from sqlalchemy.sql import func

from voipfit.database import Base


class SiteContent(Base):
    __tablename__ = "site_content"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(50), unique=True, nullable=False)
    content = Column(JSON, nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), nullable=False)
