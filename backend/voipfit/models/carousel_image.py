"""Hero carousel slides."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from voipfit.database import Base


class CarouselImage(Base):
    __tablename__ = "carousel_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    image_url = Column(String(500), nullable=False)
    title = Column(String(200), nullable=True)
    description = Column(Text, nullable=True)
    order = Column("order", Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
