"""Service catalog entries shown in the services section."""

from sqlalchemy import Boolean, Column, Integer, JSON, String, Text

from voipfit.database import Base


class Service(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    features = Column(JSON, nullable=False, default=list)
    icon = Column(String(50), nullable=False)  # MessageSquare/Phone/Database
    color = Column(String(20), nullable=False)  # emerald/amber/blue
    is_active = Column(Boolean, nullable=False, default=True)
