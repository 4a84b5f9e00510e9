"""SQLAlchemy ORM models for cars."""

from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CarModel(Base):
    """SQLAlchemy model for cars table."""

    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, autoincrement=True)
    license_plate = Column(String, nullable=False, unique=True, index=True)
    brand = Column(String, nullable=False)
    model = Column(String, nullable=False)
    engine_type = Column(String, nullable=False)  # EngineType name
    registration_date = Column(Date, nullable=False)
    image = Column(String, nullable=False)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
