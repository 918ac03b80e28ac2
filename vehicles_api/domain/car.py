"""SQLAlchemy ORM model for stored cars.

The row holds only what is durable about a car:
  - integer primary key assigned by the database
  - details as an opaque JSON bundle
  - condition and raw coordinates
  - created_at / modified_at (from TimestampMixin)
Price and street address are never columns here; they are fetched from the
pricing and maps services every time a car is read.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from vehicles_api.db.base import Base
from vehicles_api.domain.mixins import TimestampMixin


class CarRecord(Base, TimestampMixin):
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    details: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    # "USED" | "NEW"
    condition: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lon: Mapped[float] = mapped_column(Float, nullable=False)
