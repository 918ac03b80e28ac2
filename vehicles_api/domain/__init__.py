"""Domain package — all ORM models are imported here so init_db creates them.

Folder intent:
  car.py     — persisted car row (no price, no street address)
  mixins.py  — Shared TimestampMixin
"""

from vehicles_api.domain.car import CarRecord

__all__ = [
    "CarRecord",
]
