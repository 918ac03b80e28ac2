"""Car repository: the durable store behind CarService.

Works in Car values at its public surface and CarRecord rows underneath, so
price and street address can never reach the database.
"""

from __future__ import annotations

from typing import Any

from vehicles_api.domain.car import CarRecord
from vehicles_api.repositories.base import BaseRepository
from vehicles_api.schemas.car import Car, Condition, Details, Location


def _to_car(record: CarRecord) -> Car:
    return Car(
        id=record.id,
        details=Details.model_validate(record.details),
        condition=Condition(record.condition),
        location=Location(lat=record.lat, lon=record.lon),
        created_at=record.created_at,
        modified_at=record.modified_at,
    )


def _columns(car: Car) -> dict[str, Any]:
    return {
        "details": car.details.model_dump(mode="json"),
        "condition": car.condition.value,
        "lat": car.location.lat,
        "lon": car.location.lon,
    }


class CarRepository(BaseRepository[CarRecord]):
    model = CarRecord

    async def find_all(self) -> list[Car]:
        return [_to_car(r) for r in await self.list_all()]

    async def find_by_id(self, car_id: int) -> Car | None:
        record = await self.get_by_id(car_id)
        return _to_car(record) if record else None

    async def save(self, car: Car) -> Car:
        if car.id is None:
            record = await self.create(**_columns(car))
        else:
            record = await self.update(car.id, **_columns(car))
            if record is None:
                record = await self.create(id=car.id, **_columns(car))
        return _to_car(record)

    async def delete(self, car: Car) -> None:
        await self.hard_delete(car.id)
