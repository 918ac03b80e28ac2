"""Collaborator interfaces consumed by CarService.

Concrete implementations live in repositories/ and clients/; tests pass
in-memory fakes that satisfy the same protocols.
"""

from __future__ import annotations

from typing import Protocol

from vehicles_api.schemas.car import Car, Location, PriceRecord


class CarStore(Protocol):
    async def find_all(self) -> list[Car]: ...
    async def find_by_id(self, car_id: int) -> Car | None: ...
    async def save(self, car: Car) -> Car:
        """
        Persist *car*.

        Assigns a new id when ``car.id`` is None, otherwise overwrites the
        record stored at that id. Price and street address are not stored.
        """
        ...

    async def delete(self, car: Car) -> None: ...


class PriceClient(Protocol):
    async def get_price(self, vehicle_id: int) -> str: ...
    async def save_price(self, price: PriceRecord) -> None: ...
    async def delete_price(self, vehicle_id: int) -> None: ...


class MapsClient(Protocol):
    async def get_address(self, location: Location) -> Location: ...
