"""Car service: lists, reads, saves and deletes cars.

Reads are enriched after every store lookup: price comes from the pricing
service and the street address from the maps service, since neither is
stored with the car.

The two business failures (car not found, unparseable price) are returned as
Err values, never raised. Anything the store or the clients raise propagates
unchanged.

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal

from vehicles_api.core.config import settings
from vehicles_api.core.exceptions import InvalidPriceError, NotFoundError
from vehicles_api.core.result import Err, Ok, Result
from vehicles_api.schemas.car import Car, PriceRecord
from vehicles_api.services.ports import CarStore, MapsClient, PriceClient

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


def parse_price(price: str | None) -> int | None:
    """Parse a whole-number amount; None if *price* is not a signed 64-bit integer."""
    if price is None or not _INTEGER_RE.fullmatch(price):
        return None
    amount = int(price)
    if not _LONG_MIN <= amount <= _LONG_MAX:
        return None
    return amount


class CarService:
    def __init__(
        self,
        store: CarStore,
        prices: PriceClient,
        maps: MapsClient,
        currency: str | None = None,
    ):
        self._store = store
        self._prices = prices
        self._maps = maps
        self._currency = currency or settings.price_currency

    async def _enrich(self, car: Car) -> Car:
        price = await self._prices.get_price(car.id)
        location = await self._maps.get_address(car.location)
        return car.model_copy(update={"price": price, "location": location})

    async def list_cars(self) -> list[Car]:
        cars = await self._store.find_all()
        return [await self._enrich(car) for car in cars]

    async def get_car(self, car_id: int) -> Result[Car, NotFoundError]:
        car = await self._store.find_by_id(car_id)
        if car is None:
            return Err(NotFoundError("Car", car_id))
        return Ok(await self._enrich(car))

    async def save_car(self, car: Car) -> Result[Car, NotFoundError | InvalidPriceError]:
        """Create *car* when it has no id, otherwise update the stored car.

        On update the price is validated and stored first, so a bad price
        leaves the stored car untouched. Only details, location and condition
        are copied onto the stored car.
        """
        if car.id is not None:
            priced = await self.save_price(car.price, car.id)
            if isinstance(priced, Err):
                return priced

            existing = await self._store.find_by_id(car.id)
            if existing is None:
                return Err(NotFoundError("Car", car.id))

            merged = existing.model_copy(
                update={
                    "details": car.details,
                    "location": car.location,
                    "condition": car.condition,
                }
            )
            saved = await self._store.save(merged)
            return Ok(saved.model_copy(update={"price": car.price}))

        saved = await self._store.save(car)
        priced = await self.save_price(car.price, saved.id)
        if isinstance(priced, Err):
            return priced
        return Ok(saved.model_copy(update={"price": car.price}))

    async def save_price(self, price: str | None, vehicle_id: int) -> Result[None, InvalidPriceError]:
        amount = parse_price(price)
        if amount is None:
            logger.warning("Rejected price %r for vehicle %s", price, vehicle_id)
            return Err(InvalidPriceError(price))

        await self._prices.save_price(
            PriceRecord(currency=self._currency, price=Decimal(amount), vehicle_id=vehicle_id)
        )
        return Ok(None)

    async def delete_car(self, car_id: int) -> Result[None, NotFoundError]:
        car = await self._store.find_by_id(car_id)
        if car is None:
            return Err(NotFoundError("Car", car_id))

        # Price before car; the two deletes share no transaction
        await self._prices.delete_price(car.id)
        await self._store.delete(car)
        return Ok(None)
