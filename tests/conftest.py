"""
Test configuration and fixtures.

Provides in-memory fakes for the CarService collaborators (store, pricing
service, maps service) and sample car payloads.
"""

from datetime import datetime, timezone

import pytest

from vehicles_api.clients.prices import CONSULT_PRICE
from vehicles_api.schemas.car import (
    Car,
    Condition,
    Details,
    Location,
    Manufacturer,
    PriceRecord,
)
from vehicles_api.services.car import CarService


class InMemoryCarStore:
    """CarStore fake; drops price and address on save like the real repository."""

    def __init__(self) -> None:
        self.cars: dict[int, Car] = {}
        self.save_calls = 0
        self._next_id = 1

    async def find_all(self) -> list[Car]:
        return [car.model_copy(deep=True) for car in self.cars.values()]

    async def find_by_id(self, car_id: int) -> Car | None:
        car = self.cars.get(car_id)
        return car.model_copy(deep=True) if car else None

    async def save(self, car: Car) -> Car:
        self.save_calls += 1
        now = datetime.now(timezone.utc)
        if car.id is None:
            car = car.model_copy(update={"id": self._next_id, "created_at": now})
            self._next_id += 1
        stored = car.model_copy(
            update={
                "price": None,
                "location": car.location.coordinates_only(),
                "modified_at": now,
            }
        )
        self.cars[stored.id] = stored
        return stored.model_copy(deep=True)

    async def delete(self, car: Car) -> None:
        self.cars.pop(car.id, None)


class FakePriceClient:
    def __init__(self) -> None:
        self.prices: dict[int, PriceRecord] = {}
        self.calls: list[tuple[str, int]] = []

    async def get_price(self, vehicle_id: int) -> str:
        self.calls.append(("get", vehicle_id))
        record = self.prices.get(vehicle_id)
        if record is None:
            return CONSULT_PRICE
        return f"{record.currency} {record.price}"

    async def save_price(self, price: PriceRecord) -> None:
        self.calls.append(("save", price.vehicle_id))
        self.prices[price.vehicle_id] = price

    async def delete_price(self, vehicle_id: int) -> None:
        self.calls.append(("delete", vehicle_id))
        self.prices.pop(vehicle_id, None)


class FakeMapsClient:
    def __init__(self, address: str = "777 Brockton Avenue") -> None:
        self.address = address
        self.calls: list[Location] = []

    async def get_address(self, location: Location) -> Location:
        self.calls.append(location)
        return Location(
            lat=location.lat,
            lon=location.lon,
            address=self.address,
            city="Abington",
            state="MA",
            zip="2351",
        )


@pytest.fixture
def store() -> InMemoryCarStore:
    return InMemoryCarStore()


@pytest.fixture
def prices() -> FakePriceClient:
    return FakePriceClient()


@pytest.fixture
def maps() -> FakeMapsClient:
    return FakeMapsClient()


@pytest.fixture
def car_service(store, prices, maps) -> CarService:
    return CarService(store, prices, maps, currency="USD")


@pytest.fixture
def sample_details() -> Details:
    return Details(
        body="sedan",
        model="Impala",
        manufacturer=Manufacturer(code=101, name="Chevrolet"),
        number_of_doors=4,
        fuel_type="Gasoline",
        engine="3.6L V6",
        mileage=32280,
        model_year=2018,
        production_year=2018,
        external_color="white",
    )


@pytest.fixture
def sample_car(sample_details) -> Car:
    """A new (unsaved) used car with a valid price."""
    return Car(
        details=sample_details,
        condition=Condition.USED,
        location=Location(lat=40.73061, lon=-73.935242),
        price="15000",
    )


@pytest.fixture
def sample_car_payload() -> dict:
    """The same car as sent over HTTP (camelCase keys)."""
    return {
        "details": {
            "body": "sedan",
            "model": "Impala",
            "manufacturer": {"code": 101, "name": "Chevrolet"},
            "numberOfDoors": 4,
            "fuelType": "Gasoline",
            "engine": "3.6L V6",
            "mileage": 32280,
            "modelYear": 2018,
            "productionYear": 2018,
            "externalColor": "white",
        },
        "condition": "USED",
        "location": {"lat": 40.73061, "lon": -73.935242},
        "price": "15000",
    }
