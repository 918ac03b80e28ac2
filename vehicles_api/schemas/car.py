"""Car Pydantic schemas (request/response bodies and service values)."""


from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator, field_serializer

from vehicles_api.schemas.common import CamelModel

def _int_to_str(value: Any) -> Any:
    # Whole-number JSON prices ({"price": 15000}) are accepted as text
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value

PriceText = Annotated[str | None, BeforeValidator(_int_to_str)]

class Condition(str, Enum):
    USED = "USED"
    NEW = "NEW"

class Manufacturer(CamelModel):
    code: int
    name: str | None = None

class Details(CamelModel):
    body: str
    model: str
    manufacturer: Manufacturer
    number_of_doors: int | None = None
    fuel_type: str | None = None
    engine: str | None = None
    mileage: int | None = None
    model_year: int | None = None
    production_year: int | None = None
    external_color: str | None = None

class Location(CamelModel):
    """Coordinates plus a street address resolved by the maps service.

    Only ``lat`` and ``lon`` are ever stored.
    """

    lat: float
    lon: float
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None

    def coordinates_only(self) -> "Location":
        return Location(lat=self.lat, lon=self.lon)

class Car(CamelModel):
    id: int | None = None
    details: Details
    condition: Condition
    location: Location
    # Never stored; filled from the pricing service on every read
    price: PriceText = None
    created_at: datetime | None = None
    modified_at: datetime | None = None

class PriceRecord(CamelModel):
    """Price as stored by the pricing service for one vehicle."""

    currency: str
    price: Decimal
    vehicle_id: int

    @field_serializer("price", when_used="json")
    def _serialize_price(self, value: Decimal) -> int | float:
        if value == value.to_integral_value():
            return int(value)
        return float(value)
