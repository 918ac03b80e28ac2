"""Car CRUD router.

Pattern:
  1. Inject the CarService via Depends(get_car_service)
  2. Call service methods; unwrap() turns an Err into the matching AppException
  3. Wrap the result in the response envelope
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from vehicles_api.clients import get_maps_client, get_pricing_client
from vehicles_api.clients.maps import MapsServiceClient
from vehicles_api.clients.prices import PricingClient
from vehicles_api.core.response import DataResponse, ListResponse, listed
from vehicles_api.db.base import get_db
from vehicles_api.repositories.car import CarRepository
from vehicles_api.schemas.car import Car
from vehicles_api.services.car import CarService

router = APIRouter(prefix="/cars", tags=["Cars"])


# ------------------------------------------------------------------
# Dependency: service wired to the session and shared HTTP clients
# ------------------------------------------------------------------

def get_car_service(
    session: AsyncSession = Depends(get_db),
    prices: PricingClient = Depends(get_pricing_client),
    maps: MapsServiceClient = Depends(get_maps_client),
) -> CarService:
    return CarService(CarRepository(session), prices, maps)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[Car])
async def list_cars(svc: CarService = Depends(get_car_service)):
    """List all cars with current price and address."""
    return listed(await svc.list_cars())


@router.post("", response_model=DataResponse[Car], status_code=status.HTTP_201_CREATED)
async def create_car(body: Car, svc: CarService = Depends(get_car_service)):
    """Create a new car. Any id in the body is ignored."""
    car = (await svc.save_car(body.model_copy(update={"id": None}))).unwrap()
    return {"data": car}


@router.get("/{car_id}", response_model=DataResponse[Car])
async def get_car(car_id: int, svc: CarService = Depends(get_car_service)):
    car = (await svc.get_car(car_id)).unwrap()
    return {"data": car}


@router.put("/{car_id}", response_model=DataResponse[Car])
async def update_car(car_id: int, body: Car, svc: CarService = Depends(get_car_service)):
    car = (await svc.save_car(body.model_copy(update={"id": car_id}))).unwrap()
    return {"data": car}


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_car(car_id: int, svc: CarService = Depends(get_car_service)):
    (await svc.delete_car(car_id)).unwrap()
