"""HTTP client for the pricing service.

Reads degrade to a placeholder quote when the service is unavailable; writes
raise :class:`PricingServiceError` so a failed price update is never silent.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

import httpx

from vehicles_api.core.config import settings
from vehicles_api.core.exceptions import PricingServiceError
from vehicles_api.schemas.car import PriceRecord

logger = logging.getLogger(__name__)

# Shown instead of a quote when the pricing service cannot answer
CONSULT_PRICE = "(consult price)"


class PricingClient:
    """Talks to the pricing service over a persistent httpx.AsyncClient.

    Endpoints:
      GET    /services/price?vehicleId=<id>  -> {"currency": ..., "price": ...}
      POST   /prices                          <- {"currency", "price", "vehicleId"}
      DELETE /prices/<vehicleId>
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = (base_url or settings.pricing_service_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)
            logger.debug("Created pricing HTTP client for %s", self.base_url)
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def get_price(self, vehicle_id: int) -> str:
        """Return the current quote for *vehicle_id* as ``"<currency> <amount>"``."""
        try:
            resp = await self._get_client().get(
                "/services/price", params={"vehicleId": vehicle_id}
            )
            resp.raise_for_status()
            body = resp.json(parse_float=Decimal)
            return f"{body['currency']} {body['price']}"
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            logger.error("Unexpected error retrieving price for vehicle %s: %s", vehicle_id, exc)
            return CONSULT_PRICE

    async def save_price(self, price: PriceRecord) -> None:
        payload = price.model_dump(mode="json", by_alias=True)
        try:
            resp = await self._get_client().post("/prices", json=payload)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise PricingServiceError(
                f"Could not store price for vehicle {price.vehicle_id}: {exc}"
            ) from exc
        logger.info("Stored price %s %s for vehicle %s", price.currency, price.price, price.vehicle_id)

    async def delete_price(self, vehicle_id: int) -> None:
        try:
            resp = await self._get_client().delete(f"/prices/{vehicle_id}")
            if resp.status_code == 404:
                logger.info("No price stored for vehicle %s", vehicle_id)
                return
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise PricingServiceError(
                f"Could not delete price for vehicle {vehicle_id}: {exc}"
            ) from exc
