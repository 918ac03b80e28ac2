"""HTTP client for the maps (reverse geocoding) service."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from vehicles_api.core.config import settings
from vehicles_api.schemas.car import Location

logger = logging.getLogger(__name__)

_ADDRESS_FIELDS = ("address", "city", "state", "zip")


class MapsServiceClient:
    """Resolves coordinates to a street address via ``GET /maps/?lat=&lon=``."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = (base_url or settings.maps_service_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)
            logger.debug("Created maps HTTP client for %s", self.base_url)
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def get_address(self, location: Location) -> Location:
        """Return a copy of *location* with its address fields filled in.

        If the maps service is down the location comes back unchanged.
        """
        try:
            resp = await self._get_client().get(
                "/maps/", params={"lat": location.lat, "lon": location.lon}
            )
            resp.raise_for_status()
            body = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Map service is down: %s", exc)
            return location

        if not isinstance(body, dict):
            logger.warning("Unexpected maps response for (%s, %s)", location.lat, location.lon)
            return location

        resolved = {
            field: str(body[field]) if body.get(field) is not None else None
            for field in _ADDRESS_FIELDS
        }
        return Location(lat=location.lat, lon=location.lon, **resolved)
