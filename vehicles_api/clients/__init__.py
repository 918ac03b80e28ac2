"""Clients package — HTTP clients for the pricing and maps services.

Files:
  prices.py  — PricingClient (quotes, stores and deletes vehicle prices)
  maps.py    — MapsServiceClient (coordinates -> street address)

One shared instance of each is created lazily and closed on app shutdown.
"""

from vehicles_api.clients.maps import MapsServiceClient
from vehicles_api.clients.prices import PricingClient

_pricing_client: PricingClient | None = None
_maps_client: MapsServiceClient | None = None


def get_pricing_client() -> PricingClient:
    """FastAPI dependency returning the shared pricing client."""
    global _pricing_client
    if _pricing_client is None:
        _pricing_client = PricingClient()
    return _pricing_client


def get_maps_client() -> MapsServiceClient:
    """FastAPI dependency returning the shared maps client."""
    global _maps_client
    if _maps_client is None:
        _maps_client = MapsServiceClient()
    return _maps_client


async def close_clients() -> None:
    global _pricing_client, _maps_client
    if _pricing_client is not None:
        await _pricing_client.close()
        _pricing_client = None
    if _maps_client is not None:
        await _maps_client.close()
        _maps_client = None


__all__ = [
    "MapsServiceClient",
    "PricingClient",
    "close_clients",
    "get_maps_client",
    "get_pricing_client",
]
