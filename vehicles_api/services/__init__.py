"""Services package — all business logic lives here, never in routers.

Files:
  car.py    — CarService: list/get/save/delete cars, price and address enrichment
  ports.py  — CarStore, PriceClient, MapsClient protocols injected into CarService

Rule: routers call services, services call repositories and clients.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
