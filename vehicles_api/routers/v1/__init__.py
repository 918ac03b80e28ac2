"""v1 router package — all /api/v1/* endpoints live here.

Files:
  cars.py  — car CRUD with price/address enrichment

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to vehicles_api/services/.
"""
