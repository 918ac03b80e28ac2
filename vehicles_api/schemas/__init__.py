"""Pydantic schemas package.

Folder intent:
  common.py  — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  car.py     — Car, Details, Location, PriceRecord (API bodies and service values)
"""
