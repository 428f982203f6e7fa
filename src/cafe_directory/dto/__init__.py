"""Data Transfer Objects for API contracts.

These Pydantic models define the JSON side of the external API.
Internal domain logic should use entities from the entities package.
"""

from .responses import CitiesResponse, CityItem, HealthCheckResponse

__all__ = [
    "CityItem",
    "CitiesResponse",
    "HealthCheckResponse",
]
