"""Response DTOs for JSON API endpoints.

``GET /cafe`` answers in plain text and has no DTO.
"""

from pydantic import BaseModel, Field


class CityItem(BaseModel):
    """Single city entry (in cities array)."""

    city: str = Field(..., description="City identifier, as accepted by /cafe")
    cafe_count: int = Field(..., description="Number of cafes listed for the city", ge=0)


class CitiesResponse(BaseModel):
    """Response DTO for the city listing."""

    cities: list[CityItem] = Field(
        default_factory=list,
        description="Known cities, sorted by identifier",
    )


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy'")
    cities: int = Field(..., description="Number of cities in the loaded directory", ge=0)
