"""HTTP handlers for cafe operations.

Handlers convert between service results and HTTP responses.
They own status codes and response formats; the service owns validation.
"""

from fastapi import status
from fastapi.responses import PlainTextResponse

from cafe_directory.dto import CitiesResponse, CityItem, HealthCheckResponse
from cafe_directory.entities import CafeListing, CafeQuery
from cafe_directory.services import CafeService


class CafeHandler:
    """HTTP handlers for cafe operations.

    Example:
        ```python
        handler = CafeHandler(cafe_service=service)

        @app.get("/cafe", response_class=PlainTextResponse)
        async def get_cafes(count: str | None = None, city: str | None = None):
            return handler.get_cafes(CafeQuery(count=count, city=city))
        ```
    """

    def __init__(self, cafe_service: CafeService) -> None:
        """Initialize the cafe handler.

        Args:
            cafe_service: The cafe service for business logic (required).
        """
        self._cafes = cafe_service

    def get_cafes(self, query: CafeQuery) -> PlainTextResponse:
        """Handle GET /cafe requests.

        Returns:
            200 with comma-joined cafe names, or 400 with the failure message
        """
        listing = self._cafes.list_cafes(query)
        return self.render(listing)

    @staticmethod
    def render(listing: CafeListing) -> PlainTextResponse:
        """Convert a cafe listing to a plain-text response.

        Args:
            listing: The service result

        Returns:
            PlainTextResponse, 200 for cafes or 400 for a validation failure
        """
        status_code = status.HTTP_200_OK if listing.is_ok else status.HTTP_400_BAD_REQUEST
        return PlainTextResponse(content=listing.body, status_code=status_code)

    def list_cities(self) -> CitiesResponse:
        """Handle GET /cities requests."""
        directory = self._cafes.directory
        return CitiesResponse(
            cities=[
                CityItem(city=city, cafe_count=len(directory.cities[city]))
                for city in sorted(directory)
            ]
        )

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        return HealthCheckResponse(status="healthy", cities=len(self._cafes.directory))
