import logging
from typing import Any

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from cafe_directory import __version__
from cafe_directory.api.dependencies import CafeQueryDep, HandlerDep, HealthHandlerDep, lifespan
from cafe_directory.config import settings
from cafe_directory.dto import CitiesResponse, HealthCheckResponse
from cafe_directory.protocols import CafeSource

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

API_TITLE = "Cafe Directory API"
API_DESCRIPTION = "Lists cafes of a city, clipped to a requested count"


def create_app(source: CafeSource | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        source: Directory source to serve. If None, chosen from settings
            when the app starts.

    Returns:
        The configured application
    """
    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
    )
    if source is not None:
        app.state.cafe_source = source

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": API_TITLE,
            "version": __version__,
            "description": API_DESCRIPTION,
            "endpoints": {
                "cafe": "/cafe?count=<n>&city=<city>",
                "cities": "/cities",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HealthHandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return handler.health_check()

    @app.get("/cafe", response_class=PlainTextResponse)
    async def get_cafes(handler: HandlerDep, query: CafeQueryDep) -> PlainTextResponse:
        """
        List the first `count` cafes of `city`, comma-separated.

        Answers 400 with "count missing", "wrong count value" or
        "wrong city value" when the query is invalid. A repeated
        parameter uses its first value.
        """
        return handler.get_cafes(query)

    @app.get("/cities", response_model=CitiesResponse)
    async def list_cities(handler: HandlerDep) -> CitiesResponse:
        """List known cities with the number of cafes in each."""
        return handler.list_cities()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cafe_directory.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
