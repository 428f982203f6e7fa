"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - No global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request, status

from cafe_directory.config import Settings, settings
from cafe_directory.entities import CafeQuery
from cafe_directory.handlers import CafeHandler
from cafe_directory.protocols import CafeSource
from cafe_directory.repositories import JsonFileCafeRepository, StaticCafeRepository
from cafe_directory.services import CafeService

logger = logging.getLogger(__name__)


def build_source(config: Settings) -> CafeSource:
    """Pick the directory source from settings.

    Args:
        config: Application settings

    Returns:
        A JSON file source if CAFES_FILE is set, the embedded directory otherwise
    """
    if config.uses_embedded_directory:
        return StaticCafeRepository.create()
    return JsonFileCafeRepository.create(config.cafes_file)


def get_handler(request: Request) -> CafeHandler:
    """Dependency injection for CafeHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The CafeHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "cafe_handler", None)
    if handler is None:
        raise RuntimeError("CafeHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Loads the directory once and stores the layers in app.state:
    1. Source - app.state.cafe_source if preset, else chosen from settings
    2. Service (business logic) - app.state.cafe_service
    3. Handler (HTTP endpoints) - app.state.cafe_handler

    Raises:
        DirectoryLoadError: If the directory cannot be loaded; the app
            does not start
    """
    source: CafeSource = getattr(app.state, "cafe_source", None) or build_source(settings)

    cafe_service = CafeService.create(source=source)
    app.state.cafe_service = cafe_service
    app.state.cafe_handler = CafeHandler(cafe_service=cafe_service)

    logger.info("Cafe directory loaded from %s", source.describe())
    logger.info("Cities: %d", len(cafe_service.directory))

    yield

    del app.state.cafe_handler
    del app.state.cafe_service
    logger.info("Cafe service shut down")


def get_health_handler(request: Request) -> CafeHandler:
    """Dependency injection for CafeHandler on the health route.

    Args:
        request: FastAPI Request object

    Returns:
        The CafeHandler instance from app.state

    Raises:
        HTTPException: 503 if the directory is not loaded yet
    """
    handler = getattr(request.app.state, "cafe_handler", None)
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Cafe directory not loaded",
        )
    return handler


def get_cafe_query(request: Request) -> CafeQuery:
    """Extract the raw cafe query from the query string.

    A repeated parameter resolves to its first value.

    Args:
        request: FastAPI Request object

    Returns:
        CafeQuery with count and city as received, None when absent
    """
    params = request.query_params
    counts = params.getlist("count")
    cities = params.getlist("city")
    return CafeQuery(
        count=counts[0] if counts else None,
        city=cities[0] if cities else None,
    )


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[CafeHandler, Depends(get_handler)]
HealthHandlerDep = Annotated[CafeHandler, Depends(get_health_handler)]
CafeQueryDep = Annotated[CafeQuery, Depends(get_cafe_query)]
