"""Cafe Directory - lists the cafes of a city over HTTP.

Layers:
    - protocols: Interface contracts (CafeSource)
    - repositories: Directory sources (embedded, JSON file)
    - services: Query validation and lookup
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (JSON API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from cafe_directory.entities import CafeQuery
    from cafe_directory.repositories import StaticCafeRepository
    from cafe_directory.services import CafeService

    service = CafeService.create(source=StaticCafeRepository.create())
    service.list_cafes(CafeQuery(count="2", city="moscow")).body
    ```

For HTTP API:
    ```python
    from cafe_directory.api.app import app
    ```
"""

__version__ = "0.1.0"

from cafe_directory.config import settings
from cafe_directory.entities import CafeDirectory, CafeListing, CafeQuery, ErrorKind
from cafe_directory.exceptions import CafeDirectoryError, DirectoryLoadError
from cafe_directory.handlers import CafeHandler
from cafe_directory.protocols import CafeSource
from cafe_directory.repositories import JsonFileCafeRepository, StaticCafeRepository
from cafe_directory.services import CafeService

__all__ = [
    "__version__",
    # Configuration
    "settings",
    # Protocols (interfaces)
    "CafeSource",
    # Services (business logic)
    "CafeService",
    # Handlers (HTTP)
    "CafeHandler",
    # Repositories (directory sources)
    "StaticCafeRepository",
    "JsonFileCafeRepository",
    # Entities (domain models)
    "CafeDirectory",
    "CafeListing",
    "CafeQuery",
    "ErrorKind",
    # Errors
    "CafeDirectoryError",
    "DirectoryLoadError",
]
