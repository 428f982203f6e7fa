"""Service layer for business logic.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Directory source)

Usage:
    ```python
    from cafe_directory.services import CafeService

    service = CafeService.create(source=StaticCafeRepository.create())

    # Or with a prebuilt directory
    service = CafeService(directory=directory)
    ```
"""

from .cafe_service import CafeService, parse_count

__all__ = [
    "CafeService",
    "parse_count",
]
