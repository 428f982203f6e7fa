"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Directory source)
"""

from .cafe_handler import CafeHandler

__all__ = [
    "CafeHandler",
]
