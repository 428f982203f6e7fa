"""Protocol interfaces for swappable implementations.

Protocols use structural typing, so the service can be handed an
embedded directory in tests and a file-backed one in production.
"""

from .cafe_source import CafeSource

__all__ = [
    "CafeSource",
]
