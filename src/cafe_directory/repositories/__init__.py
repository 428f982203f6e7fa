"""Directory sources implementing the CafeSource protocol."""

from .json_file_repository import JsonFileCafeRepository
from .static_repository import DEFAULT_CAFES, StaticCafeRepository

__all__ = [
    "DEFAULT_CAFES",
    "JsonFileCafeRepository",
    "StaticCafeRepository",
]
