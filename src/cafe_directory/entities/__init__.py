"""Domain entities for internal representation.

These are pure frozen dataclasses used by services and repositories.
They are NOT used for API contracts - use DTOs from the dto package
for JSON responses.
"""

from .cafe_directory import CafeDirectory
from .cafe_listing import CafeListing, CafeQuery, ErrorKind

__all__ = ["CafeDirectory", "CafeListing", "CafeQuery", "ErrorKind"]
