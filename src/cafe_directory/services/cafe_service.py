"""Cafe service for core business logic.

Validates a raw cafe query against the directory and returns the
matching cafes. Validation failures are returned as data, never raised.
"""

import re

from cafe_directory.entities import CafeDirectory, CafeListing, CafeQuery, ErrorKind
from cafe_directory.protocols import CafeSource

# Optional sign followed by ASCII digits, no surrounding whitespace
_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)

# Counts must fit a signed 64-bit integer
_MAX_COUNT = 2**63 - 1
_MIN_COUNT = -(2**63)
_MAX_DIGITS = len(str(_MAX_COUNT))


def parse_count(text: str) -> int | None:
    """Parse a base-10 integer count.

    Args:
        text: Raw count parameter

    Returns:
        The parsed value, or None if the text is not a base-10 integer
        within the signed 64-bit range
    """
    if _COUNT_PATTERN.fullmatch(text) is None:
        return None
    sign = "-" if text[0] == "-" else ""
    digits = text.lstrip("+-").lstrip("0") or "0"
    # int() refuses very long digit strings; nothing past 19 digits fits anyway
    if len(digits) > _MAX_DIGITS:
        return None
    value = int(sign + digits)
    if not _MIN_COUNT <= value <= _MAX_COUNT:
        return None
    return value


class CafeService:
    """Core cafe lookup service.

    Owns an immutable CafeDirectory built once at construction, so a single
    instance can serve concurrent requests.

    Example:
        ```python
        from cafe_directory.repositories import StaticCafeRepository
        from cafe_directory.services import CafeService

        service = CafeService.create(source=StaticCafeRepository.create())
        listing = service.list_cafes(CafeQuery(count="2", city="moscow"))
        listing.body  # "Мир кофе,Сладкоежка"
        ```
    """

    def __init__(self, directory: CafeDirectory) -> None:
        """Initialize the cafe service.

        Args:
            directory: The cafe directory (required).
        """
        self._directory = directory

    @classmethod
    def create(cls, source: CafeSource) -> "CafeService":
        """Factory method that loads the directory from a source.

        Args:
            source: Where the directory comes from.

        Returns:
            Configured CafeService instance

        Raises:
            DirectoryLoadError: If the source cannot be loaded
        """
        return cls(directory=source.load())

    def list_cafes(self, query: CafeQuery) -> CafeListing:
        """Return the first ``count`` cafes of ``city``.

        Checks run in a fixed order:
        1. count present and non-empty
        2. count is a non-negative base-10 integer
        3. city is in the directory

        The count is clamped down to the number of cafes in the city.

        Args:
            query: Raw query parameters

        Returns:
            CafeListing with either the cafes or the failure kind
        """
        if not query.count:
            return CafeListing.failure(ErrorKind.MISSING_COUNT)

        count = parse_count(query.count)
        if count is None or count < 0:
            return CafeListing.failure(ErrorKind.INVALID_COUNT)

        cafes = self._directory.cafes_for(query.city)
        if cafes is None:
            return CafeListing.failure(ErrorKind.UNKNOWN_CITY)

        return CafeListing(cafes=cafes[: min(count, len(cafes))])

    @property
    def directory(self) -> CafeDirectory:
        """Get the underlying directory."""
        return self._directory
