"""Cafe query and listing domain entities."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Validation failures of a cafe query, each with its fixed message."""

    MISSING_COUNT = "count missing"
    INVALID_COUNT = "wrong count value"
    UNKNOWN_CITY = "wrong city value"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class CafeQuery:
    """Raw query parameters, exactly as received.

    Attributes:
        count: Requested number of cafes as text, or None if absent
        city: City identifier, or None if absent
    """

    count: str | None = None
    city: str | None = None


@dataclass(frozen=True)
class CafeListing:
    """Outcome of a cafe query.

    Either ``error`` is set and ``cafes`` is empty, or ``error`` is None
    and ``cafes`` holds a prefix of the city's cafe list.

    Attributes:
        cafes: Cafe names in directory order
        error: Validation failure, if any
    """

    cafes: tuple[str, ...] = ()
    error: ErrorKind | None = None

    SEPARATOR = ","

    @classmethod
    def failure(cls, error: ErrorKind) -> "CafeListing":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def body(self) -> str:
        """Plain-text body: comma-joined names or the error message."""
        if self.error is not None:
            return self.error.message
        return self.SEPARATOR.join(self.cafes)
