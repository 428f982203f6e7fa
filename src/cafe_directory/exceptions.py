"""Exceptions raised while building the cafe directory.

Request validation failures are not exceptions; see ``ErrorKind``.
"""


class CafeDirectoryError(Exception):
    """Base class for cafe directory errors."""


class DirectoryLoadError(CafeDirectoryError):
    """The directory source could not be read or has the wrong shape."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load cafe directory from {source}: {reason}")
        self.source = source
        self.reason = reason
