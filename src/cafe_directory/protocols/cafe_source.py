"""Cafe directory source protocol.

Defines the interface for anything that can produce the cafe directory
once at startup.

Implementations can include:
- An embedded, in-memory mapping (default)
- A JSON file on disk
"""

from typing import Protocol, runtime_checkable

from cafe_directory.entities import CafeDirectory


@runtime_checkable
class CafeSource(Protocol):
    """Protocol for cafe directory sources.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from cafe_directory.protocols import CafeSource

        source: CafeSource = StaticCafeRepository.create()
        source: CafeSource = JsonFileCafeRepository.create("cafes.json")
        ```
    """

    def load(self) -> CafeDirectory:
        """Build the directory.

        Returns:
            The immutable cafe directory

        Raises:
            DirectoryLoadError: If the source cannot be read
        """
        ...

    def describe(self) -> str:
        """Short human-readable name of the source, used in logs."""
        ...
