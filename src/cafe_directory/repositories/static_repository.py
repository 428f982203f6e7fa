"""In-memory cafe directory source."""

from collections.abc import Mapping, Sequence

from cafe_directory.entities import CafeDirectory

DEFAULT_CAFES: dict[str, list[str]] = {
    "moscow": ["Мир кофе", "Сладкоежка", "Кофе и завтраки", "Сытый студент"],
}


class StaticCafeRepository:
    """Serves a directory built from an in-memory mapping.

    Satisfies the CafeSource protocol.

    Example:
        ```python
        repo = StaticCafeRepository.create()
        directory = repo.load()
        directory.cafes_for("moscow")
        ```
    """

    def __init__(self, cafes: Mapping[str, Sequence[str]]) -> None:
        self._directory = CafeDirectory.from_mapping(cafes)

    @classmethod
    def create(cls, cafes: Mapping[str, Sequence[str]] | None = None) -> "StaticCafeRepository":
        """Factory method, defaults to the embedded directory."""
        return cls(cafes=DEFAULT_CAFES if cafes is None else cafes)

    def load(self) -> CafeDirectory:
        return self._directory

    def describe(self) -> str:
        return "embedded directory"
