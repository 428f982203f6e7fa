"""JSON file cafe directory source.

The file holds a single object mapping city identifiers to ordered
lists of cafe names:

    {"moscow": ["Мир кофе", "Сладкоежка"], "kazan": []}
"""

import json
import logging
from pathlib import Path

from cafe_directory.entities import CafeDirectory
from cafe_directory.exceptions import DirectoryLoadError

logger = logging.getLogger(__name__)


class JsonFileCafeRepository:
    """Loads the directory from a UTF-8 JSON file.

    Satisfies the CafeSource protocol. The file is read on every
    ``load()`` call; the app calls it once, in the lifespan.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the repository.

        Args:
            path: Location of the JSON directory file.
        """
        self._path = Path(path)

    @classmethod
    def create(cls, path: str | Path) -> "JsonFileCafeRepository":
        return cls(path=path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> CafeDirectory:
        """Read and validate the directory file.

        Returns:
            The immutable cafe directory

        Raises:
            DirectoryLoadError: If the file is missing, is not valid JSON,
                or is not an object of string lists
        """
        source = str(self._path)
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise DirectoryLoadError(source, f"cannot read file ({e})") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise DirectoryLoadError(source, f"invalid JSON ({e})") from e

        if not isinstance(data, dict):
            raise DirectoryLoadError(source, "top-level value must be an object")

        try:
            directory = CafeDirectory.from_mapping(data)
        except ValueError as e:
            raise DirectoryLoadError(source, str(e)) from e

        logger.debug("Loaded %d cities from %s", len(directory), source)
        return directory

    def describe(self) -> str:
        return f"file {self._path}"
