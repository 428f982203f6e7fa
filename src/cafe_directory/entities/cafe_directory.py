"""Cafe directory domain entity."""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class CafeDirectory:
    """Read-only mapping from city identifier to its ordered cafe names.

    Order within each city is the order the cafes are returned in, so it is
    fixed at construction. The directory is never mutated afterwards and can
    be shared across concurrent requests without locking.

    Attributes:
        cities: City identifier -> tuple of cafe names
    """

    cities: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen: dict[str, tuple[str, ...]] = {}
        for city, cafes in self.cities.items():
            if not isinstance(city, str):
                raise ValueError(f"City identifier must be a string, got {city!r}")
            if isinstance(cafes, str) or not isinstance(cafes, Sequence):
                raise ValueError(f"Cafes for {city!r} must be a list of names")
            for name in cafes:
                if not isinstance(name, str):
                    raise ValueError(f"Cafe name for {city!r} must be a string, got {name!r}")
            frozen[city] = tuple(cafes)
        object.__setattr__(self, "cities", MappingProxyType(frozen))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Sequence[str]]) -> "CafeDirectory":
        """Build a directory from any city -> names mapping."""
        return cls(cities=dict(mapping))

    def cafes_for(self, city: str | None) -> tuple[str, ...] | None:
        """Return the cafes of a city, or None if the city is unknown.

        Lookup is exact and case-sensitive.
        """
        if city is None:
            return None
        return self.cities.get(city)

    def __contains__(self, city: object) -> bool:
        return city in self.cities

    def __iter__(self) -> Iterator[str]:
        return iter(self.cities)

    def __len__(self) -> int:
        return len(self.cities)

    def __hash__(self) -> int:
        return hash(frozenset(self.cities.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CafeDirectory):
            return NotImplemented
        return dict(self.cities) == dict(other.cities)
