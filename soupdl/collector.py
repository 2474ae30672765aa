"""The collector: remembers entity maps of visited maps.

When a map is loaded again, its remembered entity map is used instead of
the one on disk, so that items already picked up do not come back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

COL_MAP_MAX = 100


@dataclass
class ColMapData:
    """What the collector remembers about one map."""

    path: str
    width: int
    height: int
    map: list[list[int]] = field(default_factory=list)

    def same_map(self, other: ColMapData) -> bool:
        """True if both describe the same map file with the same size."""
        return (
            self.width == other.width
            and self.height == other.height
            and self.path == other.path
        )


class CollectorFull(Exception):
    """Raised when the collector cannot remember any more maps."""


class Collector:
    """The list of remembered maps and the index of the active one."""

    def __init__(self, capacity: int = COL_MAP_MAX) -> None:
        self.capacity = capacity
        self.active_index = 0
        self._maps: list[ColMapData] = []

    def add_map(self, data: ColMapData) -> int | None:
        """Remember ``data`` unless the same map is already known.

        Returns the index of the already remembered map, or None when
        ``data`` was added. Raises ``CollectorFull`` when there is no room.
        """
        for i, known in enumerate(self._maps):
            if data.same_map(known):
                return i
        if len(self._maps) >= self.capacity:
            raise CollectorFull(f"collector holds {self.capacity} maps already")
        self._maps.append(data)
        return None

    def clear(self) -> None:
        """Forget every remembered map."""
        self._maps.clear()

    @property
    def active(self) -> ColMapData:
        return self._maps[self.active_index]

    def __len__(self) -> int:
        return len(self._maps)

    def __getitem__(self, index: int) -> ColMapData:
        return self._maps[index]

    def __iter__(self) -> Iterator[ColMapData]:
        return iter(self._maps)