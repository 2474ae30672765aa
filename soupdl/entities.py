"""Entity identifiers, fixed-capacity entity arrays and the entity registry."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Iterable, Iterator

from .geometry import Rect, check_rect

if TYPE_CHECKING:
    from typing import Any


class EntId(enum.IntEnum):
    """Identifier of every entity type in the game."""

    PLAYER = 0
    ITEM = 1
    FIREBALL = 2
    PARTICLE = 3
    RAGDOLL = 4
    GROUNDGUY = 5
    CLOUD = 6
    SLIDEGUY = 7
    EVILBALL = 8
    TURRET = 9
    DOOR = 10
    SAVEBIRD = 11
    BARRIER = 12
    COOLEGG = 13


class EntStatus(enum.Enum):
    NORM = enum.auto()
    DEL = enum.auto()


class EntityArrayFull(Exception):
    """Raised when an entity array has no room for another entity."""


@dataclass(eq=False)
class Entity:
    """Base of every entity kept in an ``EntityArray``.

    Subclasses set ``ent_id`` to the array they belong in.
    """

    ent_id: ClassVar[EntId]
    status: EntStatus = field(default=EntStatus.NORM, kw_only=True)
    index: int = field(default=-1, kw_only=True)
    array: EntityArray | None = field(
        default=None, kw_only=True, repr=False, compare=False
    )

    def mark_deleted(self) -> None:
        """Mark the entity for removal at the next clean of its array."""
        self.status = EntStatus.DEL
        if self.array is not None:
            self.array.needs_clean = True

    def update(self, world: Any) -> bool:
        """Advance the entity by one frame; a plain entity stays still.

        Returns True while the entity is not marked for deletion.
        """
        return self.status is EntStatus.NORM

    def destroy(self, world: Any) -> None:
        """Destroy the entity. By default it is only marked for deletion."""
        self.mark_deleted()


class EntityArray:
    """An ordered, fixed-capacity collection of entities of one type.

    Deleting an entity moves the last one into its place, so order is not
    kept across deletions.
    """

    def __init__(self, len_max: int) -> None:
        self.len_max = len_max
        self.needs_clean = False
        self._entities: list[Entity] = []

    def add(self, entity: Entity) -> Entity:
        """Append ``entity`` and return it; raise ``EntityArrayFull`` if full."""
        if len(self._entities) >= self.len_max:
            raise EntityArrayFull(
                f"entity array is full ({self.len_max} entities)"
            )
        entity.status = EntStatus.NORM
        entity.index = len(self._entities)
        entity.array = self
        self._entities.append(entity)
        return entity

    def delete(self, index: int) -> None:
        """Remove the entity at ``index``, moving the last entity into its slot."""
        last = self._entities.pop()
        if index < len(self._entities):
            self._entities[index] = last
            last.index = index

    def clean(self) -> None:
        """Remove every entity marked for deletion."""
        i = 0
        while i < len(self._entities):
            if self._entities[i].status is EntStatus.DEL:
                self.delete(i)
            else:
                i += 1
        self.needs_clean = False

    def reset(self) -> None:
        """Remove all entities."""
        self._entities.clear()
        self.needs_clean = False

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities))

    def __getitem__(self, index: int) -> Entity:
        return self._entities[index]


_CAPACITIES = {
    EntId.ITEM: 5000,
    EntId.FIREBALL: 100,
    EntId.PARTICLE: 5000,
    EntId.RAGDOLL: 200,
    EntId.GROUNDGUY: 200,
    EntId.CLOUD: 160,
    EntId.SLIDEGUY: 100,
    EntId.EVILBALL: 200,
    EntId.TURRET: 60,
    EntId.DOOR: 4,
    EntId.SAVEBIRD: 20,
    EntId.BARRIER: 100,
    EntId.COOLEGG: 100,
}

# Entity types that do not survive a map change
_TEMPORARY = (
    EntId.ITEM,
    EntId.FIREBALL,
    EntId.PARTICLE,
    EntId.RAGDOLL,
    EntId.GROUNDGUY,
    EntId.SLIDEGUY,
    EntId.EVILBALL,
    EntId.TURRET,
    EntId.DOOR,
    EntId.SAVEBIRD,
    EntId.BARRIER,
    EntId.COOLEGG,
)


class Registry:
    """One entity array per entity type; the player has none."""

    def __init__(self) -> None:
        self._arrays = {
            ent_id: EntityArray(len_max) for ent_id, len_max in _CAPACITIES.items()
        }

    def __getitem__(self, ent_id: EntId) -> EntityArray:
        return self._arrays[EntId(ent_id)]

    def destroy_temp(self) -> None:
        """Remove every entity that does not persist between maps."""
        for ent_id in _TEMPORARY:
            self._arrays[ent_id].reset()


def find_overlapping(
    entities: Iterable[Any], rect: Rect, skip_deleted: bool = False
) -> Any | None:
    """Return the first entity whose 16x16 box centred on (x, y) overlaps ``rect``.

    With ``skip_deleted``, entities marked for deletion are passed over.
    """
    for entity in entities:
        box = Rect(int(entity.x - 8), int(entity.y - 8), 16, 16)
        if not check_rect(box, rect):
            continue
        if skip_deleted and entity.status is EntStatus.DEL:
            continue
        return entity
    return None