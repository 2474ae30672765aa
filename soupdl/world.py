"""The game world: entities, tile map, camera, timing, randomness and sound."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass, field
from typing import Any, Callable

from .barrier import BarrierRequests
from .camera import Camera
from .collector import Collector
from .entities import EntId, Entity, EntityArray, Registry
from .geometry import TileGrid


@dataclass
class World:
    """Everything an entity needs to update itself.

    ``timestep`` scales all movement; 1.0 is one frame at the nominal rate.
    Sounds are recorded in ``played`` and passed to ``on_sound`` if set.
    """

    grid: TileGrid = field(default_factory=lambda: TileGrid([]))
    registry: Registry = field(default_factory=Registry)
    camera: Camera = field(default_factory=Camera)
    barriers: BarrierRequests = field(default_factory=BarrierRequests)
    collector: Collector = field(default_factory=Collector)
    player: Any = None
    timestep: float = 1.0
    screen_width: int = 640
    screen_height: int = 480
    rng: _random.Random = field(default_factory=_random.Random)
    on_sound: Callable[[str], None] | None = None
    played: list[str] = field(default_factory=list)

    def random(self) -> int:
        """Return a random integer in the range [0, 255]."""
        return self.rng.randrange(256)

    def play(self, sound: str) -> None:
        """Play the named sound effect."""
        self.played.append(sound)
        if self.on_sound is not None:
            self.on_sound(sound)

    def spawn(self, entity: Entity) -> Entity:
        """Add ``entity`` to its array; raise ``EntityArrayFull`` if full."""
        return self.registry[entity.ent_id].add(entity)

    def remove_now(self, entity: Entity) -> None:
        """Remove ``entity`` from its array at once, without marking it."""
        array = entity.array
        if (
            array is not None
            and 0 <= entity.index < len(array)
            and array[entity.index] is entity
        ):
            array.delete(entity.index)
        entity.array = None

    def update_entities(self, ent_id: EntId) -> None:
        """Update every entity of one type, then drop those marked deleted."""
        array: EntityArray = self.registry[ent_id]
        for entity in array:
            if entity.array is array:
                entity.update(self)
        if array.needs_clean:
            array.clean()