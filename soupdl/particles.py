"""Short-lived decorative particles: bubbles, flames, stars and save puffs."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from .entities import EntId, Entity, EntityArrayFull
from .geometry import Rect

if TYPE_CHECKING:
    from .world import World


class ParticleKind(enum.IntEnum):
    BUBBLE = 0
    FLAME = 1
    STAR = 2
    SAVE = 3


_CLIPS = {
    ParticleKind.BUBBLE: Rect(0, 0, 10, 10),
    ParticleKind.FLAME: Rect(10, 0, 10, 10),
    ParticleKind.STAR: Rect(20, 0, 10, 10),
    ParticleKind.SAVE: Rect(0, 10, 30, 20),
}


@dataclass(eq=False)
class Particle(Entity):
    """A particle that drifts under its own gravity until its duration ends."""

    ent_id: ClassVar[EntId] = EntId.PARTICLE
    x: float = 0.0
    y: float = 0.0
    hsp: float = 0.0
    vsp: float = 0.0
    grv: float = 0.0
    dur: int = 0
    kind: ParticleKind = ParticleKind.BUBBLE

    @classmethod
    def create(cls, world: World, x: float, y: float, kind: ParticleKind) -> Particle:
        """Spawn a particle with speeds and lifetime chosen for its kind."""
        kind = ParticleKind(kind)
        dur = 360 + world.random()
        if kind in (ParticleKind.BUBBLE, ParticleKind.SAVE):
            grv = 0.04
            hsp = (world.random() - 128) / 255.0 * 2
            vsp = -world.random() / 255.0 * 2
        elif kind is ParticleKind.FLAME:
            grv = 0.0
            dur = (dur - 360) // 2
            hsp = (world.random() - 128) / 255.0 * 1.6
            vsp = (world.random() - 128) / 255.0 * 1.6
        else:
            grv = 0.01
            hsp = (world.random() - 128) / 255.0
            vsp = -world.random() / 255.0
        particle = cls(
            x=float(x), y=float(y), hsp=hsp, vsp=vsp, grv=grv, dur=dur, kind=kind
        )
        world.spawn(particle)
        return particle

    def source_rect(self) -> Rect:
        """The particle's rectangle on the particle sprite sheet."""
        clip = _CLIPS[self.kind]
        return Rect(clip.x, clip.y, clip.w, clip.h)

    def update(self, world: World) -> None:
        ts = world.timestep
        self.vsp += self.grv * ts
        self.x += self.hsp * ts
        self.y += self.vsp * ts
        self.dur = int(self.dur - ts)
        if self.dur <= 0:
            self.destroy(world)

    def destroy(self, world: World) -> None:
        world.remove_now(self)


def spawn_particles(
    world: World, x: float, y: float, kind: ParticleKind, count: int
) -> int:
    """Spawn up to ``count`` particles; return how many fit in the array."""
    spawned = 0
    for _ in range(count):
        try:
            Particle.create(world, x, y, kind)
        except EntityArrayFull:
            break
        spawned += 1
    return spawned