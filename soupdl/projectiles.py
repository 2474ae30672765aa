"""Fireballs shot by the player and evilballs shot by turrets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from .body import TileFlag
from .entities import EntId, Entity, EntityArrayFull
from .particles import Particle, ParticleKind, spawn_particles

if TYPE_CHECKING:
    from .world import World

_EVILBALL_LIFETIME = 300.0


def _flags_at(world: World, x: float, y: float) -> int:
    grid = world.grid
    return grid.tile_flags.get(grid.tile_at(x, y), 0)


@dataclass(eq=False)
class Fireball(Entity):
    """A player projectile that bursts on solid tiles."""

    ent_id: ClassVar[EntId] = EntId.FIREBALL
    x: float = 0.0
    y: float = 0.0
    hsp: float = 0.0
    vsp: float = 0.0
    frame: int = 0
    frame_tmr: int = 0

    @classmethod
    def create(cls, world: World, x, y, hsp, vsp) -> Fireball:
        fireball = cls(x=float(int(x)), y=float(int(y)), hsp=float(hsp), vsp=float(vsp))
        world.spawn(fireball)
        return fireball

    def update(self, world: World) -> None:
        self.x += self.hsp * world.timestep
        self.y += self.vsp * world.timestep
        if _flags_at(world, self.x, self.y) & TileFlag.SOLID:
            self.destroy(world)

    def advance_frame(self) -> int:
        """Step the two-frame animation and return the frame to draw."""
        self.frame_tmr = (self.frame_tmr - 1) & 0b11
        if self.frame_tmr == 0:
            self.frame_tmr = 3
            self.frame ^= 1
        return self.frame

    def destroy(self, world: World) -> None:
        try:
            Particle.create(world, self.x, self.y, ParticleKind.FLAME)
        except EntityArrayFull:
            pass
        self.mark_deleted()


@dataclass(eq=False)
class Evilball(Entity):
    """An enemy projectile that expires or stops on evil-stop tiles."""

    ent_id: ClassVar[EntId] = EntId.EVILBALL
    x: float = 0.0
    y: float = 0.0
    hsp: float = 0.0
    vsp: float = 0.0
    frame: int = 0
    frame_tmr: int = 0
    destroy_ticks: float = _EVILBALL_LIFETIME

    @classmethod
    def create(cls, world: World, x, y, hsp, vsp) -> Evilball:
        ball = cls(x=float(int(x)), y=float(int(y)), hsp=float(hsp), vsp=float(vsp))
        world.spawn(ball)
        return ball

    def update(self, world: World) -> None:
        self.x += self.hsp * world.timestep
        self.y += self.vsp * world.timestep
        self.destroy_ticks -= world.timestep
        if self.destroy_ticks <= 0.0:
            self.destroy(world)
        elif _flags_at(world, self.x, self.y) & TileFlag.EVILSTOP:
            self.destroy(world)

    def advance_frame(self) -> int:
        """Step the two-frame animation and return the frame to draw."""
        self.frame_tmr = (self.frame_tmr - 1) & 0b111
        if self.frame_tmr == 0:
            self.frame_tmr = 5
            self.frame ^= 1
        return self.frame

    def destroy(self, world: World) -> None:
        spawn_particles(world, self.x, self.y, ParticleKind.BUBBLE, 4)
        self.mark_deleted()