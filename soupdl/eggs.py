"""Egg-shaped creatures: the shared egg behaviour and the egg enemies and NPCs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from .body import Body, TileFlag, sign
from .entities import EntId, Entity, EntityArrayFull, find_overlapping
from .geometry import TILE_AIR, check_rect
from .log import pinf
from .particles import ParticleKind, spawn_particles
from .ragdoll import Ragdoll
from .sprites import EggSprite, SprEgg, TexEgg

if TYPE_CHECKING:
    from .world import World

_ANIM_TICK_RESET = 7
_SOUND_SPLODE = "splode"

# Slideguy speed caps per unit of timestep
_SLIDEGUY_MAX_HSP = 18
_SLIDEGUY_MAX_VSP = 13


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


@dataclass(eq=False)
class Egg(Entity):
    """An entity with an egg body, egg sprite and hit points."""

    b: Body = field(default_factory=Body)
    spr: EggSprite = field(default_factory=EggSprite)
    hp: int = 0

    def update_animation(self) -> None:
        """Advance the running animation by the current horizontal speed."""
        self.spr.anim_tick -= abs(int(self.b.hsp))
        if self.spr.anim_tick <= 0:
            self.spr.anim_tick = _ANIM_TICK_RESET
            self.spr.spr = SprEgg.RUN2 if self.spr.spr == SprEgg.RUN1 else SprEgg.RUN1

    def die(self, world: World) -> None:
        """Burst into bubbles and leave a ragdoll; call before removing the egg."""
        world.play(_SOUND_SPLODE)
        spawn_particles(world, self.b.x, self.b.y, ParticleKind.BUBBLE, 6)
        try:
            Ragdoll.create(
                world, self.b.x, self.b.y, -self.b.hsp, self.b.vsp - 2, self.spr.tex
            )
        except EntityArrayFull:
            pass

    def damage(self, world: World) -> bool:
        """Take one point of damage; return True if the egg dies of it."""
        self.spr.spr = SprEgg.FALL
        self.spr.anim_tick = abs(int(self.b.hsp) * 4)
        self.hp -= 1
        if self.hp <= 0:
            return True
        world.play(_SOUND_SPLODE)
        spawn_particles(world, self.b.x, self.b.y, ParticleKind.BUBBLE, 3)
        return False

    def _hit_by_fireball(self, world: World) -> bool:
        fireball = find_overlapping(
            world.registry[EntId.FIREBALL], self.b.rect(), skip_deleted=True
        )
        if fireball is None:
            return False
        fireball.destroy(world)
        return True

    def handle_collisions(self, world: World) -> bool:
        """Take damage from spikes and fireballs; return True if the egg dies."""
        if world.grid.rect_hit_flags(self.b.rect(), TileFlag.SPIKE) != TILE_AIR:
            return self.damage(world)
        if self._hit_by_fireball(world):
            return self.damage(world)
        return False

    def handle_evil_collisions(self, world: World) -> bool:
        """Take damage from fireballs and hurt the player on contact.

        Returns True if the egg dies.
        """
        if self._hit_by_fireball(world):
            return self.damage(world)
        player = world.player
        if player is not None and check_rect(self.b.rect(), player.crect):
            player.damage(world, 1)
        return False


def _land(body: Body, grid, timestep: float, jsp: float) -> None:
    """Move vertically; jump with ``jsp`` on landing, stop on a ceiling."""
    if body.move_vertical(grid, timestep):
        body.vsp = jsp if body.vsp >= 0 else 0.0


@dataclass(eq=False)
class Groundguy(Egg):
    """An evil egg walking back and forth, jumping with ``jsp`` on landing."""

    ent_id: ClassVar[EntId] = EntId.GROUNDGUY
    jsp: float = 0.0
    stay_on_ledge: bool = False
    btag: int = 0

    @classmethod
    def create(cls, world: World, x, y, hsp, jsp, stay_on_ledge, btag) -> Groundguy:
        body = Body(x=float(int(x)), y=float(int(y)), w=31, h=31, hsp=float(hsp), grv=0.1)
        egg = cls(
            b=body,
            spr=EggSprite(SprEgg.IDLE, TexEgg.EVIL, False, 0),
            hp=4,
            jsp=float(jsp),
            stay_on_ledge=bool(stay_on_ledge),
            btag=int(btag),
        )
        world.spawn(egg)
        pinf(f"groundguy with btag {egg.btag} created")
        return egg

    def _turn_around(self) -> None:
        self.b.hsp *= -1
        self.spr.flip = sign(self.b.hsp) != 1

    def update(self, world: World) -> None:
        b = self.b
        ts = world.timestep
        if b.move_horizontal(world.grid, ts):
            self._turn_around()
        elif self.stay_on_ledge and not b.tile_collide(world.grid, b.hsp * ts, 1):
            self._turn_around()
        b.vsp += b.grv * ts
        _land(b, world.grid, ts, self.jsp)
        self.update_animation()
        if self.handle_evil_collisions(world):
            self.destroy(world)

    def destroy(self, world: World) -> None:
        world.barriers.send(self.btag)
        self.die(world)
        self.mark_deleted()


@dataclass(eq=False)
class Slideguy(Egg):
    """An evil egg sliding toward the player, jumping with ``jsp`` on landing."""

    ent_id: ClassVar[EntId] = EntId.SLIDEGUY
    acc: float = 0.0
    jsp: float = 0.0
    btag: int = 0

    @classmethod
    def create(cls, world: World, x, y, hp, acc, jsp, btag) -> Slideguy:
        body = Body(x=float(int(x)), y=float(int(y)), w=31, h=31, grv=0.2)
        egg = cls(
            b=body,
            spr=EggSprite(SprEgg.IDLE, TexEgg.EVIL, False, 0),
            hp=int(hp),
            acc=float(acc),
            jsp=float(jsp),
            btag=int(btag),
        )
        world.spawn(egg)
        return egg

    def update(self, world: World) -> None:
        b = self.b
        ts = world.timestep
        target_x = world.player.b.x if world.player is not None else b.x
        if target_x > b.x:
            b.hsp += self.acc * ts
            self.spr.flip = False
        else:
            b.hsp -= self.acc * ts
            self.spr.flip = True

        max_hsp = _SLIDEGUY_MAX_HSP * ts
        max_vsp = _SLIDEGUY_MAX_VSP * ts
        b.hsp = _clamp(b.hsp, -max_hsp, max_hsp)
        if b.move_horizontal(world.grid, ts):
            b.hsp *= -1
        b.vsp = _clamp(b.vsp + b.grv * ts, -max_vsp, max_vsp)
        _land(b, world.grid, ts, self.jsp)
        self.update_animation()
        if self.handle_evil_collisions(world):
            self.destroy(world)

    def destroy(self, world: World) -> None:
        world.barriers.send(self.btag)
        self.die(world)
        self.mark_deleted()


@dataclass(eq=False)
class Coolegg(Egg):
    """A friendly egg that hops around at random.

    All cooleggs share one hop timer, so they change direction together.
    """

    ent_id: ClassVar[EntId] = EntId.COOLEGG
    _tick: ClassVar[int] = 0

    @classmethod
    def create(cls, world: World, x, y) -> Coolegg:
        body = Body(x=float(int(x)), y=float(int(y)), w=31, h=31, hsp=4.0, grv=0.075)
        egg = cls(b=body, spr=EggSprite(SprEgg.IDLE, TexEgg.COOL, False, 0), hp=8)
        world.spawn(egg)
        return egg

    def update(self, world: World) -> None:
        b = self.b
        ts = world.timestep
        Coolegg._tick -= 1
        if Coolegg._tick <= 0:
            b.hsp = ((world.random() - 128) / 128.0) * 10
            b.vsp = -(world.random() / 255.0) * 6
            Coolegg._tick = int(35 + (world.random() / 255.0) * 70)
        b.hsp *= 0.97
        if abs(b.hsp) < 0.5:
            self.spr.spr = SprEgg.IDLE
        self.spr.flip = not b.hsp > 0

        if b.move_horizontal(world.grid, ts):
            b.hsp = 0.0
        b.vsp += b.grv * ts
        if b.move_vertical(world.grid, ts):
            b.vsp = 0.0
        self.update_animation()
        if self.handle_collisions(world):
            self.destroy(world)

    def destroy(self, world: World) -> None:
        self.die(world)
        self.mark_deleted()