"""Ragdolls: the bouncing remains of a defeated egg."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from .body import Body
from .entities import EntId, Entity, find_overlapping
from .sprites import TexEgg

if TYPE_CHECKING:
    from .world import World


@dataclass(eq=False)
class Ragdoll(Entity):
    """A body that bounces off tiles and is knocked around by fireballs."""

    ent_id: ClassVar[EntId] = EntId.RAGDOLL
    b: Body = field(default_factory=Body)
    tex: TexEgg = TexEgg.EGG
    active: bool = False
    bounce_frames: int = 0

    @classmethod
    def create(cls, world: World, x, y, hsp, vsp, tex) -> Ragdoll:
        body = Body(
            x=float(x), y=float(y), w=30, h=30, hsp=float(hsp), vsp=float(vsp), grv=0.2
        )
        ragdoll = cls(b=body, tex=TexEgg(tex))
        world.spawn(ragdoll)
        return ragdoll

    def update(self, world: World) -> None:
        b = self.b
        ts = world.timestep
        if b.tile_collide(world.grid, b.hsp * ts, 0):
            b.hsp *= -0.9
        else:
            b.x += b.hsp * ts
        b.vsp += b.grv * ts
        if b.tile_collide(world.grid, 0, b.vsp * ts):
            self.bounce_frames = 16
            b.vsp *= -0.9
            b.hsp *= 0.98
        else:
            b.y += b.vsp * ts

        fireball = find_overlapping(
            world.registry[EntId.FIREBALL], b.rect(), skip_deleted=True
        )
        if fireball is not None:
            fireball.destroy(world)
            b.hsp += fireball.hsp * 2
            b.vsp += fireball.vsp * 2
            b.vsp -= world.random() / 128.0

    def destroy(self, world: World) -> None:
        world.remove_now(self)