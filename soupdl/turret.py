"""Turrets: stationary enemies that aim at the player and fire evilballs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from .entities import EntId, Entity, EntityArrayFull
from .geometry import TILE_SIZE
from .projectiles import Evilball
from .sprites import SprTurret

if TYPE_CHECKING:
    from .world import World

FIRE_TICK_RESET = 48
FIRE_TICK_INC = 4
EVILBALL_SPD = 4.0
_FIRE_FACE_FRAMES = 14


@dataclass(eq=False)
class Turret(Entity):
    """A turret that turns toward the player and fires periodically.

    Successive turrets start with staggered fire timers so that groups of
    them do not all fire at once.
    """

    ent_id: ClassVar[EntId] = EntId.TURRET
    _fire_offset: ClassVar[int] = 0

    x: int = 0
    y: int = 0
    spr: int = SprTurret.NORM1
    fire_tick: float = float(FIRE_TICK_RESET)
    fire_spr_frames: int = 0
    dir: float = 0.0

    @classmethod
    def create(cls, world: World, x, y) -> Turret:
        offset = Turret._fire_offset + FIRE_TICK_INC
        if offset >= FIRE_TICK_RESET:
            offset = 0
        Turret._fire_offset = offset
        turret = cls(x=int(x), y=int(y), fire_tick=float(FIRE_TICK_RESET + offset))
        world.spawn(turret)
        return turret

    def _aim(self, world: World) -> None:
        player = world.player
        if player is None:
            return
        pcx = int(player.b.x + 16)
        pcy = int(player.b.y + 16)
        cx = self.x + 16
        cy = self.y + 16
        dy = pcy - cy
        dx = pcx - cx
        if dx == 0:
            self.dir = math.copysign(math.pi / 2, dy) if dy else 0.0
        else:
            self.dir = math.atan(dy / dx)
        if pcx < cx:
            self.dir += math.pi

    def update(self, world: World) -> None:
        self.spr += 1
        if self.spr > SprTurret.NORM4:
            self.spr = SprTurret.NORM1
        if self.fire_spr_frames > 0:
            self.fire_spr_frames -= 1

        self._aim(world)

        self.fire_tick -= world.timestep
        if self.fire_tick <= 0.0:
            if world.camera.can_see_point(
                self.x, self.y, TILE_SIZE * 14, world.screen_width, world.screen_height
            ):
                world.play("shoot")
            self.fire_tick = float(FIRE_TICK_RESET)
            self.fire_spr_frames = _FIRE_FACE_FRAMES
            cos_d = math.cos(self.dir)
            sin_d = math.sin(self.dir)
            try:
                Evilball.create(
                    world,
                    self.x + TILE_SIZE // 2 + cos_d * 6,
                    self.y + TILE_SIZE // 2 + sin_d * 3,
                    cos_d * EVILBALL_SPD,
                    sin_d * EVILBALL_SPD,
                )
            except EntityArrayFull:
                pass

    def face_sprite(self) -> SprTurret:
        """The face sprite to draw: the firing face while recently fired."""
        return SprTurret(self.spr + (4 if self.fire_spr_frames > 0 else 0))

    def destroy(self, world: World) -> None:
        self.mark_deleted()