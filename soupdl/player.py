"""The player egg: movement, shooting, pickups, damage, doors and savebirds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .body import Body, TileFlag, sign
from .entities import EntId, EntityArrayFull, find_overlapping
from .geometry import TILE_AIR, TILE_SIZE, Rect, check_rect
from .log import perr
from .particles import ParticleKind, spawn_particles
from .projectiles import Fireball
from .props import ItemKind
from .ragdoll import Ragdoll
from .sprites import SPR_EGG_H, SPR_EGG_W, SprEgg, TexEgg

if TYPE_CHECKING:
    from .world import World

# Pixels a fireball travels per frame
P_FIREBALL_SPD = 8

# Knockback given to the player by a fireball shot sideways or vertically
P_FIREBALL_HKB = 4
P_FIREBALL_VKB = 8

# Frames to wait between shots
P_SHOOT_COOLDOWN_RESET = 10

# Frames after leaving the ground during which a jump is still allowed
P_JUMP_GRACE = 6

# Invincibility frames given after taking damage
P_IFRAMES = 60.0

# Coins needed for a health upgrade
P_COINS_FOR_UPGRADE = 100

# Entity tile id that means "nothing spawns here" in a collector map
_ENT_TILE_NONE = 17


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


@dataclass
class Keys:
    """Which player controls are held this frame."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    jump: bool = False
    shoot: bool = False


@dataclass
class Player:
    """The player-controlled egg.

    ``flip`` is True when the player faces left. ``editing`` is True while
    the map is open in the editor: pickups are then not recorded in the
    collector and doors cannot be used. When the player walks into a door,
    ``entered_door`` holds its id for that frame and the caller loads the
    map the door leads to.
    """

    b: Body = field(
        default_factory=lambda: Body(x=0.0, y=0.0, w=18, h=22, grv=0.15)
    )
    acc: float = 0.4
    dec: float = 0.4
    maxhsp: float = 5.0
    jsp: float = -5.6
    maxvsp: float = 6.0
    jtmr: float = 0.0
    maxhp: int = 4
    hp: int = 4
    on_ground: bool = False
    has_trumpet: bool = False
    trumpet_shots: int = 0
    trumpet_shots_reset: int = 0
    shoot_cooldown: float = 0.0
    iframes: float = 0.0
    flip: bool = True
    sprite: SprEgg = SprEgg.IDLE
    anim_step_frame: int = 0
    anim_step_tmr: int = 0
    anim_shoot_tmr: int = 0
    anim_fireblink_tmr: int = 0
    trumpet_offset: tuple[int, int] = (0, 14)
    door_stop: bool = False
    crect: Rect = field(default_factory=Rect)
    coins: int = 0
    editing: bool = False
    door_last_used: int = -1
    entered_door: int | None = None

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def _anim_run(self) -> None:
        self.anim_step_frame = 0 if self.anim_step_frame else 1
        if self.anim_step_frame == 0:
            self.sprite = SprEgg.RUN1
            self.trumpet_offset = (self.trumpet_offset[0], 16)
        else:
            self.sprite = SprEgg.RUN2
            self.trumpet_offset = (self.trumpet_offset[0], 14)

    def _move(self, world: World, keys: Keys) -> int:
        ts = world.timestep
        b = self.b
        msign = 0
        if keys.left:
            if not keys.right:
                self.flip = True
                msign = -1
                self.trumpet_offset = (-10, self.trumpet_offset[1])
        elif keys.right:
            self.flip = False
            self.trumpet_offset = (24, self.trumpet_offset[1])
            msign = 1

        if msign == 0 and b.hsp != 0 and self.on_ground:
            csign = sign(b.hsp)
            b.hsp -= csign * self.dec * ts
            if csign != sign(b.hsp):
                b.hsp = 0.0
        else:
            b.hsp += msign * self.acc * ts

        b.hsp = _clamp(b.hsp, -self.maxhsp, self.maxhsp)
        b.vsp = _clamp(b.vsp + b.grv * ts, self.jsp, self.maxvsp)

        if b.move_vertical(world.grid, ts):
            b.vsp = 0.0
        if b.move_horizontal(world.grid, ts):
            b.hsp = 0.0

        self.on_ground = b.tile_collide(world.grid, 0, 1)
        if self.on_ground:
            self.jtmr = P_JUMP_GRACE
            if self.trumpet_shots != self.trumpet_shots_reset:
                self.trumpet_shots = self.trumpet_shots_reset
                if not keys.shoot:
                    self.anim_fireblink_tmr = 12
        elif self.jtmr > 0:
            self.jtmr -= ts

        if keys.jump:
            if self.jtmr > 0:
                self.jtmr = 0.0
                b.vsp = self.jsp
                world.play("step")
        elif b.vsp < 0:
            b.vsp = 0.0

        self.crect = b.rect()
        return msign

    def _animate(self, world: World, keys: Keys, msign: int) -> None:
        if self.anim_fireblink_tmr > 0:
            self.anim_fireblink_tmr -= 1

        if self.anim_shoot_tmr > 0:
            self.sprite = SprEgg.SHOOT
            self.anim_shoot_tmr -= 1
            return

        if not self.on_ground:
            if keys.left and keys.right:
                self.anim_step_tmr -= 1
                if self.anim_step_tmr <= 0:
                    self.anim_step_tmr = 2
                    self.sprite = (
                        SprEgg.DRIFT2 if self.sprite == SprEgg.DRIFT1 else SprEgg.DRIFT1
                    )
                if self.b.hsp < 0:
                    self.flip = False
                    self.trumpet_offset = (23, 11)
                else:
                    self.flip = True
                    self.trumpet_offset = (-12, 11)
            else:
                self.anim_step_tmr -= 1
                if self.anim_step_tmr <= 0:
                    self.anim_step_tmr = 2
                    self._anim_run()
        elif msign == 0:
            self.sprite = SprEgg.IDLE
            self.anim_step_tmr = 0
        else:
            self.anim_step_tmr -= abs(int(self.b.hsp))
            if self.anim_step_tmr <= 0:
                self.anim_step_tmr = int(self.maxhsp)
                self._anim_run()
                world.play("step")

    def _forget_in_collector(self, world: World, x: int, y: int) -> None:
        if self.editing or len(world.collector) == 0:
            return
        data = world.collector.active
        row = y // TILE_SIZE
        col = x // TILE_SIZE
        if 0 <= row < len(data.map) and 0 <= col < len(data.map[row]):
            data.map[row][col] = _ENT_TILE_NONE

    def _pick_up(self, world: World) -> None:
        item = find_overlapping(world.registry[EntId.ITEM], self.crect)
        if item is None:
            return
        if item.kind is ItemKind.TRUMPET:
            self.has_trumpet = True
            self.trumpet_shots_reset += 1
            self.trumpet_shots += 1
            self.anim_fireblink_tmr = 6
            self._forget_in_collector(world, item.x, item.y - TILE_SIZE)
            world.play("bubble")
        elif item.kind is ItemKind.COIN:
            self.coins += 1
            if self.coins == P_COINS_FOR_UPGRADE:
                self.maxhp += 2
                self.hp += 2
                self.coins = 0
            self._forget_in_collector(world, item.x, item.y)
            world.play("coin")
        elif item.kind is ItemKind.HEART:
            self.hp = min(self.hp + 1, self.maxhp)
        else:
            perr("player picked up unknown item")
        spawn_particles(world, self.b.x, self.b.y, ParticleKind.STAR, 10)
        item.destroy(world)

    def _shoot(self, world: World, keys: Keys) -> None:
        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= world.timestep
        if not (
            keys.shoot
            and self.has_trumpet
            and self.shoot_cooldown <= 0
            and self.trumpet_shots > 0
        ):
            return

        self.shoot_cooldown = float(P_SHOOT_COOLDOWN_RESET)
        self.trumpet_shots -= 1

        if keys.up:
            fireball_hsp, fireball_vsp = 0, -P_FIREBALL_SPD
        elif keys.down:
            fireball_hsp, fireball_vsp = 0, P_FIREBALL_SPD
        else:
            fireball_hsp = (-1 if self.flip else 1) * P_FIREBALL_SPD
            fireball_vsp = 0

        self.b.hsp += -sign(fireball_hsp) * P_FIREBALL_HKB
        self.b.vsp += -sign(fireball_vsp) * P_FIREBALL_VKB

        try:
            Fireball.create(
                world,
                self.b.x + self.b.w // 2,
                self.b.y + self.b.h // 2,
                fireball_hsp,
                fireball_vsp,
            )
        except EntityArrayFull:
            pass

        self.sprite = SprEgg.SHOOT
        self.anim_shoot_tmr = 5
        self.anim_fireblink_tmr = 6
        world.play("shoot")

        # A downward shot must not boost the player unless jump is held
        if fireball_vsp > 0 and not keys.jump:
            self.b.vsp = -1.0

    def _enter_doors(self, world: World) -> None:
        in_door = False
        for door in world.registry[EntId.DOOR]:
            if not check_rect(self.crect, door.b.rect()):
                continue
            in_door = True
            if self.door_stop:
                break
            if self.editing:
                perr("failed to open door: map is being edited")
                break
            self.door_last_used = door.door_id
            self.entered_door = door.door_id
            self.door_stop = True
            break
        if not in_door:
            self.door_stop = False

    def update(self, world: World, keys: Keys) -> None:
        """Advance the player by one frame using the held ``keys``."""
        self.entered_door = None
        if not self.alive:
            return

        msign = self._move(world, keys)
        self._animate(world, keys, msign)

        if self.iframes > 0:
            self.iframes -= world.timestep

        if world.grid.rect_hit_flags(self.crect, TileFlag.SPIKE) != TILE_AIR:
            self.damage(world, 1)

        if find_overlapping(world.registry[EntId.EVILBALL], self.crect) is not None:
            self.damage(world, 1)

        self._pick_up(world)
        self._shoot(world, keys)
        self._enter_doors(world)

        world.camera.x = int(self.b.x + 10)
        world.camera.y = int(self.b.y + 10)

    def damage(self, world: World, power: int) -> bool:
        """Take ``power`` damage unless invincible; return True if damage was done."""
        if self.iframes > 0:
            return False
        self.hp -= power
        self.iframes = P_IFRAMES
        spawn_particles(world, self.b.x + 16, self.b.y + 16, ParticleKind.BUBBLE, 3)
        world.play("splode")
        if self.hp <= 0:
            self.hp = 0
            try:
                Ragdoll.create(
                    world, self.b.x, self.b.y - 2, -self.b.hsp, -5, TexEgg.EGG
                )
            except EntityArrayFull:
                pass
            spawn_particles(
                world, self.b.x + 16, self.b.y + 16, ParticleKind.BUBBLE, 30
            )
        return True

    def interact(self, world: World) -> bool:
        """Talk to any savebird the player touches.

        Touching one restores full health and shows the save effect; the
        caller writes the save. Returns True if a savebird was touched.
        """
        if not self.alive:
            return False
        touched = False
        for bird in world.registry[EntId.SAVEBIRD]:
            area = Rect(bird.x, bird.y, SPR_EGG_W, SPR_EGG_H)
            if check_rect(self.crect, area):
                touched = True
                self.hp = self.maxhp
                try:
                    from .particles import Particle

                    Particle.create(world, self.b.x, self.b.y, ParticleKind.SAVE)
                except EntityArrayFull:
                    pass
                world.play("bubble")
        return touched

    def restart(self) -> None:
        """Restore the player for a restart of the current map."""
        self.maxhp = 16
        self.hp = 16
        self.trumpet_shots_reset = 8
        self.trumpet_shots = 8
        self.has_trumpet = True
        self.door_last_used = -1