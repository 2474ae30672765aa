"""Sprite sheet layouts and sprite state for eggs and turrets."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .geometry import TILE_SIZE, Rect

SPR_EGG_W = 32
SPR_EGG_H = 32
SPR_TURRET_W = 11
SPR_TURRET_H = 16


class SprEgg(enum.IntEnum):
    IDLE = 0
    RUN1 = 1
    RUN2 = 2
    SHOOT = 3
    FALL = 4
    BOUNCE = 5
    DRIFT1 = 6
    DRIFT2 = 7
    SKELE = 8
    WEIRD = 9


class SprTurret(enum.IntEnum):
    NORM1 = 0
    NORM2 = 1
    NORM3 = 2
    NORM4 = 3
    FIRE1 = 4
    FIRE2 = 5
    FIRE3 = 6
    FIRE4 = 7
    BASE = 8
    BASEX = 9


class TexEgg(enum.IntEnum):
    """Which egg texture to draw with."""

    EGG = 0
    EVIL = 1
    COOL = 2


def _egg(col: int, row: int) -> Rect:
    return Rect(SPR_EGG_W * col, SPR_EGG_H * row, SPR_EGG_W, SPR_EGG_H)


def _turret(col: int, row: int) -> Rect:
    return Rect(SPR_TURRET_W * col, SPR_TURRET_H * row, SPR_TURRET_W, SPR_TURRET_H)


_EGG_RECTS = {
    SprEgg.IDLE: _egg(0, 1),
    SprEgg.RUN1: _egg(0, 0),
    SprEgg.RUN2: _egg(1, 0),
    SprEgg.SHOOT: _egg(1, 1),
    SprEgg.FALL: _egg(2, 0),
    SprEgg.BOUNCE: _egg(2, 1),
    SprEgg.DRIFT1: _egg(3, 0),
    SprEgg.DRIFT2: _egg(3, 1),
    SprEgg.SKELE: _egg(4, 0),
    SprEgg.WEIRD: _egg(4, 1),
}

_TURRET_RECTS = {
    SprTurret.NORM1: _turret(0, 0),
    SprTurret.NORM2: _turret(1, 0),
    SprTurret.NORM3: _turret(2, 0),
    SprTurret.NORM4: _turret(3, 0),
    SprTurret.FIRE1: _turret(0, 1),
    SprTurret.FIRE2: _turret(1, 1),
    SprTurret.FIRE3: _turret(2, 1),
    SprTurret.FIRE4: _turret(3, 1),
    SprTurret.BASE: Rect(SPR_TURRET_W * 4, 0, TILE_SIZE, TILE_SIZE),
    SprTurret.BASEX: Rect(SPR_TURRET_W * 4 + TILE_SIZE, 0, TILE_SIZE, TILE_SIZE),
}


def egg_sprite_rect(sprite: SprEgg) -> Rect:
    """Return a copy of the sheet rectangle for an egg sprite."""
    r = _EGG_RECTS[SprEgg(sprite)]
    return Rect(r.x, r.y, r.w, r.h)


def turret_sprite_rect(sprite: SprTurret) -> Rect:
    """Return a copy of the sheet rectangle for a turret sprite."""
    r = _TURRET_RECTS[SprTurret(sprite)]
    return Rect(r.x, r.y, r.w, r.h)


@dataclass
class EggSprite:
    """Drawing state of an egg: frame, texture, facing and animation timer."""

    spr: SprEgg = SprEgg.IDLE
    tex: TexEgg = TexEgg.EGG
    flip: bool = False
    anim_tick: int = 0