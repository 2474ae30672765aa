"""Background clouds that drift across the view and wrap around it."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from .entities import EntId, Entity

if TYPE_CHECKING:
    from .world import World

CLOUDS_PER_PIXEL = 0.00016
CLOUD_MAX_WIDTH = 110
CLOUD_MAX_HEIGHT = 50


class CloudKind(enum.IntEnum):
    BIG = 0
    SMALL = 1


def _random_hsp(world: World) -> float:
    return (world.random() / 255.0) * 2 + 1


def _random_kind(world: World) -> CloudKind:
    return CloudKind(world.random() // 130)


@dataclass(eq=False)
class Cloud(Entity):
    """A cloud moving horizontally at ``hsp``."""

    ent_id: ClassVar[EntId] = EntId.CLOUD
    x: float = 0.0
    y: float = 0.0
    hsp: float = 0.0
    kind: CloudKind = CloudKind.BIG

    @classmethod
    def create(cls, world: World, x, y, hsp) -> Cloud:
        cloud = cls(x=float(int(x)), y=float(int(y)), hsp=float(hsp))
        cloud.kind = _random_kind(world)
        world.spawn(cloud)
        return cloud

    def update(self, world: World) -> None:
        cam = world.camera
        min_x = -cam.xshift - CLOUD_MAX_WIDTH
        max_x = -cam.xshift + world.screen_width + CLOUD_MAX_WIDTH
        min_y = -cam.yshift - CLOUD_MAX_HEIGHT
        max_y = -cam.yshift + world.screen_height + CLOUD_MAX_HEIGHT
        self.x += self.hsp * world.timestep

        wrapped = False
        if self.x > max_x:
            self.x = float(min_x)
            wrapped = True
        elif self.x < min_x:
            self.x = float(max_x)
            wrapped = True
        elif self.y > max_y:
            self.y = float(min_y)
        elif self.y < min_y:
            self.y = float(max_y)

        if wrapped:
            h = world.screen_height
            self.y = h * (world.random() / 255.0) + cam.y - h // 2
            self.hsp = _random_hsp(world)
            self.kind = _random_kind(world)

    def destroy(self, world: World) -> None:
        world.remove_now(self)


def scatter_clouds(world: World) -> None:
    """Place every cloud at a random spot in view with a random speed."""
    cam = world.camera
    for cloud in world.registry[EntId.CLOUD]:
        cloud.x = -cam.xshift + world.random() / 255.0 * world.screen_width
        cloud.y = -cam.yshift + world.random() / 255.0 * world.screen_height
        cloud.hsp = _random_hsp(world)


def update_cloud_count(world: World) -> None:
    """Set the number of clouds from the screen area, then scatter them."""
    clouds = world.registry[EntId.CLOUD]
    wanted = CLOUDS_PER_PIXEL * (world.screen_width * world.screen_height)
    count = int(min(max(wanted, 0), clouds.len_max))
    while len(clouds) > count:
        clouds.delete(len(clouds) - 1)
    while len(clouds) < count:
        clouds.add(Cloud())
    scatter_clouds(world)