import random
from dataclasses import dataclass
from typing import ClassVar

import pytest

from soupdl.entities import EntId, Entity, EntityArrayFull, EntStatus
from soupdl.world import World


@dataclass(eq=False)
class Dummy(Entity):
    ent_id: ClassVar[EntId] = EntId.DOOR
    updates: int = 0
    kill: bool = False
    vanish: bool = False

    def update(self, world):
        self.updates += 1
        if self.kill:
            self.destroy(world)
        if self.vanish:
            world.remove_now(self)


def test_random_is_in_byte_range():
    world = World(rng=random.Random(1))
    values = [world.random() for _ in range(500)]
    assert min(values) >= 0
    assert max(values) <= 255


def test_random_is_reproducible_with_seed():
    a = World(rng=random.Random(42))
    b = World(rng=random.Random(42))
    assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]


def test_play_records_and_calls_back():
    heard = []
    world = World(on_sound=heard.append)
    world.play("shoot")
    world.play("splode")
    assert world.played == ["shoot", "splode"]
    assert heard == ["shoot", "splode"]


def test_spawn_adds_to_array():
    world = World()
    first = world.spawn(Dummy())
    second = world.spawn(Dummy())
    assert len(world.registry[EntId.DOOR]) == 2
    assert (first.index, second.index) == (0, 1)


def test_spawn_raises_when_full():
    world = World()
    for _ in range(4):
        world.spawn(Dummy())
    with pytest.raises(EntityArrayFull):
        world.spawn(Dummy())


def test_update_entities_updates_and_cleans():
    world = World()
    keep = world.spawn(Dummy())
    doomed = world.spawn(Dummy(kill=True))
    world.update_entities(EntId.DOOR)
    assert keep.updates == 1
    assert doomed.updates == 1
    assert doomed.status is EntStatus.DEL
    assert list(world.registry[EntId.DOOR]) == [keep]


def test_remove_now_drops_entity_immediately():
    world = World()
    a = world.spawn(Dummy())
    b = world.spawn(Dummy())
    world.remove_now(a)
    arr = world.registry[EntId.DOOR]
    assert list(arr) == [b]
    assert b.index == 0
    assert a.array is None


def test_entity_removed_during_update_is_gone():
    world = World()
    world.spawn(Dummy(vanish=True))
    stay = world.spawn(Dummy())
    world.update_entities(EntId.DOOR)
    assert list(world.registry[EntId.DOOR]) == [stay]
    assert stay.updates == 1