from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from soupdl.barrier import BarrierRequests
from soupdl.entities import Entity, EntId, Registry


@dataclass(eq=False)
class Guard(Entity):
    ent_id: ClassVar[EntId] = EntId.GROUNDGUY
    btag: int = 0


@dataclass(eq=False)
class Slider(Entity):
    ent_id: ClassVar[EntId] = EntId.SLIDEGUY
    btag: int = 0


@dataclass(eq=False)
class Block(Entity):
    ent_id: ClassVar[EntId] = EntId.BARRIER
    btag: int = 0


def _registry(*entities):
    reg = Registry()
    for e in entities:
        reg[e.ent_id].add(e)
    return reg


def test_send_zero_tag_ignored():
    req = BarrierRequests()
    assert req.send(0) is False
    assert len(req) == 0


def test_send_duplicate_ignored():
    req = BarrierRequests()
    assert req.send(3) is True
    assert req.send(3) is False
    assert len(req) == 1


def test_send_limit_is_twenty():
    req = BarrierRequests()
    results = [req.send(tag) for tag in range(1, 22)]
    assert results.count(True) == 20
    assert results[-1] is False
    assert len(req) == 20


def test_barrier_removed_without_carriers():
    block = Block(btag=5)
    reg = _registry(block, Block(btag=6))
    req = BarrierRequests()
    req.send(5)
    req.handle(reg)
    assert [b.btag for b in reg[EntId.BARRIER]] == [6]
    assert len(req) == 0


def test_barrier_kept_while_carrier_alive():
    reg = _registry(Block(btag=5), Slider(btag=5))
    req = BarrierRequests()
    req.send(5)
    req.handle(reg)
    assert len(reg[EntId.BARRIER]) == 1
    assert len(req) == 0


def test_destroy_callback_receives_matching_barriers():
    blocks = [Block(btag=2), Block(btag=2), Block(btag=9)]
    reg = _registry(*blocks, Guard(btag=9))
    destroyed = []

    def destroy(barrier):
        destroyed.append(barrier)
        barrier.mark_deleted()

    req = BarrierRequests()
    req.send(2)
    req.send(9)
    req.handle(reg, destroy)
    assert set(map(id, destroyed)) == {id(blocks[0]), id(blocks[1])}
    assert list(reg[EntId.BARRIER]) == [blocks[2]]


def test_handle_with_nothing_queued_changes_nothing():
    reg = _registry(Block(btag=4))
    BarrierRequests().handle(reg)
    assert len(reg[EntId.BARRIER]) == 1