"""Barrier tags: barriers vanish once no enemy with their tag remains."""

from __future__ import annotations

from typing import Any, Callable

from .entities import EntId, Registry
from .log import perr, pinf

_REQUEST_STACK_LEN = 20

# Entity types that carry barrier tags
_CARRIERS = (EntId.GROUNDGUY, EntId.SLIDEGUY)


class BarrierRequests:
    """Pending requests to check whether barriers of a tag can be removed."""

    def __init__(self) -> None:
        self._stack: list[int] = []

    def send(self, btag: int) -> bool:
        """Queue a check of ``btag``; return True if it was queued.

        Tag 0, duplicates and requests beyond the stack limit are ignored.
        """
        if btag == 0:
            pinf("btag 0 check request sent. ignoring.")
            return False
        if len(self._stack) >= _REQUEST_STACK_LEN:
            perr("max barrier check requests sent. ignoring current request.")
            return False
        if btag in self._stack:
            return False
        self._stack.append(btag)
        return True

    def handle(
        self,
        registry: Registry,
        destroy: Callable[[Any], None] | None = None,
    ) -> None:
        """Destroy barriers whose tag no carrier holds, then clear the queue.

        ``destroy`` is called on each barrier to remove; by default the
        barrier is only marked for deletion.
        """
        if destroy is None:
            destroy = lambda barrier: barrier.mark_deleted()  # noqa: E731
        barriers = registry[EntId.BARRIER]
        for btag in reversed(self._stack):
            carried = any(
                entity.btag == btag
                for ent_id in _CARRIERS
                for entity in registry[ent_id]
            )
            if not carried:
                pinf(f"cleaning barrier tag {btag}")
                for barrier in barriers:
                    if barrier.btag == btag:
                        destroy(barrier)
            barriers.clean()
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)