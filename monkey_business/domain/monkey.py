"""Monkeys: queue-owning actors with one transform rule and one routing test."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from monkey_business.domain.rules import RoutingTest, TransformRule
from monkey_business.domain.worry import WorryLevel


@dataclass
class Monkey:
    """A single monkey; owns its item queue exclusively.

    Monkeys never reference each other. Routing goes through the id-keyed
    registry held by the round engine.
    """

    monkey_id: int
    rule: TransformRule
    test: RoutingTest
    items: deque[WorryLevel] = field(default_factory=deque)

    def inspect_and_drain(self) -> list[WorryLevel]:
        """Remove and return every item currently held, in queue order.

        Items enqueued after this call stay queued for the next visit.
        """
        drained = list(self.items)
        self.items.clear()
        return drained

    def enqueue(self, item: WorryLevel) -> None:
        self.items.append(item)

    def __len__(self) -> int:
        return len(self.items)
