"""Round engine: one ordered pass over every monkey per round.

Ordering invariant: monkeys are visited in ascending id order, once each.
An item thrown to a monkey with a higher id is inspected again in the same
round; an item thrown to a lower (or the current) id waits for the next one.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from monkey_business.domain.monkey import Monkey
from monkey_business.domain.policy import GrowthPolicy
from monkey_business.domain.troop import check_routes


class RoundState(Enum):
    """Lifecycle of the engine between and during rounds."""

    NOT_STARTED = "not_started"
    ROUND_IN_PROGRESS = "round_in_progress"
    ROUND_COMPLETE = "round_complete"


class RoundEngine:
    """Sole mutator of monkey queues and the inspection tally for one run."""

    def __init__(self, troop: Sequence[Monkey], policy: GrowthPolicy) -> None:
        if not troop:
            raise ValueError("troop must contain at least one monkey")
        for index, monkey in enumerate(troop):
            if monkey.monkey_id != index:
                raise ValueError("troop must be indexed by dense monkey id")
        check_routes(troop)
        self._troop = list(troop)
        self.policy = policy
        self.tallies: list[int] = [0] * len(self._troop)
        self.state = RoundState.NOT_STARTED
        self.cursor: int | None = None
        self.rounds_completed = 0

    @property
    def troop(self) -> tuple[Monkey, ...]:
        return tuple(self._troop)

    def item_count(self) -> int:
        """Total number of items held across all queues."""
        return sum(len(monkey) for monkey in self._troop)

    def queue_lengths(self) -> list[int]:
        return [len(monkey) for monkey in self._troop]

    def tally_by_id(self) -> dict[int, int]:
        return dict(enumerate(self.tallies))

    def _visit(self, monkey: Monkey) -> None:
        """Inspect, transform, reduce, and route every item the monkey holds now."""
        for item in monkey.inspect_and_drain():
            self.tallies[monkey.monkey_id] += 1
            worry = monkey.rule.evaluate(item).reduce(self.policy)
            destination = monkey.test.evaluate(worry)
            self._troop[destination].enqueue(worry)

    def run_round(self) -> None:
        """Visit each monkey exactly once in ascending id order."""
        self.state = RoundState.ROUND_IN_PROGRESS
        for monkey in self._troop:
            self.cursor = monkey.monkey_id
            self._visit(monkey)
        self.cursor = None
        self.state = RoundState.ROUND_COMPLETE
        self.rounds_completed += 1
