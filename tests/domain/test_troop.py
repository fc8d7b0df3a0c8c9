"""Tests for monkey_business.domain.monkey and domain.troop modules."""

from __future__ import annotations

import pytest

from monkey_business.domain.errors import MonkeyDefinitionError, RoutingError
from monkey_business.domain.monkey import Monkey
from monkey_business.domain.rules import RoutingTest, TransformRule
from monkey_business.domain.troop import MonkeyDefinition, build_troop, troop_divisors
from monkey_business.domain.worry import Operator, WorryLevel


def _definition(
    monkey_id: int,
    items: tuple[int, ...] = (),
    divisor: int = 2,
    if_true: int = 0,
    if_false: int = 0,
) -> MonkeyDefinition:
    return MonkeyDefinition(
        monkey_id=monkey_id,
        starting_items=items,
        rule=TransformRule(Operator.ADD, 1),
        test=RoutingTest(divisor=divisor, if_true=if_true, if_false=if_false),
    )


class TestMonkey:
    def test_drain_returns_items_in_order_and_empties_queue(self) -> None:
        monkey = build_troop([_definition(0, items=(5, 1, 9))])[0]
        drained = monkey.inspect_and_drain()
        assert [item.value for item in drained] == [5, 1, 9]
        assert len(monkey) == 0

    def test_items_enqueued_after_drain_stay_queued(self) -> None:
        monkey = build_troop([_definition(0, items=(5,))])[0]
        drained = monkey.inspect_and_drain()
        monkey.enqueue(WorryLevel(42))
        assert [item.value for item in drained] == [5]
        assert [item.value for item in monkey.items] == [42]

    def test_enqueue_appends_to_back(self) -> None:
        monkey = build_troop([_definition(0, items=(1,))])[0]
        monkey.enqueue(WorryLevel(2))
        assert [item.value for item in monkey.items] == [1, 2]


class TestBuildTroop:
    def test_orders_by_id(self) -> None:
        troop = build_troop([_definition(1), _definition(0)])
        assert [monkey.monkey_id for monkey in troop] == [0, 1]
        assert all(isinstance(monkey, Monkey) for monkey in troop)

    def test_self_routing_allowed(self) -> None:
        troop = build_troop([_definition(0, if_true=0, if_false=0)])
        assert troop[0].test.destinations == (0, 0)

    def test_empty_rejected(self) -> None:
        with pytest.raises(MonkeyDefinitionError):
            build_troop([])

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(MonkeyDefinitionError, match="duplicate"):
            build_troop([_definition(0), _definition(0)])

    def test_gapped_ids_rejected(self) -> None:
        with pytest.raises(MonkeyDefinitionError, match="dense"):
            build_troop([_definition(0), _definition(2)])

    def test_missing_rule_rejected(self) -> None:
        definition = MonkeyDefinition(
            monkey_id=0,
            starting_items=(),
            rule=None,
            test=RoutingTest(divisor=2, if_true=0, if_false=0),
        )
        with pytest.raises(MonkeyDefinitionError, match="transform rule"):
            build_troop([definition])

    def test_missing_test_rejected(self) -> None:
        definition = MonkeyDefinition(
            monkey_id=0, starting_items=(), rule=TransformRule(Operator.ADD, 1), test=None
        )
        with pytest.raises(MonkeyDefinitionError, match="routing test"):
            build_troop([definition])

    def test_unknown_destination_rejected(self) -> None:
        with pytest.raises(RoutingError, match="unknown monkey 5"):
            build_troop([_definition(0, if_true=1, if_false=5), _definition(1)])

    def test_routing_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            build_troop([_definition(0, if_false=1)])

    def test_divisors_in_id_order(self) -> None:
        troop = build_troop([_definition(1, divisor=7), _definition(0, divisor=3)])
        assert troop_divisors(troop) == [3, 7]
