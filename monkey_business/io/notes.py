"""Parser for the textual monkey notes format.

Each monkey is a block of six lines; blocks are separated by blank lines::

    Monkey 0:
      Starting items: 79, 98
      Operation: new = old * 19
      Test: divisible by 23
        If true: throw to monkey 2
        If false: throw to monkey 3
"""

from __future__ import annotations

import re
from pathlib import Path

from monkey_business.domain.errors import MonkeyDefinitionError
from monkey_business.domain.rules import RoutingTest, TransformRule
from monkey_business.domain.troop import MonkeyDefinition

_HEADER_RE = re.compile(r"^Monkey (\d+):$")
_ITEMS_RE = re.compile(r"^Starting items:(.*)$")
_OPERATION_RE = re.compile(r"^Operation: new = old ([-+*]) (old|\d+)$")
_TEST_RE = re.compile(r"^Test: divisible by (\d+)$")
_BRANCH_RE = re.compile(r"^If (true|false): throw to monkey (\d+)$")


def _match(pattern: re.Pattern[str], line: str, what: str) -> re.Match[str]:
    match = pattern.match(line.strip())
    if match is None:
        raise MonkeyDefinitionError(f"malformed {what} line: {line.strip()!r}")
    return match


def _parse_items(raw: str) -> tuple[int, ...]:
    if not raw.strip():
        return ()
    items: list[int] = []
    for part in (part.strip() for part in raw.split(",")):
        if not (part.isascii() and part.isdigit()):
            raise MonkeyDefinitionError(f"starting items must be non-negative integers: {part!r}")
        items.append(int(part))
    return tuple(items)


def _parse_block(block: str) -> MonkeyDefinition:
    lines = [line for line in block.splitlines() if line.strip()]
    if len(lines) != 6:
        raise MonkeyDefinitionError(f"monkey block must have 6 lines, got {len(lines)}")

    monkey_id = int(_match(_HEADER_RE, lines[0], "header").group(1))
    items = _parse_items(_match(_ITEMS_RE, lines[1], "starting items").group(1))
    op_match = _match(_OPERATION_RE, lines[2], "operation")
    divisor = int(_match(_TEST_RE, lines[3], "test").group(1))

    branches: dict[str, int] = {}
    for line in lines[4:]:
        branch = _match(_BRANCH_RE, line, "branch")
        if branch.group(1) in branches:
            raise MonkeyDefinitionError(f"monkey {monkey_id} repeats the {branch.group(1)} branch")
        branches[branch.group(1)] = int(branch.group(2))

    try:
        rule = TransformRule.from_symbols(op_match.group(1), op_match.group(2))
        test = RoutingTest(divisor=divisor, if_true=branches["true"], if_false=branches["false"])
    except ValueError as exc:
        raise MonkeyDefinitionError(f"monkey {monkey_id}: {exc}") from exc
    return MonkeyDefinition(monkey_id=monkey_id, starting_items=items, rule=rule, test=test)


def parse_notes(text: str) -> list[MonkeyDefinition]:
    """Parse every monkey block in ``text``, in file order."""
    blocks = [block for block in re.split(r"\n\s*\n", text.strip()) if block.strip()]
    if not blocks:
        raise MonkeyDefinitionError("notes contain no monkeys")
    return [_parse_block(block) for block in blocks]


def load_notes(path: Path) -> list[MonkeyDefinition]:
    """Read and parse a notes file."""
    return parse_notes(Path(path).read_text())
