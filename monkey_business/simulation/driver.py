"""Simulation driver: run N rounds, then reduce tallies to a score."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from pathlib import Path

import pyarrow.parquet as pq

from monkey_business.config.constants import TALLY_FLUSH_THRESHOLD, TOP_ACTIVE_MONKEYS
from monkey_business.config.types import GrowthPolicyMode, RunConfig, SimulationResult
from monkey_business.domain.policy import build_policy
from monkey_business.domain.troop import MonkeyDefinition, build_troop, troop_divisors
from monkey_business.simulation.engine import RoundEngine
from monkey_business.simulation.persistence import flush_tally_columns, new_tally_columns

logger = logging.getLogger(__name__)


def score_tallies(tallies: Mapping[int, int], top: int = TOP_ACTIVE_MONKEYS) -> int:
    """Multiply the ``top`` highest inspection counts.

    Ties are broken by ascending monkey id. A troop smaller than ``top``
    contributes every count it has.
    """
    if top < 1:
        raise ValueError("top must be >= 1")
    if not tallies:
        raise ValueError("tallies must not be empty")
    ranked = sorted(tallies.items(), key=lambda pair: (-pair[1], pair[0]))
    return math.prod(count for _, count in ranked[:top])


def _record_round(
    tally_columns: dict[str, list[int | str]], run_id: str, engine: RoundEngine
) -> None:
    for monkey_id, (inspections, queue_length) in enumerate(
        zip(engine.tallies, engine.queue_lengths(), strict=True)
    ):
        tally_columns["run_id"].append(run_id)
        tally_columns["round"].append(engine.rounds_completed)
        tally_columns["monkey_id"].append(monkey_id)
        tally_columns["inspections"].append(inspections)
        tally_columns["queue_length"].append(queue_length)


def run_simulation(
    definitions: Iterable[MonkeyDefinition],
    config: RunConfig | None = None,
    out_dir: Path | None = None,
    run_id: str | None = None,
) -> SimulationResult:
    """Build a troop, run ``config.rounds`` rounds, and score the tallies.

    When ``out_dir`` is given, the cumulative tally of every monkey after
    every round is written to ``out_dir/logs/tally_log.parquet``.
    """
    run_config = config or RunConfig()
    troop = build_troop(definitions)
    policy = build_policy(
        run_config.policy,
        troop_divisors(troop),
        boredness_factor=run_config.boredness_factor,
    )
    engine = RoundEngine(troop, policy)
    resolved_run_id = run_id or f"{run_config.policy.value}_r{run_config.rounds}"
    logger.info(
        "Starting run %s: %d monkeys, %d rounds, policy=%s",
        resolved_run_id,
        len(troop),
        run_config.rounds,
        run_config.policy.value,
    )

    tally_columns: dict[str, list[int | str]] | None = None
    tally_log_path: Path | None = None
    tally_writer: pq.ParquetWriter | None = None
    if out_dir is not None:
        logs_dir = Path(out_dir) / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        tally_log_path = logs_dir / "tally_log.parquet"
        tally_columns = new_tally_columns()

    try:
        for _ in range(run_config.rounds):
            engine.run_round()
            logger.debug("Round %d tallies: %s", engine.rounds_completed, engine.tallies)
            if tally_columns is not None and tally_log_path is not None:
                _record_round(tally_columns, resolved_run_id, engine)
                if len(tally_columns["run_id"]) >= TALLY_FLUSH_THRESHOLD:
                    tally_writer = flush_tally_columns(tally_columns, tally_log_path, tally_writer)
        if tally_columns is not None and tally_log_path is not None:
            tally_writer = flush_tally_columns(tally_columns, tally_log_path, tally_writer)
    finally:
        if tally_writer is not None:
            tally_writer.close()

    tallies = engine.tally_by_id()
    score = score_tallies(tallies)
    logger.info("Finished run %s: score=%d", resolved_run_id, score)
    return SimulationResult(
        score=score,
        rounds=run_config.rounds,
        policy=run_config.policy,
        tallies=tallies,
    )


def compute_monkey_business(
    definitions: Iterable[MonkeyDefinition],
    rounds: int,
    policy: GrowthPolicyMode,
) -> int:
    """Return the product of the two highest inspection counts after ``rounds``."""
    return run_simulation(definitions, RunConfig(rounds=rounds, policy=policy)).score
