"""Simulation engine: round engine, driver, and Parquet tally persistence."""

from monkey_business.simulation.driver import (
    compute_monkey_business,
    run_simulation,
    score_tallies,
)
from monkey_business.simulation.engine import RoundEngine, RoundState
from monkey_business.simulation.persistence import flush_tally_columns

__all__ = [
    "RoundEngine",
    "RoundState",
    "flush_tally_columns",
    "compute_monkey_business",
    "run_simulation",
    "score_tallies",
]
