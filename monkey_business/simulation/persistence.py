"""Parquet persistence helpers for the per-round tally log."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from monkey_business.io.schemas import TALLY_LOG_SCHEMA


def new_tally_columns() -> dict[str, list[int | str]]:
    """Empty column buffers matching ``TALLY_LOG_SCHEMA``."""
    return {name: [] for name in TALLY_LOG_SCHEMA.names}


def flush_tally_columns(
    tally_columns: dict[str, list[int | str]],
    tally_log_path: Path,
    tally_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated tally rows to Parquet and clear in-memory buffers."""
    if not tally_columns["run_id"]:
        return tally_writer
    table = pa.Table.from_pydict(tally_columns, schema=TALLY_LOG_SCHEMA)
    if tally_writer is None:
        tally_writer = pq.ParquetWriter(tally_log_path, TALLY_LOG_SCHEMA)
    tally_writer.write_table(table)
    for values in tally_columns.values():
        values.clear()
    return tally_writer
