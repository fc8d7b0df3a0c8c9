"""Parquet schema definitions for simulation diagnostics."""

from __future__ import annotations

import pyarrow as pa

TALLY_LOG_SCHEMA_VERSION = 1

# One row per monkey per completed round. Inspection counts are cumulative.
TALLY_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("round", pa.int64()),
        ("monkey_id", pa.int64()),
        ("inspections", pa.int64()),
        ("queue_length", pa.int64()),
    ],
    metadata={"schema_version": str(TALLY_LOG_SCHEMA_VERSION)},
)
