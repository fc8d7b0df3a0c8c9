"""I/O layer: notes parsing and Parquet schemas."""
