"""CLI entrypoint for monkey-business simulations.

This module owns CLI argument parsing and mode dispatch. Domain logic lives in:

- ``monkey_business.io.notes``          – notes-file parsing
- ``monkey_business.config``            – configuration dataclasses and presets
- ``monkey_business.simulation.driver`` – ``run_simulation`` driver
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from monkey_business.config.constants import BOREDNESS_FACTOR
from monkey_business.config.types import PRESETS, GrowthPolicyMode, RunConfig
from monkey_business.io.notes import load_notes
from monkey_business.simulation.driver import run_simulation

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_policy(raw_policy: str) -> GrowthPolicyMode:
    """Parse growth policy from CLI/config."""
    try:
        return GrowthPolicyMode(raw_policy)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in GrowthPolicyMode)
        raise ValueError(f"policy must be one of {valid}") from exc


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _resolve_run_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> RunConfig:
    """Combine preset, config file, and CLI overrides into one RunConfig."""
    preset_name = _get_str(args.preset, "preset", file_cfg, "relief")
    if preset_name not in PRESETS:
        raise ValueError(f"preset must be one of {', '.join(sorted(PRESETS))}")
    preset = PRESETS[preset_name]
    rounds = _get_int(args.rounds, "rounds", file_cfg, preset.rounds)
    policy = _parse_policy(_get_str(args.policy, "policy", file_cfg, preset.policy.value))
    boredness_factor = _get_int(
        args.boredness_factor, "boredness_factor", file_cfg, BOREDNESS_FACTOR
    )
    return RunConfig(rounds=rounds, policy=policy, boredness_factor=boredness_factor)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Simulate monkeys throwing items around")
    parser.add_argument("notes", type=Path, help="Monkey notes file")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--preset", type=str, choices=sorted(PRESETS), default=None)
    parser.add_argument("--rounds", type=int, default=None)
    parser.add_argument(
        "--policy",
        type=str,
        choices=[mode.value for mode in GrowthPolicyMode],
        default=None,
    )
    parser.add_argument("--boredness-factor", type=int, default=None)
    parser.add_argument(
        "--both",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run both presets unchanged and report each score; rejects run overrides",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Write per-round tallies to OUT_DIR/logs/tally_log.parquet",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for simulation runs.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override the chosen preset.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        definitions = load_notes(args.notes)
    except FileNotFoundError:
        parser.error(f"Notes file not found: {args.notes}")
    except ValueError as exc:
        parser.error(f"Invalid notes file: {args.notes}: {exc}")

    try:
        out_dir_raw = _get_val(args.out_dir, "out_dir", file_cfg, None)
        out_dir = Path(_coerce_str(out_dir_raw, "out_dir")) if out_dir_raw is not None else None
        if _get_bool(args.both, "both", file_cfg, False):
            overrides = [
                flag
                for flag, value in (
                    ("--preset", args.preset),
                    ("--rounds", args.rounds),
                    ("--policy", args.policy),
                    ("--boredness-factor", args.boredness_factor),
                )
                if value is not None
            ]
            if overrides:
                raise ValueError(f"--both runs the fixed presets; drop {', '.join(overrides)}")
            summary: dict[str, object] = {
                name: run_simulation(
                    definitions,
                    preset,
                    out_dir=out_dir / name if out_dir is not None else None,
                    run_id=name,
                ).score
                for name, preset in PRESETS.items()
            }
        else:
            run_config = _resolve_run_config(args, file_cfg)
            summary = run_simulation(definitions, run_config, out_dir=out_dir).to_summary()
    except ValueError as exc:
        parser.error(str(exc))

    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
