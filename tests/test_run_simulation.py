import json
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from monkey_business.run_simulation import _coerce_int, _parse_policy, main


def test_default_run_prints_relief_summary(
    sample_notes_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main([str(sample_notes_path)])
    summary = json.loads(capsys.readouterr().out)
    assert summary["score"] == 10605
    assert summary["rounds"] == 20
    assert summary["policy"] == "relief"
    assert summary["tallies"] == {"0": 101, "1": 95, "2": 7, "3": 105}


def test_cli_overrides_preset(sample_notes_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(sample_notes_path), "--preset", "modulus", "--rounds", "20"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["policy"] == "modulus"
    assert summary["tallies"] == {"0": 99, "1": 97, "2": 8, "3": 103}


def test_config_file_values_used_and_cli_wins(
    sample_notes_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"rounds": 1, "policy": "modulus"}))
    main([str(sample_notes_path), "--config", str(config_path), "--rounds", "20"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["rounds"] == 20
    assert summary["policy"] == "modulus"


def test_both_presets(sample_notes_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(sample_notes_path), "--both"])
    summary = json.loads(capsys.readouterr().out)
    assert summary == {"relief": 10605, "modulus": 2713310158}


def test_out_dir_writes_tally_log(
    sample_notes_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    out_dir = tmp_path / "out"
    main([str(sample_notes_path), "--rounds", "2", "--out-dir", str(out_dir)])
    capsys.readouterr()
    table = pq.read_table(out_dir / "logs" / "tally_log.parquet")
    assert table.num_rows == 8


def test_zero_rounds_exits_with_usage_error(sample_notes_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(sample_notes_path), "--rounds", "0"])
    assert excinfo.value.code == 2


def test_missing_notes_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "absent.txt")])


def test_invalid_config_json_exits(sample_notes_path: Path, tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json")
    with pytest.raises(SystemExit):
        main([str(sample_notes_path), "--config", str(config_path)])


def test_parse_policy_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="policy must be one of"):
        _parse_policy("panic")


def test_coerce_int_rejects_bool_and_fractional_float() -> None:
    with pytest.raises(ValueError):
        _coerce_int(True, "rounds")
    with pytest.raises(ValueError):
        _coerce_int(2.5, "rounds")
    assert _coerce_int(3.0, "rounds") == 3


def test_config_out_dir_of_wrong_type_exits_with_usage_error(
    sample_notes_path: Path, tmp_path: Path
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"out_dir": True}))
    with pytest.raises(SystemExit) as excinfo:
        main([str(sample_notes_path), "--config", str(config_path)])
    assert excinfo.value.code == 2


def test_config_file_must_hold_an_object(sample_notes_path: Path, tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps([1, 2]))
    with pytest.raises(SystemExit) as excinfo:
        main([str(sample_notes_path), "--config", str(config_path)])
    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    "override",
    [["--rounds", "5"], ["--policy", "relief"], ["--boredness-factor", "2"], ["--preset", "modulus"]],
)
def test_both_rejects_run_overrides(
    sample_notes_path: Path, override: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(sample_notes_path), "--both", *override])
    assert excinfo.value.code == 2
    assert "--both runs the fixed presets" in capsys.readouterr().err
