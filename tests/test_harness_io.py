import csv
import json
from pathlib import Path

from mastermind.engine import Feedback
from mastermind.harness import write_csv, write_manifest
from mastermind.harness.display import format_feedback, introduce_rules, render_board
from mastermind.harness.io import timestamp_id


def _result():
    return {
        "solver_id": "random_consistent",
        "secret": ("red", "red", "green", "blue"),
        "success": True,
        "guesses": 2,
        "time_ms": 1.23456,
        "history": [
            (("pink", "pink", "red", "red"), Feedback(0, 1)),
            (("red", "red", "green", "blue"), Feedback(4, 0)),
        ],
    }


def test_write_csv_columns(tmp_path: Path):
    out = write_csv([_result()], str(tmp_path / "sub" / "run.csv"), max_turns=3)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    row = rows[0]
    assert list(row.keys()) == [
        "solver", "secret", "success", "guesses", "time_ms",
        "guess_1", "fb_1", "guess_2", "fb_2", "guess_3", "fb_3",
    ]
    assert row["secret"] == "red red green blue"
    assert row["guess_1"] == "pink pink red red"
    assert row["fb_1"] == "'0/1"
    assert row["fb_2"] == "'4/0"
    assert row["guess_3"] == "" and row["fb_3"] == ""
    assert row["time_ms"] == "1.235"


def test_write_manifest(tmp_path: Path):
    out = write_manifest({"run_id": "x", "num_cases": 1}, str(tmp_path / "m.json"))
    assert json.loads(Path(out).read_text(encoding="utf-8")) == {"run_id": "x", "num_cases": 1}


def test_timestamp_id_shape():
    ts = timestamp_id()
    assert len(ts) == 16 and ts[8] == "T" and ts.endswith("Z")


def test_display_helpers():
    assert format_feedback(Feedback(2, 1)) == "●●○·"
    assert format_feedback(Feedback(0, 0)) == "····"
    intro = introduce_rules()
    assert "pink, red, green, blue, purple, yellow" in intro
    board = render_board([(("pink", "pink", "red", "red"), Feedback(0, 1))])
    lines = board.splitlines()
    assert len(lines) == 12
    assert lines[0].startswith(" 1 | pink") and lines[0].endswith("○···")
    assert lines[1].startswith(" 2 | ______")
