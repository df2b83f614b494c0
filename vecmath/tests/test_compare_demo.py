import csv
import json

import numpy as np

from vecmath.demos import compare
from vecmath.logging_utils import ComparisonLogger
from vecmath.math import Vec2d
from vecmath.settings_schema import DemoSettings


def test_compare_inverse_sqrt_reports_difference():
    result = compare.compare_inverse_sqrt(0.1)

    assert result.number == np.float32(0.1)
    assert result.difference == result.fast - result.exact
    assert 0.0 < result.relative_error < 0.002


def test_normalize_trial_on_zero_vector():
    trial = compare.normalize_trial(Vec2d(0.0, 0.0))

    assert trial.normalized is trial.vector
    assert trial.length == 0.0
    assert compare.format_trial(trial) == [
        "Vector: (0.0, 0.0), normalized: (0.0, 0.0)",
        "Length: 0.0",
    ]


def test_run_prints_both_sections():
    lines: list[str] = []

    comparisons, trials = compare.run(DemoSettings(), out=lines.append)

    assert len(comparisons) == 4
    assert len(trials) == 4
    assert lines[0] == "Comparing fast and slow inverse square root"
    assert lines[1].startswith("1 / sqrt(0.1) = fast: ")
    assert ", slow(but accurate): 3.16227" in lines[1]
    assert lines[2].startswith("Difference: ")
    assert lines[9] == ""
    assert lines[10] == "Normalizing vectors"
    assert lines[11].startswith("Vector: (100.0, 20.0), normalized: (")
    assert len(lines) == 19


def test_comparison_logger_writes_rows(tmp_path):
    path = tmp_path / "logs" / "run.csv"

    with ComparisonLogger(path) as logger:
        logger.log_comparison(4.0, 0.499, 0.5, -0.001)
        logger.log_trial(Vec2d(3.0, 4.0), Vec2d(0.6, 0.8), 1.0)

    assert logger.rows_written == 2
    with path.open(newline="") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == list(ComparisonLogger.HEADER)
    assert rows[1][0] == "inverse_sqrt"
    assert float(rows[1][1]) == 4.0
    assert rows[2][0] == "normalize"
    assert float(rows[2][8]) == 1.0


def test_main_with_cli_overrides(tmp_path, capsys):
    settings_path = tmp_path / "settings.json"
    log_path = tmp_path / "run.csv"

    exit_code = compare.main(
        [
            "--settings",
            str(settings_path),
            "--number",
            "4",
            "--vector",
            "3",
            "4",
            "--log",
            str(log_path),
            "--save-settings",
        ]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "1 / sqrt(4.0) = fast: " in out
    assert "slow(but accurate): 0.5" in out
    assert "Vector: (3.0, 4.0), normalized: (" in out
    assert json.loads(settings_path.read_text()) == {
        "numbers": [4.0],
        "vectors": [{"x": 3.0, "y": 4.0}],
    }
    with log_path.open(newline="") as handle:
        assert len(list(csv.reader(handle))) == 3


def test_main_uses_settings_file(tmp_path, capsys):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"numbers": [16.0], "vectors": []}))

    compare.main(["--settings", str(settings_path)])

    out = capsys.readouterr().out
    assert "1 / sqrt(16.0) = fast: " in out
    assert "Vector:" not in out
