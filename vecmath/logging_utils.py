"""CSV logging helpers for demo runs."""

from __future__ import annotations

import csv
from pathlib import Path

from .math import Vec2d


class ComparisonLogger:
    HEADER = (
        "kind",
        "input_x",
        "input_y",
        "fast",
        "exact",
        "difference",
        "result_x",
        "result_y",
        "length",
    )

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.rows_written = 0

        self._file = self.path.open("w", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(self.HEADER)

    def log_comparison(self, number: float, fast: float, exact: float, difference: float) -> None:
        self._writer.writerow(
            [
                "inverse_sqrt",
                float(number),
                "",
                float(fast),
                float(exact),
                float(difference),
                "",
                "",
                "",
            ]
        )
        self.rows_written += 1

    def log_trial(self, vector: Vec2d, normalized: Vec2d, length: float) -> None:
        self._writer.writerow(
            [
                "normalize",
                float(vector.x),
                float(vector.y),
                "",
                "",
                "",
                float(normalized.x),
                float(normalized.y),
                float(length),
            ]
        )
        self.rows_written += 1

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
