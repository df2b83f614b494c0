"""Compare the fast inverse square root against the exact one and normalize sample vectors."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

import numpy as np

from vecmath import config
from vecmath.logging_utils import ComparisonLogger
from vecmath.math import Vec2d, exact_inverse_sqrt, fast_inverse_sqrt, f32_div, to_f32
from vecmath.settings_schema import DemoSettings, load_last_used, save_last_used


@dataclass(frozen=True)
class SqrtComparison:
    number: np.float32
    fast: np.float32
    exact: np.float32
    difference: np.float32

    @property
    def relative_error(self) -> np.float32:
        return abs(f32_div(self.difference, self.exact))


@dataclass(frozen=True)
class NormalizeTrial:
    vector: Vec2d
    normalized: Vec2d
    length: np.float32


def compare_inverse_sqrt(number: float) -> SqrtComparison:
    number = to_f32(number)
    fast = fast_inverse_sqrt(number)
    exact = exact_inverse_sqrt(number)
    with np.errstate(all="ignore"):
        difference = fast - exact
    return SqrtComparison(number=number, fast=fast, exact=exact, difference=difference)


def normalize_trial(vector: Vec2d) -> NormalizeTrial:
    normalized = vector.normalized()
    return NormalizeTrial(vector=vector, normalized=normalized, length=normalized.mag())


def format_comparison(result: SqrtComparison) -> list[str]:
    return [
        f"1 / sqrt({result.number!s}) = fast: {result.fast!s}, slow(but accurate): {result.exact!s}",
        f"Difference: {result.difference!s}",
    ]


def format_trial(trial: NormalizeTrial) -> list[str]:
    return [
        f"Vector: {trial.vector}, normalized: {trial.normalized}",
        f"Length: {trial.length!s}",
    ]


def run(
    settings: DemoSettings,
    log_path: str | Path | None = None,
    out: Callable[[str], None] = print,
) -> tuple[list[SqrtComparison], list[NormalizeTrial]]:
    comparisons = [compare_inverse_sqrt(number) for number in settings.numbers]
    trials = [normalize_trial(Vec2d(x, y)) for x, y in settings.vectors]

    out("Comparing fast and slow inverse square root")
    for result in comparisons:
        for line in format_comparison(result):
            out(line)

    out("")
    out("Normalizing vectors")
    for trial in trials:
        for line in format_trial(trial):
            out(line)

    if log_path is not None:
        with ComparisonLogger(log_path) as logger:
            for result in comparisons:
                logger.log_comparison(result.number, result.fast, result.exact, result.difference)
            for trial in trials:
                logger.log_trial(trial.vector, trial.normalized, trial.length)
        out(f"Wrote CSV log to {log_path}")

    return comparisons, trials


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare fast and exact inverse square roots.")
    parser.add_argument(
        "--settings",
        type=str,
        default=str(config.DEFAULT_SETTINGS_PATH),
        help="Path to the demo settings JSON.",
    )
    parser.add_argument(
        "--number",
        type=float,
        action="append",
        default=None,
        help="Input for the inverse square root comparison. Repeat for several inputs.",
    )
    parser.add_argument(
        "--vector",
        type=float,
        nargs=2,
        action="append",
        default=None,
        metavar=("X", "Y"),
        help="Vector to normalize. Repeat for several vectors.",
    )
    parser.add_argument("--log", type=str, default=None, help="CSV log path.")
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Store the inputs used for this run in the settings file.",
    )
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> DemoSettings:
    settings = load_last_used(Path(args.settings))
    if args.number is not None:
        settings.numbers = list(args.number)
    if args.vector is not None:
        settings.vectors = [(x, y) for x, y in args.vector]
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = resolve_settings(args)
    run(settings, log_path=args.log)
    if args.save_settings:
        path = save_last_used(settings, Path(args.settings))
        print(f"Saved settings to {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
