"""Schema and helpers for the demo's persisted input settings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from . import config


def _parse_vector(entry: Any) -> tuple[float, float]:
    try:
        if isinstance(entry, dict):
            return float(entry["x"]), float(entry["y"])
        if isinstance(entry, (list, tuple)) and len(entry) == 2:
            return float(entry[0]), float(entry[1])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Malformed vector entry {entry!r}: {exc}") from exc
    raise ValueError(f"Unsupported vector entry: {entry!r}")


@dataclass
class DemoSettings:
    numbers: list[float] = field(default_factory=lambda: list(config.DEFAULT_NUMBERS))
    vectors: list[tuple[float, float]] = field(default_factory=lambda: list(config.DEFAULT_VECTORS))

    def to_json(self) -> dict[str, Any]:
        return {
            "numbers": list(self.numbers),
            "vectors": [{"x": x, "y": y} for x, y in self.vectors],
        }

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "DemoSettings":
        numbers = payload.get("numbers", config.DEFAULT_NUMBERS)
        vectors = payload.get("vectors", config.DEFAULT_VECTORS)
        return cls(
            numbers=[float(value) for value in numbers],
            vectors=[_parse_vector(entry) for entry in vectors],
        )


def load_last_used(path: Path | None = None) -> DemoSettings:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    try:
        data = json.loads(settings_path.read_text())
    except FileNotFoundError:
        return DemoSettings()
    except json.JSONDecodeError:
        return DemoSettings()
    return DemoSettings.from_json(data if isinstance(data, dict) else {})


def save_last_used(settings: DemoSettings, path: Path | None = None) -> Path:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    settings_path.write_text(json.dumps(settings.to_json(), indent=2, sort_keys=True))
    return settings_path
