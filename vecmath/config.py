"""Default configuration values for the vecmath demo."""

from __future__ import annotations

from pathlib import Path

DEFAULT_NUMBERS = (0.1, 6.0, 3.0, 30.0)
DEFAULT_VECTORS = (
    (100.0, 20.0),
    (20.0, 40.0),
    (0.5, 0.1),
    (0.0, 0.0),
)

DEFAULT_SETTINGS_PATH = Path.home() / ".vecmath_settings.json"
