"""Persistent JSON config helpers.

Reads the pre-sized capacity of the line offset table.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .offsets import DEFAULT_CAPACITY

APP_NAME = "lineseek"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_initial_capacity() -> int:
    """Return the configured offset-table capacity.

    Booleans, non-integers and values below 1 fall back to the default.
    """
    value = load_config().get("initial_capacity")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_CAPACITY
    return value
