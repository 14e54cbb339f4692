# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Library configuration.

Settings are exposed as a plain dict:

    csgray.set_config({'bump': 1e-8})
    csgray.get_config()['max_crossings']

Keys:
    bump: Distance a crossing ray is pushed past the surface it hit
        (reflected rays are pushed twice this along the new direction).
    max_crossings: Upper bound on boundary crossings in ``trace()``.
"""

from __future__ import annotations
from typing import Any, Dict
import math

DEFAULTS: Dict[str, Any] = {
    'bump': 1.0e-9,
    'max_crossings': 10000,
}

_settings: Dict[str, Any] = dict(DEFAULTS)


def check(key: str, value: Any) -> Any:
    """Validate ``value`` for setting ``key`` and return it normalized.

    Raises:
        ValueError: On an unknown key or invalid value.
    """
    if key == 'bump':
        if (isinstance(value, bool) or not isinstance(value, (int, float))
                or not math.isfinite(value) or value <= 0):
            raise ValueError(f"bump must be a positive finite number, got {value!r}")
        return float(value)
    if key == 'max_crossings':
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"max_crossings must be a positive integer, got {value!r}")
        return value
    raise ValueError(f"Unknown configuration key {key!r}")


def get_config() -> Dict[str, Any]:
    """Return a copy of the current settings."""
    return dict(_settings)


def set_config(settings: Dict[str, Any]) -> None:
    """Update settings from a dict.

    Only provided keys are changed. The update is applied only if every
    key and value is valid.

    Raises:
        ValueError: On an unknown key or invalid value.
    """
    checked = {key: check(key, value) for key, value in settings.items()}
    _settings.update(checked)


def reset_config() -> None:
    """Restore the default settings."""
    _settings.clear()
    _settings.update(DEFAULTS)


def get(key: str) -> Any:
    return _settings[key]
