# SPDX-License-Identifier: BSD-2-Clause
"""
Configuration file parsing and utilities.
"""

import tomli

from pathlib import Path
from pydantic import ValidationError

from ..utils import PinMuxError, ensure_pinmux_root, format_validation_error
from .models import Config


def _parse_config_file(config_file) -> 'Config':
    """Parse a specific pinmux.toml configuration file."""

    with open(config_file, "rb") as f:
        config_dict = tomli.load(f)

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        raise PinMuxError(f"Validation error in pinmux.toml:\n{format_validation_error(e)}")


def _parse_config() -> 'Config':
    """Parse the pinmux.toml configuration file."""
    pinmux_root = ensure_pinmux_root()
    config_file = Path(pinmux_root) / "pinmux.toml"
    try:
        return _parse_config_file(config_file)
    except FileNotFoundError:
        raise PinMuxError(f"Config file not found. I expected to find it at {config_file}")
    except tomli.TOMLDecodeError as e:
        raise PinMuxError(
            f"{config_file} has a formatting error: {e.msg} at line {e.lineno}, column {e.colno}"
        )


def resolve_path(path) -> Path:
    """Resolve a path from pinmux.toml against the project root."""
    path = Path(path)
    if path.is_absolute():
        return path
    return ensure_pinmux_root() / path
