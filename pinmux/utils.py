# SPDX-License-Identifier: BSD-2-Clause
"""
Core utility functions for PinMux

This module provides core utilities used throughout the pinmux package.
"""

import logging
import os
from pathlib import Path


logger = logging.getLogger(__name__)


class PinMuxError(Exception):
    """Base exception for PinMux errors"""
    pass


def ensure_pinmux_root() -> Path:
    """
    Ensure PINMUX_ROOT environment variable is set and return its path.

    If PINMUX_ROOT is not set, sets it to the current working directory.

    Returns:
        Path to the pinmux project root directory
    """
    # Check if we've already cached the root
    root = getattr(ensure_pinmux_root, 'root', None)
    if root:
        return root

    if "PINMUX_ROOT" not in os.environ:
        logger.debug(
            f"PINMUX_ROOT not found in environment. "
            f"Setting PINMUX_ROOT to {os.getcwd()}"
        )
        os.environ["PINMUX_ROOT"] = os.getcwd()
    else:
        logger.debug(f"PINMUX_ROOT={os.environ['PINMUX_ROOT']} found in environment")

    ensure_pinmux_root.root = Path(os.environ["PINMUX_ROOT"]).absolute()  # type: ignore
    return ensure_pinmux_root.root  # type: ignore


def format_validation_error(e) -> str:
    """Format a pydantic ValidationError as one 'Error at' line per error."""
    error_messages = []
    for error in e.errors():
        location = ".".join(str(loc) for loc in error["loc"])
        message = error["msg"]
        error_messages.append(f"Error at '{location}': {message}")
    return "\n".join(error_messages)
