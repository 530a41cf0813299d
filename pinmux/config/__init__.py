# SPDX-License-Identifier: BSD-2-Clause
"""
Configuration management for PinMux.

This module provides configuration models and parsing functionality
for pinmux.toml configuration files.
"""

from .models import (
    ExportConfig,
    PinMuxConfig,
    Config,
)

from .parser import (
    resolve_path,
    _parse_config,
    _parse_config_file,
)

__all__ = [
    'ExportConfig',
    'PinMuxConfig',
    'Config',
    'resolve_path',
    '_parse_config',
    '_parse_config_file',
]
