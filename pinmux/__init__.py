# SPDX-License-Identifier: BSD-2-Clause
"""
Pin multiplexing configuration for microcontroller chip definitions.
"""

from .utils import PinMuxError, ensure_pinmux_root
from .chip import (
    ChipMeta,
    PinCapability,
    PhysicalPin,
    ChipPackage,
    ChipDefinition,
    load_chip_definition,
)
from .store import AssignResult, ConfigurationStore
from .export import (
    PinMuxReport,
    DirectoryDelivery,
    export_configuration,
    sort_physical_pins,
)
from .config import _parse_config

__version__ = "0.1.0"

__all__ = [
    '__version__',
    'PinMuxError',
    'ensure_pinmux_root',
    'ChipMeta',
    'PinCapability',
    'PhysicalPin',
    'ChipPackage',
    'ChipDefinition',
    'load_chip_definition',
    'AssignResult',
    'ConfigurationStore',
    'PinMuxReport',
    'DirectoryDelivery',
    'export_configuration',
    'sort_physical_pins',
    '_parse_config',
]
