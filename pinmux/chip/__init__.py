# SPDX-License-Identifier: BSD-2-Clause
"""
Chip definition models and loading.
"""

from .models import (
    ChipMeta,
    PinCapability,
    PhysicalPin,
    ChipPackage,
    ChipDefinition,
)
from .loader import load_chip_definition, parse_chip_definition

__all__ = [
    'ChipMeta',
    'PinCapability',
    'PhysicalPin',
    'ChipPackage',
    'ChipDefinition',
    'load_chip_definition',
    'parse_chip_definition',
]
