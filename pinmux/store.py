# SPDX-License-Identifier: BSD-2-Clause
"""
Pin configuration state.

:class:`ConfigurationStore` holds the currently loaded chip definition and
the mapping of pin name to selected function. Invalid requests never raise
and never alter state; :meth:`ConfigurationStore.set_pin_function` reports
the outcome through an :class:`AssignResult` which callers are free to ignore.
"""

import logging

from enum import StrEnum, auto
from typing import Dict, List, Optional

from .chip import ChipDefinition, PhysicalPin

logger = logging.getLogger(__name__)

UNKNOWN_PIN_TYPE = "unknown"


class AssignResult(StrEnum):
    """Outcome of a pin function assignment"""
    OK = auto()
    NO_CHIP_LOADED = auto()
    PIN_NOT_FOUND = auto()
    FUNCTION_NOT_SUPPORTED = auto()

    def __bool__(self):
        return self is AssignResult.OK


class ConfigurationStore:
    """
    Pin multiplexing configuration for a single chip.

    Keys of the assignment map are exactly the pins with a validated
    selection; a missing key means the pin is left at its default.
    """

    def __init__(self):
        self._chip: Optional[ChipDefinition] = None
        self._assignments: Dict[str, str] = {}

    @property
    def current_chip(self) -> Optional[ChipDefinition]:
        return self._chip

    @property
    def is_loaded(self) -> bool:
        return self._chip is not None

    @property
    def physical_pins(self) -> List[PhysicalPin]:
        """Copy of the loaded chip's package pins, in definition order"""
        if self._chip is None:
            return []
        return list(self._chip.package.pins)

    @property
    def assignments(self) -> Dict[str, str]:
        """Snapshot of the current assignments"""
        return dict(self._assignments)

    def load_chip(self, chip: ChipDefinition) -> None:
        """Make `chip` the current chip, discarding all assignments."""
        logger.debug(f"Loading chip '{chip.meta.name}', clearing {len(self._assignments)} assignments")
        self._chip = chip
        self._assignments = {}

    def set_pin_function(self, pin_name: str, func: Optional[str]) -> AssignResult:
        """
        Select `func` for `pin_name`.

        An empty `func` returns the pin to its default. A function the pin
        does not support leaves the store untouched.
        """
        if self._chip is None:
            logger.debug(f"Ignoring {pin_name}={func!r}: no chip loaded")
            return AssignResult.NO_CHIP_LOADED

        if not func:
            self._assignments.pop(pin_name, None)
            logger.debug(f"Cleared {pin_name}")
            return AssignResult.OK

        if pin_name not in self._chip.pins:
            logger.debug(f"Ignoring {pin_name}={func!r}: pin not in '{self._chip.meta.name}'")
            return AssignResult.PIN_NOT_FOUND

        if func not in self.get_pin_functions(pin_name):
            logger.debug(f"Ignoring {pin_name}={func!r}: function not supported")
            return AssignResult.FUNCTION_NOT_SUPPORTED

        self._assignments[pin_name] = func
        logger.debug(f"Assigned {pin_name}={func!r}")
        return AssignResult.OK

    def get_pin_configuration(self, pin_name: str) -> Optional[str]:
        return self._assignments.get(pin_name)

    def get_pin_functions(self, pin_name: str) -> List[str]:
        """Functions supported by `pin_name`, or an empty list if unknown"""
        if self._chip is None:
            return []
        pin = self._chip.pins.get(pin_name)
        return list(pin.functions) if pin else []

    def get_pin_type(self, pin_name: str) -> str:
        """Declared type of `pin_name`, or ``"unknown"``"""
        if self._chip is None:
            return UNKNOWN_PIN_TYPE
        pin = self._chip.pins.get(pin_name)
        return pin.type if pin else UNKNOWN_PIN_TYPE
