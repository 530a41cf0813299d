# SPDX-License-Identifier: BSD-2-Clause
"""
Chip definition models.

A chip definition describes which functions each named pin supports and
where the pins sit on the physical package. The two collections are
independent: a physical pin is expected, but not required, to have a
matching capability entry.
"""

from typing import Annotated, Dict, List

from pydantic import BaseModel, BeforeValidator


PinNumber = Annotated[
    str,
    BeforeValidator(lambda v: str(v) if isinstance(v, int) and not isinstance(v, bool) else v)
]


class ChipMeta(BaseModel):
    """Descriptive information about a chip."""
    name: str


class PinCapability(BaseModel):
    """
    What a named pin is and which alternate functions it may be assigned.

    Attributes:
        type: Kind of pin, e.g. 'gpio', 'power', 'reset'
        functions: Supported functions, in display order
    """
    type: str
    functions: List[str] = []


class PhysicalPin(BaseModel):
    """
    A position on the package.

    Attributes:
        name: Pin name, normally a key of :attr:`ChipDefinition.pins`
        number: Physical position label, e.g. '10' or 'A3'
    """
    name: str
    number: PinNumber


class ChipPackage(BaseModel):
    """Physical package layout."""
    pins: List[PhysicalPin] = []


class ChipDefinition(BaseModel):
    """Root model of a chip definition file."""
    meta: ChipMeta
    pins: Dict[str, PinCapability] = {}
    package: ChipPackage = ChipPackage()
