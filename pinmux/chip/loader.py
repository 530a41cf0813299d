# SPDX-License-Identifier: BSD-2-Clause
"""
Loading of chip definition files.
"""

import logging

from pathlib import Path

import pydantic

from ..utils import PinMuxError, format_validation_error
from .models import ChipDefinition

logger = logging.getLogger(__name__)


def parse_chip_definition(data: str | bytes) -> ChipDefinition:
    """
    Parse a JSON chip definition.

    Raises:
        PinMuxError: If the document is not valid JSON or does not match the model
    """
    try:
        return ChipDefinition.model_validate_json(data)
    except pydantic.ValidationError as e:
        raise PinMuxError(f"Chip definition is misformed:\n{format_validation_error(e)}") from e


def load_chip_definition(path) -> ChipDefinition:
    """
    Load a chip definition from a JSON file.

    Args:
        path: Location of the definition file

    Returns:
        ChipDefinition model

    Raises:
        PinMuxError: If the file is missing or malformed
    """
    path = Path(path)
    logger.debug(f"Loading chip definition from {path}")
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        raise PinMuxError(f"Chip definition not found. I expected to find it at {path}")

    try:
        chip = parse_chip_definition(data)
    except PinMuxError as e:
        raise PinMuxError(f"{path}: {e}") from e

    logger.debug(
        f"Loaded chip '{chip.meta.name}': {len(chip.pins)} pin capabilities, "
        f"{len(chip.package.pins)} physical pins"
    )
    return chip
