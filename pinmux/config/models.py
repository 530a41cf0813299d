# SPDX-License-Identifier: BSD-2-Clause
from pathlib import Path
from typing import Dict, Annotated

from pydantic import BaseModel, StringConstraints


class ExportConfig(BaseModel):
    """Configuration for report export."""
    directory: Path = Path(".")
    delimiter: Annotated[str, StringConstraints(min_length=1, max_length=1)] = ","


class PinMuxConfig(BaseModel):
    """Project configuration in pinmux.toml."""
    project_name: str
    chip: Path
    export: ExportConfig = ExportConfig()
    pins: Dict[str, str] = {}


class Config(BaseModel):
    """Root configuration model for pinmux.toml."""
    pinmux: PinMuxConfig
