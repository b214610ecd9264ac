"""
Pydantic configuration models for code export and previewing.

Defaults reproduce the PixelUI designer's output: the "pixelui" Lua library,
a root container named "root", a createUI(parent) factory, and an 8x16 pixel
cell preview of a 51x19 ComputerCraft terminal.
"""

import json
import re
from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .logging_config import get_logger

logger = get_logger(__name__)

LUA_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ConfigurationError(Exception):
    """Raised when a settings file cannot be read or is invalid."""
    pass


class ExportSettings(BaseModel):
    """
    Names and boilerplate choices for generated Lua code.

    Attributes:
        library: Module passed to require() and used for pixelui.create calls
        root_name: Binding of the root container in full programs
        factory_name: Name of the generated factory function
        parent_name: Parameter of the factory receiving the parent container
        result_name: Table the factory fills and returns
        indent: Indentation unit for table fields and function bodies
        file_basename: Prefix of the export download filename
        file_extension: Extension of the export download filename
    """
    library: str = "pixelui"
    root_name: str = "root"
    factory_name: str = "createUI"
    parent_name: str = "parent"
    result_name: str = "widgets"
    indent: str = "    "
    file_basename: str = "pixelui_design"
    file_extension: str = ".lua"

    @field_validator('library', 'root_name', 'factory_name', 'parent_name', 'result_name')
    @classmethod
    def validate_lua_identifier(cls, v):
        """Binding names end up verbatim in Lua source."""
        if not LUA_IDENTIFIER.match(v):
            raise ValueError(f"'{v}' is not a valid Lua identifier")
        return v

    @field_validator('indent')
    @classmethod
    def validate_indent(cls, v):
        if v.strip(" \t"):
            raise ValueError("indent may only contain spaces and tabs")
        return v


class PreviewSettings(BaseModel):
    """
    Geometry of the preview canvas.

    Cells are terminal characters; the minimum size is the standard
    ComputerCraft terminal.
    """
    cell_width: int = Field(default=8, ge=1)
    cell_height: int = Field(default=16, ge=1)
    padding: int = Field(default=2, ge=0)
    min_width: int = Field(default=51, ge=0)
    min_height: int = Field(default=19, ge=0)


class DesignerConfig(BaseModel):
    """Root configuration combining export and preview settings."""
    export: ExportSettings = Field(default_factory=ExportSettings)
    preview: PreviewSettings = Field(default_factory=PreviewSettings)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "DesignerConfig":
        """
        Load configuration from a JSON file.

        Args:
            path: JSON file with optional "export" and "preview" sections

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If the file is missing, not JSON, or invalid
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings in {path}: {e}") from e

        logger.debug(f"Loaded settings from {path}")
        return config
