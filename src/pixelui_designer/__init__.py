"""
PixelUI Designer: Lua export and layout preview for PixelUI widget designs

Converts layouts built in the PixelUI visual designer (widgets placed on a
ComputerCraft terminal grid) into Lua source in three shapes, and projects the
layout onto pixel rectangles for an HTML preview.
"""

__version__ = "0.1.0"

# Code generation
from .codegen import (
    ExportFormat,
    LuaCodeGenerator,
    export_filename,
    generate_code,
)

# Configuration models
from .config import (
    ConfigurationError,
    DesignerConfig,
    ExportSettings,
    PreviewSettings,
)

# Design documents
from .design import (
    Design,
    DesignError,
    load_design,
    save_design,
)
from .fields import widget_config

# Preview geometry and rendering
from .layout import (
    Bounds,
    PixelRect,
    ProjectedElement,
    compute_bounds,
    project_element,
    project_elements,
)

# Logging configuration
from .logging_config import (
    get_logger,
    set_module_level,
    setup_logging,
)
from .naming import variable_name
from .preview import PreviewRenderer

# Element models
from .widgets import (
    Element,
    GenericElement,
    WidgetElement,
    WidgetType,
    parse_element,
)

__all__ = [
    # Version
    "__version__",
    # Code generation
    "ExportFormat",
    "LuaCodeGenerator",
    "generate_code",
    "export_filename",
    "variable_name",
    "widget_config",
    # Preview
    "Bounds",
    "PixelRect",
    "ProjectedElement",
    "compute_bounds",
    "project_element",
    "project_elements",
    "PreviewRenderer",
    # Elements and designs
    "Element",
    "GenericElement",
    "WidgetElement",
    "WidgetType",
    "parse_element",
    "Design",
    "load_design",
    "save_design",
    # Configuration models
    "ExportSettings",
    "PreviewSettings",
    "DesignerConfig",
    # Logging configuration
    "setup_logging",
    "get_logger",
    "set_module_level",
    # Exceptions
    "ConfigurationError",
    "DesignError",
]
