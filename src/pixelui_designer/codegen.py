"""
Lua code generation for PixelUI designs.

Turns an ordered collection of widget elements into Lua source in one of
three shapes:

- full: a runnable program with library bootstrap, root container, the
  widgets, and a main event loop
- widgets: only the widget creation statements
- function: a createUI(parent) factory returning a table of widgets

Output is deterministic: the same elements and format always produce the
same text.
"""

import textwrap
from collections.abc import Iterable
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Union

from .config import ExportSettings
from .fields import widget_config
from .logging_config import get_logger
from .naming import variable_name
from .widgets import WidgetElement

logger = get_logger(__name__)

EMPTY_EXPORT = "-- No widgets to export"


class ExportFormat(str, Enum):
    """Shapes of generated code."""

    FULL = "full"
    WIDGETS = "widgets"
    FUNCTION = "function"


def lua_string(text: str) -> str:
    """Quote text as a Lua double-quoted string literal."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'


def lua_literal(value: Any) -> str:
    """
    Render a configuration value as a Lua literal.

    Strings are quoted, lists become tables of quoted strings, booleans are
    true/false and numbers are bare (integral floats drop their ".0").
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return lua_string(value)
    if isinstance(value, (list, tuple)):
        return "{" + ", ".join(lua_string(str(item)) for item in value) + "}"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class LuaCodeGenerator:
    """
    Generates PixelUI Lua code from design elements.

    The generator holds only its settings; elements are read, never modified,
    and are enumerated in the order given.
    """

    def __init__(self, settings: Optional[ExportSettings] = None):
        """
        Initialize generator.

        Args:
            settings: Export naming settings (defaults reproduce the designer)
        """
        self.settings = settings or ExportSettings()

    def generate(
        self,
        elements: Iterable[WidgetElement],
        export_format: Union[ExportFormat, str] = ExportFormat.FULL,
    ) -> str:
        """
        Generate code for elements in the requested shape.

        Args:
            elements: Elements in design order
            export_format: Output shape ("full", "widgets" or "function")

        Returns:
            Generated Lua source, or the "-- No widgets to export" line when
            there are no elements

        Raises:
            ValueError: If export_format is not a known shape
        """
        export_format = ExportFormat(export_format)
        elements = list(elements)

        logger.debug(f"Generating '{export_format.value}' code for {len(elements)} elements")

        if not elements:
            return EMPTY_EXPORT

        if export_format is ExportFormat.WIDGETS:
            return self.generate_widgets_only(elements)
        if export_format is ExportFormat.FUNCTION:
            return self.generate_function(elements)
        return self.generate_full_program(elements)

    def widget_code(self, element: WidgetElement, parent: Optional[str] = None) -> str:
        """
        Generate the creation statement for one element.

        Args:
            element: Element to declare
            parent: Binding to attach the widget to. None or the root binding
                means no addChild statement is emitted.

        Returns:
            Lua fragment without a trailing newline
        """
        indent = self.settings.indent
        var_name = variable_name(element)

        lines = [f'local {var_name} = {self.settings.library}.create({lua_string(element.type)}, {{']
        for key, value in widget_config(element).items():
            if value is not None:
                lines.append(f"{indent}{key} = {lua_literal(value)},")
        lines.append("})")

        if parent and parent != self.settings.root_name:
            lines.append(f"{parent}:addChild({var_name})")

        return "\n".join(lines)

    def generate_full_program(self, elements: list[WidgetElement]) -> str:
        """Runnable program: bootstrap, root container, widgets, event loop."""
        code = self._full_prologue()
        for element in elements:
            code += self.widget_code(element) + "\n"
        code += self._full_epilogue()
        return code

    def generate_widgets_only(self, elements: list[WidgetElement]) -> str:
        """Widget creation statements under a header comment."""
        code = "-- Widget Creation Code\n\n"
        for element in elements:
            code += self.widget_code(element) + "\n"
        return code

    def generate_function(self, elements: list[WidgetElement]) -> str:
        """Factory function attaching every widget to its parent argument."""
        s = self.settings
        i = s.indent

        code = (
            "-- UI Creation Function\n"
            f"local function {s.factory_name}({s.parent_name})\n"
            f"{i}local {s.result_name} = {{}}\n"
            "\n"
        )

        for element in elements:
            var_name = variable_name(element)
            code += textwrap.indent(self.widget_code(element, s.parent_name), i) + "\n"
            code += f"{i}{s.result_name}.{var_name} = {var_name}\n\n"

        code += (
            f"{i}return {s.result_name}\n"
            "end\n"
            "\n"
            "-- Usage:\n"
            f"-- local {s.result_name} = {s.factory_name}(rootContainer)\n"
            f"-- Access widgets with: {s.result_name}.button1, {s.result_name}.label1, etc."
        )
        return code

    def _full_prologue(self) -> str:
        s = self.settings
        i = s.indent
        lib = s.library
        return "\n".join([
            "-- Generated PixelUI Code",
            "-- Created with PixelUI Visual Designer",
            "",
            f'local {lib} = require("{lib}")',
            "",
            "-- Get the terminal dimensions",
            "local termW, termH = term.getSize()",
            "",
            "-- Create the root container",
            f'local {s.root_name} = {lib}.create("container", {{',
            f"{i}x = 1,",
            f"{i}y = 1,",
            f"{i}width = termW,",
            f"{i}height = termH,",
            f"{i}isScrollable = false",
            "})",
            "",
            "",
        ])

    def _full_epilogue(self) -> str:
        s = self.settings
        i = s.indent
        lib = s.library
        return "\n".join([
            "",
            "-- Show the UI",
            f"{s.root_name}:show()",
            "",
            "-- Main event loop",
            "while true do",
            f"{i}local event, p1, p2, p3 = os.pullEvent()",
            "",
            f"{i}-- Handle events",
            f'{i}if event == "mouse_click" or event == "mouse_drag" or event == "mouse_up" then',
            f"{i}{i}{lib}.handleMouse(event, p1, p2, p3)",
            f'{i}elseif event == "char" or event == "key" or event == "key_up" then',
            f"{i}{i}{lib}.handleKeyboard(event, p1, p2)",
            f"{i}end",
            "",
            f"{i}-- Add your custom event handling here",
            "",
            f"{i}-- Exit condition (optional)",
            f'{i}if event == "key" and p1 == keys.q then',
            f"{i}{i}break",
            f"{i}end",
            "end",
            "",
            "-- Clean up",
            f"{lib}.cleanup()",
        ])


def generate_code(
    elements: Iterable[WidgetElement],
    export_format: Union[ExportFormat, str] = ExportFormat.FULL,
    settings: Optional[ExportSettings] = None,
) -> str:
    """
    Generate PixelUI Lua code for elements.

    Args:
        elements: Elements in design order
        export_format: "full" (default), "widgets" or "function"
        settings: Optional export settings

    Returns:
        Generated Lua source

    Example:
        >>> from pixelui_designer import Design, generate_code
        >>> design = Design()
        >>> design.add_widget("button")
        >>> print(generate_code(design.elements, "widgets"))
    """
    return LuaCodeGenerator(settings).generate(elements, export_format)


def export_filename(
    export_format: Union[ExportFormat, str] = ExportFormat.FULL,
    timestamp: Optional[datetime] = None,
    settings: Optional[ExportSettings] = None,
) -> str:
    """
    Build the download filename for exported code.

    Args:
        export_format: Output shape the code was generated in
        timestamp: Export time (defaults to now, UTC)
        settings: Optional export settings for base name and extension

    Returns:
        Filename like "pixelui_design_full_20240131T154502.lua"
    """
    export_format = ExportFormat(export_format)
    settings = settings or ExportSettings()
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)
    stamp = timestamp.strftime("%Y%m%dT%H%M%S")
    return f"{settings.file_basename}_{export_format.value}_{stamp}{settings.file_extension}"
