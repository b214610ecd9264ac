#!/usr/bin/env python3
"""
Demo script for exporting a PixelUI design.

This script demonstrates:
- Building a small settings screen with the designer's widget defaults
- Generating Lua code in all three export shapes
- Writing an HTML preview of the layout
"""

import logging
from pathlib import Path

from pixelui_designer.codegen import ExportFormat, generate_code, export_filename
from pixelui_designer.design import Design, save_design
from pixelui_designer.logging_config import setup_logging, set_module_level, get_logger
from pixelui_designer.preview import PreviewRenderer

setup_logging(level=logging.INFO)

logger = get_logger(__name__)

# Show how identifiers and bounds are derived
set_module_level('pixelui_designer.naming', logging.DEBUG)
set_module_level('pixelui_designer.layout', logging.DEBUG)


def create_settings_screen() -> Design:
    """
    Create a settings screen for a 51x19 ComputerCraft terminal.

    Layout:
    - Title label across the top
    - A bordered container holding the options
    - Volume slider, fullscreen toggle and a name text box
    - Save and Cancel buttons along the bottom
    """
    design = Design()

    title = design.add_widget("label", x=2, y=1)
    title.name = "Title"
    title.text = "Settings"
    title.width = 20
    title.align = "center"

    design.add_widget("container", x=1, y=3)

    volume = design.add_widget("slider", x=3, y=5)
    volume.name = "Volume"
    volume.value = 30

    fullscreen = design.add_widget("toggleSwitch", x=3, y=7)
    fullscreen.name = "Fullscreen"
    fullscreen.text = "Fullscreen"
    fullscreen.checked = True

    player = design.add_widget("textBox", x=3, y=9)
    player.name = "Player Name"
    player.placeholder = "Your name"
    player.max_length = 16

    save = design.add_widget("button", x=2, y=15)
    save.name = "Save"
    save.text = "Save"
    save.background = "green"

    cancel = design.add_widget("button", x=12, y=15)
    cancel.name = "Cancel"
    cancel.text = "Cancel"
    cancel.background = "red"

    return design


def main():
    out_dir = Path("pixelui_export")
    out_dir.mkdir(exist_ok=True)

    design = create_settings_screen()
    save_design(out_dir / "settings_screen.json", design)

    for export_format in ExportFormat:
        code = generate_code(design.elements, export_format)
        path = out_dir / export_filename(export_format)
        path.write_text(code, encoding="utf-8")
        logger.info(f"{export_format.value}: {len(code.splitlines())} lines -> {path}")

    preview = out_dir / "preview.html"
    preview.write_text(PreviewRenderer().render_document(design.elements), encoding="utf-8")
    logger.info(f"Preview written to {preview}")

    print(generate_code(design.elements, ExportFormat.WIDGETS))


if __name__ == "__main__":
    main()
