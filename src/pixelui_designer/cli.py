"""
Command line export of PixelUI designs.

Usage:
    $ pixelui-export design.json --format widgets
    $ pixelui-export design.json --save-dir exports/ --preview preview.html
    $ python -m pixelui_designer.cli design.json --highlight
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.syntax import Syntax

from .codegen import ExportFormat, LuaCodeGenerator, export_filename
from .config import ConfigurationError, DesignerConfig
from .design import DesignError, load_design
from .logging_config import get_logger, setup_logging
from .preview import PreviewRenderer

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelui-export",
        description="Export a PixelUI design as Lua code and an HTML preview",
    )
    parser.add_argument("design", type=Path, help="Design JSON file")
    parser.add_argument(
        "-f",
        "--format",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.FULL.value,
        help="Shape of the generated code (default: full)",
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument("-o", "--output", type=Path, help="Write code to this file")
    target.add_argument(
        "--save-dir",
        type=Path,
        help="Write code into this directory under a timestamped export filename",
    )
    parser.add_argument("--preview", type=Path, help="Also write an HTML preview page")
    parser.add_argument("--config", type=Path, help="Settings JSON file")
    parser.add_argument(
        "--highlight",
        action="store_true",
        help="Syntax-highlight code printed to the terminal",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(level=logging.DEBUG if args.debug else logging.INFO)

    try:
        config = DesignerConfig.from_file(args.config) if args.config else DesignerConfig()
        design = load_design(args.design)
    except (ConfigurationError, DesignError) as e:
        logger.error(str(e))
        return 1

    code = LuaCodeGenerator(config.export).generate(design.elements, args.format)

    try:
        if args.output or args.save_dir:
            if args.save_dir:
                args.save_dir.mkdir(parents=True, exist_ok=True)
                path = args.save_dir / export_filename(args.format, settings=config.export)
            else:
                path = args.output
            path.write_text(code, encoding="utf-8")
            logger.info(f"Wrote {args.format} export of {len(design.elements)} widgets to {path}")
        elif args.highlight:
            Console().print(Syntax(code, "lua", line_numbers=True))
        else:
            sys.stdout.write(code + "\n")

        if args.preview:
            html = PreviewRenderer(config.preview).render_document(
                design.elements, title=f"PixelUI Preview - {args.design.name}",
            )
            args.preview.write_text(html, encoding="utf-8")
            logger.info(f"Wrote preview to {args.preview}")
    except OSError as e:
        logger.error(f"Cannot write output: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
