"""
Log output for pixelui_designer, rendered by rich on stderr.

Generated Lua is written to stdout, so log records never share a stream with
it. Library modules only call get_logger(); installing the handler is left to
whoever owns the process (the pixelui-export command, a demo script, a test).
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_logging_configured = False


def setup_logging(
    level: int = logging.INFO,
    show_time: bool = True,
    show_path: bool = False,
    rich_tracebacks: bool = True,
    console: Optional[Console] = None,
) -> None:
    """
    Route all log records through a single RichHandler.

    Only the first call has an effect.

    Args:
        level: Root level applied to every pixelui_designer logger
        show_time: Prefix records with the wall-clock time
        show_path: Append the emitting file and line
        rich_tracebacks: Render exceptions logged with exc_info through rich
        console: Console to draw on; a stderr console when omitted

    Example:
        >>> import logging
        >>> from pixelui_designer.logging_config import setup_logging
        >>> setup_logging(level=logging.DEBUG)
    """
    global _logging_configured

    if _logging_configured:
        return

    if console is None:
        console = Console(stderr=True)

    # Element names and Lua snippets contain brackets rich would read as markup
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=rich_tracebacks,
        markup=False,
        log_time_format="[%X]",
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger for a pixelui_designer module; pass __name__."""
    return logging.getLogger(name)


def set_module_level(module_name: str, level: int) -> None:
    """
    Raise or lower verbosity for one module without touching the rest.

    Useful to trace a single stage, e.g. the identifier fallbacks chosen in
    'pixelui_designer.naming' or the canvas bounds from 'pixelui_designer.layout'.
    """
    logging.getLogger(module_name).setLevel(level)
