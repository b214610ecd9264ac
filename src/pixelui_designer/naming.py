"""Lua identifier derivation for exported widgets."""

import re

from .logging_config import get_logger
from .widgets import WidgetElement

logger = get_logger(__name__)

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def normalize_identifier(text: str) -> str:
    """
    Turn arbitrary text into a Lua-safe identifier fragment.

    Drops everything outside [A-Za-z0-9], prefixes a leading digit with an
    underscore and lowercases. Idempotent; may return an empty string.
    """
    stripped = _NON_ALNUM.sub("", text)
    if stripped[:1].isdigit():
        stripped = "_" + stripped
    return stripped.lower()


def variable_name(element: WidgetElement) -> str:
    """
    Derive the local variable name used for an element in generated code.

    Names are not deduplicated: two elements whose names normalize alike
    share a variable name.

    Args:
        element: Element to name

    Returns:
        Normalized element name, or "<type><creation counter>" when the name
        has no usable characters
    """
    name = normalize_identifier(element.name)
    if name:
        return name

    fallback = f"{element.type}{element.id.split('_')[1]}"
    logger.debug(f"Element {element.id} has no usable name, using '{fallback}'")
    return fallback
