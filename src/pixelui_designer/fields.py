"""
Per-type projection of an element onto its exported configuration fields.

The result is the ordered mapping that becomes the option table of a
pixelui.create(...) call: geometry first, then the element type's own
attributes in declaration order, each filtered by its export rule.
"""

from typing import Any

from .logging_config import get_logger
from .widgets import ExportRule, GenericElement, WidgetElement

logger = get_logger(__name__)

GEOMETRY_FIELDS = ("x", "y", "width", "height")


def is_exported(value: Any, rule: ExportRule) -> bool:
    """
    Decide whether an attribute value is emitted under the given rule.

    Truthiness follows the designer's JavaScript semantics: None, "", 0,
    False and empty sequences are all falsy.

    Args:
        value: Attribute value (None when the attribute is absent)
        rule: Export rule declared for the attribute

    Returns:
        True if the attribute belongs in generated code
    """
    if rule is ExportRule.DEFINED:
        return value is not None
    if rule is ExportRule.NOT_LEFT:
        return bool(value) and value != "left"
    # TRUTHY and NON_EMPTY share Python truthiness
    return bool(value)


def widget_config(element: WidgetElement) -> dict[str, Any]:
    """
    Project an element onto the configuration fields relevant to its type.

    Args:
        element: Element to project (not modified)

    Returns:
        Ordered dict keyed by the PixelUI option name (camelCase). Always holds
        x, y, width and height; unrecognized widget kinds get nothing else.
    """
    config: dict[str, Any] = {name: getattr(element, name) for name in GEOMETRY_FIELDS}

    if isinstance(element, GenericElement):
        logger.debug(f"Unknown widget type '{element.type}' for {element.id}, exporting geometry only")
        return config

    model_fields = type(element).model_fields
    for attribute, rule in element.export_fields:
        value = getattr(element, attribute)
        if is_exported(value, rule):
            key = model_fields[attribute].alias or attribute
            config[key] = list(value) if isinstance(value, list) else value

    return config
