"""
Preview geometry for designs.

Computes the canvas bounds covering every element and maps element grid
coordinates (terminal cells) onto pixel rectangles relative to those bounds.
"""

from collections.abc import Iterable
from typing import Optional

from pydantic import BaseModel, Field

from .config import PreviewSettings
from .logging_config import get_logger
from .widgets import WidgetElement

logger = get_logger(__name__)


class Bounds(BaseModel):
    """Covering rectangle of a design, in terminal cells."""

    min_x: int = Field(ge=0)
    min_y: int = Field(ge=0)
    width: int = Field(ge=0)
    height: int = Field(ge=0)

    model_config = {"frozen": True}


class PixelRect(BaseModel):
    """Element rectangle in preview pixels, relative to the bounds origin."""

    x: int
    y: int
    width: int
    height: int

    model_config = {"frozen": True}


class ProjectedElement(BaseModel):
    """A visible element placed on the preview canvas."""

    element: WidgetElement
    rect: PixelRect
    z_index: int  # Creation counter, later elements stack above


def compute_bounds(
    elements: Iterable[WidgetElement],
    settings: Optional[PreviewSettings] = None,
) -> Bounds:
    """
    Compute the preview canvas bounds for elements.

    The covering box of all elements is grown by the padding on every side,
    its origin clamped to 0, and its size raised to at least the standard
    terminal size. Hidden elements still count.

    Args:
        elements: Elements to cover
        settings: Optional preview settings

    Returns:
        Bounds, or (0, 0, min_width, min_height) when there are no elements
    """
    settings = settings or PreviewSettings()
    elements = list(elements)

    if not elements:
        return Bounds(min_x=0, min_y=0, width=settings.min_width, height=settings.min_height)

    min_x = min(e.x for e in elements)
    min_y = min(e.y for e in elements)
    max_x = max(e.x + e.width for e in elements)
    max_y = max(e.y + e.height for e in elements)

    min_x = max(0, min_x - settings.padding)
    min_y = max(0, min_y - settings.padding)
    max_x += settings.padding
    max_y += settings.padding

    bounds = Bounds(
        min_x=min_x,
        min_y=min_y,
        width=max(settings.min_width, max_x - min_x),
        height=max(settings.min_height, max_y - min_y),
    )
    logger.debug(f"Bounds for {len(elements)} elements: {bounds}")
    return bounds


def project_element(
    element: WidgetElement,
    bounds: Bounds,
    settings: Optional[PreviewSettings] = None,
) -> PixelRect:
    """
    Map an element's cell rectangle to preview pixels.

    Args:
        element: Element to place
        bounds: Canvas bounds from compute_bounds()
        settings: Optional preview settings (cell size)

    Returns:
        Pixel rectangle relative to the bounds origin
    """
    settings = settings or PreviewSettings()
    return PixelRect(
        x=(element.x - bounds.min_x) * settings.cell_width,
        y=(element.y - bounds.min_y) * settings.cell_height,
        width=element.width * settings.cell_width,
        height=element.height * settings.cell_height,
    )


def project_elements(
    elements: Iterable[WidgetElement],
    bounds: Optional[Bounds] = None,
    settings: Optional[PreviewSettings] = None,
) -> list[ProjectedElement]:
    """
    Place every visible element on the preview canvas.

    Elements with visible=False are left out. Order follows the input; the
    stacking order is carried separately as z_index.

    Args:
        elements: Elements in design order
        bounds: Canvas bounds (computed from elements when omitted)
        settings: Optional preview settings

    Returns:
        Projected elements in design order
    """
    elements = list(elements)
    if bounds is None:
        bounds = compute_bounds(elements, settings)

    return [
        ProjectedElement(
            element=element,
            rect=project_element(element, bounds, settings),
            z_index=element.creation_index,
        )
        for element in elements
        if element.is_visible
    ]
