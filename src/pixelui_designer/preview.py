"""
HTML preview rendering for designs.

Renders the projected layout as absolutely positioned boxes approximating how
the widgets will look on a ComputerCraft terminal. Markup lives in the jinja2
templates shipped with the package.
"""

from collections.abc import Iterable
from typing import Callable, Optional

from jinja2 import Environment, PackageLoader, select_autoescape

from .colors import get_color_hex
from .config import PreviewSettings
from .layout import compute_bounds, project_elements
from .logging_config import get_logger
from .widgets import WidgetElement

logger = get_logger(__name__)

# Kinds the preview draws itself; the rest go to the fallback renderer
PREVIEW_MACROS: dict[str, str] = {
    "button": "button",
    "label": "label",
    "textBox": "text_box",
    "container": "container",
}

# Built-in fallback content, used when no fallback renderer is supplied
DEFAULT_MACROS: dict[str, str] = {
    "checkBox": "check_box",
    "progressBar": "progress_bar",
}


def _env() -> Environment:
    return Environment(
        loader=PackageLoader("pixelui_designer", "templates"),
        autoescape=select_autoescape(["html", "html.j2"]),
    )


class PreviewRenderer:
    """
    Renders a design preview as HTML.

    Args:
        settings: Preview geometry (cell size, padding, minimum canvas)
        color_lookup: Maps a color name to a CSS color
        fallback_renderer: Optional callable returning trusted HTML for kinds
            the preview does not draw itself (everything but button, label,
            textBox and container)
    """

    def __init__(
        self,
        settings: Optional[PreviewSettings] = None,
        color_lookup: Callable[[Optional[str]], str] = get_color_hex,
        fallback_renderer: Optional[Callable[[WidgetElement], str]] = None,
    ):
        self.settings = settings or PreviewSettings()
        self._fallback_renderer = fallback_renderer
        self._env = _env()
        self._env.globals["cc_color"] = color_lookup
        self._macros = self._env.get_template("widgets.html.j2").module

    def render_content(self, element: WidgetElement) -> str:
        """Inner HTML for one element, filling its positioned box."""
        macro_name = PREVIEW_MACROS.get(element.type)
        if macro_name is not None:
            return str(getattr(self._macros, macro_name)(element))

        if self._fallback_renderer is not None:
            return self._fallback_renderer(element)

        macro_name = DEFAULT_MACROS.get(element.type, "generic")
        return str(getattr(self._macros, macro_name)(element))

    def _context(self, elements: Iterable[WidgetElement]) -> dict:
        elements = list(elements)
        bounds = compute_bounds(elements, self.settings)
        projected = project_elements(elements, bounds, self.settings)

        items = [
            {
                "id": p.element.id,
                "rect": p.rect,
                "z_index": p.z_index,
                "content": self.render_content(p.element),
            }
            for p in projected
        ]
        logger.debug(f"Preview of {len(items)} visible elements out of {len(elements)}")

        return {
            "has_elements": bool(elements),
            "canvas_width": bounds.width * self.settings.cell_width,
            "canvas_height": bounds.height * self.settings.cell_height,
            "items": items,
        }

    def render(self, elements: Iterable[WidgetElement]) -> str:
        """
        Render the preview canvas fragment.

        Args:
            elements: Elements in design order; hidden ones are skipped

        Returns:
            HTML fragment, or a "No widgets to preview" block for an empty design
        """
        return self._env.get_template("preview.html.j2").render(**self._context(elements))

    def render_document(self, elements: Iterable[WidgetElement], title: str = "PixelUI Preview") -> str:
        """Render a standalone HTML page containing the preview canvas."""
        return self._env.get_template("page.html.j2").render(title=title, **self._context(elements))
