"""
Design documents: the ordered collection of elements on the design surface.

A Design owns its elements in insertion order, which is also the order of
every generated output. It creates widgets with the designer's per-type
defaults and reads/writes the JSON the designer saves.
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, PrivateAttr, ValidationError, model_validator

from .logging_config import get_logger
from .widgets import Element, WidgetElement, WidgetType, parse_element

logger = get_logger(__name__)

DEFAULT_POSITION = (5, 5)

# Attributes a freshly dropped widget starts with (besides position)
WIDGET_DEFAULTS: dict[WidgetType, dict[str, Any]] = {
    WidgetType.BUTTON: {
        "width": 8, "height": 3, "text": "Button",
        "background": "gray", "color": "white", "border": True,
    },
    WidgetType.LABEL: {
        "width": 5, "height": 1, "text": "Label", "color": "white", "align": "left",
    },
    WidgetType.TEXT_BOX: {
        "width": 16, "height": 1, "text": "", "placeholder": "Type here...",
        "color": "white", "background": "black", "border": True,
    },
    WidgetType.CHECK_BOX: {
        "width": 8, "height": 1, "checked": False, "text": "Checkbox", "color": "white",
    },
    WidgetType.RADIO_BUTTON: {
        "width": 10, "height": 1, "checked": False, "text": "Radio",
        "group": "group1", "color": "white",
    },
    WidgetType.TOGGLE_SWITCH: {
        "width": 12, "height": 1, "checked": False, "text": "Toggle", "color": "white",
    },
    WidgetType.SLIDER: {
        "width": 20, "height": 1, "value": 50, "min": 0, "max": 100,
        "trackColor": "gray", "fillColor": "blue", "knobColor": "white",
    },
    WidgetType.PROGRESS_BAR: {
        "width": 20, "height": 1, "progress": 75, "color": "green",
        "background": "gray", "text": "Loading...",
    },
    WidgetType.CONTAINER: {
        "width": 20, "height": 10, "border": True, "borderColor": "lightGray",
        "background": None, "isScrollable": False,
    },
    WidgetType.LIST_VIEW: {
        "width": 15, "height": 8, "items": ["Item 1", "Item 2", "Item 3"],
        "selected": 1, "color": "white", "background": "black", "selectedColor": "blue",
    },
}


class DesignError(Exception):
    """Raised when a design file cannot be read, parsed or validated."""
    pass


class Design(BaseModel):
    """
    Ordered collection of design elements.

    Element ids are unique. Code generation and previews enumerate
    `elements` in order and never modify it.
    """

    elements: list[Element] = Field(default_factory=list)

    # Highest creation counter ever handed out; never decreases
    _counter: int = PrivateAttr(default=0)

    def model_post_init(self, __context: Any) -> None:
        self._counter = max((e.creation_index for e in self.elements), default=0)

    @model_validator(mode='after')
    def validate_unique_ids(self):
        """Reject designs where two elements share an id."""
        seen = set()
        for element in self.elements:
            if element.id in seen:
                raise ValueError(f"Duplicate element id '{element.id}'")
            seen.add(element.id)
        return self

    def get(self, element_id: str) -> Optional[WidgetElement]:
        """Look up an element by id."""
        for element in self.elements:
            if element.id == element_id:
                return element
        return None

    def next_index(self) -> int:
        """Next creation counter. Counters of removed elements are not reused."""
        live = max((e.creation_index for e in self.elements), default=0)
        return max(self._counter, live) + 1

    def add_widget(
        self,
        widget_type: Union[WidgetType, str],
        x: Optional[int] = None,
        y: Optional[int] = None,
    ) -> WidgetElement:
        """
        Create a widget with its default attributes and append it.

        Args:
            widget_type: Kind of widget to create
            x: Grid column (default 5)
            y: Grid row (default 5)

        Returns:
            The new element, with id "widget_<n>" and name "<Type> <n>"

        Raises:
            ValueError: If widget_type is not a known widget kind
        """
        widget_type = WidgetType(widget_type)
        index = self.next_index()
        self._counter = index
        kind = widget_type.value

        data = {
            "id": f"widget_{index}",
            "type": kind,
            "name": f"{kind[0].upper()}{kind[1:]} {index}",
            "x": DEFAULT_POSITION[0] if x is None else x,
            "y": DEFAULT_POSITION[1] if y is None else y,
            **WIDGET_DEFAULTS[widget_type],
        }
        element = parse_element(data)
        self.elements.append(element)
        logger.debug(f"Added {kind} as {element.id}")
        return element

    def remove(self, element_id: str) -> bool:
        """
        Remove an element by id.

        Returns:
            True if an element was removed
        """
        for i, element in enumerate(self.elements):
            if element.id == element_id:
                del self.elements[i]
                logger.debug(f"Removed {element_id}")
                return True
        return False

    def duplicate(self, element_id: str, offset: int = 2) -> Optional[WidgetElement]:
        """
        Append a copy of an element with a fresh id and name.

        Args:
            element_id: Element to copy
            offset: Cells to shift the copy right and down

        Returns:
            The copy, or None if no element has that id
        """
        source = self.get(element_id)
        if source is None:
            return None

        index = self.next_index()
        self._counter = index
        kind = source.type
        copy = source.model_copy(
            update={
                "id": f"widget_{index}",
                "name": f"{kind[0].upper()}{kind[1:]} {index}",
                "x": source.x + offset,
                "y": source.y + offset,
            },
            deep=True,
        )
        self.elements.append(copy)
        logger.debug(f"Duplicated {element_id} as {copy.id}")
        return copy

    def to_data(self) -> dict[str, Any]:
        """Serializable form with camelCase keys and absent attributes omitted."""
        return {
            "elements": [
                e.model_dump(by_alias=True, exclude_none=True) for e in self.elements
            ],
        }

    @classmethod
    def from_data(cls, data: Any) -> "Design":
        """
        Build a design from decoded JSON.

        Accepts a list of elements, a {"elements": [...]} document, or the
        designer's history snapshot format (a list of [id, element] pairs).

        Raises:
            pydantic.ValidationError: If an element or the collection is invalid
        """
        if isinstance(data, dict):
            data = data.get("elements", [])
        if not isinstance(data, list):
            raise ValueError("design must be a list of elements or an object with 'elements'")

        elements = []
        for entry in data:
            if isinstance(entry, (list, tuple)) and len(entry) == 2:
                entry = entry[1]
            elements.append(entry)
        return cls.model_validate({"elements": elements})


def load_design(path: Union[str, Path]) -> Design:
    """
    Load a design from a JSON file.

    Raises:
        DesignError: If the file is unreadable, not JSON, or not a valid design
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise DesignError(f"Cannot read design file {path}: {e}") from e

    try:
        design = Design.from_data(data)
    except (ValidationError, ValueError) as e:
        raise DesignError(f"Invalid design in {path}: {e}") from e

    logger.debug(f"Loaded {len(design.elements)} elements from {path}")
    return design


def save_design(path: Union[str, Path], design: Design) -> None:
    """Write a design to a JSON file."""
    path = Path(path)
    path.write_text(json.dumps(design.to_data(), indent=2, ensure_ascii=False), encoding="utf-8")
    logger.debug(f"Saved {len(design.elements)} elements to {path}")
