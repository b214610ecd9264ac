"""
Visual element models for the PixelUI designer.

Each widget kind placed on the design surface is a Pydantic model. The kinds
form a closed set (WidgetType); anything else parses into GenericElement,
which carries only the base geometry. Every model declares, in export order,
the attributes that belong in generated code and the rule deciding when an
attribute is emitted.
"""

import re
from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    field_validator,
)
from pydantic.alias_generators import to_camel

# <prefix>_<creation counter>, e.g. "widget_12" or "button_1"
ELEMENT_ID_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]*_(\d+)$")

Number = Union[int, float]


class WidgetType(str, Enum):
    """Widget kinds supported by the PixelUI library."""

    BUTTON = "button"
    LABEL = "label"
    TEXT_BOX = "textBox"
    CHECK_BOX = "checkBox"
    RADIO_BUTTON = "radioButton"
    TOGGLE_SWITCH = "toggleSwitch"
    SLIDER = "slider"
    PROGRESS_BAR = "progressBar"
    CONTAINER = "container"
    LIST_VIEW = "listView"


WIDGET_TYPE_VALUES = frozenset(t.value for t in WidgetType)


class ExportRule(str, Enum):
    """When an optional attribute is emitted into generated code."""

    TRUTHY = "truthy"  # Omitted when None, "", 0 or False
    DEFINED = "defined"  # Omitted only when None
    NON_EMPTY = "non_empty"  # Sequences, omitted when empty
    NOT_LEFT = "not_left"  # Alignment, omitted when unset or "left"


class WidgetElement(BaseModel):
    """
    Base model for one widget instance on the design surface.

    Coordinates and extents are in terminal character cells. Wire names are
    camelCase (readOnly, trackColor) while attributes are snake_case.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    type: str
    name: str = ""
    x: int = 0
    y: int = 0
    width: int = Field(default=1, ge=0)
    height: int = Field(default=1, ge=0)
    visible: Optional[bool] = None

    # (attribute, rule) pairs in generated-code order, after the geometry
    export_fields: ClassVar[tuple[tuple[str, ExportRule], ...]] = ()

    @field_validator("id")
    @classmethod
    def validate_id_format(cls, v):
        """Require a numeric creation counter after the last underscore."""
        if not ELEMENT_ID_PATTERN.match(v):
            raise ValueError(f"element id must look like '<prefix>_<number>', got '{v}'")
        return v

    @property
    def creation_index(self) -> int:
        """Creation counter embedded in the id."""
        return int(self.id.split("_")[1])

    @property
    def is_visible(self) -> bool:
        """Only an explicit visible=False hides an element."""
        return self.visible is not False


class ButtonElement(WidgetElement):
    type: Literal["button"] = "button"
    text: Optional[str] = None
    background: Optional[str] = None
    color: Optional[str] = None
    border: Optional[bool] = None
    enabled: Optional[bool] = None

    export_fields: ClassVar[tuple[tuple[str, ExportRule], ...]] = (
        ("text", ExportRule.TRUTHY),
        ("background", ExportRule.TRUTHY),
        ("color", ExportRule.TRUTHY),
        ("border", ExportRule.DEFINED),
        ("enabled", ExportRule.DEFINED),
    )


class LabelElement(WidgetElement):
    type: Literal["label"] = "label"
    text: Optional[str] = None
    color: Optional[str] = None
    align: Optional[Literal["left", "center", "right"]] = None

    export_fields: ClassVar[tuple[tuple[str, ExportRule], ...]] = (
        ("text", ExportRule.TRUTHY),
        ("color", ExportRule.TRUTHY),
        ("align", ExportRule.NOT_LEFT),
    )


class TextBoxElement(WidgetElement):
    type: Literal["textBox"] = "textBox"
    text: Optional[str] = None
    placeholder: Optional[str] = None
    background: Optional[str] = None
    color: Optional[str] = None
    border: Optional[bool] = None
    read_only: Optional[bool] = None
    max_length: Optional[int] = Field(default=None, ge=0)

    export_fields: ClassVar[tuple[tuple[str, ExportRule], ...]] = (
        ("text", ExportRule.TRUTHY),
        ("placeholder", ExportRule.TRUTHY),
        ("background", ExportRule.TRUTHY),
        ("color", ExportRule.TRUTHY),
        ("border", ExportRule.DEFINED),
        ("read_only", ExportRule.TRUTHY),
        ("max_length", ExportRule.TRUTHY),
    )


class CheckBoxElement(WidgetElement):
    type: Literal["checkBox"] = "checkBox"
    text: Optional[str] = None
    color: Optional[str] = None
    checked: Optional[bool] = None

    export_fields: ClassVar[tuple[tuple[str, ExportRule], ...]] = (
        ("text", ExportRule.TRUTHY),
        ("color", ExportRule.TRUTHY),
        ("checked", ExportRule.TRUTHY),
    )


class RadioButtonElement(WidgetElement):
    type: Literal["radioButton"] = "radioButton"
    text: Optional[str] = None
    color: Optional[str] = None
    checked: Optional[bool] = None
    group: Optional[str] = None

    export_fields: ClassVar[tuple[tuple[str, ExportRule], ...]] = (
        ("text", ExportRule.TRUTHY),
        ("color", ExportRule.TRUTHY),
        ("checked", ExportRule.TRUTHY),
        ("group", ExportRule.TRUTHY),
    )


class ToggleSwitchElement(WidgetElement):
    type: Literal["toggleSwitch"] = "toggleSwitch"
    text: Optional[str] = None
    color: Optional[str] = None
    checked: Optional[bool] = None

    export_fields: ClassVar[tuple[tuple[str, ExportRule], ...]] = (
        ("text", ExportRule.TRUTHY),
        ("color", ExportRule.TRUTHY),
        ("checked", ExportRule.TRUTHY),
    )


class SliderElement(WidgetElement):
    type: Literal["slider"] = "slider"
    value: Optional[Number] = None
    min: Optional[Number] = None
    max: Optional[Number] = None
    step: Optional[Number] = None
    track_color: Optional[str] = None
    fill_color: Optional[str] = None
    knob_color: Optional[str] = None

    export_fields: ClassVar[tuple[tuple[str, ExportRule], ...]] = (
        ("value", ExportRule.DEFINED),
        ("min", ExportRule.DEFINED),
        ("max", ExportRule.DEFINED),
        ("step", ExportRule.DEFINED),
        ("track_color", ExportRule.TRUTHY),
        ("fill_color", ExportRule.TRUTHY),
        ("knob_color", ExportRule.TRUTHY),
    )


class ProgressBarElement(WidgetElement):
    type: Literal["progressBar"] = "progressBar"
    progress: Optional[Number] = None
    text: Optional[str] = None
    color: Optional[str] = None
    background: Optional[str] = None

    export_fields: ClassVar[tuple[tuple[str, ExportRule], ...]] = (
        ("progress", ExportRule.DEFINED),
        ("text", ExportRule.TRUTHY),
        ("color", ExportRule.TRUTHY),
        ("background", ExportRule.TRUTHY),
    )


class ContainerElement(WidgetElement):
    type: Literal["container"] = "container"
    background: Optional[str] = None
    border: Optional[bool] = None
    border_color: Optional[str] = None
    is_scrollable: Optional[bool] = None

    export_fields: ClassVar[tuple[tuple[str, ExportRule], ...]] = (
        ("background", ExportRule.TRUTHY),
        ("border", ExportRule.DEFINED),
        ("border_color", ExportRule.TRUTHY),
        ("is_scrollable", ExportRule.TRUTHY),
    )


class ListViewElement(WidgetElement):
    type: Literal["listView"] = "listView"
    items: list[str] = Field(default_factory=list)
    selected: Optional[int] = None
    color: Optional[str] = None
    background: Optional[str] = None
    selected_color: Optional[str] = None

    export_fields: ClassVar[tuple[tuple[str, ExportRule], ...]] = (
        ("items", ExportRule.NON_EMPTY),
        ("selected", ExportRule.DEFINED),
        ("color", ExportRule.TRUTHY),
        ("background", ExportRule.TRUTHY),
        ("selected_color", ExportRule.TRUTHY),
    )


class GenericElement(WidgetElement):
    """Element of a kind this library does not know; exported as geometry only."""


def _element_tag(value: Any) -> str:
    """Pick the union arm from the raw 'type' value; unknown kinds go generic."""
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    return kind if isinstance(kind, str) and kind in WIDGET_TYPE_VALUES else "generic"


# Discriminated union for parsing any element
Element = Annotated[
    Union[
        Annotated[ButtonElement, Tag("button")],
        Annotated[LabelElement, Tag("label")],
        Annotated[TextBoxElement, Tag("textBox")],
        Annotated[CheckBoxElement, Tag("checkBox")],
        Annotated[RadioButtonElement, Tag("radioButton")],
        Annotated[ToggleSwitchElement, Tag("toggleSwitch")],
        Annotated[SliderElement, Tag("slider")],
        Annotated[ProgressBarElement, Tag("progressBar")],
        Annotated[ContainerElement, Tag("container")],
        Annotated[ListViewElement, Tag("listView")],
        Annotated[GenericElement, Tag("generic")],
    ],
    Discriminator(_element_tag),
]

_element_adapter = TypeAdapter(Element)


def parse_element(data: Any) -> WidgetElement:
    """
    Validate a raw mapping (camelCase or snake_case keys) into an element model.

    Raises:
        pydantic.ValidationError: If the element is malformed
    """
    return _element_adapter.validate_python(data)
