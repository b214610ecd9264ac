from pixelui_designer.fields import widget_config
from pixelui_designer.widgets import parse_element


def _element(**data):
    base = {"id": "widget_1", "name": "w", "x": 1, "y": 2, "width": 3, "height": 4}
    base.update(data)
    return parse_element(base)


def test_button_fields_in_declaration_order(ok_button) -> None:
    config = widget_config(ok_button)
    assert list(config.items()) == [
        ("x", 2),
        ("y", 3),
        ("width", 8),
        ("height", 1),
        ("text", "OK"),
        ("background", "blue"),
    ]


def test_border_false_is_kept_because_it_is_defined() -> None:
    config = widget_config(_element(type="button", border=False, enabled=False))
    assert config["border"] is False
    assert config["enabled"] is False


def test_checked_requires_truthy_value() -> None:
    unchecked = widget_config(_element(type="checkBox", text="Agree", checked=False))
    assert "checked" not in unchecked

    checked = widget_config(_element(type="checkBox", text="Agree", checked=True))
    assert checked["checked"] is True
    assert list(checked) == ["x", "y", "width", "height", "text", "checked"]


def test_container_scrollable_only_when_true() -> None:
    config = widget_config(_element(type="container", border=True, borderColor="lightGray", isScrollable=False))
    assert config == {
        "x": 1, "y": 2, "width": 3, "height": 4,
        "border": True, "borderColor": "lightGray",
    }


def test_slider_keeps_zero_numbers() -> None:
    config = widget_config(_element(type="slider", value=0, min=0, max=10, step=0.5))
    assert [config[k] for k in ("value", "min", "max", "step")] == [0, 0, 10, 0.5]
    assert "trackColor" not in config


def test_text_box_max_length_and_read_only_need_truthy() -> None:
    config = widget_config(_element(type="textBox", text="", placeholder="Name", maxLength=0, readOnly=False))
    assert "text" not in config
    assert "maxLength" not in config
    assert "readOnly" not in config
    assert config["placeholder"] == "Name"

    config = widget_config(_element(type="textBox", maxLength=12, readOnly=True))
    assert config["readOnly"] is True
    assert config["maxLength"] == 12


def test_label_align_left_is_omitted(title_label) -> None:
    assert widget_config(title_label)["align"] == "center"
    assert "align" not in widget_config(_element(type="label", text="Hi", align="left"))


def test_list_view_items_and_selected_zero() -> None:
    config = widget_config(_element(type="listView", items=[], selected=0, selectedColor="blue"))
    assert "items" not in config
    assert config["selected"] == 0
    assert config["selectedColor"] == "blue"

    config = widget_config(_element(type="listView", items=["a", "b"]))
    assert config["items"] == ["a", "b"]


def test_radio_button_group_follows_checked() -> None:
    config = widget_config(_element(type="radioButton", text="A", checked=True, group="g1"))
    assert list(config)[-2:] == ["checked", "group"]


def test_unknown_type_exports_geometry_only() -> None:
    config = widget_config(_element(type="spinner", text="ignored", color="red"))
    assert config == {"x": 1, "y": 2, "width": 3, "height": 4}


def test_button_full_field_order() -> None:
    config = widget_config(_element(
        type="button", text="Go", background="green", color="white",
        border=True, enabled=True,
    ))
    assert list(config.items()) == [
        ("x", 1), ("y", 2), ("width", 3), ("height", 4),
        ("text", "Go"),
        ("background", "green"),
        ("color", "white"),
        ("border", True),
        ("enabled", True),
    ]


def test_toggle_switch_checked_requires_truthy_value() -> None:
    off = widget_config(_element(type="toggleSwitch", text="Sound", color="white", checked=False))
    assert list(off.items()) == [
        ("x", 1), ("y", 2), ("width", 3), ("height", 4),
        ("text", "Sound"),
        ("color", "white"),
    ]

    on = widget_config(_element(type="toggleSwitch", text="Sound", color="white", checked=True))
    assert list(on.items())[-1] == ("checked", True)


def test_progress_bar_keeps_zero_progress_first() -> None:
    empty = widget_config(_element(type="progressBar", progress=0))
    assert list(empty.items()) == [
        ("x", 1), ("y", 2), ("width", 3), ("height", 4),
        ("progress", 0),
    ]

    loading = widget_config(_element(
        type="progressBar", background="gray", color="green",
        text="Loading...", progress=75,
    ))
    assert list(loading.items()) == [
        ("x", 1), ("y", 2), ("width", 3), ("height", 4),
        ("progress", 75),
        ("text", "Loading..."),
        ("color", "green"),
        ("background", "gray"),
    ]


def test_slider_colors_follow_range() -> None:
    config = widget_config(_element(
        type="slider", knobColor="white", fillColor="blue", trackColor="gray",
        value=50, min=0, max=100,
    ))
    assert list(config.items()) == [
        ("x", 1), ("y", 2), ("width", 3), ("height", 4),
        ("value", 50),
        ("min", 0),
        ("max", 100),
        ("trackColor", "gray"),
        ("fillColor", "blue"),
        ("knobColor", "white"),
    ]
