import pytest

from pixelui_designer.widgets import parse_element


@pytest.fixture
def ok_button():
    return parse_element({
        "id": "button_1",
        "type": "button",
        "name": "OK Btn",
        "x": 2,
        "y": 3,
        "width": 8,
        "height": 1,
        "text": "OK",
        "background": "blue",
    })


@pytest.fixture
def title_label():
    return parse_element({
        "id": "label_2",
        "type": "label",
        "name": "Title",
        "x": 1,
        "y": 1,
        "width": 12,
        "height": 1,
        "text": "Settings",
        "color": "yellow",
        "align": "center",
    })
