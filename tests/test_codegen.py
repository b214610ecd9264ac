import re
from datetime import datetime

import pytest

from pixelui_designer.codegen import (
    EMPTY_EXPORT,
    ExportFormat,
    LuaCodeGenerator,
    export_filename,
    generate_code,
    lua_literal,
)
from pixelui_designer.config import ExportSettings
from pixelui_designer.widgets import parse_element

OK_BUTTON_FRAGMENT = """local okbtn = pixelui.create("button", {
    x = 2,
    y = 3,
    width = 8,
    height = 1,
    text = "OK",
    background = "blue",
})"""


def test_widgets_format_for_single_button(ok_button) -> None:
    code = generate_code([ok_button], "widgets")
    assert code == "-- Widget Creation Code\n\n" + OK_BUTTON_FRAGMENT + "\n"
    for absent in ("border", "color", "enabled"):
        assert absent not in code


@pytest.mark.parametrize("export_format", list(ExportFormat))
def test_empty_design_yields_sentinel(export_format) -> None:
    assert generate_code([], export_format) == EMPTY_EXPORT == "-- No widgets to export"


def test_full_program_structure(ok_button, title_label) -> None:
    code = generate_code([ok_button, title_label])

    assert code.startswith("-- Generated PixelUI Code\n-- Created with PixelUI Visual Designer\n")
    assert 'local pixelui = require("pixelui")' in code
    assert 'local root = pixelui.create("container", {' in code
    assert "width = termW," in code
    assert OK_BUTTON_FRAGMENT in code
    assert "addChild" not in code
    assert code.index("local okbtn") < code.index("local title")
    assert "root:show()" in code
    assert "os.pullEvent()" in code
    assert "pixelui.handleMouse(event, p1, p2, p3)" in code
    assert "pixelui.handleKeyboard(event, p1, p2)" in code
    assert 'if event == "key" and p1 == keys.q then' in code
    assert code.endswith("-- Clean up\npixelui.cleanup()")


def test_function_format_registers_every_widget(ok_button, title_label) -> None:
    code = generate_code([ok_button, title_label], ExportFormat.FUNCTION)

    assert code.startswith("-- UI Creation Function\nlocal function createUI(parent)\n    local widgets = {}\n")
    registered = re.findall(r"^    widgets\.(\w+) = (\w+)$", code, re.MULTILINE)
    assert registered == [("okbtn", "okbtn"), ("title", "title")]
    assert "\n    parent:addChild(okbtn)\n" in code
    assert '\n    local title = pixelui.create("label", {\n        x = 1,\n' in code
    assert "    return widgets\nend\n" in code
    assert code.endswith("-- Access widgets with: widgets.button1, widgets.label1, etc.")


def test_generation_is_deterministic(ok_button, title_label) -> None:
    elements = [ok_button, title_label]
    for export_format in ExportFormat:
        assert generate_code(elements, export_format) == generate_code(elements, export_format)


def test_hidden_elements_are_still_exported() -> None:
    hidden = parse_element({"id": "widget_3", "type": "label", "name": "Secret", "visible": False})
    assert "local secret = pixelui.create(\"label\"" in generate_code([hidden], "widgets")


def test_widget_code_attaches_to_non_root_parent(ok_button) -> None:
    generator = LuaCodeGenerator()
    assert generator.widget_code(ok_button) == OK_BUTTON_FRAGMENT
    assert generator.widget_code(ok_button, "root") == OK_BUTTON_FRAGMENT
    assert generator.widget_code(ok_button, "panel").endswith("})\npanel:addChild(okbtn)")


def test_list_and_boolean_literals() -> None:
    element = parse_element({
        "id": "widget_5",
        "type": "listView",
        "name": "Menu",
        "items": ["Play", "Quit"],
        "selected": 0,
    })
    code = generate_code([element], "widgets")
    assert '    items = {"Play", "Quit"},\n' in code
    assert "    selected = 0,\n" in code


def test_lua_literal_rendering() -> None:
    assert lua_literal(True) == "true"
    assert lua_literal(False) == "false"
    assert lua_literal(50) == "50"
    assert lua_literal(5.0) == "5"
    assert lua_literal(0.25) == "0.25"
    assert lua_literal('say "hi"\n') == '"say \\"hi\\"\\n"'
    assert lua_literal([]) == "{}"


def test_custom_export_settings(ok_button) -> None:
    settings = ExportSettings(library="ui", root_name="screen", factory_name="build", result_name="refs")
    full = generate_code([ok_button], "full", settings)
    assert 'local ui = require("ui")' in full
    assert 'local screen = ui.create("container", {' in full
    assert "screen:show()" in full

    factory = generate_code([ok_button], "function", settings)
    assert "local function build(parent)" in factory
    assert "    refs.okbtn = okbtn\n" in factory


def test_unknown_format_is_rejected(ok_button) -> None:
    with pytest.raises(ValueError):
        generate_code([ok_button], "xml")


def test_export_filename() -> None:
    stamp = datetime(2024, 1, 31, 15, 45, 2)
    assert export_filename("widgets", stamp) == "pixelui_design_widgets_20240131T154502.lua"
    assert re.fullmatch(r"pixelui_design_full_\d{8}T\d{6}\.lua", export_filename())
