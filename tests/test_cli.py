import json
import re

import pytest

from pixelui_designer.cli import main


@pytest.fixture
def design_file(tmp_path):
    path = tmp_path / "design.json"
    path.write_text(json.dumps({"elements": [
        {"id": "button_1", "type": "button", "name": "OK Btn", "x": 2, "y": 3,
         "width": 8, "height": 1, "text": "OK", "background": "blue"},
    ]}), encoding="utf-8")
    return path


def test_prints_code_to_stdout(design_file, capsys) -> None:
    assert main([str(design_file), "--format", "widgets"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("-- Widget Creation Code\n")
    assert 'local okbtn = pixelui.create("button", {' in out


def test_writes_output_file(design_file, tmp_path) -> None:
    target = tmp_path / "ui.lua"
    assert main([str(design_file), "-o", str(target), "-f", "function"]) == 0
    assert target.read_text(encoding="utf-8").startswith("-- UI Creation Function")


def test_save_dir_uses_timestamped_filename(design_file, tmp_path) -> None:
    out_dir = tmp_path / "exports"
    assert main([str(design_file), "--save-dir", str(out_dir)]) == 0
    files = list(out_dir.iterdir())
    assert len(files) == 1
    assert re.fullmatch(r"pixelui_design_full_\d{8}T\d{6}\.lua", files[0].name)


def test_writes_preview_page(design_file, tmp_path) -> None:
    preview = tmp_path / "preview.html"
    assert main([str(design_file), "-o", str(tmp_path / "ui.lua"), "--preview", str(preview)]) == 0
    html = preview.read_text(encoding="utf-8")
    assert "preview-canvas" in html
    assert ">OK</div>" in html


def test_config_file_changes_library_name(design_file, tmp_path, capsys) -> None:
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"export": {"library": "ui"}}), encoding="utf-8")
    assert main([str(design_file), "--config", str(config)]) == 0
    assert 'local ui = require("ui")' in capsys.readouterr().out


def test_errors_return_exit_code_one(tmp_path) -> None:
    assert main([str(tmp_path / "missing.json")]) == 1

    design = tmp_path / "design.json"
    design.write_text("[]", encoding="utf-8")
    bad_config = tmp_path / "settings.json"
    bad_config.write_text(json.dumps({"export": {"root_name": "not valid"}}), encoding="utf-8")
    assert main([str(design), "--config", str(bad_config)]) == 1


def test_unwritable_targets_return_exit_code_one(design_file, tmp_path) -> None:
    missing_dir = tmp_path / "missing"
    assert main([str(design_file), "-o", str(missing_dir / "ui.lua")]) == 1
    assert not missing_dir.exists()

    preview = missing_dir / "preview.html"
    assert main([str(design_file), "-o", str(tmp_path / "ui.lua"), "--preview", str(preview)]) == 1

    not_a_dir = tmp_path / "exports"
    not_a_dir.write_text("", encoding="utf-8")
    assert main([str(design_file), "--save-dir", str(not_a_dir)]) == 1
