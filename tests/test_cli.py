import json
from pathlib import Path

import pytest
import yaml

from drawer_config.cli import main
from drawer_config.config import GeneratorConfig, load_yaml
from drawer_config.generator import run

from conftest import binding


def run_cli(files: dict[str, Path]) -> int:
    with pytest.raises(SystemExit) as exc:
        main([
            "--layout", str(files["layout"]),
            "--template", str(files["template"]),
            "--output", str(files["output"]),
        ])
    return exc.value.code


def test_generate_end_to_end(input_files: dict[str, Path], capsys: pytest.CaptureFixture[str]) -> None:
    assert run_cli(input_files) == 0

    out = capsys.readouterr().out
    assert "Number of unmapped entries: 3" in out
    assert "Missing mapping for keycode Z9" in out
    assert "Missing mapping for keycode A" not in out
    assert "Layer colors: {'Base': ['OFF', 'OFF', 'RED', 'WHITE', 'UNKNOWN']}" in out

    output = load_yaml(input_files["output"])
    parse_config = output["parse_config"]
    assert parse_config["zmk_keycode_map"] == {
        "N1": {"tap": "1", "shifted": "!"},
        "SPACE": "␣",
        "RA(RS(N7))": {"tap": "\\", "shifted": "\\"},
    }
    assert parse_config["raw_binding_map"] == {
        "&bootloader": "BOOT",
        "&AS_v1_TKZ N2": {
            "tap": "2",
            "shifted": '"',
            "type": "autoshift",
            "hold": "$$mdi:apple-keyboard-shift$$",
        },
        "&HRM_left_index_tap_v1B_TKZ A": {"tap": "A", "type": "passthrough"},
    }
    style = output["draw_config"]["svg_extra_style"]
    assert style.startswith("rect.key { fill: #eee; }\n")
    assert ".layer-Base .keypos-2 text.held { fill: white; }" in style
    assert ".keypos-0" not in style


def test_output_keeps_unicode(input_files: dict[str, Path]) -> None:
    assert run_cli(input_files) == 0
    assert "␣" in input_files["output"].read_text()


def test_template_aliases_expanded(tmp_path: Path, input_files: dict[str, Path]) -> None:
    input_files["template"].write_text(
        "shared: &shared\n  tap: x\n"
        "parse_config:\n  raw_binding_map:\n    '&foo': *shared\n"
    )
    assert run_cli(input_files) == 0
    output = load_yaml(input_files["output"])
    assert output["parse_config"]["raw_binding_map"]["&foo"] == {"tap": "x"}
    assert "*shared" not in input_files["output"].read_text()


def test_invalid_modifier_aborts_without_output(
    input_files: dict[str, Path], capsys: pytest.CaptureFixture[str]
) -> None:
    layout = {"layers": [[binding("&kp", binding("HYPER", binding("A")))]]}
    input_files["layout"].write_text(json.dumps(layout))

    assert run_cli(input_files) == 1
    assert "Unknown modifier: HYPER" in capsys.readouterr().err
    assert not input_files["output"].exists()


def test_malformed_binding_aborts_without_output(input_files: dict[str, Path]) -> None:
    layout = {"layers": [[binding("&kp", binding("LS", binding("A"), binding("B")))]]}
    input_files["layout"].write_text(json.dumps(layout))

    assert run_cli(input_files) == 1
    assert not input_files["output"].exists()


def test_missing_input(tmp_path: Path, input_files: dict[str, Path], capsys: pytest.CaptureFixture[str]) -> None:
    input_files["layout"] = tmp_path / "nope.json"
    assert run_cli(input_files) == 1
    assert "Keymap JSON not found" in capsys.readouterr().err


def test_invalid_json(input_files: dict[str, Path], capsys: pytest.CaptureFixture[str]) -> None:
    input_files["layout"].write_text("{not json")
    assert run_cli(input_files) == 1
    assert "Invalid keymap JSON" in capsys.readouterr().err


def test_run_without_devicetree(input_files: dict[str, Path], capsys: pytest.CaptureFixture[str]) -> None:
    input_files["layout"].write_text(json.dumps({"layers": []}))
    merged = run(
        GeneratorConfig(
            layout_path=input_files["layout"],
            template_path=input_files["template"],
            output_path=input_files["output"],
        )
    )
    assert merged["draw_config"]["svg_extra_style"] == "rect.key { fill: #eee; }"
    out = capsys.readouterr().out
    assert "Number of unmapped entries: 0" in out
    assert "Layer colors: {}" in out
    assert yaml.safe_load(input_files["output"].read_text()) == merged


def test_default_paths_point_at_config_dir() -> None:
    config = GeneratorConfig()
    assert config.layout_path.name == "keymap.json"
    assert config.template_path.parent == config.output_path.parent
    assert config.output_path.parent.name == "config"


def test_integer_params_do_not_abort(
    input_files: dict[str, Path], capsys: pytest.CaptureFixture[str]
) -> None:
    layout = {
        "layers": [[
            binding("&kp", binding("N1")),
            {"value": "&mo", "params": [{"value": 1, "params": []}]},
            binding("&bt", binding("BT_SEL"), {"value": 0, "params": []}),
        ]]
    }
    input_files["layout"].write_text(json.dumps(layout))

    assert run_cli(input_files) == 0
    assert "Number of unmapped entries: 2" in capsys.readouterr().out
    output = load_yaml(input_files["output"])
    assert output["parse_config"]["zmk_keycode_map"]["N1"] == {"tap": "1", "shifted": "!"}
