import json
from pathlib import Path

import pytest
import yaml

DEVICETREE = """\
#define RED_RGB 0xFF0000
#define WHITE_RGB 0xFFFFFF
#define OFF_RGB 0x000000
#define RED &ug RED_RGB
#define WHITE &ug WHITE_RGB
#define OFF &ug OFF_RGB

#ifdef LAYER_Base
    base_layer {
        bindings = <
            OFF OFF RED WHITE UNKNOWN
        >;
    };
#endif
"""


def binding(value: str, *params: dict) -> dict:
    """Build a raw binding object as found in the keymap JSON export."""
    return {"value": value, "params": list(params)}


def kp(keycode: str, *mods: str) -> dict:
    """Build a &kp binding, wrapping the keycode in mods outermost first."""
    inner = binding(keycode)
    for mod in reversed(mods):
        inner = binding(mod, inner)
    return binding("&kp", inner)


@pytest.fixture
def layout_data() -> dict:
    return {
        "layers": [
            [
                kp("N1"),
                kp("N7", "RA", "RS"),
                kp("A"),
                kp("Z9"),
                binding("&trans"),
                binding("&none"),
            ],
            [
                binding("&AS_v1_TKZ", binding("N2")),
                binding("&HRM_left_index_tap_v1B_TKZ", binding("A")),
                binding("&mo", {"value": 1, "params": []}),
            ],
        ],
        "custom_devicetree": DEVICETREE,
    }


@pytest.fixture
def template_data() -> dict:
    return {
        "parse_config": {
            "raw_binding_map": {"&bootloader": "BOOT"},
            "zmk_keycode_map": {"N1": "one", "SPACE": "␣"},
        },
        "draw_config": {"svg_extra_style": "rect.key { fill: #eee; }"},
    }


@pytest.fixture
def input_files(tmp_path: Path, layout_data: dict, template_data: dict) -> dict[str, Path]:
    layout_path = tmp_path / "keymap.json"
    layout_path.write_text(json.dumps(layout_data))
    template_path = tmp_path / "template.yaml"
    template_path.write_text(yaml.safe_dump(template_data, allow_unicode=True))
    return {
        "layout": layout_path,
        "template": template_path,
        "output": tmp_path / "keymap_drawer.yaml",
    }
