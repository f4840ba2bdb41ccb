"""Configuration models and loaders for keymap-drawer config generation."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

# Repository root: scripts/drawer_config/config.py -> ../../
REPO_ROOT = Path(__file__).resolve().parent.parent.parent
CONFIG_DIR = REPO_ROOT / "config"

KEY_PRESS = "&kp"
IGNORED_BEHAVIORS = frozenset({"&trans", "&none"})


class GeneratorConfig(BaseModel):
    """Input and output locations for one generator run."""

    layout_path: Path = Field(
        CONFIG_DIR / "keymap.json", description="Keymap JSON export with layers"
    )
    template_path: Path = Field(
        CONFIG_DIR / "keymap_drawer.template.yaml",
        description="keymap-drawer config template",
    )
    output_path: Path = Field(
        CONFIG_DIR / "keymap_drawer.yaml", description="Generated keymap-drawer config"
    )


class MacroAnnotation(BaseModel):
    """Display fields added to a passthrough macro's definition."""

    type: str = Field(..., description="keymap-drawer key type (CSS class)")
    hold: str | None = Field(None, description="Hold legend, e.g. a glyph reference")

    def as_fields(self) -> dict[str, str]:
        """Return the annotation as raw_binding_map fields, omitting unset ones."""
        return self.model_dump(exclude_none=True)


HRM_PASSTHROUGHS = [
    "&HRM_left_index_tap_v1B_TKZ",
    "&HRM_left_middy_tap_v1B_TKZ",
    "&HRM_left_ring_tap_v1B_TKZ",
    "&HRM_left_pinky_tap_v1B_TKZ",
    "&HRM_right_middy_tap_v1B_TKZ",
    "&HRM_right_ring_tap_v1B_TKZ",
    "&HRM_right_pinky_tap_v1B_TKZ",
]

KEY_MACROS: dict[str, MacroAnnotation] = {
    "&AS_v1_TKZ": MacroAnnotation(type="autoshift", hold="$$mdi:apple-keyboard-shift$$"),
    **{name: MacroAnnotation(type="passthrough") for name in HRM_PASSTHROUGHS},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents.

    Anchors and aliases are expanded by the loader.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def dump_yaml(data: dict[str, Any], path: Path) -> None:
    """Write data to a YAML file, keeping key order and unicode characters."""
    content = yaml.dump(data, allow_unicode=True, sort_keys=False)
    with open(path, "w") as f:
        f.write(content)
