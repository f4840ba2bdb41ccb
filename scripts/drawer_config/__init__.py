"""
keymap-drawer config generation from ZMK keymap exports.

Maps each &kp binding to the character a Swedish host layout types, adds
display entries for passthrough macros, and colors keys by the RGB layers
found in the keymap's custom device tree.

Usage:
    python -m drawer_config

Reads config/keymap.json and config/keymap_drawer.template.yaml and writes
config/keymap_drawer.yaml. --layout, --template and --output override those
paths; -v enables debug logging.
"""

from .bindings import (
    BindingError,
    InvalidModifier,
    MalformedBinding,
    ResolvedBinding,
    build_keycode_map,
    display_key,
    resolve_binding,
    to_definition,
)
from .charmap import SWEDISH_MAP, Simple, Variants, lookup_char
from .config import KEY_MACROS, GeneratorConfig, MacroAnnotation, load_yaml
from .devicetree import parse_defines, parse_layer_colors, resolve_color
from .generator import generate_config, run
from .layout import KeyBinding, Layout, load_layout, partition_bindings
from .macros import build_raw_binding_map
from .merger import merge_template
from .modifiers import Modifier, parse_modifier

__all__ = [
    # Modifiers
    "Modifier",
    "parse_modifier",
    # Character table
    "SWEDISH_MAP",
    "Simple",
    "Variants",
    "lookup_char",
    # Config
    "GeneratorConfig",
    "MacroAnnotation",
    "KEY_MACROS",
    "load_yaml",
    # Layout
    "KeyBinding",
    "Layout",
    "load_layout",
    "partition_bindings",
    # Bindings
    "BindingError",
    "InvalidModifier",
    "MalformedBinding",
    "ResolvedBinding",
    "resolve_binding",
    "display_key",
    "to_definition",
    "build_keycode_map",
    # Macros
    "build_raw_binding_map",
    # Device tree
    "parse_defines",
    "parse_layer_colors",
    "resolve_color",
    # Merger
    "merge_template",
    "generate_config",
    "run",
]
