"""SVG styling for keymap-drawer output."""

from .css import generate_layer_color_css, key_color_rules

__all__ = [
    "generate_layer_color_css",
    "key_color_rules",
]
