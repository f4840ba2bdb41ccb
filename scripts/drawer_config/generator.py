"""End-to-end generation of a keymap-drawer config from a keymap export."""

import logging
from typing import Any

from .bindings import build_keycode_map
from .config import GeneratorConfig, dump_yaml, load_yaml
from .devicetree import parse_defines, parse_layer_colors
from .layout import Layout, load_layout, partition_bindings
from .macros import build_raw_binding_map
from .merger import merge_template
from .svg.css import generate_layer_color_css

logger = logging.getLogger(__name__)


def generate_config(layout: Layout, template: dict[str, Any]) -> dict[str, Any]:
    """Build the merged keymap-drawer config.

    Prints the unmapped binding count, any missing-mapping diagnostics and
    the parsed layer colors.

    Args:
        layout: Loaded keymap export
        template: Loaded keymap-drawer config template

    Returns:
        Template with generated maps and styles merged in

    Raises:
        BindingError: a binding in the keymap is structurally invalid
    """
    key_presses, unmapped = partition_bindings(layout.layers)
    logger.debug("%d key presses, %d other bindings", len(key_presses), len(unmapped))

    zmk_keycode_map = build_keycode_map(key_presses)
    print(f"Number of unmapped entries: {len(unmapped)}")

    raw_binding_map = build_raw_binding_map(unmapped)

    devicetree = layout.custom_devicetree or ""
    layer_colors = parse_layer_colors(devicetree)
    print(f"Layer colors: {layer_colors}")
    svg_extra_style = generate_layer_color_css(layer_colors, parse_defines(devicetree))

    return merge_template(template, raw_binding_map, zmk_keycode_map, svg_extra_style)


def run(config: GeneratorConfig) -> dict[str, Any]:
    """Read the inputs, generate, and write the output config.

    Nothing is written if reading or generation fails.
    """
    layout = load_layout(config.layout_path)
    template = load_yaml(config.template_path)
    merged = generate_config(layout, template)
    dump_yaml(merged, config.output_path)
    return merged
