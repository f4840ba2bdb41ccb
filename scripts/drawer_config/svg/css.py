"""CSS generation for per-layer key colors."""

import logging

from ..devicetree import resolve_color

logger = logging.getLogger(__name__)

BLACK = "000000"
WHITE = "FFFFFF"

# Key background: layer color mixed with gray so legends stay readable
KEY_FILL_TEMPLATE = (
    ".layer-{layer} .keypos-{index} rect {{ "
    "fill: color-mix(in srgb, #{color} 70%, gray 30%); }}"
)
# Held key text on a colored key
HELD_TEXT_TEMPLATE = ".layer-{layer} .keypos-{index} text.held {{ fill: white; }}"


def key_color_rules(layer: str, index: int, color: str) -> list[str]:
    """Return the CSS rules for one colored key position.

    Args:
        layer: Layer name as used in the layer-<name> SVG class
        index: Key position within the layer
        color: Upper-case RRGGBB color

    Returns:
        Rule strings; empty for black (unlit) keys
    """
    if color == BLACK:
        return []
    rules = [KEY_FILL_TEMPLATE.format(layer=layer, index=index, color=color)]
    if color != WHITE:
        rules.append(HELD_TEXT_TEMPLATE.format(layer=layer, index=index))
    return rules


def generate_layer_color_css(
    layer_colors: dict[str, list[str]],
    defines: dict[str, str],
) -> str:
    """Generate CSS coloring each key like its layer's RGB underglow.

    Args:
        layer_colors: Layer name -> color tokens by key position
        defines: Device tree defines used to resolve the tokens

    Returns:
        CSS string for svg_extra_style, empty if nothing is colored
    """
    rules: list[str] = []
    for layer, tokens in layer_colors.items():
        for index, token in enumerate(tokens):
            color = resolve_color(token, defines)
            if color is None:
                logger.debug("layer %s key %d: unresolved color %s", layer, index, token)
                continue
            rules.extend(key_color_rules(layer, index, color))
    return "\n".join(rules)
