"""Extraction of per-layer RGB colors from custom device tree text.

Only two patterns are recognized:

    #define NAME [&behavior ]VALUE

    #ifdef LAYER_<name>
        ... bindings = < COLOR COLOR ... >; ...
    #endif
"""

import logging
import re

logger = logging.getLogger(__name__)

DEFINE_RE = re.compile(r"^[ \t]*#define[ \t]+(\w+)[ \t]+(?:&\w+[ \t]+)?(\S+)", re.MULTILINE)
LAYER_BLOCK_RE = re.compile(r"#ifdef[ \t]+LAYER_(\w+)(.*?)#endif", re.DOTALL)
BINDINGS_RE = re.compile(r"bindings\s*=\s*<(.*?)>\s*;", re.DOTALL)
HEX_COLOR_RE = re.compile(r"^(?:0x|#)([0-9A-Fa-f]{6})$")


def parse_defines(text: str) -> dict[str, str]:
    """Collect #define values, resolving a value that names an earlier define.

    Only one lookup is done per define: `#define RED &ug RED_RGB` stores the
    value RED_RGB had when RED was defined.

    Args:
        text: Raw device tree text

    Returns:
        Dict of define name -> value
    """
    defines: dict[str, str] = {}
    for match in DEFINE_RE.finditer(text):
        name, value = match.group(1), match.group(2)
        defines[name] = defines.get(value, value)
    return defines


def parse_layer_colors(text: str) -> dict[str, list[str]]:
    """Collect the color tokens of each LAYER_<name> block's bindings.

    A layer appearing twice keeps its last bindings. Blocks without a
    bindings statement are ignored.

    Args:
        text: Raw device tree text

    Returns:
        Dict of layer name -> color tokens in key position order
    """
    layer_colors: dict[str, list[str]] = {}
    for block in LAYER_BLOCK_RE.finditer(text):
        layer, body = block.group(1), block.group(2)
        bindings = BINDINGS_RE.search(body)
        if bindings is None:
            logger.debug("layer %s has no bindings statement", layer)
            continue
        layer_colors[layer] = bindings.group(1).split()
    return layer_colors


def resolve_color(token: str, defines: dict[str, str]) -> str | None:
    """Resolve a color token to an upper-case RRGGBB hex string.

    Tokens may carry a leading &. Returns None if the token is not defined or
    its value is not a 0xRRGGBB / #RRGGBB color.
    """
    value = defines.get(token)
    if value is None:
        value = defines.get(token.lstrip("&"))
    if value is None:
        return None
    match = HEX_COLOR_RE.match(value)
    if match is None:
        return None
    return match.group(1).upper()
