"""Template merging: writes generated maps and styles into a keymap-drawer config."""

from typing import Any


def merge_template(
    template: dict[str, Any],
    raw_binding_map: dict[str, Any],
    zmk_keycode_map: dict[str, Any],
    svg_extra_style: str = "",
) -> dict[str, Any]:
    """Merge generated values into a keymap-drawer config template.

    Existing map entries are kept, new ones added, and entries with the same
    key replaced by the generated value. Generated CSS is appended after any
    existing svg_extra_style. The template is modified in place.

    Args:
        template: Loaded template config
        raw_binding_map: Generated parse_config.raw_binding_map entries
        zmk_keycode_map: Generated parse_config.zmk_keycode_map entries
        svg_extra_style: Generated CSS for draw_config.svg_extra_style

    Returns:
        The merged config
    """
    parse_config = template.get("parse_config") or {}
    parse_config["raw_binding_map"] = {
        **(parse_config.get("raw_binding_map") or {}),
        **raw_binding_map,
    }
    parse_config["zmk_keycode_map"] = {
        **(parse_config.get("zmk_keycode_map") or {}),
        **zmk_keycode_map,
    }
    template["parse_config"] = parse_config

    if svg_extra_style:
        draw_config = template.get("draw_config") or {}
        existing = draw_config.get("svg_extra_style") or ""
        draw_config["svg_extra_style"] = (
            f"{existing.rstrip()}\n{svg_extra_style}\n" if existing else f"{svg_extra_style}\n"
        )
        template["draw_config"] = draw_config

    return template
