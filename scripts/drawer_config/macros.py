"""Passthrough macro resolution for raw_binding_map."""

from typing import Iterable

from .bindings import MalformedBinding, display_key, resolve_binding, to_definition
from .charmap import SWEDISH_MAP, LocalizedEntry
from .config import KEY_MACROS, MacroAnnotation
from .layout import KeyBinding


def macro_definition(
    binding: KeyBinding,
    annotation: MacroAnnotation,
    table: dict[str, LocalizedEntry] = SWEDISH_MAP,
) -> tuple[str, dict[str, str]]:
    """Build the raw_binding_map entry for one passthrough macro binding.

    The wrapped keycode is resolved like a &kp binding; if that yields no
    characters, the keycode itself is used as the tap legend.

    Args:
        binding: Macro binding, e.g. &AS_v1_TKZ with one wrapped param
        annotation: Fixed display fields for this macro
        table: Character table to query

    Returns:
        ("<macro> <display key>", definition merged with the annotation)
    """
    if len(binding.params) != 1:
        raise MalformedBinding(binding)

    resolved = resolve_binding(binding.params[0])
    entry = to_definition(resolved, table)
    definition = entry[1] if entry else {}
    if not definition:
        definition = {"tap": resolved.keycode}

    key = f"{binding.code} {display_key(resolved.keycode, resolved.tokens)}"
    return key, {**definition, **annotation.as_fields()}


def build_raw_binding_map(
    unmapped: Iterable[KeyBinding],
    macros: dict[str, MacroAnnotation] = KEY_MACROS,
    table: dict[str, LocalizedEntry] = SWEDISH_MAP,
) -> dict[str, dict[str, str]]:
    """Build raw_binding_map entries for known passthrough macros.

    Bindings whose behavior is not a known macro are skipped.
    """
    raw_binding_map: dict[str, dict[str, str]] = {}
    for binding in unmapped:
        annotation = macros.get(binding.code)
        if annotation is None:
            continue
        key, definition = macro_definition(binding, annotation, table)
        raw_binding_map[key] = definition
    return raw_binding_map
