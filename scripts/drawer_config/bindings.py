"""Binding resolution and keycode map generation."""

import logging
import re
import string
from typing import Iterable, NamedTuple

from .charmap import SWEDISH_MAP, LocalizedEntry, lookup_char
from .layout import KeyBinding
from .modifiers import Modifier, parse_modifier

logger = logging.getLogger(__name__)

FUNCTION_KEY_RE = re.compile(r"^F(\d+)$")


class BindingError(ValueError):
    """Structurally invalid binding in the keymap."""


class InvalidModifier(BindingError):
    """A single-param wrapper whose behavior is not a modifier."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown modifier: {token}")


class MalformedBinding(BindingError):
    """A binding with the wrong number of params for its position."""

    def __init__(self, binding: KeyBinding):
        self.binding = binding
        params = [p.model_dump() for p in binding.params]
        super().__init__(
            f"Expected one param for {binding.code}, got {len(params)}: {params!r}"
        )


class ResolvedBinding(NamedTuple):
    """A keycode with the modifiers wrapped around it, outermost first."""

    keycode: str
    modifiers: tuple[Modifier, ...] = ()
    tokens: tuple[str, ...] = ()

    @property
    def modifier_set(self) -> frozenset[Modifier]:
        return frozenset(self.modifiers)


def resolve_binding(
    binding: KeyBinding,
    modifiers: tuple[Modifier, ...] = (),
    tokens: tuple[str, ...] = (),
) -> ResolvedBinding:
    """Unwrap nested modifier bindings down to the base keycode.

    Args:
        binding: Binding to resolve, e.g. RA(RS(A)) as nested params
        modifiers: Abstract modifiers accumulated from outer wrappers
        tokens: Literal modifier tokens accumulated from outer wrappers

    Returns:
        ResolvedBinding with modifiers and tokens in outer-to-inner order

    Raises:
        InvalidModifier: a single-param wrapper is not a modifier token
        MalformedBinding: a binding has more than one param
    """
    if not binding.params:
        return ResolvedBinding(binding.code, modifiers, tokens)
    if len(binding.params) > 1:
        raise MalformedBinding(binding)

    modifier = parse_modifier(binding.code)
    if modifier is None:
        raise InvalidModifier(binding.code)
    return resolve_binding(
        binding.params[0], modifiers + (modifier,), tokens + (binding.code,)
    )


def display_key(keycode: str, tokens: Iterable[str]) -> str:
    """Build the keymap-drawer map key, e.g. RA(RS(A)) for tokens RA, RS."""
    key = keycode
    for token in reversed(list(tokens)):
        key = f"{token}({key})"
    return key


def is_missing_ok(keycode: str) -> bool:
    """Whether a keycode absent from the table needs no diagnostic.

    Letters, F1-F12, bare modifiers and TAB are drawn fine by keymap-drawer.
    """
    if len(keycode) == 1 and keycode in string.ascii_uppercase:
        return True
    match = FUNCTION_KEY_RE.match(keycode)
    if match and 1 <= int(match.group(1)) <= 12:
        return True
    return parse_modifier(keycode) is not None or keycode == "TAB"


def report_missing(resolved: ResolvedBinding) -> None:
    """Print a diagnostic for a keycode with no character mapping."""
    mods = [m.value for m in resolved.modifiers]
    print(
        f"Missing mapping for keycode {resolved.keycode} with modifiers {mods} "
        f"(ZMK mods: {list(resolved.tokens)})"
    )


def to_definition(
    resolved: ResolvedBinding,
    table: dict[str, LocalizedEntry] = SWEDISH_MAP,
) -> tuple[str, dict[str, str]] | None:
    """Convert a resolved binding into a keymap-drawer keycode map entry.

    Args:
        resolved: Resolved binding
        table: Character table to query

    Returns:
        (display key, definition with tap/shifted) or None when the keycode
        has no mapping and is not expected to be missing. The definition may
        be empty if neither character is known.
    """
    tap = lookup_char(resolved.keycode, resolved.modifier_set, table)
    shifted = lookup_char(resolved.keycode, resolved.modifier_set | {Modifier.SHIFT}, table)

    if tap is None and not is_missing_ok(resolved.keycode):
        report_missing(resolved)
        return None

    definition = {
        field: value
        for field, value in (("tap", tap), ("shifted", shifted))
        if value is not None
    }
    return display_key(resolved.keycode, resolved.tokens), definition


def build_keycode_map(
    key_presses: Iterable[KeyBinding],
    table: dict[str, LocalizedEntry] = SWEDISH_MAP,
) -> dict[str, dict[str, str]]:
    """Build zmk_keycode_map entries for all &kp bindings.

    Duplicate display keys resolve to the last definition seen.
    """
    keycode_map: dict[str, dict[str, str]] = {}
    for key_press in key_presses:
        if len(key_press.params) != 1:
            raise MalformedBinding(key_press)
        resolved = resolve_binding(key_press.params[0])
        entry = to_definition(resolved, table)
        if entry is None:
            continue
        key, definition = entry
        if definition:
            keycode_map[key] = definition
        else:
            logger.debug("no characters for %s, skipping", key)
    return keycode_map
