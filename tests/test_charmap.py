import pytest

from drawer_config.charmap import SWEDISH_MAP, Simple, Variants, lookup_char, variants
from drawer_config.modifiers import Modifier

SHIFT, ALT, CTRL = Modifier.SHIFT, Modifier.ALT, Modifier.CTRL


def test_simple_entries_only_match_without_modifiers() -> None:
    simple = {k: v for k, v in SWEDISH_MAP.items() if isinstance(v, Simple)}
    assert simple
    for keycode, entry in simple.items():
        assert lookup_char(keycode, []) == entry.char
        assert lookup_char(keycode, [SHIFT]) is None
        assert lookup_char(keycode, [ALT, CTRL]) is None


def test_variant_entries_match_exact_sets() -> None:
    for keycode, entry in SWEDISH_MAP.items():
        if not isinstance(entry, Variants):
            continue
        for mods, char in entry.variants.items():
            assert lookup_char(keycode, list(mods)) == char
        assert lookup_char(keycode, [CTRL]) is None


def test_lookup_is_order_and_duplicate_independent() -> None:
    assert lookup_char("N7", [ALT, SHIFT]) == "\\"
    assert lookup_char("N7", [SHIFT, ALT]) == "\\"
    assert lookup_char("N7", [SHIFT, ALT, SHIFT]) == "\\"


def test_lookup_number_row() -> None:
    assert lookup_char("N1", []) == "1"
    assert lookup_char("N1", [SHIFT]) == "!"
    assert lookup_char("N1", [ALT]) is None
    assert lookup_char("N2", [ALT]) == "@"


def test_lookup_missing_keycode() -> None:
    assert lookup_char("Z9", []) is None
    assert lookup_char("A", []) is None


def test_lookup_custom_table() -> None:
    table = {"X": variants({(): "x", (SHIFT,): "X"})}
    assert lookup_char("X", [SHIFT], table) == "X"
    assert lookup_char("N1", [], table) is None


def test_ambiguous_entries_are_rejected() -> None:
    with pytest.raises(ValueError):
        Simple("")
    with pytest.raises(ValueError):
        Variants({})
    with pytest.raises(ValueError):
        Variants({(SHIFT,): "!"})
