"""Swedish character table for ZMK keycodes.

Keycodes are the US-layout names ZMK uses; values are what a Swedish host
layout actually types. An entry is either a single character with no modifier
variants, or a mapping from modifier sets to characters.
"""

from dataclasses import dataclass
from typing import Iterable

from .modifiers import Modifier

SHIFT = Modifier.SHIFT
ALT = Modifier.ALT


@dataclass(frozen=True)
class Simple:
    """Entry without modifier variants."""

    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or not self.char:
            raise ValueError(f"Simple entry needs a non-empty string, got {self.char!r}")

    def lookup(self, modifiers: frozenset[Modifier]) -> str | None:
        return self.char if not modifiers else None


@dataclass(frozen=True)
class Variants:
    """Entry keyed by the exact set of held modifiers."""

    variants: dict[frozenset[Modifier], str]

    def __post_init__(self) -> None:
        if not isinstance(self.variants, dict) or not self.variants:
            raise ValueError("Variants entry needs a non-empty modifier mapping")
        for mods, char in self.variants.items():
            if not isinstance(mods, frozenset):
                raise ValueError(f"Variant key must be a frozenset, got {mods!r}")
            if not isinstance(char, str) or not char:
                raise ValueError(f"Variant value must be a non-empty string, got {char!r}")

    def lookup(self, modifiers: frozenset[Modifier]) -> str | None:
        return self.variants.get(modifiers)


LocalizedEntry = Simple | Variants


def variants(mapping: dict[tuple[Modifier, ...], str]) -> Variants:
    """Build a Variants entry from tuple-keyed shorthand."""
    return Variants({frozenset(mods): char for mods, char in mapping.items()})


SWEDISH_MAP: dict[str, LocalizedEntry] = {
    # Function keys
    **{f"F{n}": Simple(f"F{n}") for n in range(1, 13)},
    # Number row: base, Shift, Alt (Option), Alt+Shift
    "N1": variants({(): "1", (SHIFT,): "!"}),
    "N2": variants({(): "2", (SHIFT,): '"', (ALT,): "@"}),
    "N3": variants({(): "3", (SHIFT,): "#", (ALT,): "£"}),
    "N4": variants({(): "4", (SHIFT,): "¤", (ALT,): "€"}),
    "N5": variants({(): "5", (SHIFT,): "%"}),
    "N6": variants({(): "6", (SHIFT,): "&"}),
    "N7": variants({(): "7", (SHIFT,): "/", (ALT,): "|", (ALT, SHIFT): "\\"}),
    "N8": variants({(): "8", (SHIFT,): "(", (ALT,): "[", (ALT, SHIFT): "{"}),
    "N9": variants({(): "9", (SHIFT,): ")", (ALT,): "]", (ALT, SHIFT): "}"}),
    "N0": variants({(): "0", (SHIFT,): "EQ"}),
    # Punctuation / symbol keys
    "MINUS": variants({(): "+", (SHIFT,): "?", (ALT,): "±", (ALT, SHIFT): "¿"}),
    "EQUAL": variants({(): "´", (SHIFT,): "`"}),
    "NON_US_BSLH": variants({(): "<", (SHIFT,): ">"}),
    "COMMA": variants({(): ",", (SHIFT,): ";"}),
    "DOT": variants({(): ".", (SHIFT,): ":"}),
    "FSLH": variants({(): "-", (SHIFT,): "_"}),
    "BSLH": variants({(): "'", (SHIFT,): "*"}),
    "GRAVE": variants({(): "<", (SHIFT,): ">"}),
    "LBKT": variants({(): "Å"}),
    "RBKT": variants({(): "¨", (SHIFT,): "^", (ALT,): "~"}),
    "SEMI": variants({(): "Ö"}),
    "SQT": variants({(): "Ä"}),
    # Utility symbols
    "PIPE": Simple("|"),
    "PERCENT": Simple("%"),
    "DLLR": Simple("$"),
    "HASH": Simple("#"),
    "EXCL": Simple("!"),
    "PLUS": Simple("+"),
    "UNDER": Simple("_"),
    "LT": variants({(): "<?", (ALT,): "???"}),
    "GT": Simple(">?"),
    # Keypad
    **{f"KP_N{n}": Simple(str(n)) for n in range(10)},
    "KP_DOT": Simple("."),
    "KP_EQUAL": Simple("EQ"),
    "KP_SLASH": Simple("/"),
    "KP_MULTIPLY": Simple("*"),
    "KP_PLUS": Simple("+"),
    "KP_MINUS": Simple("-"),
    "MACRO_PLACEHOLDER": Simple("M"),
}


def lookup_char(
    keycode: str,
    modifiers: Iterable[Modifier],
    table: dict[str, LocalizedEntry] = SWEDISH_MAP,
) -> str | None:
    """Look up the character a keycode produces with the given modifiers held.

    Modifiers are compared as a set, so order and duplicates do not matter.

    Args:
        keycode: ZMK keycode name (e.g. N7)
        modifiers: Held abstract modifiers
        table: Character table to query

    Returns:
        The character, or None if the table has no entry for this combination
    """
    entry = table.get(keycode)
    if entry is None:
        return None
    return entry.lookup(frozenset(modifiers))
