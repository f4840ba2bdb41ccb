"""ZMK modifier token parsing."""

from enum import Enum


class Modifier(str, Enum):
    """Abstract modifier, independent of which side produced it."""

    SHIFT = "shift"
    ALT = "alt"
    CTRL = "ctrl"
    GUI = "gui"


# Long and short forms, left and right
MODIFIER_TOKENS: dict[str, Modifier] = {
    "LSHFT": Modifier.SHIFT,
    "RSHFT": Modifier.SHIFT,
    "LS": Modifier.SHIFT,
    "RS": Modifier.SHIFT,
    "LALT": Modifier.ALT,
    "RALT": Modifier.ALT,
    "LA": Modifier.ALT,
    "RA": Modifier.ALT,
    "LCTRL": Modifier.CTRL,
    "RCTRL": Modifier.CTRL,
    "LC": Modifier.CTRL,
    "RC": Modifier.CTRL,
    "LGUI": Modifier.GUI,
    "RGUI": Modifier.GUI,
    "LG": Modifier.GUI,
    "RG": Modifier.GUI,
}


def parse_modifier(token: str) -> Modifier | None:
    """Map a ZMK modifier token (e.g. LSHFT, RA) to its abstract modifier.

    Returns None if the token is not a modifier.
    """
    return MODIFIER_TOKENS.get(token)
