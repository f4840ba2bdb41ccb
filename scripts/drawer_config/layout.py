"""Keymap JSON loading and binding partitioning."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator

from pydantic import BaseModel, Field

from .config import IGNORED_BEHAVIORS, KEY_PRESS

# Layer and Bluetooth params are exported as integers, e.g. &mo 1
ParamValue = str | int


class KeyBinding(BaseModel):
    """A ZMK binding: a behavior or keycode with nested parameter bindings.

    `LS(RA(N7))` arrives as LS -> RA -> N7, each wrapper holding one param.
    """

    value: ParamValue
    params: list[KeyBinding] = Field(default_factory=list)

    @property
    def code(self) -> str:
        """Behavior or keycode name as a string."""
        return str(self.value)


class Layout(BaseModel):
    """Keymap JSON export."""

    layers: list[Any] = Field(default_factory=list)
    custom_devicetree: str | None = None


def load_layout(path: Path) -> Layout:
    """Load a keymap JSON export.

    Args:
        path: Path to the keymap JSON file

    Returns:
        Layout with raw layers and optional device tree text
    """
    with open(path) as f:
        return Layout.model_validate(json.load(f))


def flatten_layers(layers: Any) -> Iterator[dict[str, Any]]:
    """Yield every binding object in arbitrarily nested layer lists, in order."""
    if isinstance(layers, list):
        for item in layers:
            yield from flatten_layers(item)
    elif isinstance(layers, dict):
        yield layers


def partition_bindings(
    layers: Any,
) -> tuple[list[KeyBinding], list[KeyBinding]]:
    """Split all layer bindings into key presses and unmapped behaviors.

    Transparent and empty keys are dropped from the unmapped list.

    Returns:
        (key_presses, unmapped) - both as parsed KeyBindings
    """
    key_presses: list[KeyBinding] = []
    unmapped: list[KeyBinding] = []
    for raw in flatten_layers(layers):
        binding = KeyBinding.model_validate(raw)
        if binding.code == KEY_PRESS:
            key_presses.append(binding)
        elif binding.code not in IGNORED_BEHAVIORS:
            unmapped.append(binding)
    return key_presses, unmapped
