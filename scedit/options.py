"""Editable settings list: option rows, the in-place value editor, and colour slots."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple

from scedit.config import EditorConfig

MAX_VALUE_LENGTH = 32

# Terminal colour numbers the configured colours are written into.
_COLOR_GREEN = 2
_COLOR_CYAN = 6
_COLOR_TARGETS = (
    ("color_0", _COLOR_GREEN),  # comments
    ("color_1", 8),  # types
    ("color_2", 9),  # control flow
    ("color_3", _COLOR_CYAN),  # variables
    ("color_4", 11),  # functions
    ("color_6", 10),  # parentheses
    ("color_7", 12),  # strings
    ("color_8", 13),  # typedefs
)

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class OptionType(Enum):
    """Kind of value an option holds, which limits what may be typed into it."""

    INTEGER = 0
    BOOLEAN = 1
    STRING = 2


@dataclass
class ConfigOption:
    """One row of the settings list."""

    name: str
    description: str
    value: str
    type: OptionType

    def accepts(self, ch: str) -> bool:
        """Return whether the character *ch* may be typed into this option."""
        if len(ch) != 1:
            return False
        if self.type is OptionType.INTEGER:
            return ch.isdigit() and ch.isascii() or ch == "-"
        if self.type is OptionType.BOOLEAN:
            return ch in ("0", "1")
        return 32 <= ord(ch) < 127


_DESCRIPTIONS: Tuple[Tuple[str, str, OptionType], ...] = (
    ("expandtab", "Spaces insertion for tabs (0=off, 1=on) WORK IN PROGRESS", OptionType.BOOLEAN),
    ("tab_size", "Number of visual spaces per tab", OptionType.INTEGER),
    ("parenthesis_autocomplete", "Auto-complete parentheses (0=off, 1=on)", OptionType.BOOLEAN),
    ("quotations_autocomplete", "Auto-complete quotes (0=off, 1=on)", OptionType.BOOLEAN),
    ("autosave", "File autosave (0=off, 1=on)", OptionType.BOOLEAN),
    ("color_0", "Comments color (0-255, 0=default)", OptionType.INTEGER),
    ("color_1", "Types color (0-255, 0=default)", OptionType.INTEGER),
    ("color_2", "Control flow color (0-255, 0=default)", OptionType.INTEGER),
    ("color_3", "Variables color (0-255, 0=default)", OptionType.INTEGER),
    ("color_4", "Functions color (0-255, 0=default)", OptionType.INTEGER),
    ("color_5", "Numbers color (0-255, 0=default)", OptionType.INTEGER),
    ("color_6", "Parentheses color (0-255, 0=default)", OptionType.INTEGER),
    ("color_7", "Strings color (0-255, 0=default)", OptionType.INTEGER),
    ("color_8", "Typedef color (0-255, 0=default)", OptionType.INTEGER),
    ("path", "Default file path", OptionType.STRING),
)


def _atoi(text: str) -> int:
    """Parse a leading decimal integer as the C library does, 0 when there is none."""
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    number = int(match.group(1)) & 0xFFFFFFFF
    return number - 2**32 if number >= 2**31 else number


def color_to_rgb(value: int) -> Tuple[int, int, int]:
    """Expand an 8-bit RGB332 colour into terminal 0-1000 component levels."""
    red = ((value >> 5) & 0x7) * 1000 // 7
    green = ((value >> 2) & 0x7) * 1000 // 7
    blue = (value & 0x3) * 1000 // 3
    return red, green, blue


def color_slots(config: EditorConfig) -> List[Tuple[int, Tuple[int, int, int]]]:
    """Return ``(terminal colour number, rgb)`` for every configured colour to redefine."""
    slots = []
    for field, target in _COLOR_TARGETS:
        value = getattr(config, field)
        if value > 0:
            slots.append((target, color_to_rgb(value)))
    return slots


def config_options(config: EditorConfig) -> List[ConfigOption]:
    """Build the settings rows showing the values of *config*."""
    values: Dict[str, str] = {
        "expandtab": str(int(bool(config.expandtab))),
        "tab_size": str(config.tab_size),
        "parenthesis_autocomplete": str(int(bool(config.parenthesis_autocomplete))),
        "quotations_autocomplete": str(int(bool(config.quotations_autocomplete))),
        "autosave": str(int(bool(config.autosave))),
        "path": (config.default_path or "")[: MAX_VALUE_LENGTH - 1],
    }
    for n in range(9):
        values[f"color_{n}"] = str(getattr(config, f"color_{n}"))
    return [
        ConfigOption(name, description, values[name], kind)
        for name, description, kind in _DESCRIPTIONS
    ]


def apply_options(config: EditorConfig, options: Iterable[ConfigOption]) -> EditorConfig:
    """Return a copy of *config* updated from the edited option rows."""
    by_name = {option.name: option.value for option in options}
    updates: Dict[str, object] = {}
    for name in ("expandtab", "parenthesis_autocomplete", "quotations_autocomplete", "autosave"):
        if name in by_name:
            updates[name] = _atoi(by_name[name]) != 0
    if "tab_size" in by_name:
        updates["tab_size"] = _atoi(by_name["tab_size"])
    for n in range(9):
        name = f"color_{n}"
        if name in by_name:
            updates[name] = _atoi(by_name[name])
    if "path" in by_name:
        updates["default_path"] = by_name["path"]
    return replace(config, **updates)


class OptionEditor:
    """Selection and in-place editing over a list of option rows."""

    def __init__(self, options: Sequence[ConfigOption]) -> None:
        if not options:
            raise ValueError("no options to edit")
        self.options: List[ConfigOption] = list(options)
        self.current = 0
        self.editing = False
        self._started = False
        self._original = ""

    @property
    def selected(self) -> ConfigOption:
        """The option under the selection."""
        return self.options[self.current]

    def move_up(self) -> None:
        """Select the previous option, wrapping to the last."""
        self.current = (self.current - 1) % len(self.options)

    def move_down(self) -> None:
        """Select the next option, wrapping to the first."""
        self.current = (self.current + 1) % len(self.options)

    def begin_edit(self) -> None:
        """Start editing the selected option."""
        self.editing = True
        self._started = False

    def _key(self) -> ConfigOption:
        if not self.editing:
            raise RuntimeError("no option is being edited")
        option = self.selected
        if not self._started:
            # The first key replaces the old value; it is kept for restoring.
            self._original = option.value[: MAX_VALUE_LENGTH - 1]
            option.value = ""
            self._started = True
        return option

    def type_char(self, ch: str) -> bool:
        """Append *ch* if the option accepts it and there is room; return whether it was added."""
        option = self._key()
        if option.accepts(ch) and len(option.value) < MAX_VALUE_LENGTH - 1:
            option.value += ch
            return True
        return False

    def backspace(self) -> None:
        """Remove the last character of the value being edited."""
        option = self._key()
        option.value = option.value[:-1]

    def _finish(self) -> None:
        self.editing = False
        self._started = False

    def commit(self) -> None:
        """Finish editing, keeping the old value if the new one is empty."""
        option = self._key()
        if not option.value:
            option.value = self._original
        self._finish()

    def cancel(self) -> None:
        """Finish editing and restore the old value."""
        option = self._key()
        option.value = self._original
        self._finish()