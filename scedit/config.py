"""Editor settings: defaults, the on-disk ``key=value`` format, loading and saving."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

CONFIG_FILE_NAME = ".sceconfig"
MAX_LINE_LENGTH = 256

_C_SPACE = " \t\n\v\f\r"
_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class EditorConfig:
    """User-adjustable editor settings."""

    expandtab: bool = True
    tab_size: int = 4
    parenthesis_autocomplete: bool = True
    quotations_autocomplete: bool = True
    autosave: bool = True
    color_0: int = 0  # comments
    color_1: int = 0  # types
    color_2: int = 0  # control flow
    color_3: int = 0  # variables
    color_4: int = 0  # function calls
    color_5: int = 0  # numbers
    color_6: int = 0  # parentheses
    color_7: int = 0  # strings
    color_8: int = 0  # typedefs
    default_path: Optional[str] = None


def config_file_path(home: Optional[str] = None) -> Path:
    """Return the settings file location, using ``$HOME`` when *home* is not given."""
    if home is None:
        home = os.environ.get("HOME")
    if home is None:
        return Path(".") / CONFIG_FILE_NAME
    return Path(f"{home}/{CONFIG_FILE_NAME}/{CONFIG_FILE_NAME}")


def trim(value: str) -> str:
    """Strip leading and trailing ASCII whitespace."""
    return value.strip(_C_SPACE)


def parse_boolean(value: Optional[str]) -> bool:
    """Interpret true/yes/1/on (any case) as true, anything else as false."""
    if value is None:
        return False
    return value.lower() in {"true", "yes", "1", "on"}


def parse_integer(value: Optional[str], default: int) -> int:
    """Parse a whole decimal integer, returning *default* if the text is not one."""
    if not value:
        return default
    match = _INTEGER.fullmatch(value)
    if match is None:
        return default
    number = max(_LONG_MIN, min(_LONG_MAX, int(match.group(1))))
    # Narrow to a signed 32-bit int.
    number &= 0xFFFFFFFF
    return number - 2**32 if number >= 2**31 else number


def _physical_lines(text: str) -> Iterator[str]:
    """Yield lines as a fixed-size line reader would, splitting over-long ones."""
    chunk = MAX_LINE_LENGTH - 1
    parts = text.split("\n")
    for number, part in enumerate(parts):
        line = part + "\n" if number < len(parts) - 1 else part
        for start in range(0, len(line), chunk):
            yield line[start:start + chunk]


def parse_config(text: str) -> EditorConfig:
    """Build a configuration from settings-file text, starting from the defaults."""
    config = EditorConfig()
    for line in _physical_lines(text):
        if line[0] in "#\n\r":
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = trim(key)
        value = trim(value)

        if key == "expandtab":
            config.expandtab = parse_boolean(value)
        elif key == "tab_size":
            config.tab_size = parse_integer(value, 4)
        elif key == "autocomplete":
            enabled = parse_integer(value, 1) > 0
            config.parenthesis_autocomplete = enabled
            config.quotations_autocomplete = enabled
        elif key == "parenthesis_autocomplete":
            config.parenthesis_autocomplete = parse_boolean(value)
        elif key == "quotations_autocomplete":
            config.quotations_autocomplete = parse_boolean(value)
        elif key == "autosave":
            config.autosave = parse_boolean(value)
        elif re.fullmatch(r"color_[0-8]", key):
            setattr(config, key, parse_integer(value, 0))
        elif key == "path":
            if value:
                config.default_path = value
    return config


def load_config(path: Optional[PathLike] = None) -> EditorConfig:
    """Read settings from *path*, or return the defaults if it cannot be opened."""
    target = Path(path) if path is not None else config_file_path()
    try:
        with open(target, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except OSError:
        return EditorConfig()
    return parse_config(text)


def render_config(config: EditorConfig) -> str:
    """Return the settings-file text for *config*."""
    out = [
        "# file insertion of spaces instead of \\t\n",
        f"expandtab={int(bool(config.expandtab))}\n\n",
        "# visual size for tabs (spaces)\n",
        f"tab_size={config.tab_size}\n\n",
        "# specific autocompletion settings\n",
        f"parenthesis_autocomplete={int(bool(config.parenthesis_autocomplete))}\n",
        f"quotations_autocomplete={int(bool(config.quotations_autocomplete))}\n\n",
        "# automatic file saving\n",
        f"autosave={int(bool(config.autosave))}\n\n",
        "# color sets are based on vs code\n",
        "# color 0: comments;          vs code dark green\n\n",
        "# color 1: types;             vs code blue\n",
        "# color 2: control flow;      vs code purple\n",
        "# color 3: variables;         vs code cyan\n",
        "# color 4: function calls;    vs code light yellow\n",
        "# color 5: numbers;           vs code light green\n",
        "# color 6: parentheses;       vs code variable\n",
        "# color 7: strings;           vs code orange\n",
        "# color 8: type definitions;       vs code green\n",
    ]
    out.extend(f"color_{n}={getattr(config, f'color_{n}')}\n" for n in range(9))
    out.append("# default path for files\n")
    out.append(f"path={config.default_path or ''}\n")
    return "".join(out)


def save_config(config: EditorConfig, path: Optional[PathLike] = None) -> None:
    """Write *config* to *path* (the default settings file if not given)."""
    target = Path(path) if path is not None else config_file_path()
    with open(target, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
        handle.write(render_config(config))