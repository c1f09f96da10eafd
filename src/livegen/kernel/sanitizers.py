from __future__ import annotations

import math
import re

# Sanitizers are pure value -> value functions applied by Port.update.

_FLOAT_PREFIX = re.compile(r"^[+-]?(?:inf(?:inity)?|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.IGNORECASE)

NO_KEY = -1

# Browser-style key codes for named keys; single characters map to their upper-case code point.
_NAMED_KEYS = {
    "backspace": 8,
    "tab": 9,
    "enter": 13,
    "return": 13,
    "shift": 16,
    "control": 17,
    "ctrl": 17,
    "alt": 18,
    "escape": 27,
    "esc": 27,
    "space": 32,
    "left": 37,
    "up": 38,
    "right": 39,
    "down": 40,
    "delete": 46,
}


def to_float(value: object) -> float:
    # Parse-float semantics: numeric prefix of text is accepted, anything else is NaN.
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value.strip())
        if match is None:
            return math.nan
        return float(match.group(0))
    return math.nan


def to_bool(value: object) -> bool:
    if isinstance(value, str):
        text = value.strip().lower()
        if text in {"", "0", "false", "no", "off"}:
            return False
        if text in {"1", "true", "yes", "on"}:
            return True
        number = to_float(text)
        return not math.isnan(number) and number != 0.0
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def key_code(value: object) -> int:
    # Keys are addressed by code; characters and key names are converted on update.
    # Unknown keys map to NO_KEY, which is never reported as held.
    if isinstance(value, bool):
        return NO_KEY
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        if len(value) == 1:
            return ord(value.upper())
        named = _NAMED_KEYS.get(value.strip().lower())
        if named is not None:
            return named
        if value.strip().isdigit():
            return int(value.strip())
    return NO_KEY
