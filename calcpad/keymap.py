"""Key normalization: maps terminal keys and key names onto engine tokens.

The engine only understands the keypad vocabulary in calcpad.models.TOKENS.
Everything a front end might send (Enter, Escape, raw control characters,
ASCII stand-ins for ← and ±) is collapsed onto that vocabulary here, so
the engine never sees a newline or a key name.
"""

from __future__ import annotations

from typing import Optional

from calcpad.models import BACKSPACE, CLEAR, EQUALS, TOGGLE_SIGN, TOKENS

# Named keys, matched case-insensitively.
KEY_NAMES: dict[str, str] = {
    "enter": EQUALS,
    "return": EQUALS,
    "escape": CLEAR,
    "esc": CLEAR,
    "backspace": BACKSPACE,
    "delete": BACKSPACE,
    "del": BACKSPACE,
    "neg": TOGGLE_SIGN,
    "clear": CLEAR,
}

# Single characters that stand in for a keypad token, matched case-insensitively.
KEY_CHARS: dict[str, str] = {
    "\n": EQUALS,
    "\r": EQUALS,
    "\x1b": CLEAR,
    "\b": BACKSPACE,
    "\x7f": BACKSPACE,
    "c": CLEAR,
    "x": "*",
    "_": TOGGLE_SIGN,
}


class UnknownKeyError(ValueError):
    """Raised by tokenize() for a key with no keypad equivalent."""

    def __init__(self, key: str) -> None:
        super().__init__(f"unknown key: {key!r}")
        self.key = key


def normalize_key(key: str) -> Optional[str]:
    """Map one key (character or key name) to a token, or None if unmapped."""
    if key in TOKENS:
        return key
    if key.lower() in KEY_CHARS:
        return KEY_CHARS[key.lower()]
    return KEY_NAMES.get(key.lower())


def tokenize(line: str) -> list[str]:
    """Split typed input into tokens.

    Whitespace separates words. A word that is a key name ('Enter', 'esc')
    becomes one token; any other word is read character by character, so
    '12.5*4=' yields seven tokens.

    Raises:
        UnknownKeyError: on the first character or word with no mapping.
    """
    tokens: list[str] = []
    for word in line.split():
        named = KEY_NAMES.get(word.lower())
        if named is not None:
            tokens.append(named)
            continue
        for ch in word:
            token = normalize_key(ch)
            if token is None:
                raise UnknownKeyError(ch)
            tokens.append(token)
    return tokens
