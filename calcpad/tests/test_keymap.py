"""Key normalization tests."""

import pytest

from calcpad.keymap import UnknownKeyError, normalize_key, tokenize
from calcpad.models import BUTTON_LAYOUT, TOKENS


# --- normalize_key ---

def test_every_button_is_a_token():
    for row in BUTTON_LAYOUT:
        for label in row:
            assert normalize_key(label) == label
    assert {label for row in BUTTON_LAYOUT for label in row} == TOKENS


@pytest.mark.parametrize("key, expected", [
    ("\n", "="),
    ("\r", "="),
    ("Enter", "="),
    ("RETURN", "="),
    ("Escape", "C"),
    ("\x1b", "C"),
    ("Backspace", "←"),
    ("Delete", "←"),
    ("\b", "←"),
    ("\x7f", "←"),
    ("c", "C"),
    ("x", "*"),
    ("_", "±"),
    ("X", "*"),
])
def test_key_aliases(key, expected):
    assert normalize_key(key) == expected


@pytest.mark.parametrize("key", ["a", "(", "F1", "^"])
def test_unmapped_keys(key):
    assert normalize_key(key) is None


# --- tokenize ---

def test_tokenize_run_of_keys():
    assert tokenize("12.5*4=") == ["1", "2", ".", "5", "*", "4", "="]


def test_tokenize_words_and_names():
    assert tokenize("3 + 4 enter esc") == ["3", "+", "4", "=", "C"]


def test_tokenize_empty_line():
    assert tokenize("   ") == []


def test_tokenize_unknown_key():
    with pytest.raises(UnknownKeyError) as exc:
        tokenize("3 + 4a")
    assert exc.value.key == "a"
    assert isinstance(exc.value, ValueError)


def test_uppercase_aliases():
    assert tokenize("2X3 ESC") == ["2", "*", "3", "C"]
    assert normalize_key("C") == "C"
