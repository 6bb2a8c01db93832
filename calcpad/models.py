"""Data models for the calcpad engine.

Operator enum, token vocabulary, CalculatorState and the keypad layout:
the typed structures shared by engine → keymap → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Operator(str, Enum):
    """Pending binary operators, keyed by their button label."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# Control tokens
DIGITS = "0123456789"
DECIMAL_POINT = "."
EQUALS = "="
CLEAR = "C"
BACKSPACE = "←"
PERCENT = "%"
TOGGLE_SIGN = "±"

TOKENS = frozenset(
    list(DIGITS)
    + [op.value for op in Operator]
    + [DECIMAL_POINT, EQUALS, CLEAR, BACKSPACE, PERCENT, TOGGLE_SIGN]
)

# Display strings for recovered failures
ERROR = "Error"
DIVISION_BY_ZERO = "Error: Division by 0"

# Button grid, top row first.
BUTTON_LAYOUT: tuple[tuple[str, ...], ...] = (
    (CLEAR, BACKSPACE, PERCENT, "/"),
    ("7", "8", "9", "*"),
    ("4", "5", "6", "-"),
    ("1", "2", "3", "+"),
    (TOGGLE_SIGN, "0", DECIMAL_POINT, EQUALS),
)


@dataclass
class CalculatorState:
    """Everything the engine remembers between button presses.

    first_operand is only meaningful while an operator is pending.
    start_new_number means the next digit or decimal point replaces the
    display instead of extending it.
    """

    display: str = "0"
    first_operand: float = 0.0
    operator: Optional[Operator] = None
    start_new_number: bool = True

    def reset(self) -> None:
        """Restore the power-on state in place."""
        self.display = "0"
        self.first_operand = 0.0
        self.operator = None
        self.start_new_number = True
