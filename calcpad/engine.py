"""Calculator engine. Turns button tokens into display text.

One entry point, Calculator.handle(token), dispatching on the token class:

    C        reset everything
    0-9      type a digit
    .        type the decimal point (once per number)
    ←        delete the last typed character
    ±        toggle the sign of the display
    %        divide the display by 100
    + - * /  set the pending operator, chaining any pending calculation
    =        apply the pending operator

Failures never raise out of handle(): they land on the display as "Error"
or "Error: Division by 0" and the next digit starts a fresh number.
"""

from __future__ import annotations

from typing import Optional

from calcpad.formatting import parse_number, strip_trailing_zeros
from calcpad.models import (
    BACKSPACE,
    CLEAR,
    DECIMAL_POINT,
    DIGITS,
    DIVISION_BY_ZERO,
    EQUALS,
    ERROR,
    PERCENT,
    TOGGLE_SIGN,
    CalculatorState,
    Operator,
)

_OPERATOR_TOKENS = frozenset(op.value for op in Operator)


class Calculator:
    """Keypad state machine over a single CalculatorState.

    Not thread-safe: the caller serializes handle() calls.
    """

    def __init__(self, state: Optional[CalculatorState] = None) -> None:
        self.state = state or CalculatorState()

    @property
    def display(self) -> str:
        return self.state.display

    def handle(self, command: str) -> str:
        """Apply one token and return the new display text.

        Tokens outside the keypad vocabulary are ignored.
        """
        if command == CLEAR:
            self.state.reset()
        elif command == BACKSPACE:
            self._backspace()
        elif command == PERCENT:
            self._apply_percent()
        elif command == TOGGLE_SIGN:
            self._toggle_sign()
        elif command in _OPERATOR_TOKENS:
            self._set_operator(Operator(command))
        elif command == EQUALS:
            self._calculate_result()
        elif command == DECIMAL_POINT:
            self._append_decimal_point()
        elif len(command) == 1 and command in DIGITS:
            self._append_digit(command)
        return self.state.display

    def press(self, *commands: str) -> str:
        """Feed several tokens in order; returns the final display."""
        for command in commands:
            self.handle(command)
        return self.state.display

    # --- Input editing ---

    def _append_digit(self, digit: str) -> None:
        s = self.state
        if s.start_new_number:
            s.display = digit
            s.start_new_number = False
        elif s.display == "0":
            s.display = digit
        else:
            s.display += digit

    def _append_decimal_point(self) -> None:
        s = self.state
        if s.start_new_number:
            s.display = "0."
            s.start_new_number = False
        elif DECIMAL_POINT not in s.display:
            s.display += DECIMAL_POINT

    def _backspace(self) -> None:
        s = self.state
        if s.start_new_number:
            return
        if len(s.display) <= 1:
            s.display = "0"
            s.start_new_number = True
        else:
            s.display = s.display[:-1]

    def _toggle_sign(self) -> None:
        s = self.state
        if s.display == "0":
            return
        if s.display.startswith("-"):
            s.display = s.display[1:]
        else:
            s.display = "-" + s.display

    # --- Arithmetic ---

    def _fail(self, text: str = ERROR) -> None:
        self.state.display = text
        self.state.start_new_number = True

    def _apply_percent(self) -> None:
        try:
            value = parse_number(self.state.display)
        except ValueError:
            self._fail()
            return
        self.state.display = strip_trailing_zeros(value / 100.0)
        self.state.start_new_number = True

    def _set_operator(self, op: Operator) -> None:
        s = self.state
        if s.operator is not None and not s.start_new_number:
            # 3 + 4 * → 7 * ...
            self._calculate_result()
        try:
            s.first_operand = parse_number(s.display)
        except ValueError:
            self._fail()
            return
        s.operator = op
        s.start_new_number = True

    def _calculate_result(self) -> None:
        s = self.state
        if s.operator is None:
            return
        try:
            second = parse_number(s.display)
        except ValueError:
            self._fail()
            return

        if s.operator is Operator.ADD:
            result = s.first_operand + second
        elif s.operator is Operator.SUB:
            result = s.first_operand - second
        elif s.operator is Operator.MUL:
            result = s.first_operand * second
        else:
            if second == 0:
                s.operator = None
                self._fail(DIVISION_BY_ZERO)
                return
            result = s.first_operand / second

        s.display = strip_trailing_zeros(result)
        s.operator = None
        s.start_new_number = True
