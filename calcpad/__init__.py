"""calcpad: a keypad calculator engine with a terminal shell.

The engine is a small state machine: feed it one token per button press
("7", "+", "=", "C", ...) and it hands back the text for a single-line
display. The shell maps terminal keys onto the same tokens.

Usage:
    python -m calcpad keypad                 # Show the button layout
    python -m calcpad press 3 + 4 '*' 2 =    # Feed tokens, print the display
    python -m calcpad press -t 50%           # Same, with a per-token trace
    python -m calcpad repl                   # Interactive session
"""

from calcpad.engine import Calculator
from calcpad.models import CalculatorState, Operator

__all__ = ["Calculator", "CalculatorState", "Operator"]
