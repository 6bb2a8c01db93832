"""CLI for the calcpad keypad calculator.

Usage:
    python -m calcpad keypad                 # Show the button layout
    python -m calcpad press 3 + 4 '*' 2 =    # Feed tokens, print the display
    python -m calcpad press --trace 8/0=     # Per-token display table
    python -m calcpad repl                   # Interactive session
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calcpad.engine import Calculator
from calcpad.keymap import UnknownKeyError, tokenize
from calcpad.models import BUTTON_LAYOUT, ERROR

app = typer.Typer(
    name="calcpad",
    help="Keypad calculator with a single-line display",
    no_args_is_help=True,
)
console = Console(stderr=True)

_QUIT_WORDS = ("q", "quit", "exit")


def _keypad_table() -> Table:
    """Render BUTTON_LAYOUT as a grid of buttons."""
    table = Table(show_header=False, show_lines=True)
    for _ in BUTTON_LAYOUT[0]:
        table.add_column(justify="center", min_width=3)
    for row in BUTTON_LAYOUT:
        table.add_row(*row)
    return table


def _display_style(text: str) -> str:
    return "red" if text.startswith(ERROR) else "bold"


@app.command("keypad")
def cmd_keypad() -> None:
    """Show the on-screen button layout."""
    console.print()
    console.print(_keypad_table())
    console.print()


@app.command("press", context_settings={"ignore_unknown_options": True})
def cmd_press(
    keys: list[str] = typer.Argument(help="Keys to press, e.g. 3 + 4 = or '12.5*4='"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show the display after every token"),
) -> None:
    """Feed keys to a fresh calculator and print the final display."""
    try:
        tokens = tokenize(" ".join(keys))
    except UnknownKeyError as e:
        console.print(f"[red]Unknown key: {escape(repr(e.key))}[/red]")
        raise typer.Exit(1)

    calc = Calculator()
    if trace:
        table = Table(title="Key Trace", show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Key", style="green", justify="center")
        table.add_column("Display", justify="right")
        table.add_column("Pending", justify="center", style="dim")
        for i, token in enumerate(tokens, 1):
            shown = calc.handle(token)
            pending = calc.state.operator.value if calc.state.operator else "--"
            table.add_row(str(i), token, f"[{_display_style(shown)}]{shown}[/]", pending)
        console.print()
        console.print(table)
        console.print()
    else:
        calc.press(*tokens)

    typer.echo(calc.display)


@app.command("repl")
def cmd_repl(
    keypad: bool = typer.Option(False, "--keypad/--no-keypad", envvar="CALCPAD_KEYPAD", help="Show the keypad on start"),
    prompt: str = typer.Option("> ", "--prompt", envvar="CALCPAD_PROMPT", help="Input prompt"),
) -> None:
    """Interactive session: type keys, see the display after each line."""
    if keypad:
        console.print(_keypad_table())
    console.print("[dim]Keys: 0-9 . + - * / = % C. 'del' deletes, '_' toggles sign, 'q' quits.[/dim]")

    calc = Calculator()
    console.print(f"[bold]{calc.display}[/bold]")
    while True:
        try:
            line = console.input(prompt)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if line.strip().lower() in _QUIT_WORDS:
            break
        try:
            tokens = tokenize(line)
        except UnknownKeyError as e:
            console.print(f"[yellow]Unknown key {escape(repr(e.key))}, line ignored[/yellow]")
            continue
        shown = calc.press(*tokens)
        console.print(f"[{_display_style(shown)}]{shown}[/]")


if __name__ == "__main__":
    app()
