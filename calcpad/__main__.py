"""CLI for the calcpad calculator.

Usage:
    python -m calcpad keys                       # Show the keypad
    python -m calcpad press 5 + 3 =              # Press keys, print the display
    python -m calcpad press 1 2 / 0 = --trace    # Show the display after every key
    python -m calcpad press 4 / 2 = --state      # Also show the internal buffers
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from calcpad.display import ERROR_TEXT
from calcpad.engine import CalculatorEngine
from calcpad.keypad import KEYPAD_ROWS, UnknownKeyError, all_labels, events_for
from calcpad.models import CalculatorState

app = typer.Typer(
    name="calcpad",
    help="Basic keypad calculator",
    no_args_is_help=True,
)
console = Console()


@app.command("keys")
def cmd_keys() -> None:
    """Show the keypad layout."""
    width = max(len(row) for row in KEYPAD_ROWS)
    table = Table(title="Keypad", show_header=False, show_lines=True)
    for _ in range(width):
        table.add_column(justify="center", min_width=4)

    for row in KEYPAD_ROWS:
        cells = [_style_key(label) for label in row]
        cells += [""] * (width - len(row))
        table.add_row(*cells)

    console.print()
    console.print(table)
    console.print("[dim]ASCII aliases: - * x /[/dim]")
    console.print()


@app.command("press")
def cmd_press(
    keys: list[str] = typer.Argument(help="Key labels in order (e.g., 5 + 3 =)"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show the display after every key"),
    state: bool = typer.Option(False, "--state", "-s", help="Show the final operands and operator"),
) -> None:
    """Press a sequence of keys and print the display."""
    try:
        events = events_for(keys)
    except UnknownKeyError as e:
        console.print(f"[red]{e}[/red]. Valid keys: {' '.join(all_labels())}")
        raise typer.Exit(1)

    engine = CalculatorEngine()

    if trace:
        table = Table(title="Key presses", show_header=True, header_style="bold")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Key", style="green")
        table.add_column("Event")
        table.add_column("Display", justify="right")
        for i, (label, event) in enumerate(zip(keys, events), start=1):
            shown = engine.handle(event)
            table.add_row(str(i), label, event.describe(), _style_display(shown))
        console.print()
        console.print(table)
    else:
        engine.handle_all(events)

    console.print(Panel(_style_display(engine.display), expand=False, title="Display"))

    if state:
        _render_state(engine.snapshot())


def _style_key(label: str) -> str:
    if label in ("AC", "C"):
        return f"[red]{label}[/red]"
    if label.isdigit():
        return f"[bold]{label}[/bold]"
    return f"[magenta]{label}[/magenta]"


def _style_display(text: str) -> str:
    if text == ERROR_TEXT:
        return f"[red]{text}[/red]"
    return f"[bold]{text}[/bold]"


def _render_state(s: CalculatorState) -> None:
    """Render the engine's buffers and pending operator."""
    table = Table(title="State", show_header=True, header_style="bold")
    table.add_column("Field", style="dim", min_width=10)
    table.add_column("Value", justify="right")
    for name, value in s.to_dict().items():
        table.add_row(name, "[dim]--[/dim]" if value in (None, "") else str(value))
    console.print(table)


if __name__ == "__main__":
    app()
