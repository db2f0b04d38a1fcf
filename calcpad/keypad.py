"""Keypad layout and key-label → InputEvent mapping.

This is the UI side of the calculator: it knows which buttons exist and
what each one sends, but holds no calculator state of its own.
"""

from __future__ import annotations

from calcpad.models import InputEvent, Operator

# Four columns, top to bottom; the clear keys sit on their own row.
KEYPAD_ROWS: list[list[str]] = [
    ["7", "8", "9", Operator.DIVIDE.value],
    ["4", "5", "6", Operator.MULTIPLY.value],
    ["1", "2", "3", Operator.SUBTRACT.value],
    ["0", ".", "=", Operator.ADD.value],
    ["AC", "C"],
]

# ASCII spellings accepted when labels are typed rather than pressed
ALIASES: dict[str, str] = {
    "-": Operator.SUBTRACT.value,
    "*": Operator.MULTIPLY.value,
    "x": Operator.MULTIPLY.value,
    "/": Operator.DIVIDE.value,
}


class UnknownKeyError(ValueError):
    """Raised when a label does not correspond to any keypad button."""


def all_labels() -> list[str]:
    """Every button label in keypad order."""
    return [label for row in KEYPAD_ROWS for label in row]


def event_for(label: str) -> InputEvent:
    """Map a button label (or ASCII alias) to the event it sends.

    Raises:
        UnknownKeyError: if the label is not on the keypad.
    """
    key = ALIASES.get(label, label)
    if len(key) == 1 and key in "0123456789":
        return InputEvent.of_digit(key)
    if key in {op.value for op in Operator}:
        return InputEvent.of_operator(key)
    if key == ".":
        return InputEvent.decimal()
    if key == "=":
        return InputEvent.calculate()
    if key == "C":
        return InputEvent.clear_last()
    if key == "AC":
        return InputEvent.clear_all()
    raise UnknownKeyError(f"Unknown key: {label!r}")


def events_for(labels: list[str]) -> list[InputEvent]:
    """Map a sequence of labels, failing on the first unknown one."""
    return [event_for(label) for label in labels]
