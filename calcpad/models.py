"""Data models for the calcpad calculator.

Operator and EventKind enums, InputEvent, CalculatorState — the typed
structures that flow from keypad → engine → display.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional, Union

from calcpad.display import INITIAL_DISPLAY


class Operator(str, Enum):
    """Binary operators, valued by the symbol printed on the key."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"

    def apply(self, a: float, b: float) -> float:
        """Apply the operator to two operands.

        Division by zero yields NaN rather than raising.
        """
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUBTRACT:
            return a - b
        if self is Operator.MULTIPLY:
            return a * b
        if b == 0:
            return math.nan
        return a / b


class EventKind(str, Enum):
    """The six kinds of input the engine accepts."""

    DIGIT = "digit"
    OPERATOR = "operator"
    DECIMAL = "decimal"
    CALCULATE = "calculate"
    CLEAR_LAST = "clear-last"
    CLEAR_ALL = "clear-all"


@dataclass(frozen=True)
class InputEvent:
    """A single button press, already mapped from its key label.

    Build instances through the classmethods; they validate the payload
    so the engine never sees a malformed digit or operator.
    """

    kind: EventKind
    digit: Optional[str] = None
    operator: Optional[Operator] = None

    @classmethod
    def of_digit(cls, d: str) -> InputEvent:
        if len(d) != 1 or d not in "0123456789":
            raise ValueError(f"Not a digit: {d!r}")
        return cls(EventKind.DIGIT, digit=d)

    @classmethod
    def of_operator(cls, op: Union[Operator, str]) -> InputEvent:
        # Operator(...) raises ValueError for unknown symbols
        return cls(EventKind.OPERATOR, operator=Operator(op))

    @classmethod
    def decimal(cls) -> InputEvent:
        return cls(EventKind.DECIMAL)

    @classmethod
    def calculate(cls) -> InputEvent:
        return cls(EventKind.CALCULATE)

    @classmethod
    def clear_last(cls) -> InputEvent:
        return cls(EventKind.CLEAR_LAST)

    @classmethod
    def clear_all(cls) -> InputEvent:
        return cls(EventKind.CLEAR_ALL)

    def describe(self) -> str:
        """Short human-readable form, e.g. 'digit 7' or 'operator ×'."""
        if self.kind is EventKind.DIGIT:
            return f"digit {self.digit}"
        if self.kind is EventKind.OPERATOR and self.operator is not None:
            return f"operator {self.operator.value}"
        return self.kind.value


@dataclass
class CalculatorState:
    """Operand buffers, pending operator and the text on the display.

    An empty buffer means the operand has not been started yet.
    """

    first: str = ""
    second: str = ""
    operator: Optional[Operator] = None
    display: str = INITIAL_DISPLAY

    def reset(self) -> None:
        """Return to the session-start values."""
        self.first = ""
        self.second = ""
        self.operator = None
        self.display = INITIAL_DISPLAY

    @property
    def current(self) -> str:
        """The buffer being typed: second once an operator is set, else first."""
        return self.second if self.operator is not None else self.first

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        d = asdict(self)
        d["operator"] = self.operator.value if self.operator else None
        return d
