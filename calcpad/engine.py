"""Calculator engine — interprets button presses and produces the display text.

Input happens in three implicit phases, read off the state rather than stored:
1. Entering the first operand (no operator set)
2. Entering the second operand (operator set)
3. Result shown after "=": phase 1 again, with the result seeded as the
   first operand so it can be chained into the next operation

Every event is total over the state space: incomplete input is ignored and
division by zero shows "Error". The engine never raises for user input.
"""

from __future__ import annotations

from typing import Iterable

from calcpad.display import ERROR_TEXT, INITIAL_DISPLAY, format_result, parse_number
from calcpad.models import CalculatorState, EventKind, InputEvent, Operator


class CalculatorEngine:
    """Single-session calculator state machine.

    The engine exclusively owns its CalculatorState; callers send events
    through handle() and read the display text it returns.
    """

    def __init__(self) -> None:
        self._state = CalculatorState()

    @property
    def display(self) -> str:
        return self._state.display

    def snapshot(self) -> CalculatorState:
        """Return a copy of the current state for inspection."""
        s = self._state
        return CalculatorState(
            first=s.first, second=s.second, operator=s.operator, display=s.display,
        )

    def handle(self, event: InputEvent) -> str:
        """Apply one event and return the updated display text."""
        kind = event.kind
        if kind is EventKind.DIGIT:
            if not event.digit:
                raise ValueError("Digit event without a digit")
            self._enter_digit(event.digit)
        elif kind is EventKind.OPERATOR:
            if event.operator is None:
                raise ValueError("Operator event without an operator")
            self._enter_operator(event.operator)
        elif kind is EventKind.DECIMAL:
            self._enter_decimal()
        elif kind is EventKind.CALCULATE:
            self._calculate()
        elif kind is EventKind.CLEAR_LAST:
            self._clear_last()
        elif kind is EventKind.CLEAR_ALL:
            self._clear_all()
        else:
            raise ValueError(f"Unhandled event kind: {kind!r}")
        return self._state.display

    def handle_all(self, events: Iterable[InputEvent]) -> str:
        """Apply events in order and return the final display text."""
        for event in events:
            self.handle(event)
        return self._state.display

    # --- Handlers ---

    def _enter_digit(self, d: str) -> None:
        s = self._state
        if s.operator is None:
            # Starting over after a lone "0" or an "Error" replaces the buffer
            if s.first == "0" or s.display == ERROR_TEXT:
                s.first = d
            else:
                s.first += d
            s.display = s.first
        else:
            s.second += d
            s.display = s.second

    def _enter_operator(self, op: Operator) -> None:
        s = self._state
        if s.first.strip():
            s.operator = op

    def _enter_decimal(self) -> None:
        s = self._state
        current = s.current
        # Exponent and infinity results ("1e-05", "inf") are already complete
        if "." in current or "e" in current or "inf" in current:
            return
        updated = "0." if not current.strip() else current + "."
        if s.operator is None:
            s.first = updated
        else:
            s.second = updated
        s.display = updated

    def _calculate(self) -> None:
        s = self._state
        a = parse_number(s.first)
        b = parse_number(s.second)
        if a is None or b is None or s.operator is None:
            return

        result = format_result(s.operator.apply(a, b))

        # Reset, then seed the result as the next first operand
        self._clear_all()
        if result != ERROR_TEXT:
            s.first = result
        s.display = result

    def _clear_last(self) -> None:
        s = self._state
        if s.operator is None:
            if s.first.strip():
                s.first = s.first[:-1]
                s.display = s.first if s.first.strip() else INITIAL_DISPLAY
        elif s.second.strip():
            s.second = s.second[:-1]
            s.display = s.second if s.second.strip() else INITIAL_DISPLAY
        else:
            # Abandon the pending operator, keep the first operand
            s.operator = None
            s.display = s.first

    def _clear_all(self) -> None:
        self._state.reset()
