"""calcpad — Basic keypad calculator.

A single state machine turns button presses (digits, operators, ".", "=",
C and AC) into the text shown on the display. One pending operator, two
operands, no precedence: "5 + 3 =" shows 8, and the result can be chained
into the next operation.

Usage:
    python -m calcpad keys                  # Show the keypad
    python -m calcpad press 5 + 3 =         # Press keys, print the display
"""
