"""Number parsing and result formatting for the calculator display.

Operand buffers are plain text; they are only turned into floats when
"=" is pressed, and the result is turned back into text for the display.
"""

from __future__ import annotations

import math
from typing import Optional

ERROR_TEXT = "Error"
INITIAL_DISPLAY = "0"


def parse_number(text: str) -> Optional[float]:
    """Parse an operand buffer as a float.

    Returns None for blank or malformed text (e.g. "" or ".") instead of
    raising, so an incomplete operand simply aborts the calculation.
    """
    if not text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def format_result(value: float) -> str:
    """Format a calculation result for the display.

    NaN becomes "Error". Otherwise the default float text is used with a
    literal ".0" suffix removed: 2.0 -> "2", 2.5 -> "2.5".
    """
    if math.isnan(value):
        return ERROR_TEXT
    text = str(value)
    # Only the exact two-character suffix; "1e+16" and "2.25" pass through
    if text.endswith(".0"):
        text = text[:-2]
    return text
