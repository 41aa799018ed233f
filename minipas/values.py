"""Runtime value helpers for minipas.

The language has a single numeric type, represented by Python ``float``.
There is no boolean type: a value is false when it lies within
``EPSILON`` of zero and true otherwise. Relational and logical operators
produce ``TRUE`` or ``FALSE``.
"""

from __future__ import annotations

import math

EPSILON = 0.001

TRUE = 1.0
FALSE = 0.0


def truth(value: float) -> bool:
    """Return the truth of a number under the zero tolerance."""
    return not (-EPSILON < value < EPSILON)


def from_bool(flag: bool) -> float:
    return TRUE if flag else FALSE


def truncating_mod(a: float, b: float) -> float:
    """Remainder of the operands truncated to integers, sign of the dividend."""
    return float(math.fmod(int(a), int(b)))


def format_number(value: float) -> str:
    # same shape as a C++ stream prints a float: 7.0 -> "7", 0.1 -> "0.1"
    return f"{value:g}"
