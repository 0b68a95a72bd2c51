"""Value helpers for the turtle language.

The language has a single value type: a number. Booleans produced by
relational and logical operators are encoded C-style as ``1.0`` (true)
and ``0.0`` (false), and any non-zero number counts as true.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

Number = float

TRUE: Number = 1.0
FALSE: Number = 0.0


@dataclass(frozen=True)
class ErrorVal:
    """A runtime error record: an error name plus a human readable message."""
    name: str
    message: str

    def __str__(self) -> str:
        return f"{self.name}: {self.message}"


def truth(flag: bool) -> Number:
    return TRUE if flag else FALSE


def is_truthy(value: Number) -> bool:
    return value != 0


def to_number(value) -> Number:
    """Coerce ints, floats and numeric strings to a Number."""
    if isinstance(value, bool):
        return truth(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value.strip())
    raise TypeError(f"cannot convert {type(value).__name__} to a number")


def format_number(value: Number) -> str:
    """Render a number for the command stream.

    Integral values print without a fractional part (``20``, ``-90``);
    anything else uses ``repr`` so the printed text round-trips exactly.
    """
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))
