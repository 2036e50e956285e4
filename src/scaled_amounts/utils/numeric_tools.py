from __future__ import annotations

from decimal import Decimal
from typing import Any, TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def is_strict_int(value: Any) -> bool:
    """Check that $value is an `int` and not a `bool`.

    `bool` subclasses `int` in Python, but True/False are never valid magnitudes or precisions.
    """
    return isinstance(value, int) and not isinstance(value, bool)


# Note: No 'as_int' function is provided.
# Integer fields are never converted implicitly; callers pass `int` or go through `Decimal`.
