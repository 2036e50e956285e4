"""Function-style API over `ScaledValue` arithmetic."""

from __future__ import annotations

from scaled_amounts.domain.scaled.scaled_value import ScaledValue


def add(left: ScaledValue, right: ScaledValue) -> ScaledValue:
    """Return `left + right`, see `ScaledValue.add`."""
    return left.add(right)


def subtract(left: ScaledValue, right: ScaledValue) -> ScaledValue:
    """Return `left - right`, see `ScaledValue.subtract`."""
    return left.subtract(right)


def equals(left: ScaledValue, right: ScaledValue) -> bool:
    """Return True if both values denote the same quantity, see `ScaledValue.equals`."""
    return left.equals(right)
