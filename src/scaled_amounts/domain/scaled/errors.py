from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scaled_amounts.domain.scaled.scaled_value import ScaledValue


class OverflowKind(Enum):
    """Which step of a scaled-value computation left the u64 range."""

    SCALE_FACTOR = "SCALE_FACTOR"
    MAGNITUDE_OVERFLOW = "MAGNITUDE_OVERFLOW"
    MAGNITUDE_UNDERFLOW = "MAGNITUDE_UNDERFLOW"


class ScaledValueOverflowError(OverflowError):
    """Raised when aligning or combining two ScaledValue-s cannot be represented in u64.

    One error type covers all three failure modes; inspect $kind to tell them apart.

    Attributes:
        kind (OverflowKind): Failed step.
        left (ScaledValue): First operand.
        right (ScaledValue): Second operand.
        operation (str): Name of the operation that failed (e.g. "add").
    """

    def __init__(self, kind: OverflowKind, left: ScaledValue, right: ScaledValue, operation: str, reason: str):
        self.kind = kind
        self.left = left
        self.right = right
        self.operation = operation
        self.reason = reason

        super().__init__(f"Cannot call `ScaledValue.{operation}` with $left ({left!r}) and $right ({right!r}) because {reason} ({kind.value})")
