"""Scale alignment shared by addition, subtraction and equality of ScaledValue-s.

Two values are brought onto the implicit scale of the more precise one by multiplying
the magnitude of the less precise one by a power of ten. Only integer arithmetic is used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scaled_amounts.domain.scaled.errors import OverflowKind, ScaledValueOverflowError
from scaled_amounts.domain.scaled.limits import MAX_PRECISION_DIFF, POWERS_OF_TEN, U64_MAX

if TYPE_CHECKING:
    from scaled_amounts.domain.scaled.scaled_value import ScaledValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaleAlignment:
    """How to bring two ScaledValue-s onto one scale.

    Attributes:
        scale_factor: Power of ten applied to the less precise magnitude (1 for equal precisions).
        scale_left: True when the left operand is the one to scale. On equal precisions the
            left operand is chosen, which is harmless because $scale_factor is 1.
        precision: Precision of the aligned magnitudes, i.e. max of both precisions.
    """

    scale_factor: int
    scale_left: bool
    precision: int


def compute_alignment(left: ScaledValue, right: ScaledValue, operation: str) -> ScaleAlignment:
    """Find the scale factor and the operand to scale for $left and $right.

    Args:
        left: First operand.
        right: Second operand.
        operation: Name of the calling operation, used in error messages.

    Returns:
        ScaleAlignment describing the rescaling.

    Raises:
        ScaledValueOverflowError: If the precision difference needs a factor above u64 (kind SCALE_FACTOR).
    """
    scale_left = not (left.precision > right.precision)
    precision_diff = max(left.precision, right.precision) - min(left.precision, right.precision)

    # Raise: 10**20 and above does not fit u64, we never wrap or widen silently
    if precision_diff > MAX_PRECISION_DIFF:
        reason = f"scale factor 10**{precision_diff} exceeds u64 (max supported precision difference is {MAX_PRECISION_DIFF})"
        logger.debug(f"Rejected `{operation}` of {left!r} and {right!r}: {reason}")
        raise ScaledValueOverflowError(OverflowKind.SCALE_FACTOR, left, right, operation, reason)

    return ScaleAlignment(
        scale_factor=POWERS_OF_TEN[precision_diff],
        scale_left=scale_left,
        precision=max(left.precision, right.precision),
    )


def align_magnitudes(left: ScaledValue, right: ScaledValue, operation: str) -> tuple[int, int, int]:
    """Return magnitudes of $left and $right on a common scale, plus that scale's precision.

    Operand order is preserved in the result: (aligned left magnitude, aligned right magnitude, precision).
    A zero magnitude on the less precise side stays zero at any scale, so no scale factor is needed for it.

    Raises:
        ScaledValueOverflowError: If the scale factor does not fit u64 (kind SCALE_FACTOR) or the
            rescaled magnitude exceeds u64 (kind MAGNITUDE_OVERFLOW).
    """
    scaled_operand = left if not (left.precision > right.precision) else right
    if scaled_operand.magnitude == 0:
        return left.magnitude, right.magnitude, max(left.precision, right.precision)

    alignment = compute_alignment(left, right, operation)

    if alignment.scale_left:
        left_magnitude = left.magnitude * alignment.scale_factor
        right_magnitude = right.magnitude
        scaled_magnitude = left_magnitude
    else:
        left_magnitude = left.magnitude
        right_magnitude = right.magnitude * alignment.scale_factor
        scaled_magnitude = right_magnitude

    # Raise: rescaled magnitude must still be a u64
    if scaled_magnitude > U64_MAX:
        reason = f"rescaled magnitude {scaled_magnitude} exceeds u64 max {U64_MAX}"
        logger.debug(f"Rejected `{operation}` of {left!r} and {right!r}: {reason}")
        raise ScaledValueOverflowError(OverflowKind.MAGNITUDE_OVERFLOW, left, right, operation, reason)

    return left_magnitude, right_magnitude, alignment.precision
