from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from scaled_amounts.domain.scaled.alignment import align_magnitudes
from scaled_amounts.domain.scaled.errors import OverflowKind, ScaledValueOverflowError
from scaled_amounts.domain.scaled.limits import U64_MAX, U8_MAX
from scaled_amounts.utils.numeric_tools import DecimalLike, as_decimal, is_strict_int

logger = logging.getLogger(__name__)


class ScaledValue:
    """Fixed-point quantity: an unsigned integer $magnitude with $precision implied decimal places.

    The represented number is `magnitude / 10**precision`. There is no canonical form, so
    `ScaledValue(1, 0)` and `ScaledValue(1000, 3)` are different representations that compare equal.

    Addition, subtraction and equality first align both operands onto the larger precision
    (see `scaled_amounts.domain.scaled.alignment`) and then combine plain integers. Results that
    leave the u64 range raise `ScaledValueOverflowError` instead of wrapping.

    Attributes:
        magnitude (int): Quantity in the smallest unit implied by $precision (0 .. 2**64 - 1).
        precision (int): Number of implied fractional digits (0 .. 255).
    """

    __slots__ = ("_magnitude", "_precision")

    def __init__(self, magnitude: int, precision: int) -> None:
        """Initialize a ScaledValue.

        Args:
            magnitude: Unsigned 64-bit integer magnitude.
            precision: Unsigned 8-bit number of decimal places.

        Raises:
            TypeError: If $magnitude or $precision is not an int.
            ValueError: If $magnitude or $precision is outside its u64 / u8 range.
        """
        # Raise: $magnitude must be an int (bool is rejected)
        if not is_strict_int(magnitude):
            raise TypeError(f"Cannot call `ScaledValue.__init__` because $magnitude is not int (got type '{type(magnitude).__name__}')")

        # Raise: $precision must be an int (bool is rejected)
        if not is_strict_int(precision):
            raise TypeError(f"Cannot call `ScaledValue.__init__` because $precision is not int (got type '{type(precision).__name__}')")

        # Raise: $magnitude must fit u64
        if magnitude < 0 or magnitude > U64_MAX:
            raise ValueError(f"Cannot call `ScaledValue.__init__` because $magnitude ({magnitude}) is outside the range 0..{U64_MAX}")

        # Raise: $precision must fit u8
        if precision < 0 or precision > U8_MAX:
            raise ValueError(f"Cannot call `ScaledValue.__init__` because $precision ({precision}) is outside the range 0..{U8_MAX}")

        self._magnitude = magnitude
        self._precision = precision

    # region Properties

    @property
    def magnitude(self) -> int:
        """Get the integer magnitude."""
        return self._magnitude

    @property
    def precision(self) -> int:
        """Get the number of implied decimal places."""
        return self._precision

    # endregion

    # region Arithmetic

    def add(self, other: ScaledValue) -> ScaledValue:
        """Return the sum of $self and $other at the larger of both precisions.

        Args:
            other: Value to add.

        Returns:
            ScaledValue: New value with precision `max(self.precision, other.precision)`.

        Raises:
            TypeError: If $other is not a ScaledValue.
            ScaledValueOverflowError: If alignment or the sum leaves the u64 range.
        """
        self._check_operand(other, "add")
        left_magnitude, right_magnitude, precision = align_magnitudes(self, other, "add")

        total = left_magnitude + right_magnitude

        # Raise: sum must fit u64
        if total > U64_MAX:
            reason = f"sum {total} exceeds u64 max {U64_MAX}"
            logger.debug(f"Rejected `add` of {self!r} and {other!r}: {reason}")
            raise ScaledValueOverflowError(OverflowKind.MAGNITUDE_OVERFLOW, self, other, "add", reason)

        return ScaledValue(total, precision)

    def subtract(self, other: ScaledValue) -> ScaledValue:
        """Return `self - other` at the larger of both precisions.

        The less precise operand is scaled up regardless of whether it is the minuend or the subtrahend.

        Args:
            other: Value to subtract.

        Returns:
            ScaledValue: New value with precision `max(self.precision, other.precision)`.

        Raises:
            TypeError: If $other is not a ScaledValue.
            ScaledValueOverflowError: If alignment overflows u64, or the difference would be negative
                (kind MAGNITUDE_UNDERFLOW); negative quantities are not representable.
        """
        self._check_operand(other, "subtract")
        left_magnitude, right_magnitude, precision = align_magnitudes(self, other, "subtract")

        difference = left_magnitude - right_magnitude

        # Raise: difference must not be negative
        if difference < 0:
            reason = f"difference {left_magnitude} - {right_magnitude} is negative"
            logger.debug(f"Rejected `subtract` of {self!r} and {other!r}: {reason}")
            raise ScaledValueOverflowError(OverflowKind.MAGNITUDE_UNDERFLOW, self, other, "subtract", reason)

        return ScaledValue(difference, precision)

    def equals(self, other: ScaledValue) -> bool:
        """Check whether $self and $other denote the same quantity, whatever their precisions.

        Comparison is exact integer equality after alignment, no tolerance is involved.

        Raises:
            TypeError: If $other is not a ScaledValue.
            ScaledValueOverflowError: If alignment leaves the u64 range (same policy as `add` and `subtract`).
        """
        self._check_operand(other, "equals")
        left_magnitude, right_magnitude, _ = align_magnitudes(self, other, "equals")
        return left_magnitude == right_magnitude

    def _check_operand(self, other: object, operation: str) -> None:
        # Raise: operand must be a ScaledValue
        if not isinstance(other, ScaledValue):
            raise TypeError(f"Cannot call `ScaledValue.{operation}` because $other is not ScaledValue (got type '{type(other).__name__}')")

    def __add__(self, other: object) -> ScaledValue:
        """Add another ScaledValue, see `add`."""
        if not isinstance(other, ScaledValue):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> ScaledValue:
        """Subtract another ScaledValue, see `subtract`."""
        if not isinstance(other, ScaledValue):
            return NotImplemented
        return self.subtract(other)

    def __eq__(self, other: object) -> bool:
        """Check equality with another ScaledValue, see `equals`."""
        if not isinstance(other, ScaledValue):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        """Hash consistent with `equals`: trailing zero digits are stripped before hashing."""
        magnitude, precision = self._magnitude, self._precision
        while precision > 0 and magnitude % 10 == 0:
            magnitude //= 10
            precision -= 1
        return hash((magnitude, precision))

    # endregion

    # region Conversions

    def to_decimal(self) -> Decimal:
        """Return the exact `Decimal` for this value (never goes through float).

        Returns:
            Decimal: `magnitude / 10**precision` with exponent `-precision`.
        """
        digits = tuple(int(digit) for digit in str(self._magnitude))
        return Decimal((0, digits, -self._precision))

    @classmethod
    def from_decimal(cls, value: DecimalLike, precision: int | None = None) -> ScaledValue:
        """Create a ScaledValue from a Decimal-like scalar.

        Args:
            value: Non-negative finite Decimal-like scalar.
            precision: Target precision. If None, the number of fractional digits of $value
                is used (e.g. `Decimal("1.50")` -> precision 2).

        Returns:
            ScaledValue: Value exactly equal to $value.

        Raises:
            ValueError: If $value cannot be converted, is negative or not finite, or cannot be
                represented exactly at $precision within u64.
        """
        # Raise: $value must be convertible to Decimal
        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot call `ScaledValue.from_decimal` because $value ({value}) cannot be converted to Decimal") from e

        # Raise: $value must be a finite number
        if not decimal_value.is_finite():
            raise ValueError(f"Cannot call `ScaledValue.from_decimal` because $value ({decimal_value}) is not finite")

        # Raise: negative quantities are not representable
        if decimal_value < 0:
            raise ValueError(f"Cannot call `ScaledValue.from_decimal` because $value ({decimal_value}) is negative")

        _, digits, exponent = decimal_value.as_tuple()
        if precision is None:
            precision = max(0, -exponent)

        # Raise: $precision must be a u8 int
        if not is_strict_int(precision) or precision < 0 or precision > U8_MAX:
            raise ValueError(f"Cannot call `ScaledValue.from_decimal` because $precision ({precision}) is not an int in the range 0..{U8_MAX}")

        coefficient = int("".join(str(digit) for digit in digits)) if digits else 0
        shift = exponent + precision

        # Zero is exact at any precision, whatever its exponent
        if coefficient == 0:
            return cls(0, precision)

        if shift >= 0:
            # Raise: shifting a non-zero coefficient by more than 20 digits always leaves u64
            if shift > 20:
                raise ValueError(f"Cannot call `ScaledValue.from_decimal` because $value ({decimal_value}) at $precision ({precision}) exceeds u64")
            magnitude = coefficient * 10**shift
        else:
            # Raise: dropping more digits than the coefficient has always leaves a non-zero remainder
            if -shift > len(digits):
                raise ValueError(f"Cannot call `ScaledValue.from_decimal` because $value ({decimal_value}) has more than {precision} decimal places")
            magnitude, remainder = divmod(coefficient, 10**-shift)
            # Raise: $value must be representable at $precision without rounding
            if remainder:
                raise ValueError(f"Cannot call `ScaledValue.from_decimal` because $value ({decimal_value}) has more than {precision} decimal places")

        # Raise: magnitude must fit u64
        if magnitude > U64_MAX:
            raise ValueError(f"Cannot call `ScaledValue.from_decimal` because $value ({decimal_value}) at $precision ({precision}) exceeds u64")

        return cls(magnitude, precision)

    @classmethod
    def from_str(cls, value_str: str) -> ScaledValue:
        """Parse a ScaledValue from a decimal string like '1.000'.

        Trailing fractional zeros are kept as precision, so '1.000' becomes `ScaledValue(1000, 3)`.

        Raises:
            ValueError: If the string is empty or not a valid non-negative decimal.
        """
        value_str = value_str.strip()

        # Raise: $value_str must not be blank
        if not value_str:
            raise ValueError("Cannot call `ScaledValue.from_str` because $value_str is empty")

        # Raise: $value_str must be a decimal literal
        try:
            decimal_value = Decimal(value_str)
        except InvalidOperation as e:
            raise ValueError(f"Cannot call `ScaledValue.from_str` because $value_str ('{value_str}') is not a valid decimal") from e

        return cls.from_decimal(decimal_value)

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return fixed-point text with exactly $precision fractional digits, like '1.000000'."""
        if self._precision == 0:
            return str(self._magnitude)

        digits = str(self._magnitude).rjust(self._precision + 1, "0")
        return f"{digits[:-self._precision]}.{digits[-self._precision:]}"

    def __repr__(self) -> str:
        """Return string like 'ScaledValue(1000000, 6)'."""
        return f"{self.__class__.__name__}({self._magnitude}, {self._precision})"

    # endregion
