from __future__ import annotations

from typing import Final

# Native widths represented by ScaledValue fields
U64_MAX: Final[int] = 2**64 - 1
U8_MAX: Final[int] = 2**8 - 1

# Largest precision difference whose power of ten still fits into u64 (10**19 < 2**64 < 10**20)
MAX_PRECISION_DIFF: Final[int] = 19

# Bounded lookup table; index is the precision difference
POWERS_OF_TEN: Final[tuple[int, ...]] = tuple(10**exponent for exponent in range(MAX_PRECISION_DIFF + 1))
