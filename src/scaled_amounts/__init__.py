__version__ = "0.0.1"

from scaled_amounts.domain.scaled.errors import OverflowKind, ScaledValueOverflowError
from scaled_amounts.domain.scaled.operations import add, equals, subtract
from scaled_amounts.domain.scaled.scaled_value import ScaledValue

__all__ = ["ScaledValue", "ScaledValueOverflowError", "OverflowKind", "add", "subtract", "equals"]
