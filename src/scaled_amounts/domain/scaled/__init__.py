"""Scaled-value domain package.

This package contains the fixed-point ScaledValue type (integer magnitude plus
decimal precision) and the precision-aware add, subtract and equals operations.
"""
