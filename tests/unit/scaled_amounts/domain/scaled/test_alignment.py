import logging

import pytest

from scaled_amounts.domain.scaled.alignment import ScaleAlignment, align_magnitudes, compute_alignment
from scaled_amounts.domain.scaled.errors import OverflowKind, ScaledValueOverflowError
from scaled_amounts.domain.scaled.limits import MAX_PRECISION_DIFF, POWERS_OF_TEN, U64_MAX
from scaled_amounts.domain.scaled.scaled_value import ScaledValue


def test_powers_of_ten_table_is_bounded_to_u64():
    assert len(POWERS_OF_TEN) == MAX_PRECISION_DIFF + 1
    assert POWERS_OF_TEN[0] == 1
    assert POWERS_OF_TEN[-1] <= U64_MAX
    assert POWERS_OF_TEN[-1] * 10 > U64_MAX


def test_compute_alignment_scales_less_precise_operand():
    alignment = compute_alignment(ScaledValue(1_000_000, 6), ScaledValue(1_000, 3), "add")

    assert alignment == ScaleAlignment(scale_factor=1_000, scale_left=False, precision=6)


def test_compute_alignment_is_order_independent_for_factor_and_precision():
    a = ScaledValue(7, 2)
    b = ScaledValue(7, 9)

    forward = compute_alignment(a, b, "add")
    backward = compute_alignment(b, a, "add")

    assert forward.scale_factor == backward.scale_factor == 10**7
    assert forward.precision == backward.precision == 9
    assert forward.scale_left is True
    assert backward.scale_left is False


def test_compute_alignment_equal_precisions_uses_factor_one():
    alignment = compute_alignment(ScaledValue(3, 4), ScaledValue(5, 4), "equals")

    assert alignment.scale_factor == 1
    assert alignment.scale_left is True
    assert alignment.precision == 4


def test_align_magnitudes_preserves_operand_order():
    assert align_magnitudes(ScaledValue(2_000_000, 6), ScaledValue(1_000, 3), "subtract") == (2_000_000, 1_000_000, 6)
    assert align_magnitudes(ScaledValue(1_000, 3), ScaledValue(2_000_000, 6), "subtract") == (1_000_000, 2_000_000, 6)


def test_align_magnitudes_equal_precisions_leave_magnitudes_unchanged():
    assert align_magnitudes(ScaledValue(U64_MAX, 255), ScaledValue(3, 255), "add") == (U64_MAX, 3, 255)


def test_compute_alignment_rejects_scale_factor_above_u64():
    with pytest.raises(ScaledValueOverflowError) as exc_info:
        compute_alignment(ScaledValue(1, 0), ScaledValue(1, MAX_PRECISION_DIFF + 1), "add")

    error = exc_info.value
    assert error.kind == OverflowKind.SCALE_FACTOR
    assert error.operation == "add"
    assert "10**20" in str(error)


def test_rejected_alignment_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="scaled_amounts.domain.scaled.alignment"):
        with pytest.raises(ScaledValueOverflowError):
            align_magnitudes(ScaledValue(U64_MAX, 0), ScaledValue(0, 1), "equals")

    assert "Rejected `equals`" in caplog.text


def test_align_magnitudes_skips_scale_factor_for_zero():
    assert align_magnitudes(ScaledValue(0, 0), ScaledValue(7, 200), "add") == (0, 7, 200)
    assert align_magnitudes(ScaledValue(7, 200), ScaledValue(0, 0), "subtract") == (7, 0, 200)
