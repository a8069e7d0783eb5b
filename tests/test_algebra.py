import operator

import pytest

from rasterview.algebra import (
    RasterAlgebra,
    binary_operation,
    optionalize_function,
    unary_operation,
    wrap,
)
from rasterview.nodata import nodata_to_optional
from rasterview.raster import ArrayRaster, create


def _ones_and_hundreds(rows=3, cols=5):
    n = rows * cols
    a = ArrayRaster(rows, cols, range(1, n + 1))
    b = ArrayRaster(rows, cols, range(100, 100 * n + 1, 100))
    return a, b


def test_wrapped_addition_matches_transform_case():
    a, b = _ones_and_hundreds()
    c = wrap(a) + wrap(b)
    assert list(c) == [101, 202, 303, 404, 505, 606, 707, 808, 909,
                       1010, 1111, 1212, 1313, 1414, 1515]


def test_addition_sub_raster():
    a, b = _ones_and_hundreds(6, 3)
    c = (wrap(a) + b).sub_raster(2, 1, 3, 2)
    assert list(c) == [808, 909, 1111, 1212, 1414, 1515]


def test_subtraction_undoes_addition():
    a, b = _ones_and_hundreds()
    result = (wrap(a) + b) - b
    assert list(result) == list(a)


def test_double_negation_is_identity():
    a, _ = _ones_and_hundreds()
    assert list(-(-wrap(a))) == list(a)


def test_scalar_on_left_and_right():
    a, _ = _ones_and_hundreds()
    wa = wrap(a)
    assert list((10 - wa) + wa) == [10] * len(a)
    assert list(wa * 1) == list(a)
    assert list(1 * wa) == list(a)


def test_comparison_gives_booleans():
    a = ArrayRaster(1, 4, [1, 2, 3, 4])
    assert list(wrap(a) > 2) == [False, False, True, True]


def test_equality_and_inequality_are_complementary():
    a = ArrayRaster(1, 4, [1, 2, 3, 4])
    b = ArrayRaster(1, 4, [1, 0, 3, 0])
    assert list(wrap(a) == b) == [True, False, True, False]
    assert list(wrap(a) != b) == [False, True, False, True]


def test_logical_operators_are_consistent():
    a = ArrayRaster(2, 2, [0, 1, 0, 1])
    b = ArrayRaster(2, 2, [0, 0, 1, 1])
    both = list(wrap(a) & b)
    either = list(wrap(a) | b)
    negated = list(~wrap(a))
    assert all(x <= y for x, y in zip(both, either))
    assert negated == [not v for v in list(a)] or negated == [bool(v) is False for v in list(a)]
    assert both.count(True) < either.count(True)


def test_missing_values_propagate():
    a = ArrayRaster(1, 3, [1, 6, 3])
    optional = nodata_to_optional(a, 6)
    result = list(wrap(optional) + 1)
    assert result[1] is None
    assert result[0] is not None and result[2] is not None


def test_optionalize_function():
    plus = optionalize_function(operator.add)
    assert plus(1, None) is None
    assert plus(None, 2) is None
    assert plus(1, 2) == 3


def test_binary_operation_needs_a_raster():
    with pytest.raises(TypeError):
        binary_operation(operator.add, 1, 2)


def test_binary_operation_shape_mismatch():
    with pytest.raises(ValueError):
        binary_operation(operator.add, create(2, 2), create(3, 2))


def test_unary_operation_rejects_scalar():
    with pytest.raises(TypeError):
        unary_operation(operator.neg, 5)


def test_wrap_is_idempotent_and_preserves_shape():
    a, _ = _ones_and_hundreds()
    wa = wrap(a)
    assert wrap(wa) is wa
    assert wa.shape == a.shape
    assert isinstance(wa.sub_raster(0, 0, 2, 2), RasterAlgebra)
    assert list(wa.sub_raster(1, 1, 2, 2)) == list(a.sub_raster(1, 1, 2, 2))