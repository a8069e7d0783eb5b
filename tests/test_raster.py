import operator

import pytest

from rasterview.raster import ArrayRaster, TransformRaster, create, is_raster, transform

EXPECTED_SUM = [101, 202, 303, 404, 505, 606, 707, 808, 909, 1010, 1111, 1212, 1313, 1414, 1515]


def make_pair(rows, cols):
    a = create(rows, cols)
    a.assign(range(1, rows * cols + 1))
    b = create(rows, cols)
    b.assign(range(100, 100 * rows * cols + 1, 100))
    return a, b


def my_plus(a, b):
    return a + b


class Plusser:
    def __call__(self, a, b):
        return a + b


class CountingPlusser:
    def __init__(self):
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return a + b


def test_transform_with_operator_function():
    a, b = make_pair(3, 5)
    assert list(transform(operator.add, a, b)) == EXPECTED_SUM


def test_transform_with_user_function():
    a, b = make_pair(3, 5)
    assert list(transform(my_plus, a, b)) == EXPECTED_SUM


def test_transform_with_function_object():
    a, b = make_pair(3, 5)
    assert list(transform(Plusser(), a, b)) == EXPECTED_SUM


def test_transform_with_function_object_after_sub_raster():
    a, b = make_pair(3, 5)
    c = transform(Plusser(), a, b).sub_raster(0, 0, 3, 5)
    assert list(c) == EXPECTED_SUM


def test_transform_with_stateful_function_object():
    a, b = make_pair(3, 5)
    plusser = CountingPlusser()
    assert list(transform(plusser, a, b)) == EXPECTED_SUM
    assert plusser.calls == len(EXPECTED_SUM)


def test_transform_with_lambda():
    a, b = make_pair(3, 5)
    assert list(transform(lambda x, y: x + y, a, b)) == EXPECTED_SUM


def test_transform_empty():
    a, b = make_pair(3, 5)
    c = transform(lambda x, y: x + y, a, b)
    c1 = c.sub_raster(0, 0, 0, 0)
    c2 = c.sub_raster(0, 0, 0, 2)
    c3 = c.sub_raster(0, 0, 2, 0)
    assert list(c1) == [] and list(c2) == [] and list(c3) == []
    assert (len(c1), c1.rows, c1.cols) == (0, 0, 0)
    assert (len(c2), c2.rows, c2.cols) == (0, 0, 2)
    assert (len(c3), c3.rows, c3.cols) == (0, 2, 0)


def test_transform_sub_raster():
    a, b = make_pair(6, 3)
    c = transform(lambda x, y: x + y, a, b).sub_raster(2, 1, 3, 2)
    assert list(c) == [808, 909, 1111, 1212, 1414, 1515]


def test_transform_sub_raster_random_access():
    a, b = make_pair(6, 3)
    c = transform(lambda x, y: x + y, a, b).sub_raster(2, 1, 3, 2)
    check = list(c)
    assert c[2] == check[2]
    assert c[4] == check[4]
    assert c[3 - 1] == check[3 - 1]
    assert c[3 + 1] == check[3 + 1]
    assert c[-1] == check[-1]
    assert c[-2] == check[-2]
    assert c[(1, 0)] == check[2]
    assert [c[i] for i in range(len(c))] == check


def test_random_access_out_of_range():
    a, b = make_pair(2, 2)
    c = transform(operator.add, a, b)
    with pytest.raises(IndexError):
        c[len(c)]
    with pytest.raises(IndexError):
        c.get(2, 0)


def test_transform_get_matches_iteration():
    a, b = make_pair(3, 5)
    c = transform(operator.add, a, b)
    assert [c.get(r, k) for r in range(c.rows) for k in range(c.cols)] == list(c)


def test_transform_requires_equal_shapes():
    with pytest.raises(ValueError):
        transform(operator.add, create(2, 3), create(3, 2))


def test_transform_requires_rasters():
    with pytest.raises(TypeError):
        TransformRaster(operator.add, create(2, 2), 5)
    with pytest.raises(ValueError):
        transform(operator.neg)


def test_array_raster_views_share_storage():
    a, _ = make_pair(3, 5)
    sub = a.sub_raster(1, 1, 2, 3)
    sub.set(0, 0, -5)
    assert a.get(1, 1) == -5
    assert list(sub)[0] == -5


def test_array_raster_assign_through_view():
    a = create(3, 3)
    a.sub_raster(1, 1, 2, 2).assign([1, 2, 3, 4])
    assert list(a) == [0, 0, 0, 0, 1, 2, 0, 3, 4]


def test_array_raster_wrong_length():
    with pytest.raises(ValueError):
        ArrayRaster(2, 2, [1, 2, 3])
    with pytest.raises(ValueError):
        create(2, 2).assign([1])


def test_array_raster_sub_raster_out_of_bounds():
    with pytest.raises(IndexError):
        create(3, 3).sub_raster(2, 0, 2, 1)


def test_create_fill_and_negative():
    r = create(2, 3, fill=7)
    assert list(r) == [7] * len(r)
    with pytest.raises(ValueError):
        create(-1, 3)


def test_is_raster():
    assert is_raster(create(1, 1))
    assert not is_raster([1, 2, 3])