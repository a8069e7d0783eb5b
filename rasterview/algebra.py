"""Cell-by-cell arithmetic and logic on rasters, with missing values propagated."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from functools import partial
from typing import Any

from rasterview.raster import Raster, TransformRaster, transform


def optionalize_function(function: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a function so that it returns None when any argument is None."""

    def wrapped(*args: Any) -> Any:
        if any(arg is None for arg in args):
            return None
        return function(*args)

    return wrapped


def _unwrap(value: Any) -> Any:
    return value.raster if isinstance(value, RasterAlgebra) else value


def _apply_right(function: Callable[[Any, Any], Any], right: Any, left: Any) -> Any:
    return function(left, right)


def binary_operation(function: Callable[[Any, Any], Any], a: Any, b: Any) -> TransformRaster:
    """Combine two rasters, or a raster and a scalar, cell by cell."""
    a = _unwrap(a)
    b = _unwrap(b)
    a_is_raster = isinstance(a, Raster)
    b_is_raster = isinstance(b, Raster)
    if a_is_raster and b_is_raster:
        return transform(optionalize_function(function), a, b)
    if a_is_raster:
        return transform(optionalize_function(partial(_apply_right, function, b)), a)
    if b_is_raster:
        return transform(optionalize_function(partial(function, a)), b)
    raise TypeError("at least one operand must be a raster")


def unary_operation(function: Callable[[Any], Any], a: Any) -> TransformRaster:
    """Apply a one-argument function to every cell of a raster."""
    a = _unwrap(a)
    if not isinstance(a, Raster):
        raise TypeError(f"operand must be a raster, got {type(a).__name__}")
    return transform(optionalize_function(function), a)


def _logical_and(a: Any, b: Any) -> bool:
    return bool(a) and bool(b)


def _logical_or(a: Any, b: Any) -> bool:
    return bool(a) or bool(b)


def _logical_not(a: Any) -> bool:
    return not a


def _binary(function: Callable[[Any, Any], Any]):
    def forward(self: "RasterAlgebra", other: Any) -> "RasterAlgebra":
        return RasterAlgebra(binary_operation(function, self, other))

    def reflected(self: "RasterAlgebra", other: Any) -> "RasterAlgebra":
        return RasterAlgebra(binary_operation(function, other, self))

    return forward, reflected


def _unary(function: Callable[[Any], Any]):
    def apply(self: "RasterAlgebra") -> "RasterAlgebra":
        return RasterAlgebra(unary_operation(function, self))

    return apply


class RasterAlgebra(Raster):
    """A raster that supports arithmetic, comparison and logical operators.

    ``&``, ``|`` and ``~`` are logical and, or and not. Cells that are None
    stay None in the result.
    """

    def __init__(self, raster: Raster) -> None:
        raster = _unwrap(raster)
        if not isinstance(raster, Raster):
            raise TypeError(f"can only wrap rasters, got {type(raster).__name__}")
        self._raster = raster
        self._rows = raster.rows
        self._cols = raster.cols

    @property
    def raster(self) -> Raster:
        return self._raster

    def get(self, row: int, col: int) -> Any:
        return self._raster.get(row, col)

    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> "RasterAlgebra":
        return RasterAlgebra(self._raster.sub_raster(first_row, first_col, rows, cols))

    def __iter__(self) -> Iterator[Any]:
        return iter(self._raster)

    __add__, __radd__ = _binary(operator.add)
    __sub__, __rsub__ = _binary(operator.sub)
    __mul__, __rmul__ = _binary(operator.mul)
    __truediv__, __rtruediv__ = _binary(operator.truediv)
    __floordiv__, __rfloordiv__ = _binary(operator.floordiv)
    __mod__, __rmod__ = _binary(operator.mod)
    __and__, __rand__ = _binary(_logical_and)
    __or__, __ror__ = _binary(_logical_or)
    __gt__, _ = _binary(operator.gt)
    __ge__, _ = _binary(operator.ge)
    __lt__, _ = _binary(operator.lt)
    __le__, _ = _binary(operator.le)
    __eq__, _ = _binary(operator.eq)  # type: ignore[assignment]
    __ne__, _ = _binary(operator.ne)  # type: ignore[assignment]
    del _
    __hash__ = None  # type: ignore[assignment]

    __neg__ = _unary(operator.neg)
    __invert__ = _unary(_logical_not)


def wrap(raster: Raster) -> RasterAlgebra:
    """Wrap a raster so that operators apply cell by cell."""
    if isinstance(raster, RasterAlgebra):
        return raster
    return RasterAlgebra(raster)