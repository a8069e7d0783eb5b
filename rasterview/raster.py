"""Core raster abstraction: row-major grids of values with cheap sub-views."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from itertools import repeat
from typing import Any


class Raster(ABC):
    """A rectangular grid of values, iterated in row-major order."""

    _rows: int
    _cols: int

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @abstractmethod
    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> "Raster":
        """Return a view on a rectangular part of this raster."""

    @abstractmethod
    def get(self, row: int, col: int) -> Any:
        """Return the value of one cell."""

    def __iter__(self) -> Iterator[Any]:
        for row in range(self._rows):
            for col in range(self._cols):
                yield self.get(row, col)

    def __len__(self) -> int:
        return self._rows * self._cols

    def __getitem__(self, key: Any) -> Any:
        """Index by a (row, col) tuple or by a row-major position."""
        if isinstance(key, tuple):
            return self.get(*key)
        size = len(self)
        index = operator.index(key)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"index {key} out of range for raster of size {size}")
        return self.get(*divmod(index, self._cols))

    def _check_cell(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(
                f"cell ({row}, {col}) outside raster of shape {self.shape}"
            )

    def _check_window(self, first_row: int, first_col: int, rows: int, cols: int) -> None:
        if (
            rows < 0
            or cols < 0
            or first_row < 0
            or first_col < 0
            or first_row + rows > self._rows
            or first_col + cols > self._cols
        ):
            raise IndexError(
                f"window ({first_row}, {first_col}, {rows}, {cols}) "
                f"outside raster of shape {self.shape}"
            )


def _check_dimensions(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError(f"raster dimensions must be non-negative, got {rows}x{cols}")


class ArrayRaster(Raster):
    """A mutable in-memory raster; sub-rasters share its storage."""

    def __init__(self, rows: int, cols: int, values: Iterable[Any]) -> None:
        _check_dimensions(rows, cols)
        data = list(values)
        if len(data) != rows * cols:
            raise ValueError(
                f"expected {rows * cols} values for a {rows}x{cols} raster, got {len(data)}"
            )
        self._data = data
        self._stride = cols
        self._first_row = 0
        self._first_col = 0
        self._rows = rows
        self._cols = cols

    def _offset(self, row: int, col: int) -> int:
        return (self._first_row + row) * self._stride + self._first_col + col

    def get(self, row: int, col: int) -> Any:
        self._check_cell(row, col)
        return self._data[self._offset(row, col)]

    def set(self, row: int, col: int, value: Any) -> None:
        """Write one cell."""
        self._check_cell(row, col)
        self._data[self._offset(row, col)] = value

    def assign(self, values: Iterable[Any]) -> None:
        """Overwrite all cells with values given in row-major order."""
        new = list(values)
        if len(new) != len(self):
            raise ValueError(f"expected {len(self)} values, got {len(new)}")
        cols = self._cols
        for row in range(self._rows):
            start = self._offset(row, 0)
            self._data[start:start + cols] = new[row * cols:(row + 1) * cols]

    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> "ArrayRaster":
        self._check_window(first_row, first_col, rows, cols)
        view = ArrayRaster.__new__(ArrayRaster)
        view._data = self._data
        view._stride = self._stride
        view._first_row = self._first_row + first_row
        view._first_col = self._first_col + first_col
        view._rows = rows
        view._cols = cols
        return view

    def __iter__(self) -> Iterator[Any]:
        cols = self._cols
        for row in range(self._rows):
            start = self._offset(row, 0)
            yield from self._data[start:start + cols]


class TransformRaster(Raster):
    """A read-only raster whose cells are a function of the cells of other rasters."""

    def __init__(self, function: Callable[..., Any], *args: Raster) -> None:
        if not args:
            raise ValueError("transform needs at least one raster")
        for arg in args:
            if not isinstance(arg, Raster):
                raise TypeError(f"transform arguments must be rasters, got {type(arg).__name__}")
        shape = args[0].shape
        for arg in args[1:]:
            if arg.shape != shape:
                raise ValueError(f"raster shapes differ: {shape} and {arg.shape}")
        self._function = function
        self._rasters = args
        self._rows, self._cols = shape

    @property
    def function(self) -> Callable[..., Any]:
        return self._function

    def get(self, row: int, col: int) -> Any:
        self._check_cell(row, col)
        return self._function(*(raster.get(row, col) for raster in self._rasters))

    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> "TransformRaster":
        self._check_window(first_row, first_col, rows, cols)
        return TransformRaster(
            self._function,
            *(raster.sub_raster(first_row, first_col, rows, cols) for raster in self._rasters),
        )

    def __iter__(self) -> Iterator[Any]:
        return map(self._function, *self._rasters)


def transform(function: Callable[..., Any], *args: Raster) -> TransformRaster:
    """Apply a function cell by cell over one or more rasters of equal shape."""
    return TransformRaster(function, *args)


def create(rows: int, cols: int, fill: Any = 0) -> ArrayRaster:
    """Create an in-memory raster with every cell set to fill."""
    _check_dimensions(rows, cols)
    return ArrayRaster(rows, cols, repeat(fill, rows * cols))


def is_raster(obj: Any) -> bool:
    """Tell whether obj behaves as a raster."""
    return isinstance(obj, Raster)