"""A raster surrounded by a border of constant padding values."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice, repeat
from typing import Any

from rasterview.raster import Raster


class PaddedRaster(Raster):
    """View a raster with extra rows and columns of a constant pad value around it."""

    def __init__(
        self,
        raster: Raster,
        leading_rows: int,
        trailing_rows: int,
        leading_cols: int,
        trailing_cols: int,
        value: Any,
    ) -> None:
        if min(leading_rows, trailing_rows, leading_cols, trailing_cols) < 0:
            raise ValueError("padding sizes must be non-negative")
        self._raster = raster
        self._leading_rows = leading_rows
        self._trailing_rows = trailing_rows
        self._leading_cols = leading_cols
        self._trailing_cols = trailing_cols
        self._value = value
        self._core_rows = raster.rows
        self._core_cols = raster.cols
        self._rows = raster.rows + leading_rows + trailing_rows
        self._cols = raster.cols + leading_cols + trailing_cols

    @property
    def pad_value(self) -> Any:
        return self._value

    @property
    def core(self) -> Raster:
        return self._raster

    def _core_cell(self, row: int, col: int) -> tuple[int, int] | None:
        core_row = row - self._leading_rows
        core_col = col - self._leading_cols
        if 0 <= core_row < self._core_rows and 0 <= core_col < self._core_cols:
            return (core_row, core_col)
        return None

    def get(self, row: int, col: int) -> Any:
        self._check_cell(row, col)
        cell = self._core_cell(row, col)
        if cell is None:
            return self._value
        return self._raster.get(*cell)

    def set(self, row: int, col: int, value: Any) -> None:
        """Write a cell of the core raster; the padding cannot be written."""
        self._check_cell(row, col)
        cell = self._core_cell(row, col)
        if cell is None:
            raise ValueError("trying to write into the padding of a padded raster")
        setter = getattr(self._raster, "set", None)
        if setter is None:
            raise TypeError("the padded raster is not writable")
        setter(*cell, value)

    def __iter__(self) -> Iterator[Any]:
        pad = self._value
        cols = self._cols
        yield from repeat(pad, self._leading_rows * cols)
        core = iter(self._raster)
        for _ in range(self._core_rows):
            yield from repeat(pad, self._leading_cols)
            yield from islice(core, self._core_cols)
            yield from repeat(pad, self._trailing_cols)
        yield from repeat(pad, self._trailing_rows * cols)

    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> "PaddedRaster":
        self._check_window(first_row, first_col, rows, cols)
        leading_rows, core_rows, trailing_rows, first_core_row = _split(
            first_row, rows, self._leading_rows, self._core_rows
        )
        leading_cols, core_cols, trailing_cols, first_core_col = _split(
            first_col, cols, self._leading_cols, self._core_cols
        )
        core = self._raster.sub_raster(first_core_row, first_core_col, core_rows, core_cols)
        return PaddedRaster(
            core, leading_rows, trailing_rows, leading_cols, trailing_cols, self._value
        )


def _split(first: int, size: int, leading: int, core: int) -> tuple[int, int, int, int]:
    """Divide a window along one axis into leading padding, core and trailing padding."""
    lead = min(size, max(0, leading - first))
    trail = min(size - lead, max(0, first + size - (leading + core)))
    first_core = min(core, max(0, first - leading))
    return lead, size - lead - trail, trail, first_core


def pad(
    raster: Raster,
    rows_before: int,
    rows_after: int,
    cols_before: int,
    cols_after: int,
    value: Any,
) -> PaddedRaster:
    """Surround a raster with rows and columns holding value."""
    return PaddedRaster(raster, rows_before, rows_after, cols_before, cols_after, value)