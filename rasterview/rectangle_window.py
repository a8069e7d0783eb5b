"""Moving-window indicators over a rectangular neighbourhood of every cell."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any

from rasterview.raster import Raster


class Indicator(ABC):
    """An accumulator of cell values that can also be merged with other accumulators.

    A window indicator keeps one subtotal per column and combines them with
    add_subtotal and subtract_subtotal as the window slides.
    """

    @abstractmethod
    def add_sample(self, value: Any) -> None:
        """Take one cell value into account."""

    @abstractmethod
    def subtract_sample(self, value: Any) -> None:
        """Remove one cell value that was added before."""

    @abstractmethod
    def add_subtotal(self, other: "Indicator") -> None:
        """Merge everything that another indicator has accumulated."""

    @abstractmethod
    def subtract_subtotal(self, other: "Indicator") -> None:
        """Remove everything that another, previously merged, indicator holds."""

    @abstractmethod
    def extract(self) -> Any:
        """Return the value of the indicator."""


def _add(indicator: Indicator, value: Any) -> None:
    if value is not None:
        indicator.add_sample(value)


def _subtract(indicator: Indicator, value: Any) -> None:
    if value is not None:
        indicator.subtract_sample(value)


class RectangleWindowRaster(Raster):
    """Each cell is an indicator over a rectangle of cells around it.

    The rectangle reaches rows_before rows up, rows_after rows down,
    cols_before columns left and cols_after columns right of the cell, and is
    clipped at the edges of the raster. Cells that are None are skipped.
    """

    def __init__(
        self,
        raster: Raster,
        rows_before: int,
        rows_after: int,
        cols_before: int,
        cols_after: int,
        generator: Callable[[], Indicator],
    ) -> None:
        if min(rows_before, rows_after, cols_before, cols_after) < 0:
            raise ValueError("window extents must be non-negative")
        self._raster = raster
        self._rows_before = rows_before
        self._rows_after = rows_after
        self._cols_before = cols_before
        self._cols_after = cols_after
        self._generator = generator
        self._first_row = 0
        self._first_col = 0
        self._rows = raster.rows
        self._cols = raster.cols

    def sub_raster(
        self, first_row: int, first_col: int, rows: int, cols: int
    ) -> "RectangleWindowRaster":
        self._check_window(first_row, first_col, rows, cols)
        sub = RectangleWindowRaster(
            self._raster,
            self._rows_before,
            self._rows_after,
            self._cols_before,
            self._cols_after,
            self._generator,
        )
        sub._first_row = self._first_row + first_row
        sub._first_col = self._first_col + first_col
        sub._rows = rows
        sub._cols = cols
        return sub

    def get(self, row: int, col: int) -> Indicator:
        self._check_cell(row, col)
        full_row = self._first_row + row
        full_col = self._first_col + col
        first_row = max(0, full_row - self._rows_before)
        end_row = min(self._raster.rows, full_row + self._rows_after + 1)
        first_col = max(0, full_col - self._cols_before)
        end_col = min(self._raster.cols, full_col + self._cols_after + 1)
        indicator = self._generator()
        window = self._raster.sub_raster(
            first_row, first_col, end_row - first_row, end_col - first_col
        )
        for value in window:
            _add(indicator, value)
        return indicator

    def _snapshot(self, indicator: Indicator) -> Indicator:
        copy = self._generator()
        copy.add_subtotal(indicator)
        return copy

    def _row_values(self, row: int, first_col: int, width: int) -> Iterator[Any]:
        return iter(self._raster.sub_raster(row, first_col, 1, width))

    def __iter__(self) -> Iterator[Indicator]:
        if self._rows == 0 or self._cols == 0:
            return
        raster_rows = self._raster.rows
        raster_cols = self._raster.cols
        first_row = self._first_row
        first_col = self._first_col

        buffer_first_col = max(0, first_col - self._cols_before)
        buffer_end_col = min(raster_cols, first_col + self._cols + self._cols_after)
        width = buffer_end_col - buffer_first_col

        # One subtotal per column, covering the rows of the current window.
        buffer = [self._generator() for _ in range(width)]
        init_first_row = max(0, first_row - self._rows_before)
        init_end_row = min(raster_rows, first_row + self._rows_after + 1)
        for row in range(init_first_row, init_end_row):
            for subtotal, value in zip(buffer, self._row_values(row, buffer_first_col, width)):
                _add(subtotal, value)

        init_end_col = min(raster_cols, first_col + self._cols_after + 1)
        for r in range(self._rows):
            full_row = first_row + r
            if r > 0:
                add_row = full_row + self._rows_after
                if add_row < raster_rows:
                    for subtotal, value in zip(
                        buffer, self._row_values(add_row, buffer_first_col, width)
                    ):
                        _add(subtotal, value)
                subtract_row = full_row - self._rows_before - 1
                if subtract_row >= 0:
                    for subtotal, value in zip(
                        buffer, self._row_values(subtract_row, buffer_first_col, width)
                    ):
                        _subtract(subtotal, value)

            current = self._generator()
            for subtotal in buffer[: init_end_col - buffer_first_col]:
                current.add_subtotal(subtotal)

            for c in range(self._cols):
                full_col = first_col + c
                if c > 0:
                    add_col = full_col + self._cols_after
                    if add_col < raster_cols:
                        current.add_subtotal(buffer[add_col - buffer_first_col])
                    subtract_col = full_col - self._cols_before - 1
                    if subtract_col >= 0:
                        current.subtract_subtotal(buffer[subtract_col - buffer_first_col])
                yield self._snapshot(current)


def make_rectangle_window_view(
    raster: Raster,
    rows_before: int,
    rows_after: int,
    cols_before: int,
    cols_after: int,
    generator: Callable[[], Indicator],
) -> RectangleWindowRaster:
    """Create a moving-window indicator raster with a rectangular window."""
    return RectangleWindowRaster(raster, rows_before, rows_after, cols_before, cols_after, generator)