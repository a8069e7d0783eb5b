"""A raster whose cells hold their own (row, column) coordinates."""

from __future__ import annotations

from collections.abc import Iterator

from rasterview.raster import Raster


class CoordinateRaster(Raster):
    """Cells are (row, col) pairs, counted from the origin of the full raster."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"raster dimensions must be non-negative, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._first_row = 0
        self._first_col = 0

    def get(self, row: int, col: int) -> tuple[int, int]:
        self._check_cell(row, col)
        return (self._first_row + row, self._first_col + col)

    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> "CoordinateRaster":
        self._check_window(first_row, first_col, rows, cols)
        sub = CoordinateRaster(rows, cols)
        sub._first_row = self._first_row + first_row
        sub._first_col = self._first_col + first_col
        return sub

    def __iter__(self) -> Iterator[tuple[int, int]]:
        col_range = range(self._first_col, self._first_col + self._cols)
        for row in range(self._first_row, self._first_row + self._rows):
            for col in col_range:
                yield (row, col)


def coordinate_raster(rows: int, cols: int) -> CoordinateRaster:
    """Create a coordinate raster of the given dimensions."""
    return CoordinateRaster(rows, cols)


def coordinate_raster_like(raster: Raster) -> CoordinateRaster:
    """Create a coordinate raster with the dimensions of another raster."""
    return CoordinateRaster(raster.rows, raster.cols)