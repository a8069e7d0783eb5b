"""A raster whose cells are the windows of a padded raster around each cell."""

from __future__ import annotations

from typing import Any

from rasterview.padded import PaddedRaster, pad
from rasterview.raster import Raster


class SubrasterWindowRaster(Raster):
    """Each cell is a sub-raster covering the neighbourhood of that cell.

    Cells near the edge see pad_value where the neighbourhood leaves the raster.
    """

    def __init__(
        self,
        raster: Raster,
        rows_before: int,
        rows_after: int,
        cols_before: int,
        cols_after: int,
        pad_value: Any,
    ) -> None:
        self._rows_before = rows_before
        self._rows_after = rows_after
        self._cols_before = cols_before
        self._cols_after = cols_after
        self._padded = pad(raster, rows_before, rows_after, cols_before, cols_after, pad_value)
        self._rows = raster.rows
        self._cols = raster.cols

    @property
    def window_rows(self) -> int:
        return self._rows_before + self._rows_after + 1

    @property
    def window_cols(self) -> int:
        return self._cols_before + self._cols_after + 1

    def get(self, row: int, col: int) -> PaddedRaster:
        self._check_cell(row, col)
        return self._padded.sub_raster(row, col, self.window_rows, self.window_cols)

    def sub_raster(
        self, first_row: int, first_col: int, rows: int, cols: int
    ) -> "SubrasterWindowRaster":
        self._check_window(first_row, first_col, rows, cols)
        sub = SubrasterWindowRaster.__new__(SubrasterWindowRaster)
        sub._rows_before = self._rows_before
        sub._rows_after = self._rows_after
        sub._cols_before = self._cols_before
        sub._cols_after = self._cols_after
        sub._rows = rows
        sub._cols = cols
        sub._padded = self._padded.sub_raster(
            first_row,
            first_col,
            rows + self.window_rows - 1,
            cols + self.window_cols - 1,
        )
        return sub


def make_subraster_window_view(
    raster: Raster,
    rows_before: int,
    rows_after: int,
    cols_before: int,
    cols_after: int,
    pad_value: Any,
) -> SubrasterWindowRaster:
    """Create a window raster with the given extent around each cell."""
    return SubrasterWindowRaster(raster, rows_before, rows_after, cols_before, cols_after, pad_value)


def make_square_subraster_window_view(
    raster: Raster, radius: int, pad_value: Any
) -> SubrasterWindowRaster:
    """Create a window raster with a square window of the given radius."""
    return SubrasterWindowRaster(raster, radius, radius, radius, radius, pad_value)