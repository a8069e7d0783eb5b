"""Moving-window indicators where each cell is weighted by its distance."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from rasterview.nodata import optionalize
from rasterview.raster import ArrayRaster, Raster, TransformRaster, create, transform
from rasterview.subraster_window import make_square_subraster_window_view


class GlobalIndicator:
    """Compute an indicator over all cells of a raster, each with its own weight.

    Cells that are None are skipped.
    """

    def __init__(self, generator: Callable[[], Any]) -> None:
        self._generator = generator

    def __call__(self, raster: Raster, weight: Raster) -> Any:
        indicator = self._generator()
        for value, w in zip(raster, weight):
            if value is not None:
                indicator.add_sample(value, w)
        return indicator.extract()


class WeightedWindow:
    """A square kernel of weights given by a function of the distance to its centre.

    Cells farther than max_radius from the centre get weight 0.
    """

    def __init__(self, max_radius: float, function: Callable[[float], Any]) -> None:
        self.kernel_radius = int(max_radius)
        size = 2 * self.kernel_radius + 1
        centre = size // 2

        def weight(row: int, col: int) -> Any:
            d = math.hypot(centre - col, centre - row)
            return function(d) if d <= max_radius else 0

        self.kernel: ArrayRaster = ArrayRaster(
            size, size, (weight(row, col) for row in range(size) for col in range(size))
        )


def make_distance_weighted_indicator_view(
    raster: Raster, window: WeightedWindow, generator: Callable[[], Any]
) -> TransformRaster:
    """For every cell, compute the kernel-weighted indicator over its neighbourhood."""
    windows = make_square_subraster_window_view(optionalize(raster), window.kernel_radius, None)
    weights = create(raster.rows, raster.cols, window.kernel)
    return transform(GlobalIndicator(generator), windows, weights)