"""Conversions between nodata sentinel values and missing (None) values."""

from __future__ import annotations

from functools import partial
from typing import Any

from rasterview.raster import Raster, TransformRaster, transform


class _NeverEqual:
    """Sentinel that compares unequal to every cell value."""

    def __eq__(self, other: object) -> bool:
        return False

    def __ne__(self, other: object) -> bool:
        return True

    def __hash__(self) -> int:
        return id(self)


_NEVER_NODATA = _NeverEqual()


def _to_optional(nodata_value: Any, value: Any) -> Any:
    return None if nodata_value == value else value


def _to_nodata(nodata_value: Any, value: Any) -> Any:
    return nodata_value if value is None else value


def nodata_to_optional(raster: Raster, nodata_value: Any) -> TransformRaster:
    """View a raster with cells equal to nodata_value replaced by None."""
    return transform(partial(_to_optional, nodata_value), raster)


def optional_to_nodata(raster: Raster, nodata_value: Any) -> TransformRaster:
    """View a raster with None cells replaced by nodata_value."""
    return transform(partial(_to_nodata, nodata_value), raster)


def optionalize(raster: Raster) -> TransformRaster:
    """View a raster as one whose cells may be missing; values are unchanged."""
    return nodata_to_optional(raster, _NEVER_NODATA)