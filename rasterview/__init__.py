"""Lazy, composable views over in-memory two-dimensional rasters."""

__version__ = "0.1.0"