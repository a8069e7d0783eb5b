[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterview"
version = "0.1.0"
description = "Lazy, composable views over two-dimensional rasters: transforms, padding, nodata handling, raster algebra and moving windows."
requires-python = ">=3.10"
dependencies = []
keywords = ["raster", "gis", "moving window", "map algebra", "nodata"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rasterview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
