# rasterview

`rasterview` provides lazy views over two-dimensional rasters, held in memory.

A raster has `rows` and `cols`, and `shape` gives both as a tuple. `len()` gives the number of cells. Iteration visits the cells in row-major order. A raster can be indexed by a `(row, col)` tuple or by a row-major position, and `get(row, col)` reads one cell. `sub_raster(first_row, first_col, rows, cols)` returns a view on a rectangular part of the raster.

Most rasters in the package are views. A view is built on other rasters and computes its values when they are read. Sub-rasters of an `ArrayRaster` share its storage. Reads outside a raster raise `IndexError`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Modules

### `rasterview.raster`

- `ArrayRaster(rows, cols, values)` is a mutable raster. Write to it with `set(row, col, value)`, or with `assign(values)` to overwrite every cell in row-major order.
- `create(rows, cols, fill=0)` makes an `ArrayRaster` with every cell set to `fill`.
- `transform(function, *rasters)` returns a read-only `TransformRaster`. It applies `function` cell by cell over one or more rasters of the same shape.
- `is_raster(obj)` tells whether `obj` is a `Raster`.

### `rasterview.nodata`

- `nodata_to_optional(raster, nodata_value)` views cells equal to `nodata_value` as `None`.
- `optional_to_nodata(raster, nodata_value)` views `None` cells as `nodata_value`.
- `optionalize(raster)` views a raster as one whose cells may be missing. The values themselves are unchanged.

### `rasterview.coordinate`

- `coordinate_raster(rows, cols)` returns a `CoordinateRaster` whose cells are their own `(row, col)` pairs.
- `coordinate_raster_like(raster)` does the same with the shape of another raster.
- In a sub-raster, the pairs stay counted from the origin of the full raster.

### `rasterview.padded`

- `pad(raster, rows_before, rows_after, cols_before, cols_after, value)` returns a `PaddedRaster`. It surrounds the raster with a border of `value`.
- `PaddedRaster.set` writes through to the core raster.
- Writing into the padding raises `ValueError`.

### `rasterview.algebra`

- `wrap(raster)` returns a `RasterAlgebra`.
- A `RasterAlgebra` supports these operators cell by cell, between two rasters or between a raster and a scalar:
  - `+ - * / // %`
  - `< <= > >= == !=`
  - `&` and `|` as logical and and logical or
- Unary `-` and `~` are supported; `~` is logical not.
- A `None` cell stays `None` in the result.
- `binary_operation(function, a, b)` and `unary_operation(function, a)` apply your own functions in the same way.
- `optionalize_function(function)` wraps a function so that it returns `None` when any argument is `None`.

### `rasterview.subraster_window`

- `make_subraster_window_view(raster, rows_before, rows_after, cols_before, cols_after, pad_value)` returns a `SubrasterWindowRaster`. Each of its cells is the neighbourhood of that cell, as a padded sub-raster.
- `make_square_subraster_window_view(raster, radius, pad_value)` does the same with a square window.

### `rasterview.distance_weighted`

- `WeightedWindow(max_radius, function)` builds a square kernel. The kernel has `kernel_radius` and `kernel`. Each weight is `function(distance)`, and cells beyond `max_radius` get weight 0.
- `make_distance_weighted_indicator_view(raster, window, generator)` evaluates an indicator over the weighted neighbourhood of each cell.
  - `generator()` must return an object with `add_sample(value, weight)` and `extract()`.
  - The cells of the view are the extracted values.
  - `None` cells are skipped.

### `rasterview.rectangle_window`

`make_rectangle_window_view(raster, rows_before, rows_after, cols_before, cols_after, generator)` returns a `RectangleWindowRaster`. Each of its cells is an `Indicator` over the rectangle around that cell.

- The rectangle is clipped at the edges of the raster.
- `None` cells are skipped.
- Iteration updates the indicator incrementally, using one subtotal per column.
- `generator()` must return an instance of a subclass of `Indicator`. The subclass implements `add_sample`, `subtract_sample`, `add_subtotal`, `subtract_subtotal` and `extract`.

## Example

```python
from rasterview.raster import create, transform
from rasterview.padded import pad
from rasterview.rectangle_window import Indicator, make_rectangle_window_view

a = create(3, 5, 0)
a.assign(range(1, 16))
b = create(3, 5, 0)
b.assign(range(100, 1600, 100))

c = transform(lambda x, y: x + y, a, b)
print(list(c.sub_raster(1, 0, 1, 5)))   # [606, 707, 808, 909, 1010]

padded = pad(a, 1, 1, 1, 1, -1)
print(padded.rows, padded.cols)         # 5 7


class Total(Indicator):
    def __init__(self):
        self.value = 0

    def add_sample(self, value):
        self.value += value

    def subtract_sample(self, value):
        self.value -= value

    def add_subtotal(self, other):
        self.value += other.value

    def subtract_subtotal(self, other):
        self.value -= other.value

    def extract(self):
        return self.value


window = make_rectangle_window_view(a, 1, 1, 1, 1, Total)
print(window.get(0, 0).extract())       # 16
```

## What it does not do

- The package works on rasters held in memory only. It does not read or write raster files.
- It offers no ready-made landscape indicators; you supply the indicator.
- It has rectangular and distance-weighted windows, but no circular windows.
- It has no command-line tool.