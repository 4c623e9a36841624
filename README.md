# tilebrush

Building blocks for a brush engine that paints onto a canvas stored as square
tiles: an abstract painting surface, the run-length encoded opacity mask of a
single dab inside a tile, per-tile queues of pending dab operations, symmetry
transforms for mirrored and rotational painting, a reproducible random number
generator and fast single-precision approximations of `exp` and friends.

The package has no dependencies outside the standard library.

## Install

```
pip install .
```

## Modules

- `tilebrush.surface`: the abstract `Surface` and the value types
  `Rectangle` and `Color`.
- `tilebrush.dabmask`: `render_dab_mask` and `decode_mask`, with the
  constants `TILE_SIZE` (64) and `OPAQUE` (`1 << 15`).
- `tilebrush.operationqueue`: `OperationQueue`, `DrawDabOperation` and
  `remove_duplicate_tiles`.
- `tilebrush.tilemap`: `TileMap`, a square grid of slots centred on the
  origin.
- `tilebrush.symmetry`: `SymmetryType`, `SymmetryState`, `Transform`,
  `SymmetryData` and `num_matrices_required`.
- `tilebrush.rng`: `RngDouble`, a lagged-Fibonacci generator of floats in
  `[0, 1)`.
- `tilebrush.fastmath`: `fastpow2`, `fastexp`, `fasterpow2`, `fasterexp`,
  `fastsinh`, `fastersinh`, `fastcosh`, `fastercosh`, `fasttanh`,
  `fastertanh`.

## The surface interface

`Surface` is an abstract base class. A concrete surface implements
`draw_dab` (returning `True` if it changed anything), `get_color` (returning
a `Color`) and `end_atomic(max_rectangles)` (returning the changed areas as a
list of `Rectangle`). `get_alpha` is derived from `get_color`;
`begin_atomic` and `save_png` do nothing unless overridden.

The `atomic()` context manager calls `begin_atomic`, and on leaving the block
extends the yielded list with what `end_atomic` returned:

```python
from tilebrush.surface import Color, Rectangle, Surface


class BoxSurface(Surface):
    """Remembers the bounding box of everything drawn."""

    def __init__(self):
        self.box = Rectangle()

    def draw_dab(self, x, y, radius, color_r, color_g, color_b, opaque,
                 hardness, softness, alpha_eraser, aspect_ratio, angle,
                 lock_alpha, colorize, posterize, posterize_num, paint):
        self.box.expand_to_include_point(int(x - radius), int(y - radius))
        self.box.expand_to_include_point(int(x + radius), int(y + radius))
        return True

    def get_color(self, x, y, radius, paint):
        return Color(0.0, 0.0, 0.0, 0.0)

    def end_atomic(self, max_rectangles=1):
        box, self.box = self.box, Rectangle()
        return [] if box.is_empty else [box]


surface = BoxSurface()
with surface.atomic() as changed:
    surface.draw_dab(10.0, 10.0, 4.0, 1.0, 0.0, 0.0, 1.0, 0.8, 0.0, 1.0,
                     1.0, 0.0, 0.0, 0.0, 0.0, 0.05, 0.0)
print(changed)  # [Rectangle(x=6, y=6, width=9, height=9)]
```

`Rectangle.expand_to_include_point` and `expand_to_include_rect` grow a
rectangle in place; a rectangle of width or height zero is empty, and
expanding an empty one starts it at the given point.

## Dab masks

`render_dab_mask(x, y, radius, hardness, softness, aspect_ratio, angle)`
returns the opacity of a dab over one 64 × 64 tile, with `x` and `y`
relative to the tile's top-left corner and `angle` in degrees. The result
is a flat list of integers: a non-zero value is the opacity of the next
pixel (`OPAQUE` is fully opaque), a `0` is followed by four times the number
of pixels to skip, and `0, 0` ends the mask. Dabs with a radius below 3 are
anti-aliased. Hardness is clamped to `[0, 1]` and a hardness of zero raises
`ValueError`; aspect ratios below 1 count as 1.

`decode_mask` expands such a list into one opacity per pixel, row by row,
and raises `ValueError` on a malformed mask.

```python
from tilebrush.dabmask import TILE_SIZE, decode_mask, render_dab_mask

mask = render_dab_mask(32.0, 32.0, 5.0, 0.8, 0.0, 1.0, 0.0)
pixels = decode_mask(mask)
centre = pixels[32 * TILE_SIZE + 32]
```

## Operation queues

`OperationQueue` keeps a FIFO of `DrawDabOperation` items per tile index
`(tx, ty)`. The underlying `TileMap` starts with the given size (10 by
default, covering tiles −10 to 9 on each axis) and doubles until an added
index fits. `pop`, `peek_first` and `peek_last` return `None` when a tile
has nothing queued. `dirty_tiles()` lists the distinct tiles that received
operations, in first-seen order, until `clear_dirty_tiles()` is called.

```python
from tilebrush.operationqueue import DrawDabOperation, OperationQueue

queue = OperationQueue()
queue.add((0, 0), DrawDabOperation(x=3.0, y=4.0, radius=2.0))
queue.add((25, -3), DrawDabOperation(radius=1.0))
print(queue.dirty_tiles())  # [(0, 0), (25, -3)]
op = queue.pop((0, 0))
```

## Symmetry

`SymmetryData` holds the current and pending `SymmetryState` and the
`Transform` list for the current one. `set_pending` only records new
settings (at least two symmetry lines are always used); `update` recomputes
the transforms when the pending state differs from the current one.
`num_matrices_required` gives how many transforms a state needs: 1 for
`VERTICAL` and `HORIZONTAL`, 3 for `VERTHORZ`, N−1 for `ROTATIONAL` and
2N−1 for `SNOWFLAKE`.

```python
from tilebrush.symmetry import SymmetryData, SymmetryType

data = SymmetryData()
data.set_pending(True, 100.0, 100.0, 0.0, SymmetryType.ROTATIONAL, 4)
data.update()
for matrix in data.matrices:
    print(matrix.transform_point(150.0, 100.0))
```

`Transform` is an immutable affine transform; `translate`, `rotate_cw`
(radians, clockwise) and `reflect` (across a line at the given angle in
radians) each return a new transform that applies the original first.

## Random numbers

`RngDouble(seed)` produces the same sequence for the same seed; only the low
30 bits of the seed matter. It can be iterated directly.

```python
from tilebrush.rng import RngDouble

rng = RngDouble(42)
values = [rng.next() for _ in range(5)]
```

## Fast math

The functions in `tilebrush.fastmath` compute in single precision. The
`fast*` variants are accurate to about 1e-4 relative error, the `faster*`
variants to a few percent. Exponents below −126 are clipped, and results too
large for single precision become infinity.

## What this package does not do

There is no concrete tile-backed surface here: nothing stores tile pixels,
blends queued dabs into them, samples colours from them or writes PNG files.
The pieces above are what such a surface would be built from; an
application supplies the `Surface` subclass itself.

## Tests

```
pip install .[test]
pytest
```