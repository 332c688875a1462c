# glscene

The parts of a small real-time 3D application that do not need a graphics API.
Everything is plain Python with no dependencies, so all of it can be tested
without a window or a GPU.

## What is in it

- `glscene.geometry`: `Vector3` (an immutable vector with `dot`, `cross`,
  `length` and `normalized`), `Plane` (built from three points with
  `Plane.from_points` or `set_points`, with `distance_to_point` and
  `project_point`) and `AABB2D`, a box described by exactly four corners.
- `glscene.color`: `Color`, which keeps its channels clamped to 0..1, can be
  built from 0..255 values with `Color.from_rgb`, and converts back with
  `as_rgb` (truncating) or `as_tuple`.
- `glscene.light`: `Light`, built with `Light.from_floats` (0..1 channels) or
  `Light.from_rgb` (0..256 channels), plus a generic `clamp`.
- `glscene.binarytree`: `BinaryTree`, an ordered tree that discards duplicates
  (`insert` returns `False` for them) and walks with `in_order`, `pre_order`
  and `post_order` generators.
- `glscene.circularlist`: `CircularDoubleLinkedList`, a ring of
  `CircularNode`s with `append`, `first_node`, `last_node`, `nodes`, iteration
  and `len`.
- `glscene.frustum`: `Frustum`, built from a camera description with `update`
  or from eight corners with `set_plane_points`, which tells whether a point or
  an `AABB2D` is `Visibility.INSIDE`, `INTERSECT` or `OUTSIDE`.
- `glscene.camera`: `Camera`, which rebuilds its frustum from its position,
  orientation, field of view and framebuffer size, and answers
  `is_aabb_visible`.
- `glscene.hexgrid`: `HexGrid`, which lays out the centres of a grid of
  pointy-top or flat-top hexagonal cells on the XZ plane with
  `compute_centers`.
- `glscene.menu`: `GameMenu` and `MenuItem`, a wrap-around menu with a single
  selected item and a colour for each selection state.
- `glscene.mesh`: `Mesh`, an indexed triangle mesh that checks its indices, and
  `build_textured_cube`, which produces the vertex, normal and UV data of a
  cube resting on y = 0.

## Install

```
pip install .
```

Install with `pip install .[test]` to run the tests, then run `pytest`.

## Example

```python
from glscene.geometry import Vector3
from glscene.frustum import Frustum, Visibility

frustum = Frustum()
frustum.update(
    Vector3(0, 0, 0),    # eye position
    Vector3(0, 0, -1),   # point looked at
    Vector3(0, 1, 0),    # up
    Vector3(1, 0, 0),    # right
    0.5, 1000.0,         # near and far distances
    60.0,                # vertical field of view, in degrees
    4 / 3,               # aspect ratio
)

print(frustum.is_point_visible(Vector3(0, 0, -10)) is Visibility.INSIDE)
```

A menu wraps around in both directions:

```python
from glscene.menu import GameMenu

menu = GameMenu()
for label in ("Load", "Options", "Quit"):
    menu.add_menu_item(label, 0.0, 0.0, 0)

menu.select_menu_item(False)        # moves back from the first item to the last
print(menu.selected_item_number())  # 3
```

## What it does not do

glscene holds data and does the arithmetic around it; it draws nothing. There
is no window, no rendering, no main loop, no keyboard or mouse handling and no
texture or model file loading. A program that wants to put a `Mesh`, a
`HexGrid` or a `GameMenu` on screen has to hand their data to a graphics
library of its own choosing.