# marchcubes

An implementation of the Marching Cubes algorithm. It turns a regular grid of
scalar values, such as an electron-density map, into a triangle mesh of the
isosurface at a chosen level. It is pure Python and has no dependencies.

## Installation

```
pip install marchcubes
```

## Usage

Grid values are a flat sequence in x-fast, y-medium, z-slow order. The value
at `(x, y, z)` is at index `x + y * nx + z * nx * ny`.

```python
from marchcubes.marching import MarchingCubes, MeshSide

nx, ny, nz = 16, 16, 16
values = [
    ((x - 8) ** 2 + (y - 8) ** 2 + (z - 8) ** 2) ** 0.5
    for z in range(nz)
    for y in range(ny)
    for x in range(nx)
]

mc = MarchingCubes(
    (nx, ny, nz),          # number of grid points along each axis
    (16.0, 16.0, 16.0),    # cell size along each axis
    (16.0, 16.0, 16.0),    # sampling interval along each axis
    values,
    5.0,                   # iso level
)

mesh = mc.generate(MeshSide.BOTH)
print(len(mesh.vertices), len(mesh.indices) // 3)
```

Grid point `(x, y, z)` is placed at
`(x * size[0] / sampling_interval[0], y * size[1] / sampling_interval[1], z * size[2] / sampling_interval[2])`.
Vertex positions are interpolated linearly along each cube edge that the surface
crosses.

`generate()` returns a `Mesh` with two fields:

- `vertices`: a list of `Vertex` objects. Each has `posit`, a position, and `normal`, a unit normal.
- `indices`: a list of indices into `vertices`, three per triangle.

Vertices are not shared between triangles. Every index points at a vertex of its
own, so `indices` is simply `0, 1, 2, ...`.

The normal is the negated, normalised gradient of the field. The gradient is
found by central differences, with one-sided differences at the grid borders.
The normal therefore points out of the region whose values are higher than the
iso level. Where the gradient is zero, the normal is `(nan, nan, nan)`.

`MeshSide` picks which faces are produced. `generate()` uses `MeshSide.BOTH` if
no value is given.

- `MeshSide.INSIDE_ONLY`: each triangle with its winding as listed in the lookup table.
- `MeshSide.OUTSIDE_ONLY`: each triangle with its first two vertices swapped, which reverses the winding.
- `MeshSide.BOTH`: both versions, the outside triangle first and then the inside one.

If your grid is made of objects rather than plain numbers, subclass `GridPoint`
and implement `value()`. Then build the mesher with
`MarchingCubes.from_gridpoints(...)`, which takes the same arguments as the
constructor.

A value sequence whose length does not match the grid dimensions raises
`ValueError`. A grid with fewer than two points along any axis yields an empty
mesh.

## Lookup tables

The module `marchcubes.tables` holds the standard tables:

- `CUBE_CORNER_OFFSETS`
- `EDGE_VERTEX_PAIRS`
- `EDGE_TABLE`
- `TRI_TABLE`, with the triangles of each configuration as edge-id triples

It also provides three helpers:

- `cube_index(corner_values, iso_level)` gives the 8-bit configuration index of a cube. Bit `i` is set when corner `i` is below the iso level. It raises `ValueError` unless exactly eight values are given.
- `crossed_edges(cube_index)` gives the ids of the edges that the surface crosses, in ascending order.
- `edge_triangles(cube_index)` gives the triangles of a configuration.

`crossed_edges` and `edge_triangles` raise `ValueError` for an index outside `0..255`.

## What it does not do

marchcubes works only on values that are already in memory. It does not read
density-map files and does not write mesh files. It has no command-line tool.