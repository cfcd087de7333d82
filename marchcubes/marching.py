"""Isosurface extraction from a regular scalar grid using marching cubes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from itertools import product

from .tables import (
    CUBE_CORNER_OFFSETS,
    EDGE_VERTEX_PAIRS,
    crossed_edges,
    cube_index,
    edge_triangles,
)

Vec3 = tuple[float, float, float]


class GridPoint(ABC):
    """A grid sample that exposes a scalar value."""

    @abstractmethod
    def value(self) -> float:
        """Return the scalar value of this sample."""


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position and unit normal."""

    posit: Vec3
    normal: Vec3


@dataclass
class Mesh:
    """Triangle mesh; ``indices`` are grouped three per triangle."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


class MeshSide(Enum):
    """Which faces of the surface to emit."""

    BOTH = "both"
    OUTSIDE_ONLY = "outside_only"
    INSIDE_ONLY = "inside_only"


def _lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t, a[2] + (b[2] - a[2]) * t)


def _negated_unit(v: Vec3) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        # A vanishing gradient has no direction.
        return (math.nan, math.nan, math.nan)
    return (-v[0] / length, -v[1] / length, -v[2] / length)


class MarchingCubes:
    """Scalar volume with an iso level, ready to be turned into a mesh.

    ``values`` are ordered x fastest, then y, then z slowest.
    """

    def __init__(
        self,
        dims: tuple[int, int, int],
        size: tuple[float, float, float],
        sampling_interval: tuple[float, float, float],
        values: Iterable[float],
        iso_level: float,
    ) -> None:
        self.dims = tuple(dims)
        self.values = [float(v) for v in values]
        self.iso_level = float(iso_level)

        nx, ny, nz = self.dims
        expected = nx * ny * nz
        if len(self.values) != expected:
            raise ValueError(
                f"Density array has {len(self.values)} points, but header implies {expected}."
            )
        self._scale = tuple(s / i for s, i in zip(size, sampling_interval))

    @classmethod
    def from_gridpoints(
        cls,
        dims: tuple[int, int, int],
        size: tuple[float, float, float],
        sampling_interval: tuple[float, float, float],
        values: Iterable[GridPoint],
        iso_level: float,
    ) -> MarchingCubes:
        """Build from objects exposing ``value()`` instead of raw numbers."""
        return cls(dims, size, sampling_interval, (p.value() for p in values), iso_level)

    def _value(self, x: int, y: int, z: int) -> float:
        nx, ny, _ = self.dims
        return self.values[x + y * nx + z * nx * ny]

    def _axis_derivative(self, point: tuple[int, int, int], axis: int) -> float:
        n = self.dims[axis]
        i = point[axis]

        def at(offset: int) -> float:
            p = list(point)
            p[axis] += offset
            return self._value(*p)

        has_prev, has_next = i > 0, i + 1 < n
        if has_prev and has_next:
            return (at(1) - at(-1)) * 0.5
        if has_next:
            return at(1) - at(0)
        if has_prev:
            return at(0) - at(-1)
        return 0.0

    def _gradient(self, point: tuple[int, int, int]) -> Vec3:
        return (
            self._axis_derivative(point, 0),
            self._axis_derivative(point, 1),
            self._axis_derivative(point, 2),
        )

    def _position(self, point: tuple[int, int, int]) -> Vec3:
        sx, sy, sz = self._scale
        return (point[0] * sx, point[1] * sy, point[2] * sz)

    def generate(self, mesh_side: MeshSide = MeshSide.BOTH) -> Mesh:
        """Run marching cubes over the whole grid and return the mesh."""
        mesh = Mesh()
        nx, ny, nz = self.dims
        iso = self.iso_level

        for x, y, z in product(range(nx - 1), range(ny - 1), range(nz - 1)):
            corners = [(x + dx, y + dy, z + dz) for dx, dy, dz in CUBE_CORNER_OFFSETS]
            cube = [self._value(*c) for c in corners]

            index = cube_index(cube, iso)
            edges = crossed_edges(index)
            if not edges:
                continue

            edge_points: dict[int, Vertex] = {}
            for edge in edges:
                a, b = EDGE_VERTEX_PAIRS[edge]
                mu = (iso - cube[a]) / (cube[b] - cube[a])
                posit = _lerp(self._position(corners[a]), self._position(corners[b]), mu)
                grad = _lerp(self._gradient(corners[a]), self._gradient(corners[b]), mu)
                edge_points[edge] = Vertex(posit, _negated_unit(grad))

            for inside in edge_triangles(index):
                outside = (inside[1], inside[0], inside[2])
                if mesh_side is MeshSide.BOTH:
                    faces = (outside, inside)
                elif mesh_side is MeshSide.INSIDE_ONLY:
                    faces = (inside,)
                else:
                    faces = (outside,)

                for face in faces:
                    for edge in face:
                        mesh.vertices.append(edge_points[edge])
                        mesh.indices.append(len(mesh.vertices) - 1)

        return mesh