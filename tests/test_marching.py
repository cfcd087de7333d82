import math
from dataclasses import dataclass

import pytest

from marchcubes.marching import (
    GridPoint,
    MarchingCubes,
    Mesh,
    MeshSide,
    Vertex,
)


def _single_corner_cube(scale=(1.0, 1.0, 1.0)):
    # 2x2x2 grid, corner 0 (index 0) below iso, all others above.
    values = [0.0] + [1.0] * 7
    return MarchingCubes((2, 2, 2), scale, (1.0, 1.0, 1.0), values, 0.5)


def _sphere_field(n):
    c = (n - 1) / 2
    return [
        math.sqrt((x - c) ** 2 + (y - c) ** 2 + (z - c) ** 2)
        for z in range(n)
        for y in range(n)
        for x in range(n)
    ]


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        MarchingCubes((2, 2, 2), (1, 1, 1), (1, 1, 1), [0.0] * 7, 0.5)


def test_uniform_field_gives_empty_mesh():
    mc = MarchingCubes((3, 3, 3), (1, 1, 1), (1, 1, 1), [1.0] * 27, 0.5)
    mesh = mc.generate(MeshSide.BOTH)
    assert mesh.vertices == []
    assert mesh.indices == []


def test_flat_axis_gives_empty_mesh():
    mc = MarchingCubes((1, 2, 2), (1, 1, 1), (1, 1, 1), [0.0, 1.0, 0.0, 1.0], 0.5)
    assert mc.generate(MeshSide.BOTH).vertices == []


def test_single_corner_inside_positions():
    mesh = _single_corner_cube().generate(MeshSide.INSIDE_ONLY)
    # Triangle (0, 8, 3): midpoints of edges along x, z and y from the origin.
    assert [v.posit for v in mesh.vertices] == [
        (0.5, 0.0, 0.0),
        (0.0, 0.0, 0.5),
        (0.0, 0.5, 0.0),
    ]
    assert mesh.indices == [0, 1, 2]


def test_outside_swaps_first_two_vertices():
    mc = _single_corner_cube()
    inside = mc.generate(MeshSide.INSIDE_ONLY).vertices
    outside = mc.generate(MeshSide.OUTSIDE_ONLY).vertices
    assert outside == [inside[1], inside[0], inside[2]]


def test_both_is_outside_then_inside():
    mc = _single_corner_cube()
    inside = mc.generate(MeshSide.INSIDE_ONLY).vertices
    outside = mc.generate(MeshSide.OUTSIDE_ONLY).vertices
    both = mc.generate(MeshSide.BOTH)
    assert both.vertices == outside + inside
    assert both.indices == list(range(len(both.vertices)))


def test_normals_are_unit_and_point_away_from_high_values():
    mesh = _single_corner_cube().generate(MeshSide.INSIDE_ONLY)
    for vertex in mesh.vertices:
        assert math.isclose(math.hypot(*vertex.normal), 1.0, rel_tol=1e-9)
        assert all(component <= 0.0 for component in vertex.normal)


def test_scale_multiplies_positions():
    unit = _single_corner_cube().generate(MeshSide.BOTH)
    scaled = _single_corner_cube((2.0, 3.0, 4.0)).generate(MeshSide.BOTH)
    assert len(unit.vertices) == len(scaled.vertices)
    for u, s in zip(unit.vertices, scaled.vertices):
        assert s.posit == pytest.approx((u.posit[0] * 2, u.posit[1] * 3, u.posit[2] * 4))


def test_from_gridpoints_matches_plain_values():
    @dataclass
    class Density(GridPoint):
        density: float

        def value(self):
            return self.density

    values = _sphere_field(4)
    plain = MarchingCubes((4, 4, 4), (1, 1, 1), (1, 1, 1), values, 1.2)
    points = MarchingCubes.from_gridpoints(
        (4, 4, 4), (1, 1, 1), (1, 1, 1), [Density(v) for v in values], 1.2
    )
    assert points.generate(MeshSide.BOTH) == plain.generate(MeshSide.BOTH)


def test_sphere_mesh_invariants():
    n = 6
    mc = MarchingCubes((n, n, n), (n, n, n), (n, n, n), _sphere_field(n), 2.0)
    mesh = mc.generate(MeshSide.BOTH)
    assert isinstance(mesh, Mesh)
    assert len(mesh.indices) > 0
    assert len(mesh.indices) % 6 == 0
    assert mesh.indices == list(range(len(mesh.vertices)))
    for vertex in mesh.vertices:
        assert isinstance(vertex, Vertex)
        assert all(0.0 <= c <= n - 1 for c in vertex.posit)
        assert math.isclose(math.hypot(*vertex.normal), 1.0, rel_tol=1e-9)


def test_both_doubles_inside_count():
    n = 5
    mc = MarchingCubes((n, n, n), (1, 1, 1), (1, 1, 1), _sphere_field(n), 1.5)
    inside = mc.generate(MeshSide.INSIDE_ONLY)
    outside = mc.generate(MeshSide.OUTSIDE_ONLY)
    both = mc.generate(MeshSide.BOTH)
    assert len(inside.vertices) == len(outside.vertices)
    assert len(both.vertices) == 2 * len(inside.vertices)


def test_inverted_field_gives_same_vertex_positions():
    values = [0.0] + [1.0] * 7
    inverted = [1.0 - v for v in values]
    a = MarchingCubes((2, 2, 2), (1, 1, 1), (1, 1, 1), values, 0.5).generate(MeshSide.BOTH)
    b = MarchingCubes((2, 2, 2), (1, 1, 1), (1, 1, 1), inverted, 0.5).generate(MeshSide.BOTH)
    assert sorted(v.posit for v in a.vertices) == sorted(v.posit for v in b.vertices)