import pytest

from marchcubes.tables import (
    CUBE_CORNER_OFFSETS,
    EDGE_TABLE,
    EDGE_VERTEX_PAIRS,
    TRI_TABLE,
    crossed_edges,
    cube_index,
    edge_triangles,
)


def test_cube_index_all_above_is_zero():
    assert cube_index([1.0] * 8, 0.5) == 0


def test_cube_index_all_below_is_full():
    assert cube_index([0.0] * 8, 0.5) == 255


def test_cube_index_value_equal_to_iso_counts_as_above():
    assert cube_index([0.5] * 8, 0.5) == 0


@pytest.mark.parametrize("corner", range(8))
def test_cube_index_single_corner_sets_its_bit(corner):
    values = [1.0] * 8
    values[corner] = 0.0
    assert cube_index(values, 0.5) == 1 << corner


def test_cube_index_rejects_wrong_length():
    with pytest.raises(ValueError):
        cube_index([0.0] * 7, 0.5)


def test_tables_cover_every_configuration():
    assert len(EDGE_TABLE) == len(TRI_TABLE) == 256
    assert len(CUBE_CORNER_OFFSETS) == 8
    assert len(EDGE_VERTEX_PAIRS) == 12
    for index in range(len(EDGE_TABLE)):
        from_mask = tuple(
            edge for edge in range(len(EDGE_VERTEX_PAIRS)) if EDGE_TABLE[index] >> edge & 1
        )
        assert crossed_edges(index) == from_mask


def test_empty_configurations_have_no_triangles():
    assert edge_triangles(0) == ()
    assert edge_triangles(255) == ()
    assert crossed_edges(0) == ()
    assert crossed_edges(255) == ()


def test_first_configuration_pinned():
    assert edge_triangles(1) == ((0, 8, 3),)
    assert crossed_edges(1) == (0, 3, 8)


@pytest.mark.parametrize("index", [-1, 256])
def test_out_of_range_index_raises(index):
    with pytest.raises(ValueError):
        edge_triangles(index)
    with pytest.raises(ValueError):
        crossed_edges(index)


@pytest.mark.parametrize("index", range(256))
def test_crossed_edges_join_corners_on_opposite_sides(index):
    expected = tuple(
        edge
        for edge, (a, b) in enumerate(EDGE_VERTEX_PAIRS)
        if bool(index & (1 << a)) != bool(index & (1 << b))
    )
    assert crossed_edges(index) == expected


@pytest.mark.parametrize("index", range(256))
def test_triangles_use_exactly_the_crossed_edges(index):
    used = {edge for triangle in edge_triangles(index) for edge in triangle}
    assert used == set(crossed_edges(index))


@pytest.mark.parametrize("index", range(256))
def test_complement_configuration_crosses_same_edges(index):
    assert crossed_edges(index) == crossed_edges(255 - index)


@pytest.mark.parametrize("index", range(256))
def test_triangles_are_well_formed(index):
    triangles = edge_triangles(index)
    assert len(triangles) <= 5
    for triangle in triangles:
        assert len(triangle) == 3
        assert len(set(triangle)) == 3
        assert all(0 <= edge < 12 for edge in triangle)


def test_cube_index_feeds_lookup():
    values = [0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0]
    index = cube_index(values, 0.5)
    assert edge_triangles(index) == ((0, 8, 3),)