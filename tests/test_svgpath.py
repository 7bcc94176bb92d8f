import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mapserve.svgpath import (
    Projector,
    mercator_x,
    mercator_y,
    path_data,
    render_zoom,
    shape_path,
)


@given(st.floats(min_value=-85.0, max_value=85.0))
def test_mercator_y_is_odd(lat):
    assert mercator_y(-lat) == pytest.approx(-mercator_y(lat), abs=1e-12)


def test_mercator_y_rejects_poles():
    with pytest.raises(ValueError):
        mercator_y(90.0)


def test_projector_corners():
    p = Projector(256, 256, -2.0, 1.0, 45.0, 48.0)
    assert p.x(-2.0) == pytest.approx(0.0)
    assert p.x(1.0) == pytest.approx(256.0)
    assert p.y(48.0) == pytest.approx(0.0)
    assert p.y(45.0) == pytest.approx(256.0)


def test_projector_y_grows_southwards():
    p = Projector(100, 200, 0.0, 10.0, 10.0, 20.0)
    assert p.y(19.0) < p.y(15.0) < p.y(11.0)
    assert p.y(15.0) == p.y(15.0)


def test_projector_x_is_linear_in_longitude():
    p = Projector(100, 100, 0.0, 10.0, 0.0, 10.0)
    assert p.x(5.0) == pytest.approx(p.width / 2)


def test_projector_rejects_empty_span():
    with pytest.raises(ValueError):
        Projector(10, 10, 1.0, 1.0, 0.0, 5.0)
    with pytest.raises(ValueError):
        Projector(10, 10, 0.0, 1.0, 5.0, 5.0)


def test_path_data_uses_short_commands():
    assert path_data([(0, 0), (0, 5), (3, 5), (4, 7)]) == "M0 0V5H3L4 7"


def test_path_data_drops_repeated_points():
    assert path_data([(1, 1), (1, 1), (2, 2)]) == "M1 1L2 2"


def test_path_data_rounds_half_away_from_zero():
    assert path_data([(0.5, 1.5), (-0.5, 2.5)]) == "M1 2L-1 3"


def test_path_data_needs_two_points():
    assert path_data([(3, 4)]) == ""


@given(st.lists(st.tuples(st.integers(-500, 500), st.integers(-500, 500)), min_size=2))
def test_path_data_starts_with_move(points):
    data = path_data(points)
    assert data.startswith(f"M{points[0][0]} {points[0][1]}")
    assert data.count("M") == 1


def test_shape_path_wraps_lines():
    result = shape_path([[(0, 0), (0, 5)], [(1, 1), (2, 2)]], 7)
    assert result == '<path  d="M0 0V5M1 1L2 2" class="c7"/>\n'


def test_shape_path_without_lines_is_empty():
    assert shape_path([], 3) == ""


def test_render_zoom_full_extent():
    assert render_zoom(0xFFFFFFFF, 256) == 0


def test_render_zoom_caps_at_maximum():
    assert render_zoom(0, 256) == 19


def test_render_zoom_fixed_level_wins():
    assert render_zoom(0xFFFFFFFF, 256, 5) == 5


@given(st.integers(min_value=1 << 16, max_value=0xFFFFFFFF))
def test_render_zoom_larger_image_zooms_in(extent):
    assert render_zoom(extent, 512) == min(19, render_zoom(extent, 256) + 1)


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_render_zoom_within_bounds(extent):
    assert 0 <= render_zoom(extent, 256) <= 19


def test_render_zoom_halving_extent_adds_level():
    assert render_zoom(1 << 20, 256) == render_zoom(1 << 21, 256) + 1
    assert math.isclose(render_zoom(1 << 20, 256), render_zoom(1 << 20, 256))