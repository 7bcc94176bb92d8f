"""Map projection onto tile pixels and SVG path data for drawn lines."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

MAX_RENDER_ZOOM = 19
BASE_TILE_SIZE = 256
_UINT32_MASK = 0xFFFFFFFF


def mercator_x(lon: float) -> float:
    """Web Mercator abscissa of a longitude given in degrees."""
    return math.radians(lon)


def mercator_y(lat: float) -> float:
    """Web Mercator ordinate of a latitude given in degrees."""
    if not -90.0 < lat < 90.0:
        raise ValueError(f"latitude out of range for Mercator: {lat}")
    return math.log(math.tan(math.pi / 4 + math.radians(lat) / 2))


def _c_round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Projector:
    """Maps longitudes and latitudes onto the pixels of a rendered image.

    The west edge lands on x = 0 and the north edge on y = 0.
    """

    def __init__(self, width, height, lon_min, lon_max, lat_min, lat_max):
        if lon_min == lon_max:
            raise ValueError("longitude span must not be empty")
        if lat_min == lat_max:
            raise ValueError("latitude span must not be empty")
        self.width = width
        self.height = height
        self._x0 = mercator_x(lon_min)
        self._x_span = mercator_x(lon_max) - self._x0
        self._y0 = mercator_y(lat_max)
        self._y_span = mercator_y(lat_min) - self._y0
        self._y_cache: dict[float, float] = {}

    def x(self, lon: float) -> float:
        """Pixel column of a longitude."""
        return self.width * (mercator_x(lon) - self._x0) / self._x_span

    def y(self, lat: float) -> float:
        """Pixel row of a latitude."""
        cached = self._y_cache.get(lat)
        if cached is None:
            cached = self.height * (mercator_y(lat) - self._y0) / self._y_span
            self._y_cache[lat] = cached
        return cached


def path_data(points: Sequence[tuple[float, float]]) -> str:
    """SVG path commands for one line of projected pixel points.

    Coordinates are rounded; repeated points are dropped and purely vertical
    or horizontal moves use the short V and H commands. Lines of fewer than
    two points give an empty string.
    """
    if len(points) < 2:
        return ""
    parts: list[str] = []
    previous: tuple[int, int] | None = None
    for px, py in points:
        x, y = _c_round(px), _c_round(py)
        if previous is None:
            parts.append(f"M{x} {y}")
        elif (x, y) != previous:
            old_x, old_y = previous
            if x == old_x:
                parts.append(f"V{y}")
            elif y == old_y:
                parts.append(f"H{x}")
            else:
                parts.append(f"L{x} {y}")
        previous = (x, y)
    return "".join(parts)


def shape_path(lines: Iterable[Sequence[tuple[float, float]]], rank) -> str:
    """One <path> element drawing all *lines* with the CSS class c<rank>."""
    lines = list(lines)
    if not lines:
        return ""
    data = "".join(path_data(line) for line in lines)
    return f'<path  d="{data}" class="c{rank}"/>\n'


def render_zoom(extent, size_y, fixed_zoom=-1) -> int:
    """Zoom level for an image *size_y* pixels high showing *extent* normalized units.

    A positive *fixed_zoom* overrides the computed level.
    """
    zoom = 31
    span = (int(extent) & _UINT32_MASK) >> 1
    while span:
        zoom -= 1
        span >>= 1
    size = int(size_y)
    while size > BASE_TILE_SIZE:
        zoom += 1
        size >>= 1
    zoom = min(zoom, MAX_RENDER_ZOOM)
    if fixed_zoom is not None and fixed_zoom > 0:
        zoom = fixed_zoom
    return zoom