"""Geo-referenced raster images and their lookup for PNG tiles."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mapserve.tiles import RASTER_LON_LIMIT, tile_bounds


@dataclass(frozen=True)
class RasterImageInfo:
    """An image file covering a longitude/latitude box."""

    filename: str
    lon_min: float
    lon_max: float
    lat_min: float
    lat_max: float

    def __post_init__(self) -> None:
        if self.lon_min >= self.lon_max or self.lat_min >= self.lat_max:
            raise ValueError(f"empty extent for raster image {self.filename!r}")

    def overlaps(self, lon_min, lon_max, lat_min, lat_max) -> bool:
        """Whether the given box touches the image's extent."""
        return (
            lat_max >= self.lat_min
            and lat_min <= self.lat_max
            and lon_max >= self.lon_min
            and lon_min <= self.lon_max
        )

    def pixel_for(self, lon, lat, width, height) -> tuple[int, int] | None:
        """Pixel (column, row) of an image of *width* x *height* at a position.

        Row 0 is the north edge. Returns None outside the image's extent.
        """
        if not (self.lon_min <= lon < self.lon_max and self.lat_min <= lat < self.lat_max):
            return None
        column = int((lon - self.lon_min) * width / (self.lon_max - self.lon_min))
        row = int((lat - self.lat_max) * height / (self.lat_min - self.lat_max))
        return min(column, width - 1), min(row, height - 1)


def raster_tile_bounds(z, x, y) -> tuple[float, float, float, float]:
    """Return (west lon, north lat, east lon, south lat) of a raster tile."""
    return tile_bounds(z, x, y, RASTER_LON_LIMIT)


def images_overlapping(
    images: Iterable[RasterImageInfo], lon_min, lon_max, lat_min, lat_max
) -> list[RasterImageInfo]:
    """The images, in order, that overlap the given box."""
    return [image for image in images if image.overlaps(lon_min, lon_max, lat_min, lat_max)]