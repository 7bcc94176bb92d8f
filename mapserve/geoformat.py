"""Formatting of place-lookup results as XML, JSON or a map redirect."""

from __future__ import annotations

import re
from dataclasses import dataclass

from mapserve.geoscore import MAX_RESULTS

MAX_ZOOM = 17
MIN_ZOOM = 0

_C_SPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _fmt(value: float) -> str:
    """Render a float with six decimals, as the wire format expects."""
    return f"{value:.6f}"


@dataclass(frozen=True)
class AreaView:
    """A result area expressed in degrees, ready to be written out."""

    lon_min: float
    lon_max: float
    lat_min: float
    lat_max: float
    found: str = ""
    score: int = 0
    pin: tuple[float, float] | None = None

    @property
    def center(self) -> tuple[float, float]:
        """Longitude and latitude of the middle of the area."""
        return (self.lon_min + self.lon_max) / 2, (self.lat_min + self.lat_max) / 2


def split_query(name: str) -> tuple[list[str], int]:
    """Split a comma separated query into search terms and a street number.

    A term that starts with a digit is taken as the street number (the last
    one wins); empty terms are dropped.
    """
    terms: list[str] = []
    street_number = 0
    parts = name.split(",")
    if parts and parts[-1] == "":
        parts.pop()
    for part in parts:
        word = part.strip(_C_SPACE)
        if not word:
            continue
        if word[0].isdigit() and word[0] in "0123456789":
            street_number = _atoi(word)
            continue
        terms.append(word)
    return terms, street_number


def zoom_for_extent(width: int, height: int) -> int:
    """Choose the map zoom level that shows an extent of the given size."""
    if width < 0 or height < 0:
        raise ValueError("extent sizes must not be negative")
    level = 32 - max(width, height).bit_length()
    return max(MIN_ZOOM, min(MAX_ZOOM, level))


def _emitted(areas, limit):
    # One more than *limit* entries are written, as the counter is tested
    # before it is incremented.
    return list(areas)[: limit + 1]


def format_xml(areas, limit=MAX_RESULTS) -> str:
    """Write the areas as an XML document with one <area> element each."""
    lines = ["<root>\n"]
    for area in _emitted(areas, limit):
        pin = ""
        if area.pin is not None:
            pin = f'pin_lon="{_fmt(area.pin[0])}" pin_lat="{_fmt(area.pin[1])}" '
        lines.append(
            "<area "
            f'lon_min="{_fmt(area.lon_min)}" '
            f'lon_max="{_fmt(area.lon_max)}" '
            f'lat_min="{_fmt(area.lat_min)}" '
            f'lat_max="{_fmt(area.lat_max)}" '
            f"{pin}"
            f'found="{area.found}" '
            f'score="{area.score}" />\n'
        )
    lines.append("</root>\n")
    return "".join(lines)


def format_json(areas, limit=MAX_RESULTS) -> str:
    """Write the areas as a JSON array of objects."""
    entries = []
    for area in _emitted(areas, limit):
        pin = ""
        if area.pin is not None:
            pin = f', "pin_lon":{_fmt(area.pin[0])}, "pin_lat":{_fmt(area.pin[1])}'
        entries.append(
            "{"
            f'"lon_min":{_fmt(area.lon_min)}'
            f', "lon_max":{_fmt(area.lon_max)}'
            f', "lat_min":{_fmt(area.lat_min)}'
            f"{pin}"
            f', "lat_max":{_fmt(area.lat_max)}'
            f', "found":"{area.found}"'
            f', "score":{area.score}'
            "}\n"
        )
    return "[" + ", ".join(entries) + "]\n"


def redirect_url(area, zoom, mag="") -> str:
    """Build the map page URL that centres on *area* (or its pin)."""
    lon, lat = area.pin if area.pin is not None else area.center
    url = (
        f"/MapDisplay?pin=true&longitude={_fmt(lon)}"
        f"&lattitude={_fmt(lat)}&zoom={zoom}"
    )
    if mag == "X2":
        url += "&mag=X2"
    elif mag == "X05":
        url += "&mag=X05"
    return url