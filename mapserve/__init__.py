"""Building blocks for a map tile and geolocation web service."""

__version__ = "0.1.0"

__all__ = [
    "geoscore",
    "geoformat",
    "router",
    "tiles",
    "pages",
    "svgpath",
    "labels",
    "svgtext",
    "rasters",
]