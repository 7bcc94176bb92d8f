"""Selection of the service that answers a request path."""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass

log = logging.getLogger(__name__)

DEFAULT_CACHE_LEVEL = 8

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _atoll(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Service(enum.Enum):
    PING = "ping"
    GEOLOCATION = "geolocation"
    RELATION_LIST = "relation list"
    INDEX_LIST = "index list"
    INDEX_DETAIL = "index detail"
    RELATION_DETAIL = "relation detail"
    WAY_DETAIL = "way detail"
    SVG = "svg"
    MAP_DISPLAY = "map display"
    TILE = "tile"
    RASTER_IMAGE = "raster image"


# Parameter name that enables each service.
_SWITCHES = {
    Service.PING: "PingService",
    Service.RELATION_LIST: "RelationListService",
    Service.INDEX_LIST: "IdxListService",
    Service.INDEX_DETAIL: "IdxDetailService",
    Service.RELATION_DETAIL: "RelationDetailService",
    Service.WAY_DETAIL: "WayDetailService",
    Service.SVG: "SvgService",
    Service.MAP_DISPLAY: "MapDisplayService",
    Service.TILE: "TileService",
    Service.GEOLOCATION: "GeolocationService",
    Service.RASTER_IMAGE: "RasterImageService",
}

# Fixed paths, checked in this order before tile paths.
_FIXED_PATHS = (
    (Service.PING, ("/ping",)),
    (Service.GEOLOCATION, ("/geoloc",)),
    (Service.RELATION_LIST, ("/relation/list",)),
    (Service.INDEX_LIST, ("/index/list",)),
    (Service.INDEX_DETAIL, ("/index/get",)),
    (Service.RELATION_DETAIL, ("/relation/get",)),
    (Service.WAY_DETAIL, ("/way/get",)),
    (Service.SVG, ("/svgMap.svg",)),
    (Service.MAP_DISPLAY, ("/MapDisplay", "/")),
)


@dataclass(frozen=True)
class ServiceConfig:
    """Which services are enabled, and the settings they share."""

    enabled: frozenset = frozenset()
    cache_level: int = DEFAULT_CACHE_LEVEL
    locale: str = ""
    default_color: str = ""

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> ServiceConfig:
        """Read the configuration from a mapping of parameter names to values."""
        enabled = frozenset(
            service for service, key in _SWITCHES.items() if params.get(key, "") == "enabled"
        )
        for service in enabled:
            log.info("%s service enabled", service.value)
        level = params.get("CacheLevel", "")
        return cls(
            enabled=enabled,
            cache_level=int(level) if level else DEFAULT_CACHE_LEVEL,
            locale=params.get("locale", ""),
            default_color=params.get("DefaultColor", ""),
        )

    def is_enabled(self, service: Service) -> bool:
        return service in self.enabled


@dataclass(frozen=True)
class Route:
    """The service chosen for a path and, for tiles, its z/x/y address."""

    service: Service
    tile: tuple[int, int, int] | None = None


def parse_tile_path(path: str) -> tuple[int, int, int]:
    """Read the zoom, column and row from a path such as /z/x/y.svg."""
    parts = path[1:].split("/")
    z = _atoll(parts[0])
    x = _atoll(parts[1]) if len(parts) > 1 else 0
    y = _atoll(parts[2]) if len(parts) > 2 else 0
    return z, x, y


def resolve_service(config: ServiceConfig, path: str) -> Route | None:
    """Return the route for *path*, or None when no enabled service serves it."""
    for service, paths in _FIXED_PATHS:
        if config.is_enabled(service) and path in paths:
            return Route(service)
    if config.is_enabled(Service.TILE) and ".svg" in path:
        return Route(Service.TILE, parse_tile_path(path))
    if config.is_enabled(Service.RASTER_IMAGE) and ".png" in path:
        return Route(Service.RASTER_IMAGE, parse_tile_path(path))
    return None