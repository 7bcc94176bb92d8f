"""Tile geometry, gzip encoding, entity tags and the on-disk tile cache."""

from __future__ import annotations

import logging
import math
import threading
import zlib
from pathlib import Path

log = logging.getLogger(__name__)

TILE_LON_LIMIT = 179.99999999
RASTER_LON_LIMIT = 179.999
SVG_CACHE_MIN_SIZE = 4096
PNG_CACHE_MIN_SIZE = 2048

_GZIP_WBITS = 16 + zlib.MAX_WBITS
_MAX_MEM_LEVEL = 9

_cache_lock = threading.Lock()


def tile_x_to_lon(x, z, limit=TILE_LON_LIMIT) -> float:
    """Longitude of the west edge of tile column *x* at zoom *z*, capped at *limit*."""
    result = x / (1 << z) * 360.0 - 180
    return min(result, limit)


def tile_y_to_lat(y, z) -> float:
    """Latitude of the north edge of tile row *y* at zoom *z* (Web Mercator)."""
    n = math.pi - 2.0 * math.pi * y / 2.0**z
    return 180.0 / math.pi * math.atan(0.5 * (math.exp(n) - math.exp(-n)))


def tile_bounds(z, x, y, limit=TILE_LON_LIMIT) -> tuple[float, float, float, float]:
    """Return (west lon, north lat, east lon, south lat) of a tile."""
    return (
        tile_x_to_lon(x, z, limit),
        tile_y_to_lat(y, z),
        tile_x_to_lon(x + 1, z, limit),
        tile_y_to_lat(y + 1, z),
    )


def gzip_compress(data: bytes) -> bytes:
    """Compress *data* into a gzip stream at the default compression level."""
    compressor = zlib.compressobj(
        zlib.Z_DEFAULT_COMPRESSION,
        zlib.DEFLATED,
        _GZIP_WBITS,
        _MAX_MEM_LEVEL,
        zlib.Z_DEFAULT_STRATEGY,
    )
    return compressor.compress(data) + compressor.flush()


def gzip_decompress(data: bytes) -> bytes:
    """Decompress a complete gzip stream; raise ValueError if it is bad or cut short."""
    decompressor = zlib.decompressobj(_GZIP_WBITS)
    try:
        result = decompressor.decompress(data) + decompressor.flush()
    except zlib.error as exc:
        raise ValueError(f"invalid gzip data: {exc}") from exc
    if not decompressor.eof:
        raise ValueError("incomplete gzip data")
    return result


def content_etag(data: bytes) -> int:
    """Fold the bytes of *data* into a 64-bit key by XOR, eight bytes at a time."""
    key = bytearray(8)
    for position, byte in enumerate(data):
        key[position % 8] ^= byte
    return int.from_bytes(key, "little")


def tile_cache_path(root, z, x, y, suffix) -> Path:
    """Location of a cached tile: <root>/cache/<z>/<x>/<y>.<suffix>."""
    return Path(root) / "cache" / str(z) / str(x) / f"{y}.{suffix}"


def read_cached(path) -> bytes | None:
    """Return the cached file's contents, or None when it cannot be read."""
    try:
        return Path(path).read_bytes()
    except OSError:
        return None


def write_cached(path, data: bytes, min_size=0) -> bool:
    """Store *data* at *path* when it is longer than *min_size* bytes.

    The zoom and column directories are created as needed; the cache root
    must already exist. Returns whether the file was written.
    """
    if len(data) <= min_size:
        return False
    path = Path(path)
    column_dir = path.parent
    zoom_dir = column_dir.parent
    zoom_dir.mkdir(exist_ok=True)
    column_dir.mkdir(exist_ok=True)
    with _cache_lock:
        try:
            path.write_bytes(data)
        except OSError:
            log.warning("unable to cache %s", path)
            return False
    return True