# mapserve

Pure-Python building blocks for a small map web service that serves SVG map
tiles, raster overlay tiles and a free-text place search. The package has no
dependencies outside the standard library.

## Modules

- `mapserve.geoscore`: rectangles in normalized coordinates (`Rect`, with
  `intersect`, `is_valid`, `area`), candidate search hits (`WeightedArea`),
  index ranges of a searched word (`SearchRange`), word-match scoring
  (`calc_match_score`, `name_words`, `admin_level_bonus`) and ranking and
  combining of hits from several search terms (`rank_areas`, `combine_areas`).
- `mapserve.geoformat`: splitting a comma separated query into terms and a
  street number (`split_query`), choosing a zoom level for an extent
  (`zoom_for_extent`), and writing results given as `AreaView` objects as
  XML (`format_xml`), JSON (`format_json`) or a map page URL (`redirect_url`).
- `mapserve.router`: which services are switched on, read from a mapping of
  parameters (`ServiceConfig.from_params`), and the choice of a `Service`
  for a request path (`resolve_service`, returning a `Route`); tile paths of
  the form `/z/x/y.svg` or `/z/x/y.png` are read by `parse_tile_path`.
- `mapserve.tiles`: tile column and row to longitude and latitude
  (`tile_x_to_lon`, `tile_y_to_lat`, `tile_bounds`), gzip encoding
  (`gzip_compress`, `gzip_decompress`), an XOR-folded entity tag
  (`content_etag`) and the on-disk tile cache (`tile_cache_path`,
  `read_cached`, `write_cached`).
- `mapserve.pages`: small HTML pages (`ping_page`, `index_list_page`,
  `relation_list_page`, `detail_page`) and decoding of packed,
  length-prefixed tag data (`decode_tags`, `format_tags`).
- `mapserve.svgpath`: Web Mercator projection onto image pixels
  (`mercator_x`, `mercator_y`, `Projector`), SVG path data for lines
  (`path_data`, `shape_path`) and the render zoom for an extent
  (`render_zoom`).
- `mapserve.labels`: map labels (`Label`), breaking long labels into
  `<tspan>` lines (`cut_string_markup`, `measure_text`), ordering them
  (`sort_labels`) and dropping those that crowd others (`select_labels`).
- `mapserve.svgtext`: locale lists (`parse_locales`), choice of the name to
  show (`pick_name`), font size from a CSS style (`font_size_from_style`),
  `<text>` and `<use>` elements (`text_element`, `symbol_use`), and the SVG
  header and background (`svg_header`, `background_rect`).
- `mapserve.rasters`: georeferenced raster images (`RasterImageInfo`, with
  `overlaps` and `pixel_for`), raster tile bounds (`raster_tile_bounds`) and
  selection of the images that cover a box (`images_overlapping`).

## Example

```python
from mapserve.router import ServiceConfig, Service, resolve_service
from mapserve.tiles import tile_bounds, gzip_compress, content_etag

config = ServiceConfig.from_params({"TileService": "enabled", "CacheLevel": "8"})
route = resolve_service(config, "/12/2047/1362.svg")
assert route.service is Service.TILE and route.tile == (12, 2047, 1362)

west, north, east, south = tile_bounds(12, 2047, 1362)
body = gzip_compress(b"<svg/>")
etag = content_etag(body)
```

## What the package does not do

- It runs no HTTP server and answers no requests; `resolve_service` only
  names the service that would handle a path.
- It does not generate the interactive map page.
- It does not load map data or text indexes, so it does not run a search
  itself or draw complete tiles: it scores, combines and formats search hits,
  and builds the paths, labels and elements of an SVG document from data the
  caller supplies.
- It does not read or write PNG images; `mapserve.rasters` only works out
  which image and which pixel cover a position.

## Tests

```
pip install -e .[test]
pytest
```