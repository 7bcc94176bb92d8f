import pytest

from mapserve.router import (
    Route,
    Service,
    ServiceConfig,
    parse_tile_path,
    resolve_service,
)

ALL_ENABLED = {
    key: "enabled"
    for key in (
        "PingService",
        "RelationListService",
        "IdxListService",
        "IdxDetailService",
        "RelationDetailService",
        "WayDetailService",
        "SvgService",
        "MapDisplayService",
        "TileService",
        "GeolocationService",
        "RasterImageService",
    )
}


def test_config_defaults():
    config = ServiceConfig.from_params({})
    assert config.enabled == frozenset()
    assert config.cache_level == 8
    assert config.locale == ""
    assert config.default_color == ""


def test_config_reads_values():
    config = ServiceConfig.from_params(
        {"PingService": "enabled", "TileService": "disabled", "CacheLevel": "12",
         "locale": "fr", "DefaultColor": "#CCDDCC"}
    )
    assert config.enabled == frozenset({Service.PING})
    assert config.cache_level == 12
    assert config.locale == "fr"
    assert config.default_color == "#CCDDCC"


def test_config_all_enabled():
    config = ServiceConfig.from_params(ALL_ENABLED)
    assert config.enabled == frozenset(Service)


@pytest.mark.parametrize(
    "path,service",
    [
        ("/ping", Service.PING),
        ("/geoloc", Service.GEOLOCATION),
        ("/relation/list", Service.RELATION_LIST),
        ("/index/list", Service.INDEX_LIST),
        ("/index/get", Service.INDEX_DETAIL),
        ("/relation/get", Service.RELATION_DETAIL),
        ("/way/get", Service.WAY_DETAIL),
        ("/svgMap.svg", Service.SVG),
        ("/MapDisplay", Service.MAP_DISPLAY),
        ("/", Service.MAP_DISPLAY),
    ],
)
def test_fixed_paths(path, service):
    config = ServiceConfig.from_params(ALL_ENABLED)
    assert resolve_service(config, path) == Route(service)


def test_disabled_service_is_not_found():
    config = ServiceConfig.from_params({"GeolocationService": "enabled"})
    assert resolve_service(config, "/ping") is None
    assert resolve_service(config, "/12/3/4.svg") is None


def test_tile_route():
    config = ServiceConfig.from_params(ALL_ENABLED)
    assert resolve_service(config, "/12/2034/1387.svg") == Route(Service.TILE, (12, 2034, 1387))


def test_svg_map_takes_precedence_over_tiles():
    config = ServiceConfig.from_params({"SvgService": "enabled", "TileService": "enabled"})
    assert resolve_service(config, "/svgMap.svg").service is Service.SVG


def test_svg_map_falls_to_tiles_when_svg_disabled():
    config = ServiceConfig.from_params({"TileService": "enabled"})
    assert resolve_service(config, "/svgMap.svg") == Route(Service.TILE, (0, 0, 0))


def test_raster_route():
    config = ServiceConfig.from_params({"RasterImageService": "enabled"})
    assert resolve_service(config, "/7/64/42.png") == Route(Service.RASTER_IMAGE, (7, 64, 42))


def test_unknown_path():
    config = ServiceConfig.from_params(ALL_ENABLED)
    assert resolve_service(config, "/nothing") is None


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/12/2034/1387.svg", (12, 2034, 1387)),
        ("/5.svg", (5, 0, 0)),
        ("/5/9.svg", (5, 9, 0)),
        ("//3/4.svg", (0, 3, 4)),
        ("/a/b/c.png", (0, 0, 0)),
    ],
)
def test_parse_tile_path(path, expected):
    assert parse_tile_path(path) == expected