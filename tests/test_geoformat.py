import json
from urllib.parse import parse_qs, urlsplit

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mapserve.geoformat import (
    AreaView,
    format_json,
    format_xml,
    redirect_url,
    split_query,
    zoom_for_extent,
)


def _area(i=0, pin=None):
    return AreaView(
        lon_min=1.5 + i,
        lon_max=2.25 + i,
        lat_min=47.0,
        lat_max=48.5,
        found=f"Node_{i}:Place",
        score=100 * i,
        pin=pin,
    )


def test_split_query_terms_and_number():
    terms, number = split_query(" Nantes , 12 , rue Crebillon ")
    assert terms == ["Nantes", "rue Crebillon"]
    assert number == 12


def test_split_query_drops_empty_terms():
    terms, number = split_query("Paris,, ,")
    assert terms == ["Paris"]
    assert number == 0


def test_split_query_last_number_wins():
    _, number = split_query("3, Lyon, 7bis")
    assert number == 7


def test_zoom_for_empty_extent_is_max():
    assert zoom_for_extent(0, 0) == 17


def test_zoom_for_huge_extent_is_min():
    assert zoom_for_extent(1 << 40, 0) == 0


def test_zoom_uses_larger_side():
    assert zoom_for_extent(5, 1 << 20) == zoom_for_extent(1 << 20, 5)


def test_zoom_rejects_negative():
    with pytest.raises(ValueError):
        zoom_for_extent(-1, 0)


@given(st.integers(0, 1 << 40), st.integers(0, 1 << 40))
def test_zoom_is_bounded_and_monotone(a, b):
    small, large = sorted((a, b))
    assert 0 <= zoom_for_extent(large, 0) <= zoom_for_extent(small, 0) <= 17


def test_format_xml_single_area():
    out = format_xml([_area(1)])
    assert out.startswith("<root>\n")
    assert out.endswith("</root>\n")
    assert 'lon_min="2.500000"' in out
    assert 'found="Node_1:Place"' in out
    assert 'score="100"' in out
    assert "pin_lon" not in out


def test_format_xml_with_pin():
    out = format_xml([_area(0, pin=(1.75, 47.5))])
    assert 'pin_lon="1.750000" pin_lat="47.500000" found=' in out


def test_format_xml_writes_one_more_than_limit():
    out = format_xml([_area(i) for i in range(10)], limit=3)
    assert out.count("<area ") == 4


def test_format_json_is_valid_json():
    areas = [_area(i) for i in range(3)]
    data = json.loads(format_json(areas))
    assert [entry["found"] for entry in data] == [a.found for a in areas]
    assert [entry["lon_min"] for entry in data] == [a.lon_min for a in areas]
    assert [entry["score"] for entry in data] == [a.score for a in areas]


def test_format_json_pin_round_trip():
    data = json.loads(format_json([_area(0, pin=(1.75, 47.5))]))
    assert (data[0]["pin_lon"], data[0]["pin_lat"]) == (1.75, 47.5)


def test_format_json_empty():
    assert json.loads(format_json([])) == []


def test_redirect_uses_pin():
    url = redirect_url(_area(0, pin=(1.75, 47.5)), 14, "X2")
    parts = urlsplit(url)
    query = parse_qs(parts.query)
    assert parts.path == "/MapDisplay"
    assert float(query["longitude"][0]) == 1.75
    assert float(query["lattitude"][0]) == 47.5
    assert query["zoom"] == ["14"]
    assert query["mag"] == ["X2"]


def test_redirect_uses_center_without_pin():
    area = _area(0)
    query = parse_qs(urlsplit(redirect_url(area, 9)).query)
    lon, lat = area.center
    assert float(query["longitude"][0]) == pytest.approx(lon)
    assert float(query["lattitude"][0]) == pytest.approx(lat)
    assert "mag" not in query


def test_redirect_ignores_unknown_mag():
    assert redirect_url(_area(0), 3, "X1") == redirect_url(_area(0), 3)