"""Small HTML pages: ping, index and relation lists, object details."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

_HEAD = '<!DOCTYPE html><html> <head>  <meta charset="UTF-8"></head> '
_DETAIL_BODY = '<body style="background-color:#AAAAAA; color:#3399CC; padding:20px;">'
_KINDS = {"relation": "Relation", "way": "Way"}


def decode_tags(data: bytes) -> list[tuple[str, str]]:
    """Decode length-prefixed tag/value pairs from a packed tag buffer."""
    data = bytes(data)
    pairs = []
    used = 0
    while used < len(data):
        fields = []
        for _ in range(2):
            if used >= len(data):
                raise ValueError("truncated tag data")
            size = data[used]
            used += 1
            if used + size > len(data):
                raise ValueError("truncated tag data")
            fields.append(data[used : used + size].decode("utf-8", errors="replace"))
            used += size
        pairs.append((fields[0], fields[1]))
    return pairs


def format_tags(data: bytes) -> str:
    """Render packed tags as 'tag=value<br/>' lines."""
    return "".join(f"{tag}={value}<br/>" for tag, value in decode_tags(data))


def ping_page() -> str:
    """Page that answers a liveness check."""
    return _HEAD + "<body>Ping!</body></html>"


def index_list_page(indexes: Iterable[tuple[str, str]]) -> str:
    """List the indexes, given as (name, type) pairs, with links to their contents."""
    links = "".join(
        f'<a href="/index/get?name={name}"> {name}:{kind}</a><br/>' for name, kind in indexes
    )
    return _HEAD + "<body>" + links + "</body></html>"


def relation_list_page(relations: Iterable[Mapping[str, str]]) -> str:
    """List relations by position; each entry is the relation's tag mapping."""
    lines = "".join(
        f'<a href="/relation/get?id={rel_id}"> {rel_id}</a>'
        f'name:{tags.get("name", "")} type:{tags.get("type", "")}<br/>'
        for rel_id, tags in enumerate(relations)
    )
    return _HEAD + "<body>" + lines + "</body></html>"


def detail_page(kind, tags_data, rect, points_count=None) -> str:
    """Detail page of a relation or way; *tags_data* None means it was not found."""
    try:
        title = _KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown object kind: {kind!r}") from None
    if tags_data is None:
        return _HEAD + f"<body>{title} wasn't found.</body></html>"

    description = format_tags(tags_data)
    if kind == "way":
        description += f"points : {points_count or 0}"
    return (
        _HEAD
        + _DETAIL_BODY
        + f'<div style="position:absolute;top:10px; left:1100px;">{description}</div>'
        + '<object type="image/svg+xml" data="../svgMap.svg?'
        + f"longitude1={rect.x0}&lattitude1={rect.y0}"
        + f"&longitude2={rect.x1}&lattitude2={rect.y1}"
        + '" style="width:1000px"/>'
        + "</body></html>"
    )