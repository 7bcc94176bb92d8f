"""Text, symbols and fixed parts of the SVG documents drawn for map tiles."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping

from mapserve.labels import Label, cut_string_markup

MAX_LOCALES = 32
LOCALE_CODE_LEN = 2
DEFAULT_TEXT_FIELD = "name"
FONT_SIZE_KEY = "font-size:"

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _degrees(angle: float) -> str:
    return f"{angle * 180 / math.pi:.6f}"


def parse_locales(locale: str, step: int = 3) -> list[str]:
    """Split a locale list into two-letter codes found every *step* characters.

    With a step of 3, "fr,en" gives ["fr", "en"]; at most 32 codes are kept.
    """
    if step < LOCALE_CODE_LEN:
        raise ValueError(f"locale step must be at least {LOCALE_CODE_LEN}")
    codes = [
        locale[start : start + LOCALE_CODE_LEN]
        for start in range(0, len(locale), step)
    ]
    return [code for code in codes if len(code) == LOCALE_CODE_LEN][:MAX_LOCALES]


def pick_name(
    tags: Mapping[str, str], text_field: str = "", locales: Iterable[str] = ()
) -> str:
    """Choose the text shown for an object.

    A non-default *text_field* is used when the object has it; otherwise the
    first localized name ("name:xx") present wins, then the plain name.
    """
    field = text_field or DEFAULT_TEXT_FIELD
    name = ""
    if field != DEFAULT_TEXT_FIELD:
        name = tags.get(field, "")
    if not name or field == DEFAULT_TEXT_FIELD:
        name = next(
            (tags[key] for key in (f"name:{code}" for code in locales) if tags.get(key)),
            "",
        )
        if not name:
            name = tags.get("name", "")
    return name


def font_size_from_style(style: str) -> int | None:
    """Font size given by a CSS style string, or None when it sets none."""
    found = style.find(FONT_SIZE_KEY)
    if found == -1:
        return None
    return _atoi(style[found + len(FONT_SIZE_KEY) :])


def text_element(label: Label) -> str:
    """The <text> element that draws *label*, broken into lines when long."""
    attributes = f'class="c{label.style}"'
    if not label.size_from_style:
        attributes += f' style="font-size:{label.fontsize}px"'
    attributes += f' x="{label.pos_x}" y="{label.pos_y}"'
    if label.angle != 0:
        attributes += (
            f' transform="rotate({_degrees(label.angle)},{label.pos_x},{label.pos_y})"'
        )
    body = cut_string_markup(label.text, label.pos_x, label.pos_y, label.fontsize)
    return f"<text  {attributes}>{body}</text>\n"


def symbol_use(symbol: str, x: float, y: float, angle: float = 0.0) -> str:
    """A <use> element placing *symbol* at (x, y), rotated by *angle* radians."""
    ix, iy = int(x), int(y)
    element = f'<use xlink:href="#{symbol}"  x="{ix}"  y="{iy}"'
    if angle != 0:
        element += f' transform="rotate({_degrees(angle)},{ix},{iy})"'
    return element + "/>"


def svg_header(width: int, height: int) -> str:
    """XML declaration and opening <svg> element of a document."""
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
        '<svg xmlns="http://www.w3.org/2000/svg" '
        'xmlns:xlink="http://www.w3.org/1999/xlink" '
        f'width="{width}" height="{height}" viewBox="0 0 {width} {height}">\n'
    )


def background_rect(width: int, height: int, color: str) -> str:
    """Half-transparent rectangle that fills the whole image with *color*."""
    return (
        f'<rect width="{width + 1}" height="{height + 1}" '
        f'fill="{color}" opacity="0.5"/>\n'
    )