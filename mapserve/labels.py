"""Text labels of a rendered map: line breaking, ordering and overlap removal."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass

MAX_TEXT_LEN = 18
MIN_TEXT_LEN = 6
_SEPARATORS = (" ", "/", "-")


@dataclass
class Label:
    """A piece of text placed on the map, with its position and style."""

    id: int = 0
    zindex: int = 0
    text: str = ""
    ref: str = ""
    style: int = 0
    pos_x: int = 0
    pos_y: int = 0
    angle: float = 0.0
    fontsize: int = 0
    to_show: bool = True
    size_from_style: bool = False

    def clear(self) -> None:
        """Reset every field to its default value."""
        for item in dataclasses.fields(self):
            setattr(self, item.name, item.default)


def _break_position(text: str) -> int:
    """Index of the first separator at or after MIN_TEXT_LEN, or -1."""
    for separator in _SEPARATORS:
        position = text.find(separator, MIN_TEXT_LEN)
        if position != -1:
            return position
    return -1


def _c_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def _line_count(text: str) -> int:
    lines = 0
    while True:
        lines += 1
        if len(text) < MAX_TEXT_LEN:
            return lines
        position = _break_position(text)
        position = MAX_TEXT_LEN if position == -1 else position + 1
        text = text[position:]


def cut_string_markup(text: str, x: int, y: int, dy: int) -> str:
    """Break a long label into <tspan> lines centred vertically on *y*.

    Text shorter than MAX_TEXT_LEN characters is returned unchanged.
    """
    if len(text) < MAX_TEXT_LEN:
        return text
    lines = _line_count(text)
    y0 = y - _c_div(dy * (lines - 1), 2)

    result = ""
    first = True
    line = 0
    while True:
        line_y = y0 + dy * line
        if len(text) < MAX_TEXT_LEN:
            return result + f'</tspan><tspan  x="{x}" y="{line_y}">{text}</tspan>'
        if not first:
            result += "</tspan>"
        result += f'<tspan  x="{x}" y="{line_y}">'
        position = _break_position(text)
        if position == -1:
            return result + text + "</tspan>"
        result += text[:position]
        text = text[position + 1 :]
        first = False
        line += 1


def measure_text(text: str) -> tuple[int, int]:
    """Return (widest line in characters, number of lines) of a broken label."""
    lines = 1
    if len(text) < MAX_TEXT_LEN:
        return len(text), lines
    widest = 0
    while len(text) >= MAX_TEXT_LEN:
        lines += 1
        position = _break_position(text)
        if position == -1:
            position = MAX_TEXT_LEN
        widest = max(widest, position)
        if position != MAX_TEXT_LEN:
            position += 1
        text = text[position:]
    return widest, lines


def sort_labels(labels: Iterable[Label]) -> list[Label]:
    """Order labels by z-index (highest first), then style, position and text."""
    return sorted(
        labels,
        key=lambda label: (-label.zindex, label.style, label.pos_x, label.pos_y, label.text),
    )


def _extent(label: Label) -> tuple[float, float]:
    width, lines = measure_text(label.text)
    return float(label.fontsize) * width, float(label.fontsize) * lines


def select_labels(labels: Iterable[Label]) -> list[Label]:
    """Keep, in the given order, each label that does not crowd one already kept.

    Every label's ``to_show`` flag is set; the kept labels are returned.
    """
    kept: list[tuple[Label, float, float]] = []
    for label in labels:
        width, height = _extent(label)
        show = True
        for other, other_width, other_height in kept:
            dx = float(label.pos_x) - float(other.pos_x)
            dy = float(label.pos_y) - float(other.pos_y)
            reach = width * width + height * height + other_width**2 + other_height**2
            if reach > 4 * (dx * dx + dy * dy):
                show = False
                break
        label.to_show = show
        if show:
            kept.append((label, width, height))
    return [label for label, _, _ in kept]