"""Scoring and combination of candidate areas for place-name lookup."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

UNDEFINED_ID = 0xFFFFFFFFFFFFFFFF
WORST_SCORE = -999_999_999
MAX_RESULTS = 50
MAX_COMBINED = 250

MISMATCH_PENALTY = 40
ORDERED_MATCH = 500
UNORDERED_MATCH = 300

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in normalized coordinates."""

    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0

    def intersect(self, other: Rect) -> Rect:
        """Return the overlap of two rectangles (possibly invalid)."""
        return Rect(
            max(self.x0, other.x0),
            max(self.y0, other.y0),
            min(self.x1, other.x1),
            min(self.y1, other.y1),
        )

    def is_valid(self) -> bool:
        return self.x0 <= self.x1 and self.y0 <= self.y1

    def area(self) -> int:
        return (self.x1 - self.x0) * (self.y1 - self.y0)


@dataclass
class WeightedArea:
    """A candidate area found by a search, with its score and origin."""

    r: Rect = field(default_factory=Rect)
    score: int = 0
    found: str = ""
    nodes: list[int] = field(default_factory=list)
    ways: list[int] = field(default_factory=list)
    relations: list[int] = field(default_factory=list)
    pin: tuple[int, int] = (0, 0)


@dataclass
class SearchRange:
    """Index ranges in the text indexes that hold one searched word."""

    word: int
    nodes: tuple[int, int] | None = None
    ways: tuple[int, int] | None = None
    relations: tuple[int, int] | None = None

    def count(self) -> int:
        """Number of index entries covered by all ranges together."""
        return sum(
            1 + stop - start
            for span in (self.nodes, self.ways, self.relations)
            if span is not None
            for start, stop in (span,)
        )

    def __lt__(self, other: SearchRange) -> bool:
        return self.count() < other.count()


def _balance(a: list[int], b: list[int], pivots: list[int]) -> int:
    """Mark surplus occurrences so each pivot value occurs equally in a and b."""
    penalty = 0
    for i in range(len(pivots)):
        count_a = a.count(pivots[i])
        count_b = b.count(pivots[i])
        while count_a > count_b:
            a[a.index(pivots[i])] = UNDEFINED_ID
            count_a -= 1
            penalty -= MISMATCH_PENALTY
        while count_b > count_a:
            b[b.index(pivots[i])] = UNDEFINED_ID
            count_b -= 1
            penalty -= MISMATCH_PENALTY
    return penalty


def _defined(values: list[int]) -> list[int]:
    return [v for v in values if v != UNDEFINED_ID]


def calc_match_score(a, b) -> int:
    """Score how well the word keys of *b* match the searched keys *a*.

    Every word present in one list but not the other costs 40 points; each
    common word earns 500 when it comes in the same position and 300 otherwise.
    """
    a = list(a)
    b = list(b)
    result = _balance(a, b, a)
    a, b = _defined(a), _defined(b)
    result += _balance(a, b, b)
    a, b = _defined(a), _defined(b)

    while a:
        head = a.pop(0)
        if head in b:
            position = b.index(head)
            result += ORDERED_MATCH if position == 0 else UNORDERED_MATCH
            del b[position]
    return result


def name_words(name: str) -> list[str]:
    """Split an object name into the words that are matched against a query."""
    text = name.replace("-", " ")
    parts = text.split(" ")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.replace("&apos;", "'") for part in parts]


def admin_level_bonus(score: int, admin_level: str) -> int:
    """Raise the magnitude of *score* slightly for administrative areas."""
    if not admin_level:
        return score
    level = 10 - _atoi(admin_level)
    if level:
        return int(score * (1.0 + 0.1 / level))
    return score


def rank_areas(areas, limit=MAX_COMBINED) -> list[WeightedArea]:
    """Sort by score, then by area, both descending, keeping *limit* entries."""
    ranked = sorted(areas, key=lambda area: (-area.score, -area.r.area()))
    return ranked[:limit]


def combine_areas(current, found) -> list[WeightedArea]:
    """Intersect the areas of a new search term with those found so far."""
    found = rank_areas(found)
    if not found:
        return list(current)
    combined = [
        WeightedArea(
            r=overlap,
            score=a.score + b.score,
            found=f"{a.found}, {b.found}",
            relations=[*a.relations, *b.relations],
        )
        for a in found
        for b in current
        if (overlap := a.r.intersect(b.r)).is_valid()
    ]
    return rank_areas(combined)