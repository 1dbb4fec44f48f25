"""Half-open interval arithmetic and offset translation rules.

WHY: Every stage of the remapper reasons about spans of unsigned 64-bit
numbers. Overlap, intersection and "translate this piece through a rule"
are needed by the interval index, the category maps and the tests, so
they live in one small module with no dependencies.

HOW: Two frozen dataclasses:
  Interval:  a half-open span [start, end)
  RangeRule: a source interval translated onto a target interval by a
             constant offset
Plus three pure functions: overlaps(), intersect() and subrange_map().

RULES:
- Intervals are half-open: start is included, end is not
- 0 <= start <= end <= MAX_VALUE; zero-length intervals hold no values
- Boundary-touching intervals ([0, 5) and [5, 9)) do NOT overlap
- A rule's offset is target.start - source.start; translated pieces
  always keep the length of the source piece
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MAX_VALUE = 2 ** 64
"""Exclusive upper bound for interval endpoints (unsigned 64-bit space)."""


def _check_bound(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("Interval {} must be an integer, got {!r}".format(name, value))
    if value < 0 or value > MAX_VALUE:
        raise ValueError(
            "Interval {} {} is outside the unsigned 64-bit range".format(name, value)
        )


@dataclass(frozen=True)
class Interval:
    """A half-open numeric span ``[start, end)``.

    WHY: Seeds, rule sources and rule targets are all spans of numbers.
    A dedicated type keeps the half-open convention in one place and
    rejects malformed bounds at construction time.

    RULES:
    - start and end are integers with 0 <= start <= end <= MAX_VALUE
    - ``n in interval`` is true for start <= n < end
    - length is end - start (a property, since it can exceed sys.maxsize)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        _check_bound("start", self.start)
        _check_bound("end", self.end)
        if self.start > self.end:
            raise ValueError(
                "Interval start {} is greater than end {}".format(self.start, self.end)
            )

    @classmethod
    def from_length(cls, start: int, length: int) -> Interval:
        """Build ``[start, start + length)``."""
        return cls(start, start + length)

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def __contains__(self, number: object) -> bool:
        return isinstance(number, int) and self.start <= number < self.end

    def shift(self, offset: int) -> Interval:
        """Return the interval moved by ``offset`` (may be negative)."""
        return Interval(self.start + offset, self.end + offset)

    def __str__(self) -> str:
        return "{}..{}".format(self.start, self.end)


@dataclass(frozen=True)
class RangeRule:
    """One row of a translation table: a source span mapped onto a target span.

    WHY: Category maps are piecewise-linear. Each piece shifts every
    number of its source span by the same constant offset.

    HOW: The offset is derived from the two starts. The target's end is
    kept for display only; translation never reads it, so a rule whose
    target is longer than its source still maps point-for-point from the
    start.

    RULES:
    - offset = target.start - source.start
    - translate(n) is only meaningful for n in source
    - from_triple() takes the (target_start, source_start, length) shape
      produced by the almanac parser
    """

    source: Interval
    target: Interval

    @classmethod
    def from_triple(cls, target_start: int, source_start: int, length: int) -> RangeRule:
        return cls(
            source=Interval.from_length(source_start, length),
            target=Interval.from_length(target_start, length),
        )

    @property
    def offset(self) -> int:
        return self.target.start - self.source.start

    def translate(self, number: int) -> int:
        return number + self.offset

    def __str__(self) -> str:
        return "{} -> {}".format(self.source, self.target)


def overlaps(a: Interval, b: Interval) -> bool:
    """Whether two half-open intervals share at least one value.

    Touching intervals (``a.end == b.start``) share nothing and do not
    overlap. Zero-length intervals never overlap anything.
    """
    if a.is_empty or b.is_empty:
        return False
    return a.start < b.end and b.start < a.end


def intersect(a: Interval, b: Interval) -> Optional[Interval]:
    """The common part of ``a`` and ``b``, or None when they do not overlap."""
    if not overlaps(a, b):
        return None
    return Interval(max(a.start, b.start), min(a.end, b.end))


def subrange_map(rule: RangeRule, sub: Interval) -> Optional[RangeRule]:
    """Translate a piece of a rule's source span into target space.

    WHY: When a query only covers part of a rule, the matched part has
    to be carried over on its own, keeping the rule's offset.

    HOW: Checks containment, then shifts ``sub`` by the rule's offset.

    RULES:
    - sub must lie inside rule.source (start and end inclusive checks)
    - Returns None when it does not; callers treat that as "rule does
      not apply", not as an error

    Args:
        rule: The rule whose offset is applied.
        sub: The source-space piece to translate.

    Returns:
        A RangeRule pairing ``sub`` with its translated target span, or
        None when ``sub`` is not contained in ``rule.source``.
    """
    if rule.source.start <= sub.start and sub.end <= rule.source.end:
        return RangeRule(source=sub, target=sub.shift(rule.offset))
    return None
