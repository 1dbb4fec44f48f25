"""One translation table between two categories.

WHY: Each "X-to-Y map" block of an almanac translates numbers of one
category into the next. Scalar lookups and range lookups have different
needs: a scalar only needs the first rule containing it, while a range
has to be split into every matched and unmatched piece.

HOW: CategoryMap keeps the rules twice: as the flat ordered tuple given
at construction (scanned linearly for scalars) and as an IntervalIndex
built from the same rules (queried for ranges). ranges_for() sorts the
matched pieces by source start and fills every gap with an identity
interval, so the output covers the query exactly.

RULES:
- Built once; rules and index never change afterwards
- Source spans of the rules may not overlap each other
- Unmatched numbers pass through unchanged (identity), relabeled to the
  target category
- Sum of ranges_for() output lengths == query length
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from range_remapper.core.index import IntervalIndex
from range_remapper.core.intervals import Interval, RangeRule


@dataclass(frozen=True)
class Value:
    """A number tagged with the category it currently belongs to."""

    category: str
    number: int

    def __str__(self) -> str:
        return "{}={}".format(self.category, self.number)


def _check_disjoint(rules: Sequence[RangeRule], label: str) -> None:
    ordered = sorted((r for r in rules if not r.source.is_empty), key=lambda r: r.source.start)
    for previous, current in zip(ordered, ordered[1:]):
        if current.source.start < previous.source.end:
            raise ValueError(
                "{}: rule sources {} and {} overlap".format(
                    label, previous.source, current.source
                )
            )


class CategoryMap:
    """Piecewise-linear translation from ``source_category`` to ``target_category``.

    WHY: The pipeline only needs to know, per category, how to move a
    number or a range one hop forward. Everything about rule lookup and
    gap filling stays inside this class.

    RULES:
    - rules keep input order; value_for() picks the first containing rule
    - index is derived from rules and stays consistent with them
    - Overlapping source spans or equal categories raise ValueError
    """

    def __init__(
        self,
        source_category: str,
        target_category: str,
        rules: Iterable[RangeRule] = (),
    ) -> None:
        if source_category == target_category:
            raise ValueError(
                "Category map cannot translate '{}' onto itself".format(source_category)
            )
        self.source_category = source_category
        self.target_category = target_category
        self.rules: Tuple[RangeRule, ...] = tuple(rules)
        _check_disjoint(self.rules, "{}-to-{}".format(source_category, target_category))
        self.index = IntervalIndex(list(self.rules))

    @classmethod
    def from_triples(
        cls,
        source_category: str,
        target_category: str,
        triples: Iterable[Tuple[int, int, int]],
    ) -> CategoryMap:
        """Build a map from ``(target_start, source_start, length)`` rows."""
        rules = [RangeRule.from_triple(*triple) for triple in triples]
        return cls(source_category, target_category, rules)

    def __repr__(self) -> str:
        return "CategoryMap({!r} -> {!r}, {} rules)".format(
            self.source_category, self.target_category, len(self.rules)
        )

    def value_for(self, value: Value) -> Optional[Value]:
        """Translate one number a single hop.

        Returns None when ``value`` is not in this map's source category.
        Otherwise the first rule (input order) whose source contains the
        number applies its offset; with no such rule the number is kept.
        """
        if value.category != self.source_category:
            return None

        for rule in self.rules:
            if value.number in rule.source:
                return Value(self.target_category, rule.translate(value.number))
        return Value(self.target_category, value.number)

    def ranges_for(self, query: Interval) -> List[Interval]:
        """Split ``query`` into target-space intervals.

        WHY: A range of source numbers may be partly covered by several
        rules and partly by none. Covered parts are shifted by their
        rule's offset; uncovered parts keep their values.

        HOW:
          1. Ask the index for every overlapping rule piece
          2. Sort the pieces by source start
          3. Emit an identity interval for any gap before the first piece
          4. Emit each piece's target, plus identity intervals between
             pieces that do not touch
          5. Emit an identity interval for any gap after the last piece

        RULES:
        - No matches at all: the whole query comes back as one interval
        - A zero-length query yields no intervals
        - Output is in ascending source order and covers the query with
          no gaps and no overlaps, so total length is conserved

        Args:
            query: Source-category interval.

        Returns:
            Target-category intervals covering the query.
        """
        if query.is_empty:
            return []

        pieces = sorted(self.index.find_intersections(query), key=lambda r: r.source.start)
        if not pieces:
            return [query]

        ranges: List[Interval] = []
        cursor = query.start
        for piece in pieces:
            if cursor < piece.source.start:
                ranges.append(Interval(cursor, piece.source.start))
            ranges.append(piece.target)
            cursor = piece.source.end

        if cursor < query.end:
            ranges.append(Interval(cursor, query.end))

        return ranges
