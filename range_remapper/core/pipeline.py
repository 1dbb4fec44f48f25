"""Chained category maps and the hop-by-hop walks over them.

WHY: A number or a range has to travel through several category maps
(seed → soil → ... → location) before it reaches the category the caller
asks about. The pipeline owns the maps and performs that walk.

HOW: Pipeline stores one CategoryMap per source category. map() moves a
single Value one hop at a time with CategoryMap.value_for(). map_range()
carries a working set of intervals: at every hop each interval is split
by CategoryMap.ranges_for() and the pieces are concatenated into the next
working set.

RULES:
- At most one outgoing map per category (a simple chain)
- A missing map before the target is reached is a failure: map()
  returns None and map_range() returns []
- Each walk remembers the categories it visited; coming back to one
  before reaching the target is a failure as well (cycle guard)
- Walks never mutate the pipeline, its maps or their indexes
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from range_remapper.core.category_map import CategoryMap, Value
from range_remapper.core.intervals import Interval

logger = logging.getLogger(__name__)


class Pipeline:
    """Category maps keyed by their source category."""

    def __init__(self, maps: Iterable[CategoryMap] = ()) -> None:
        self._maps_by_source: Dict[str, CategoryMap] = {}
        for category_map in maps:
            self.insert(category_map)

    def insert(self, category_map: CategoryMap) -> None:
        """Register a map; a second map for the same source raises ValueError."""
        source = category_map.source_category
        if source in self._maps_by_source:
            raise ValueError("A map from category '{}' is already registered".format(source))
        self._maps_by_source[source] = category_map

    def get(self, category: str) -> Optional[CategoryMap]:
        return self._maps_by_source.get(category)

    def __contains__(self, category: object) -> bool:
        return category in self._maps_by_source

    def __len__(self) -> int:
        return len(self._maps_by_source)

    def __iter__(self) -> Iterator[CategoryMap]:
        return iter(self._maps_by_source.values())

    @property
    def categories(self) -> List[str]:
        """Every category that appears as a source or a target, in insertion order."""
        seen: Dict[str, None] = {}
        for category_map in self._maps_by_source.values():
            seen.setdefault(category_map.source_category)
            seen.setdefault(category_map.target_category)
        return list(seen)

    def chain(self, source: str) -> List[str]:
        """Categories visited starting at ``source`` until the chain ends.

        The walk stops at the first category with no outgoing map, or just
        before a category would be visited twice.
        """
        visited = [source]
        current = self.get(source)
        while current is not None and current.target_category not in visited:
            visited.append(current.target_category)
            current = self.get(current.target_category)
        return visited

    def terminal_category(self, source: str) -> str:
        """Last category reachable from ``source``."""
        return self.chain(source)[-1]

    def map(self, value: Value, target: str) -> Optional[Value]:
        """Walk a single value to the ``target`` category.

        WHY: Scalar seeds only need their final number; this is the cheap
        path that never splits anything.

        HOW: Repeatedly replaces the value with the result of the current
        category's map until the category equals ``target``.

        RULES:
        - Already in target: returned unchanged
        - No map for the current category: None (dead end)
        - Category seen before on this walk: None (cycle)
        - Numbers matched by no rule pass through unchanged

        Args:
            value: Starting category and number.
            target: Category to stop at.

        Returns:
            The value in the target category, or None on failure.
        """
        visited = {value.category}
        current: Optional[Value] = value
        while current is not None and current.category != target:
            category_map = self.get(current.category)
            if category_map is None:
                logger.warning(
                    "No map from category '%s'; cannot reach '%s'", current.category, target
                )
                return None
            previous = current
            current = category_map.value_for(previous)
            if current is None:
                return None
            if current.category in visited and current.category != target:
                logger.warning(
                    "Category '%s' reached twice while mapping to '%s'", current.category, target
                )
                return None
            visited.add(current.category)
            logger.debug("Mapped %s -> %s", previous, current)
        return current

    def map_range(self, interval: Interval, source: str, target: str) -> List[Interval]:
        """Walk an interval to the ``target`` category, splitting as needed.

        WHY: Range seeds can hold billions of numbers; mapping them one by
        one is out of the question. Splitting at rule boundaries keeps the
        work proportional to the number of rules.

        HOW: Starts with the working set [interval] in ``source``. At each
        hop every interval of the set is passed through ranges_for() of
        the current category's map and the results are concatenated.

        RULES:
        - source == target: the interval comes back as-is (empty list for
          a zero-length interval)
        - No map for the current category before target: [] (failure)
        - Category seen before on this walk: [] (cycle)
        - An empty working set ends the walk early with []
        - Total length of the working set never changes between hops

        Args:
            interval: Starting interval in ``source`` space.
            source: Category the interval belongs to.
            target: Category to stop at.

        Returns:
            Target-category intervals, or [] on failure.
        """
        working = [] if interval.is_empty else [interval]
        current = source
        visited = {source}
        while working and current != target:
            category_map = self.get(current)
            if category_map is None:
                logger.warning("No map from category '%s'; cannot reach '%s'", current, target)
                return []

            next_working: List[Interval] = []
            for part in working:
                next_working.extend(category_map.ranges_for(part))
            logger.debug(
                "Mapped %d range(s) %s -> %s into %d range(s)",
                len(working), current, category_map.target_category, len(next_working),
            )
            working = next_working
            current = category_map.target_category

            if current in visited and current != target:
                logger.warning("Category '%s' reached twice while mapping to '%s'", current, target)
                return []
            visited.add(current)
        return working

    def map_ranges(self, intervals: Iterable[Interval], source: str, target: str) -> List[Interval]:
        """map_range() over several intervals, results concatenated in input order."""
        mapped: List[Interval] = []
        for interval in intervals:
            mapped.extend(self.map_range(interval, source, target))
        return mapped


def lowest_start(intervals: Iterable[Interval]) -> Optional[int]:
    """Smallest start over non-empty intervals, or None when there are none."""
    starts = [interval.start for interval in intervals if not interval.is_empty]
    return min(starts) if starts else None
