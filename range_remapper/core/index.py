"""Augmented interval index over translation rules.

WHY: A range query against a category map has to find every rule whose
source span overlaps the query. Scanning the rule list works, but an
interval tree lets whole subtrees be skipped once it is clear that
nothing in them reaches far enough right.

HOW: An unbalanced binary search tree keyed by source start. Every node
owns one RangeRule and remembers max_end, the largest source end in its
subtree. Insertion walks down from the root, raising max_end on the way.
Queries walk the tree with an explicit stack and prune any subtree whose
max_end is at or before the query start.

RULES:
- The first inserted rule becomes the root; no rebalancing, ever
- Strictly smaller source starts go left; equal or larger go right
- max_end >= source.end of every rule in the node's subtree
- find_intersections() returns rules restricted to the query, already
  translated into target space; result order is unspecified
- Queries never mutate the tree
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from range_remapper.core.intervals import (
    Interval,
    RangeRule,
    intersect,
    overlaps,
    subrange_map,
)


@dataclass
class _IndexNode:
    """One tree node; children are owned exclusively by their parent."""

    rule: RangeRule
    max_end: int
    left: Optional[_IndexNode] = None
    right: Optional[_IndexNode] = None


class IntervalIndex:
    """Interval tree over RangeRule source spans.

    Build it once with insert() (or pass the rules to the constructor) and
    query it as often as needed. Rule counts per category are small, so
    the insertion-order shape is acceptable.
    """

    def __init__(self, rules: Optional[List[RangeRule]] = None) -> None:
        self._root: Optional[_IndexNode] = None
        self._size = 0
        for rule in rules or ():
            self.insert(rule)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    @property
    def max_end(self) -> Optional[int]:
        """Largest source end in the whole index, or None when empty."""
        return self._root.max_end if self._root is not None else None

    def insert(self, rule: RangeRule) -> None:
        """Add a rule, keeping max_end current along the insertion path.

        RULES:
        - Empty index: the rule becomes the root
        - rule.source.start < node start: descend left, else right
        - A new leaf is created in the first empty child slot reached
        """
        self._size += 1
        if self._root is None:
            self._root = _IndexNode(rule=rule, max_end=rule.source.end)
            return

        node = self._root
        while True:
            if node.max_end < rule.source.end:
                node.max_end = rule.source.end

            if rule.source.start < node.rule.source.start:
                if node.left is None:
                    node.left = _IndexNode(rule=rule, max_end=rule.source.end)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _IndexNode(rule=rule, max_end=rule.source.end)
                    return
                node = node.right

    def find_intersections(self, query: Interval) -> List[RangeRule]:
        """Collect the parts of all stored rules that overlap ``query``.

        WHY: A category map needs every matched piece of a query to split
        it into translated and untranslated parts.

        HOW: Depth-first walk with an explicit stack. Each visited node
        whose source overlaps the query contributes its intersection,
        translated through subrange_map(). A child is only visited when
        its max_end is past query.start, since otherwise no span below it
        can reach into the query.

        RULES:
        - Only rules whose source overlaps the query contribute
        - Each returned rule's source is the intersection with the query
        - Both children may be visited; sort the result if order matters

        Args:
            query: Source-space interval to look up.

        Returns:
            List of RangeRule pieces (source restricted to the query,
            target translated by the rule's offset).
        """
        found: List[RangeRule] = []
        if self._root is None or query.is_empty:
            return found

        stack = [self._root]
        while stack:
            node = stack.pop()
            common = intersect(node.rule.source, query)
            if common is not None:
                piece = subrange_map(node.rule, common)
                if piece is not None:
                    found.append(piece)

            for child in (node.right, node.left):
                if child is not None and child.max_end > query.start:
                    stack.append(child)

        return found

    def find_overlapping(self, query: Interval) -> Optional[RangeRule]:
        """Return one stored rule overlapping ``query``, or None.

        A single descent: stop at the first overlapping node; otherwise go
        left when the left subtree reaches past query.start, else right.
        When the left subtree is chosen and holds no overlap, the right
        subtree cannot hold one either, since its starts are no smaller.
        """
        node = self._root
        while node is not None:
            if overlaps(node.rule.source, query):
                return node.rule
            if node.left is not None and node.left.max_end > query.start:
                node = node.left
            else:
                node = node.right
        return None

    def __iter__(self) -> Iterator[RangeRule]:
        """Yield stored rules in source-start order (in-order traversal)."""
        stack: List[_IndexNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.rule
            node = node.right

    def depth(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        if self._root is None:
            return 0
        deepest = 0
        stack = [(self._root, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, level + 1))
        return deepest
