"""Core remapping engine: intervals, interval index, category maps, pipeline.

WHY: The core package is the stable heart of the remapper. It knows
nothing about text, files or command lines; it consumes structured rules
and answers scalar and range queries.

HOW: intervals.py defines Interval/RangeRule and the arithmetic on them,
index.py the augmented interval tree, category_map.py one translation
table, pipeline.py the chain walk, report.py the result IR consumed by
formatters.

RULES:
- No I/O in this package
- Everything is immutable after construction; queries never mutate state
"""

from range_remapper.core.category_map import CategoryMap, Value
from range_remapper.core.index import IntervalIndex
from range_remapper.core.intervals import (
    MAX_VALUE,
    Interval,
    RangeRule,
    intersect,
    overlaps,
    subrange_map,
)
from range_remapper.core.pipeline import Pipeline, lowest_start

__all__ = [
    "MAX_VALUE",
    "CategoryMap",
    "Interval",
    "IntervalIndex",
    "Pipeline",
    "RangeRule",
    "Value",
    "intersect",
    "lowest_start",
    "overlaps",
    "subrange_map",
]
