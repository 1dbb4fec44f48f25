"""Shared test fixtures for the range_remapper test suite.

WHY: Several test modules need the same sample almanac and the same
interval-tree rule set. Centralizing them here avoids duplication and
keeps every module checking against the same known answers.

HOW: SAMPLE_ALMANAC is the classic seven-map almanac whose answers are
known (lowest location 35 for value seeds, 46 for range seeds). Fixtures
provide the raw text, the parsed Almanac and the built Pipeline, plus
the five-rule index set used by the interval-tree tests.

RULES:
- Expected per-seed locations: 79 -> 82, 14 -> 43, 55 -> 86, 13 -> 35
- TREE_RULES insertion order matters: the first rule becomes the root
"""

from typing import List

import pytest

from range_remapper.core.intervals import Interval, RangeRule
from range_remapper.parsing.almanac import build_pipeline, parse_almanac


SAMPLE_ALMANAC = """\
seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""

SAMPLE_CHAIN = [
    "seed", "soil", "fertilizer", "water",
    "light", "temperature", "humidity", "location",
]

SAMPLE_LOCATIONS = {79: 82, 14: 43, 55: 86, 13: 35}


def _rule(source_start: int, source_end: int, target_start: int, target_end: int) -> RangeRule:
    return RangeRule(
        source=Interval(source_start, source_end),
        target=Interval(target_start, target_end),
    )


TREE_RULES: List[RangeRule] = [
    _rule(100, 200, 50, 150),
    _rule(32, 48, 62, 78),
    _rule(10, 20, 90, 100),
    _rule(255, 260, 100, 105),
    _rule(400, 420, 800, 820),
]


@pytest.fixture
def sample_text():
    """The sample almanac document."""
    return SAMPLE_ALMANAC


@pytest.fixture
def sample_almanac():
    """The sample almanac, parsed."""
    return parse_almanac(SAMPLE_ALMANAC)


@pytest.fixture
def sample_pipeline(sample_almanac):
    """Pipeline built from the sample almanac's seven maps."""
    return build_pipeline(sample_almanac)


@pytest.fixture
def sample_chain():
    """Categories of the sample almanac, seed to location."""
    return list(SAMPLE_CHAIN)


@pytest.fixture
def sample_locations():
    """Known seed -> location answers for the sample almanac."""
    return dict(SAMPLE_LOCATIONS)


@pytest.fixture
def tree_rules():
    """The five rules used by the interval-tree tests, in insertion order."""
    return list(TREE_RULES)


@pytest.fixture
def almanac_file(tmp_path):
    """The sample almanac written to a temporary file."""
    path = tmp_path / "almanac.txt"
    path.write_text(SAMPLE_ALMANAC, encoding="utf-8")
    return path
