"""Unit tests for almanac text parsing.

WHY: The parser is the boundary between free-form text and the engine.
Silently skipping a malformed row would change every downstream answer,
so each layout problem must surface with its line number.

HOW: The sample almanac checks the happy path; small documents check
each error rule.
"""

import pytest

from range_remapper.core.intervals import Interval
from range_remapper.parsing.almanac import (
    AlmanacParseError,
    build_pipeline,
    load_almanac,
    parse_almanac,
)


class TestParseSample:

    def test_seed_category_is_singular(self, sample_almanac):
        assert sample_almanac.seed_category == "seed"

    def test_seed_numbers(self, sample_almanac):
        assert sample_almanac.seed_numbers == [79, 14, 55, 13]
        assert sample_almanac.seeds("values") == [79, 14, 55, 13]

    def test_seed_ranges(self, sample_almanac):
        assert sample_almanac.seeds("ranges") == [Interval(79, 93), Interval(55, 68)]

    def test_blocks(self, sample_almanac):
        assert len(sample_almanac.blocks) == 7
        first = sample_almanac.blocks[0]
        assert (first.source, first.target) == ("seed", "soil")
        assert first.triples == [(50, 98, 2), (52, 50, 48)]
        assert first.line == 3

    def test_build_pipeline(self, sample_almanac, sample_chain):
        pipeline = build_pipeline(sample_almanac)
        assert len(pipeline) == 7
        assert pipeline.categories == sample_chain

    def test_zero_length_row_keeps_range_length(self):
        almanac = parse_almanac("seeds: 5 5\n\nseed-to-soil map:\n500 5 5\n900 7 0\n")
        pipeline = build_pipeline(almanac)
        mapped = pipeline.map_range(almanac.seeds("ranges")[0], "seed", "soil")
        assert mapped == [Interval(500, 505)]

    def test_load_from_file(self, almanac_file):
        almanac = load_almanac(almanac_file)
        assert almanac.seed_numbers == [79, 14, 55, 13]


class TestParseLayout:

    def test_blank_lines_and_indentation_ignored(self):
        almanac = parse_almanac("\n\n  seeds: 1 2  \n\n\n  a-to-b map:\n  5 6 7\n\n")
        assert almanac.seed_numbers == [1, 2]
        assert almanac.blocks[0].triples == [(5, 6, 7)]

    def test_empty_block_is_allowed(self):
        almanac = parse_almanac("seeds: 1\na-to-b map:\nb-to-c map:\n1 2 3\n")
        assert almanac.blocks[0].triples == []
        assert almanac.blocks[1].triples == [(1, 2, 3)]

    def test_empty_seeds_line(self):
        assert parse_almanac("seeds:\n").seed_numbers == []

    def test_other_seed_label(self):
        assert parse_almanac("widgets: 4\n").seed_category == "widget"


class TestParseErrors:
    """Malformed text raises AlmanacParseError with a line number."""

    def test_error_is_value_error(self):
        assert issubclass(AlmanacParseError, ValueError)

    def test_missing_seeds(self):
        with pytest.raises(AlmanacParseError, match="no seeds line") as exc_info:
            parse_almanac("a-to-b map:\n1 2 3\n")
        assert exc_info.value.line is None

    def test_duplicate_seeds(self):
        with pytest.raises(AlmanacParseError, match="duplicate seeds") as exc_info:
            parse_almanac("seeds: 1\nseeds: 2\n")
        assert exc_info.value.line == 2

    def test_non_numeric_seed(self):
        with pytest.raises(AlmanacParseError, match="unsigned integers"):
            parse_almanac("seeds: 1 x 3\n")

    def test_row_outside_block(self):
        with pytest.raises(AlmanacParseError, match="outside of a map block") as exc_info:
            parse_almanac("seeds: 1\n1 2 3\n")
        assert exc_info.value.line == 2

    def test_short_row(self):
        with pytest.raises(AlmanacParseError, match="3 numbers") as exc_info:
            parse_almanac("seeds: 1\na-to-b map:\n1 2\n")
        assert exc_info.value.line == 3

    def test_unrecognised_line(self):
        with pytest.raises(AlmanacParseError, match="unrecognised line") as exc_info:
            parse_almanac("seeds: 1\na-to-b map:\n1 -2 3\n")
        assert exc_info.value.line == 3

    def test_odd_seed_range_count(self):
        almanac = parse_almanac("seeds: 1 2 3\n")
        with pytest.raises(AlmanacParseError, match="pairs") as exc_info:
            almanac.seeds("ranges")
        assert exc_info.value.line == 1

    def test_unknown_seed_mode(self):
        with pytest.raises(AlmanacParseError, match="Unknown seed mode"):
            parse_almanac("seeds: 1\n").seeds("pairs")

    def test_overlapping_rules_reported_at_header(self):
        almanac = parse_almanac("seeds: 1\n\na-to-b map:\n0 10 10\n100 15 10\n")
        with pytest.raises(AlmanacParseError, match="overlap") as exc_info:
            build_pipeline(almanac)
        assert exc_info.value.line == 3

    def test_duplicate_block(self):
        almanac = parse_almanac("seeds: 1\na-to-b map:\na-to-c map:\n")
        with pytest.raises(AlmanacParseError, match="already registered"):
            build_pipeline(almanac)

    def test_seed_value_above_u64(self):
        almanac = parse_almanac("seeds: 1 {}\na-to-b map:\n".format(2 ** 64))
        with pytest.raises(AlmanacParseError, match="64-bit") as exc_info:
            almanac.seeds("values")
        assert exc_info.value.line == 1

    def test_largest_seed_value_accepted(self):
        assert parse_almanac("seeds: {}\n".format(2 ** 64 - 1)).seeds() == [2 ** 64 - 1]

    def test_number_above_u64(self):
        almanac = parse_almanac("seeds: 1\na-to-b map:\n0 {} 1\n".format(2 ** 64))
        with pytest.raises(AlmanacParseError, match="64-bit"):
            build_pipeline(almanac)
