"""Unit tests for the mapping report builder.

WHY: The report is what the CLI and formatters present; its lowest
value is the answer users ask for.
"""

import pytest

from range_remapper.core.intervals import Interval
from range_remapper.core.report import build_report


class TestBuildReportValues:

    def test_lowest_location(self, sample_almanac, sample_pipeline):
        report = build_report(sample_pipeline, sample_almanac.seeds("values"), "seed", "location")
        assert report.lowest == 35
        assert report.seed_mode == "values"
        assert report.unmapped_count == 0

    def test_per_seed_results(self, sample_pipeline, sample_locations):
        report = build_report(sample_pipeline, list(sample_locations), "seed", "location")
        for result, (seed, location) in zip(report.results, sample_locations.items()):
            assert result.seed == Interval(seed, seed + 1)
            assert result.mapped == [Interval(location, location + 1)]
            assert result.lowest == location

    def test_chain_stops_at_target(self, sample_pipeline):
        report = build_report(sample_pipeline, [79], "seed", "water")
        assert report.chain == ["seed", "soil", "fertilizer", "water"]
        assert report.lowest == 81

    def test_unreachable_target(self, sample_pipeline, sample_chain):
        report = build_report(sample_pipeline, [79, 14], "seed", "nowhere")
        assert report.lowest is None
        assert report.unmapped_count == 2
        assert report.chain == sample_chain
        assert not report.results[0].reached_target


class TestBuildReportRanges:

    def test_lowest_location(self, sample_almanac, sample_pipeline):
        report = build_report(
            sample_pipeline, sample_almanac.seeds("ranges"), "seed", "location", "ranges"
        )
        assert report.lowest == 46
        assert [result.seed for result in report.results] == [Interval(79, 93), Interval(55, 68)]

    def test_each_result_conserves_length(self, sample_almanac, sample_pipeline):
        report = build_report(
            sample_pipeline, sample_almanac.seeds("ranges"), "seed", "location", "ranges"
        )
        for result in report.results:
            assert sum(interval.length for interval in result.mapped) == result.seed.length


class TestBuildReportErrors:

    def test_unknown_mode(self, sample_pipeline):
        with pytest.raises(ValueError, match="Unknown seed mode"):
            build_report(sample_pipeline, [1], "seed", "location", "pairs")

    def test_interval_in_values_mode(self, sample_pipeline):
        with pytest.raises(ValueError, match="not a number"):
            build_report(sample_pipeline, [Interval(1, 5)], "seed", "location", "values")

    def test_number_in_ranges_mode(self, sample_pipeline):
        with pytest.raises(ValueError, match="not an interval"):
            build_report(sample_pipeline, [1], "seed", "location", "ranges")
