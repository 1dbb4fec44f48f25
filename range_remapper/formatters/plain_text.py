"""Plain text report formatter.

WHY: The default output when running the CLI by hand: the answer first,
then one line per seed so a surprising answer can be traced back.

HOW: First line "lowest <target>: N" (or "none"), then the chain, then
one line per seed. Value seeds print as "79 -> 82"; range seeds print
their interval and the intervals they split into.

RULES:
- First line is always the answer line
- Seeds that did not reach the target print "unmapped"
- No trailing whitespace; content ends with a newline
- Output suffix: ".txt"; media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from range_remapper.core.report import MappingReport, SeedResult
from range_remapper.formatters.base import BaseFormatter, FormatterOutput


def _describe_seed(result: SeedResult, seed_mode: str) -> str:
    if seed_mode == "values":
        seed_text = str(result.seed.start)
    else:
        seed_text = str(result.seed)

    if not result.reached_target:
        return "{} -> unmapped".format(seed_text)

    if seed_mode == "values":
        return "{} -> {}".format(seed_text, result.mapped[0].start)

    return "{} -> {} ({} range{}, lowest {})".format(
        seed_text,
        ", ".join(str(interval) for interval in result.mapped),
        len(result.mapped),
        "" if len(result.mapped) == 1 else "s",
        result.lowest,
    )


class PlainTextFormatter(BaseFormatter):
    """Human-readable summary of a mapping run."""

    @property
    def name(self) -> str:
        return "Plain text"

    def format(self, report: MappingReport) -> FormatterOutput:
        lowest = "none" if report.lowest is None else str(report.lowest)
        lines: List[str] = [
            "lowest {}: {}".format(report.target_category, lowest),
            "chain: {}".format(" -> ".join(report.chain)),
            "{} ({} mode):".format(report.source_category, report.seed_mode),
        ]
        for result in report.results:
            lines.append("  {}".format(_describe_seed(result, report.seed_mode)))

        return FormatterOutput(
            suffix=".txt",
            content="\n".join(lines) + "\n",
            media_type="text/plain",
        )
