"""Almanac text parsing: seeds line and "X-to-Y map" blocks.

WHY: The engine consumes structured rules, but its input arrives as a
plain text document. This module is the only place that knows the text
layout; the core never sees a string.

HOW: parse_almanac() reads the document line by line. A seeds line
("seeds: 79 14 55 13") names the starting category and lists numbers.
Each block header ("seed-to-soil map:") opens a new MapBlock; the rows
that follow are (target_start, source_start, length) triples. Blank
lines are ignored. build_pipeline() turns the blocks into CategoryMaps
inside a Pipeline.

RULES:
- Exactly one seeds line; its label is singularised for the category
  ("seeds" -> "seed")
- Header format: <source>-to-<target> map:
- Rows hold exactly three unsigned integers and must follow a header
- Seed mode "values": seeds are numbers; "ranges": (start, length) pairs
- Every problem raises AlmanacParseError with the 1-based line number
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from range_remapper.core.category_map import CategoryMap
from range_remapper.core.intervals import MAX_VALUE, Interval
from range_remapper.core.pipeline import Pipeline

_SEEDS_RE = re.compile(r"^([a-z][a-z0-9_]*):(.*)$")
_HEADER_RE = re.compile(r"^([a-z][a-z0-9_]*)-to-([a-z][a-z0-9_]*)\s+map\s*:$")
_NUMBERS_RE = re.compile(r"^\d+(\s+\d+)*$")


class AlmanacParseError(ValueError):
    """Raised when almanac text does not follow the expected layout.

    RULES:
    - line is the 1-based line number, or None when the problem is not
      tied to one line (e.g. a missing seeds line)
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = "line {}: {}".format(line, message)
        super().__init__(message)


@dataclass
class MapBlock:
    """One "X-to-Y map" block: its categories and raw rows."""

    source: str
    target: str
    line: int
    triples: List[Tuple[int, int, int]] = field(default_factory=list)


@dataclass
class Almanac:
    """Structured almanac: starting category, seed numbers and map blocks."""

    seed_category: str
    seed_numbers: List[int]
    seed_line: int
    blocks: List[MapBlock]

    def seeds(self, seed_mode: str = "values") -> List[Union[int, Interval]]:
        """Seeds interpreted for ``seed_mode`` ("values" or "ranges").

        In ranges mode consecutive numbers form (start, length) pairs.

        Raises:
            AlmanacParseError: On an odd count in ranges mode, a seed
                number outside the unsigned 64-bit range in values mode,
                or an unknown mode.
        """
        if seed_mode == "values":
            for number in self.seed_numbers:
                if number >= MAX_VALUE:
                    raise AlmanacParseError(
                        "seed {} is outside the unsigned 64-bit range".format(number),
                        line=self.seed_line,
                    )
            return list(self.seed_numbers)
        if seed_mode != "ranges":
            raise AlmanacParseError("Unknown seed mode '{}'".format(seed_mode))

        if len(self.seed_numbers) % 2:
            raise AlmanacParseError(
                "seed ranges need (start, length) pairs, got {} numbers".format(
                    len(self.seed_numbers)
                ),
                line=self.seed_line,
            )
        starts = self.seed_numbers[0::2]
        lengths = self.seed_numbers[1::2]
        try:
            return [Interval.from_length(start, length) for start, length in zip(starts, lengths)]
        except ValueError as exc:
            raise AlmanacParseError(str(exc), line=self.seed_line) from exc


def _singular(label: str) -> str:
    if len(label) > 1 and label.endswith("s"):
        return label[:-1]
    return label


def _numbers(text: str) -> List[int]:
    return [int(part) for part in text.split()]


def parse_almanac(text: str) -> Almanac:
    """Parse almanac text into seeds and map blocks.

    Args:
        text: The full document.

    Returns:
        An Almanac with the raw seed numbers and one MapBlock per header.

    Raises:
        AlmanacParseError: On any line that is not a seeds line, a header,
            a three-number row or blank; on duplicate seeds lines; when no
            seeds line exists.
    """
    seed_category: Optional[str] = None
    seed_numbers: List[int] = []
    seed_line = 0
    blocks: List[MapBlock] = []
    current: Optional[MapBlock] = None

    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue

        header = _HEADER_RE.match(line)
        if header:
            current = MapBlock(source=header.group(1), target=header.group(2), line=number)
            blocks.append(current)
            continue

        seeds = _SEEDS_RE.match(line)
        if seeds:
            if seed_category is not None:
                raise AlmanacParseError("duplicate seeds line", line=number)
            values = seeds.group(2).strip()
            if values and not _NUMBERS_RE.match(values):
                raise AlmanacParseError("seeds must be unsigned integers", line=number)
            seed_category = _singular(seeds.group(1))
            seed_numbers = _numbers(values)
            seed_line = number
            current = None
            continue

        if not _NUMBERS_RE.match(line):
            raise AlmanacParseError("unrecognised line {!r}".format(line), line=number)
        if current is None:
            raise AlmanacParseError("rule row outside of a map block", line=number)
        row = _numbers(line)
        if len(row) != 3:
            raise AlmanacParseError(
                "rule rows need 3 numbers (target start, source start, length), "
                "got {}".format(len(row)),
                line=number,
            )
        current.triples.append((row[0], row[1], row[2]))

    if seed_category is None:
        raise AlmanacParseError("no seeds line found")

    return Almanac(
        seed_category=seed_category,
        seed_numbers=seed_numbers,
        seed_line=seed_line,
        blocks=blocks,
    )


def build_pipeline(almanac: Almanac) -> Pipeline:
    """Build one CategoryMap per block and insert them into a Pipeline.

    Raises:
        AlmanacParseError: When a block's rules are invalid (bad bounds,
            overlapping sources) or a source category has two blocks.
    """
    pipeline = Pipeline()
    for block in almanac.blocks:
        try:
            pipeline.insert(CategoryMap.from_triples(block.source, block.target, block.triples))
        except ValueError as exc:
            raise AlmanacParseError(str(exc), line=block.line) from exc
    return pipeline


def load_almanac(path: Union[str, Path]) -> Almanac:
    """Read and parse an almanac file (UTF-8)."""
    return parse_almanac(Path(path).read_text(encoding="utf-8"))
