"""Text input parsing for the remapper.

WHY: Keeps every text format concern out of the core engine.

HOW: almanac.py parses the seeds/map-block document and builds a
Pipeline from it.
"""

from range_remapper.parsing.almanac import (
    Almanac,
    AlmanacParseError,
    MapBlock,
    build_pipeline,
    load_almanac,
    parse_almanac,
)

__all__ = [
    "Almanac",
    "AlmanacParseError",
    "MapBlock",
    "build_pipeline",
    "load_almanac",
    "parse_almanac",
]
