"""Range Remapper: multi-stage, range-based numeric remapping.

WHY: Numbers often have to travel through a chain of piecewise-linear
translation tables (seed -> soil -> ... -> location). Mapping single
numbers is easy; mapping ranges of billions of numbers needs interval
splitting so that matched parts are shifted and unmatched parts kept.

HOW: Three layers: parse (almanac text -> structured rules), map (core
intervals, interval index, category maps, pipeline), report (pluggable
formatters). The core is independently usable and never touches text.

RULES:
- Intervals are half-open [start, end) over unsigned 64-bit integers
- Unmatched numbers pass through a map unchanged
- Range mapping conserves the total count of covered numbers
"""

__version__ = "0.1.0"
