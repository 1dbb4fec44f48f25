"""Report formatter registry.

WHY: The CLI needs a single lookup to find a formatter by key. A central
dict makes adding a format trivial: create the class, import it here,
add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["json"]()``.

RULES:
- Keys are snake_case identifiers (used by --format and config)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from range_remapper.formatters.json_report import JSONReportFormatter
from range_remapper.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from range_remapper.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "plain_text": PlainTextFormatter,
    "json": JSONReportFormatter,
}
