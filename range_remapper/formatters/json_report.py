"""JSON report formatter with schema validation.

WHY: Scripts and other tools consume the result; they need a stable,
machine-readable structure rather than the plain text summary.

HOW: Builds a dict from the MappingReport: categories, seed mode, chain,
lowest value and one entry per seed with its mapped intervals as
{"start", "end"} objects. The dict is validated against
report_schema.json (shipped next to this module) before serialising.

RULES:
- Intervals are half-open {"start": int, "end": int} objects
- "lowest" is null when no seed reached the target
- Schema validation is mandatory; raises on invalid output
- Output suffix: ".json"; media type: "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from range_remapper.core.intervals import Interval
from range_remapper.core.report import MappingReport
from range_remapper.formatters.base import BaseFormatter, FormatterOutput

_SCHEMA_PATH = Path(__file__).resolve().parent / "report_schema.json"


def _load_schema() -> dict[str, Any]:
    """Load the report JSON schema from disk.

    Cached at module level after first call to avoid repeated I/O.
    """
    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: dict[str, Any] | None = None


def _get_schema() -> dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def _interval_dict(interval: Interval) -> dict[str, int]:
    return {"start": interval.start, "end": interval.end}


class JSONReportFormatter(BaseFormatter):
    """Machine-readable report, validated against report_schema.json."""

    @property
    def name(self) -> str:
        return "JSON report"

    def format(self, report: MappingReport) -> FormatterOutput:
        """Render the report as indented JSON.

        Raises:
            jsonschema.ValidationError: If the generated JSON does not
                conform to the report schema.
        """
        output: dict[str, Any] = {
            "source": report.source_category,
            "target": report.target_category,
            "seed_mode": report.seed_mode,
            "chain": list(report.chain),
            "lowest": report.lowest,
            "unmapped": report.unmapped_count,
            "seeds": [
                {
                    "seed": _interval_dict(result.seed),
                    "mapped": [_interval_dict(interval) for interval in result.mapped],
                    "lowest": result.lowest,
                }
                for result in report.results
            ],
        }

        jsonschema.validate(instance=output, schema=_get_schema())

        return FormatterOutput(
            suffix=".json",
            content=json.dumps(output, indent=2) + "\n",
            media_type="application/json",
        )
