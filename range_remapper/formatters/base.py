"""Abstract base formatter and output container.

WHY: Every output format consumes the same MappingReport but produces
different content. This base class enforces one interface so the CLI
can work with any formatter generically.

HOW: BaseFormatter is an ABC with a ``name`` property and a ``format()``
method. FormatterOutput is a plain dataclass bundling the content with
its MIME type and a file suffix.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``suffix`` starts with a dot, e.g. ``".json"``
- Formatters never write files; the CLI decides where content goes
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from range_remapper.core.report import MappingReport


@dataclass
class FormatterOutput:
    """Rendered report content.

    Attributes:
        suffix: File suffix used when saving, e.g. ``".txt"``.
        content: The rendered text.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all report formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain text'."""

    @abstractmethod
    def format(self, report: MappingReport) -> FormatterOutput:
        """Render the report.

        Args:
            report: Seeds, their mapped intervals and the lowest value.

        Returns:
            A FormatterOutput with the rendered content.
        """
