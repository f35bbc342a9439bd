"""Diagnostic model: structured messages reported while transforming CSS."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about the style sheet being transformed.

    Attributes:
        plugin: Name of the transform that produced this diagnostic.
        severity: How serious the issue is.
        text: Human-readable description of the problem.
        selector: Selector of the rule involved, if applicable.
        line: 1-based line of the node involved, if known.
        column: 1-based column of the node involved, if known.
    """

    plugin: str
    severity: Severity
    text: str
    selector: str | None = None
    line: int | None = None
    column: int | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" [{self.line}:{self.column}]"
        if self.selector:
            location += f" [{self.selector}]"
        return f"{self.severity.value}{location}: {self.text} ({self.plugin})"
