"""Style-sheet error types."""

from __future__ import annotations


class CssSyntaxError(Exception):
    """Raised when CSS cannot be parsed or a declaration cannot be rewritten.

    Attributes:
        reason: The bare error message, without location.
        line: 1-based line of the offending node, if known.
        column: 1-based column of the offending node, if known.
        source: The full input CSS the node came from, if known.
        file: Name of the input (usually a path), if known.
        plugin: Name of the transform that raised the error, if any.
    """

    def __init__(
        self,
        reason: str,
        line: int | None = None,
        column: int | None = None,
        source: str | None = None,
        file: str | None = None,
        plugin: str | None = None,
    ):
        self.reason = reason
        self.line = line
        self.column = column
        self.source = source
        self.file = file
        self.plugin = plugin
        super().__init__(self._format())

    def _format(self) -> str:
        location = self.file or "<css input>"
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        message = f"{location}: {self.reason}"
        if self.plugin:
            message = f"{self.plugin}: {message}"
        return message
