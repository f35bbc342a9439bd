"""Transform result: the rewritten tree plus the diagnostics collected on it."""

from __future__ import annotations

from dataclasses import dataclass, field

from fluidtype.model.diagnostic import Diagnostic, Severity
from fluidtype.stylesheet.model import Node, Root, Rule
from fluidtype.stylesheet.printer import to_css


@dataclass
class Result:
    """Outcome of running transforms over one style sheet."""

    root: Root
    messages: list[Diagnostic] = field(default_factory=list)

    @property
    def css(self) -> str:
        return to_css(self.root)

    def warn(self, text: str, node: Node | None = None, plugin: str = "") -> Diagnostic:
        """Record a warning about *node* and return it."""
        source = node.source if node is not None else None
        diagnostic = Diagnostic(
            plugin=plugin,
            severity=Severity.WARNING,
            text=text,
            selector=node.selector if isinstance(node, Rule) else None,
            line=source.line if source else None,
            column=source.column if source else None,
        )
        self.messages.append(diagnostic)
        return diagnostic

    def warnings(self) -> list[Diagnostic]:
        return [m for m in self.messages if m.is_warning]
