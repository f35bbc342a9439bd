"""Per-invocation state shared by the fluid resolver and synthesizer."""

from __future__ import annotations

from dataclasses import dataclass

from fluidtype.model.diagnostic import Diagnostic
from fluidtype.model.result import Result
from fluidtype.stylesheet.model import Node

PLUGIN_NAME = "fluidtype"
DEFAULT_ROOT_FONT_SIZE = "16px"


@dataclass
class TransformContext:
    """State for one run of the fluid transform over one style sheet.

    ``root_font_size`` starts at the configured default and is replaced each
    time a ``:root``/``html`` rule with a pixel font-size is walked, so later
    rem conversions in the same run use the most recent value. A new context
    is created for every run.
    """

    result: Result
    root_font_size: str = DEFAULT_ROOT_FONT_SIZE

    def warn(self, node: Node, text: str) -> Diagnostic:
        return self.result.warn(text, node=node, plugin=PLUGIN_NAME)
