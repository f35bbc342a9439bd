"""Base protocol for style-sheet transforms."""

from __future__ import annotations

from typing import Protocol

from fluidtype.model.result import Result
from fluidtype.stylesheet.model import Root


class Transform(Protocol):
    """An in-place rewrite of a style-sheet tree that reports into *result*."""

    def apply(self, root: Root, result: Result) -> Root: ...
