"""One-call entry point: parse, transform, and return the result."""

from __future__ import annotations

from fluidtype.model.result import Result
from fluidtype.stylesheet.parser import parse_stylesheet
from fluidtype.transforms import apply_transforms
from fluidtype.transforms.fluid import FluidTypographyOptions, FluidTypographyTransform


def process(
    css: str,
    options: FluidTypographyOptions | None = None,
    source_name: str | None = None,
) -> Result:
    """Parse *css*, rewrite its fluid declarations, and return the Result.

    ``result.css`` holds the output text and ``result.warnings()`` the
    non-fatal diagnostics. Raises CssSyntaxError on unparseable input or on
    a fluid size without a unit.
    """
    root = parse_stylesheet(css, name=source_name)
    return apply_transforms(root, [FluidTypographyTransform(options)])
