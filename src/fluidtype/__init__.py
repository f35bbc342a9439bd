"""fluidtype: rewrite fluid font-size, line-height and letter-spacing into responsive CSS."""

__version__ = "0.1.0"

from fluidtype.processor import process  # noqa: E402
from fluidtype.model import Diagnostic, ParameterSet, Result, Severity  # noqa: E402
from fluidtype.stylesheet import CssSyntaxError, parse_stylesheet, to_css  # noqa: E402
from fluidtype.transforms import (  # noqa: E402
    FluidTypographyOptions,
    FluidTypographyTransform,
    apply_transforms,
)

__all__ = [
    "__version__",
    "process",
    "parse_stylesheet",
    "to_css",
    "apply_transforms",
    "FluidTypographyOptions",
    "FluidTypographyTransform",
    "ParameterSet",
    "Result",
    "Diagnostic",
    "Severity",
    "CssSyntaxError",
]
