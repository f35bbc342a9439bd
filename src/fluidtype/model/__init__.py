"""fluidtype model layer -- public type re-exports."""

from fluidtype.model.diagnostic import Diagnostic, Severity
from fluidtype.model.params import Dimension, ParameterSet, Unit
from fluidtype.model.result import Result

__all__ = [
    # params
    "Unit",
    "Dimension",
    "ParameterSet",
    # diagnostic
    "Severity",
    "Diagnostic",
    # result
    "Result",
]
