from fluidtype.fluid.context import PLUGIN_NAME, TransformContext
from fluidtype.fluid.resolver import DEFAULT_PARAMS, FLUID_MARKER, Resolution, resolve_params
from fluidtype.fluid.root_size import detect_root_font_size
from fluidtype.fluid.synthesizer import SynthesizedOutput, build_rules, fluid_expression, splice
from fluidtype.fluid.units import format_number, get_unit, numeric_tokens, parse_dimension, px_to_rem

__all__ = [
    "PLUGIN_NAME",
    "TransformContext",
    "DEFAULT_PARAMS",
    "FLUID_MARKER",
    "Resolution",
    "resolve_params",
    "detect_root_font_size",
    "SynthesizedOutput",
    "build_rules",
    "fluid_expression",
    "splice",
    "format_number",
    "get_unit",
    "numeric_tokens",
    "parse_dimension",
    "px_to_rem",
]
