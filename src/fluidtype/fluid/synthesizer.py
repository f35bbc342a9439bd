"""Build the fluid calc() declaration and its boundary media queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fluidtype.fluid.context import PLUGIN_NAME, TransformContext
from fluidtype.fluid.units import format_number, magnitude, parse_dimension, px_to_rem
from fluidtype.model.params import ParameterSet, Unit
from fluidtype.stylesheet.model import AtRule, Declaration, Rule

logger = logging.getLogger("fluidtype")


@dataclass
class SynthesizedOutput:
    """The nodes that replace one fluid declaration.

    Attributes:
        fluid_decl: ``<prop>: calc(...)``, replaces the fluid declaration.
        variable_decl: ``--<prop>: calc(...)``, inserted after it.
        min_media: ``@media screen and (max-width: <min_width>)`` block
            pinning the property to the minimum size.
        max_media: ``@media screen and (min-width: <max_width>)`` block
            pinning the property to the maximum size.
    """

    fluid_decl: Declaration
    variable_decl: Declaration
    min_media: AtRule
    max_media: AtRule


def fluid_expression(min_size: str, max_size: str, min_width: str, max_width: str) -> str:
    """Return the calc() that is *min_size* at *min_width* and *max_size* at *max_width*."""
    size_diff = magnitude(max_size) - magnitude(min_size)
    range_diff = magnitude(max_width) - magnitude(min_width)
    return (
        f"calc({min_size} + {format_number(size_diff)}"
        f" * ((100vw - {min_width}) / {format_number(range_diff)}))"
    )


def _reconcile_widths(
    rule: Rule,
    params: ParameterSet,
    size_unit: Unit,
    width_unit: Unit,
    context: TransformContext,
) -> tuple[str, str]:
    """Express the width bounds in a unit that can be subtracted from 100vw."""
    if size_unit is Unit.REM and width_unit is Unit.PX:
        return (
            px_to_rem(params.min_width, context.root_font_size),
            px_to_rem(params.max_width, context.root_font_size),
        )
    if size_unit is width_unit or (size_unit is Unit.REM and width_unit is Unit.EM):
        return params.min_width, params.max_width
    context.warn(rule, "this combination of units is not supported")
    return params.min_width, params.max_width


def _media_block(query: str, rule: Rule, prop: str, value: str) -> AtRule:
    target = rule.clone(
        nodes=[
            Declaration(prop=prop, value=value),
            Declaration(prop=f"--{prop}", value=value),
        ]
    )
    return AtRule(name="media", params=query, nodes=[target])


def build_rules(
    rule: Rule, prop: str, params: ParameterSet, context: TransformContext
) -> SynthesizedOutput:
    """Synthesize the replacement nodes for fluid *prop* on *rule*.

    Raises CssSyntaxError when the minimum size has no px/rem/em unit.
    """
    min_size, max_size = parse_dimension(params.min_size), parse_dimension(params.max_size)
    min_width, max_width = parse_dimension(params.min_width), parse_dimension(params.max_width)
    size_unit, width_unit = min_size.unit, min_width.unit

    if size_unit is Unit.UNRECOGNIZED:
        raise rule.error("sizes with unitless values are not supported", plugin=PLUGIN_NAME)

    if size_unit is not max_size.unit or width_unit is not max_width.unit:
        context.warn(rule, "min/max unit types must match")

    lower, upper = _reconcile_widths(rule, params, size_unit, width_unit, context)
    expression = fluid_expression(params.min_size, params.max_size, lower, upper)

    return SynthesizedOutput(
        fluid_decl=Declaration(prop=prop, value=expression),
        variable_decl=Declaration(prop=f"--{prop}", value=expression),
        min_media=_media_block(
            f"screen and (max-width: {params.min_width})", rule, prop, params.min_size
        ),
        max_media=_media_block(
            f"screen and (min-width: {params.max_width})", rule, prop, params.max_size
        ),
    )


def splice(
    rule: Rule,
    decl: Declaration,
    output: SynthesizedOutput,
    consumed: list[Declaration],
) -> None:
    """Write *output* into the tree in place of the fluid declaration *decl*.

    Resulting document order: the rule, then the max-width block, then the
    min-width block.
    """
    for node in consumed:
        node.remove()

    output.fluid_decl.source = decl.source
    output.variable_decl.source = decl.source
    container = decl.parent
    if container is None:
        raise ValueError("Fluid declaration is not attached to a rule")
    container.insert_after(decl, output.variable_decl)
    decl.replace_with(output.fluid_decl)

    parent = rule.parent
    if parent is None:
        raise ValueError("Rule is not attached to a style sheet")
    parent.insert_after(rule, output.min_media)
    parent.insert_after(rule, output.max_media)
    logger.info("Rewrote fluid %s on %r", decl.prop, rule.selector)
