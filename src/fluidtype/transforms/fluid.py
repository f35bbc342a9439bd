"""Fluid typography transform: rewrites ``fluid`` sizes into calc() + media queries.

Example input::

    .title { font-size: fluid 16px 32px; font-range: 400px 1200px; }

becomes a ``calc()`` font-size (plus a ``--font-size`` mirror) that scales
between 16px and 32px as the viewport grows from 400px to 1200px, followed
by two media blocks pinning the size outside that range.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from fluidtype.fluid.context import DEFAULT_ROOT_FONT_SIZE, PLUGIN_NAME, TransformContext
from fluidtype.fluid.resolver import DEFAULT_PARAMS, FLUID_MARKER, resolve_params
from fluidtype.fluid.root_size import detect_root_font_size
from fluidtype.fluid.synthesizer import SynthesizedOutput, build_rules, splice
from fluidtype.model.params import ParameterSet
from fluidtype.model.result import Result
from fluidtype.stylesheet.model import Declaration, Root, Rule

logger = logging.getLogger("fluidtype")

FLUID_PROPS = re.compile(r"font-size|line-height|letter-spacing")


@dataclass(frozen=True)
class FluidTypographyOptions:
    """Configuration for :class:`FluidTypographyTransform`.

    Attributes:
        defaults: Parameters used for any bound a rule does not declare,
            keyed by property name.
        root_font_size: Root font size assumed until a ``:root``/``html``
            rule declares one.
    """

    defaults: Mapping[str, ParameterSet] = field(default_factory=lambda: dict(DEFAULT_PARAMS))
    root_font_size: str = DEFAULT_ROOT_FONT_SIZE


@dataclass
class PlannedRewrite:
    """One fluid declaration, with everything needed to rewrite it."""

    rule: Rule
    decl: Declaration
    params: ParameterSet
    output: SynthesizedOutput
    consumed: list[Declaration] = field(default_factory=list)


class FluidTypographyTransform:
    """Rewrite every fluid font-size, line-height and letter-spacing declaration.

    Rules are walked in document order, including rules nested in at-rules.
    Every rewrite is planned before the tree is touched, so a fatal error
    (a unitless minimum size) leaves the tree exactly as it was.
    Declarations without the ``fluid`` marker, such as fallbacks, are left
    alone.
    """

    name = PLUGIN_NAME

    def __init__(self, options: FluidTypographyOptions | None = None) -> None:
        self.options = options or FluidTypographyOptions()

    def apply(self, root: Root, result: Result) -> Root:
        rewrites = self.plan(root, result)
        for rewrite in rewrites:
            splice(rewrite.rule, rewrite.decl, rewrite.output, rewrite.consumed)
        logger.debug("Applied %d fluid rewrite(s)", len(rewrites))
        return root

    def plan(self, root: Root, result: Result) -> list[PlannedRewrite]:
        """Resolve and synthesize every fluid declaration without mutating *root*."""
        context = TransformContext(result=result, root_font_size=self.options.root_font_size)
        rewrites: list[PlannedRewrite] = []
        for rule in list(root.walk_rules()):
            root_size = detect_root_font_size(rule, context.root_font_size)
            if root_size != context.root_font_size:
                logger.debug("Root font size set to %s by %r", root_size, rule.selector)
                context.root_font_size = root_size

            for decl, superseded in _fluid_declarations(rule):
                resolution = resolve_params(rule, decl.prop, self.options.defaults)
                output = build_rules(rule, decl.prop, resolution.params, context)
                rewrites.append(
                    PlannedRewrite(
                        rule=rule,
                        decl=decl,
                        params=resolution.params,
                        output=output,
                        consumed=resolution.consumed + superseded,
                    )
                )
        return rewrites


def _fluid_declarations(rule: Rule) -> list[tuple[Declaration, list[Declaration]]]:
    """Pair the last fluid declaration of each property with the ones it overrides.

    Earlier fluid declarations of the same property are dropped on splicing;
    only the last one is rewritten.
    """
    latest: dict[str, Declaration] = {}
    superseded: dict[str, list[Declaration]] = {}
    for decl in rule.walk_decls(FLUID_PROPS):
        if FLUID_MARKER not in decl.value:
            continue
        if decl.prop in latest:
            superseded.setdefault(decl.prop, []).append(latest.pop(decl.prop))
        latest[decl.prop] = decl
    return [(decl, superseded.get(prop, [])) for prop, decl in latest.items()]
