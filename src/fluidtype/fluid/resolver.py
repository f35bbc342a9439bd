"""Resolve the fluid parameters of one property from a rule's declarations.

Precedence, lowest first:
    1. built-in defaults for the property
    2. the two sizes given after ``fluid`` (``font-size: fluid 14px 20px``)
    3. the range shorthand (``font-range: 420px 1280px``)
    4. the longhand declarations (``min-font-size``, ``upper-font-range``, ...)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field

from fluidtype.fluid.units import numeric_tokens
from fluidtype.model.params import ParameterSet
from fluidtype.stylesheet.model import Declaration, Rule

logger = logging.getLogger("fluidtype")

FLUID_MARKER = "fluid"

DEFAULT_PARAMS: dict[str, ParameterSet] = {
    "font-size": ParameterSet(
        min_size="12px", max_size="21px", min_width="420px", max_width="1280px"
    ),
    "line-height": ParameterSet(
        min_size="1.2em", max_size="1.8em", min_width="420px", max_width="1280px"
    ),
    "letter-spacing": ParameterSet(
        min_size="0px", max_size="4px", min_width="420px", max_width="1280px"
    ),
}

RANGE_PROPS: dict[str, str] = {
    "font-size": "font-range",
    "line-height": "line-height-range",
    "letter-spacing": "letter-spacing-range",
}

LONGHAND_PROPS: dict[str, dict[str, str]] = {
    "font-size": {
        "min_size": "min-font-size",
        "max_size": "max-font-size",
        "min_width": "lower-font-range",
        "max_width": "upper-font-range",
    },
    "line-height": {
        "min_size": "min-line-height",
        "max_size": "max-line-height",
        "min_width": "lower-line-height-range",
        "max_width": "upper-line-height-range",
    },
    "letter-spacing": {
        "min_size": "min-letter-spacing",
        "max_size": "max-letter-spacing",
        "min_width": "lower-letter-spacing-range",
        "max_width": "upper-letter-spacing-range",
    },
}


@dataclass
class Resolution:
    """Resolved parameters plus the declarations they were read from.

    ``consumed`` holds the range and longhand declarations; they only exist
    to configure the fluid size and are removed from the tree on splicing.
    """

    params: ParameterSet
    consumed: list[Declaration] = field(default_factory=list)


def resolve_params(
    rule: Rule,
    prop: str,
    defaults: Mapping[str, ParameterSet] | None = None,
) -> Resolution:
    """Resolve the fluid parameters for *prop* declared on *rule*.

    *defaults* may cover only some properties; the built-in defaults fill
    in the rest. The tree is not modified.
    """
    base = DEFAULT_PARAMS[prop] if defaults is None else defaults.get(prop, DEFAULT_PARAMS[prop])
    values = asdict(base)
    consumed: list[Declaration] = []

    for decl in rule.walk_decls(prop):
        if FLUID_MARKER not in decl.value:
            continue
        tokens = numeric_tokens(decl.value)
        if len(tokens) >= 2:
            values["min_size"], values["max_size"] = tokens[0], tokens[1]

    for decl in rule.walk_decls(RANGE_PROPS[prop]):
        widths = decl.value.split()
        if len(widths) >= 2:
            values["min_width"], values["max_width"] = widths[0], widths[1]
        consumed.append(decl)

    for param, longhand in LONGHAND_PROPS[prop].items():
        for decl in rule.walk_decls(longhand):
            values[param] = decl.value.strip()
            consumed.append(decl)

    params = ParameterSet(**values)
    logger.debug("Resolved %s on %r: %s", prop, rule.selector, params)
    return Resolution(params=params, consumed=consumed)
