"""Detection of the document's root font size, used for px -> rem conversion."""

from __future__ import annotations

from fluidtype.fluid.resolver import FLUID_MARKER
from fluidtype.stylesheet.model import Rule

ROOT_SELECTORS = frozenset({":root", "html"})


def detect_root_font_size(rule: Rule, current: str) -> str:
    """Return the pixel font-size *rule* sets on the root element, else *current*.

    Only rules whose selector is exactly ``:root`` or ``html`` count. If the
    rule has several pixel font-sizes the last one wins. Fluid font-sizes are
    skipped since they have no single value.
    """
    if rule.selector.strip() not in ROOT_SELECTORS:
        return current
    size = current
    for decl in rule.walk_decls("font-size"):
        if "px" in decl.value and FLUID_MARKER not in decl.value:
            size = decl.value
    return size
