from fluidtype.stylesheet.errors import CssSyntaxError
from fluidtype.stylesheet.model import AtRule, Container, Declaration, Node, Position, Root, Rule
from fluidtype.stylesheet.parser import parse_stylesheet
from fluidtype.stylesheet.printer import to_css

__all__ = [
    "parse_stylesheet",
    "to_css",
    "CssSyntaxError",
    "Node",
    "Container",
    "Root",
    "Rule",
    "AtRule",
    "Declaration",
    "Position",
]
