"""Lark-based parser that turns CSS source into a style-sheet tree."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from fluidtype.stylesheet.errors import CssSyntaxError
from fluidtype.stylesheet.model import AtRule, Declaration, Node, Position, Root, Rule

__all__ = ["parse_stylesheet"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


def _position(token: Token) -> Position | None:
    if token.line is None or token.column is None:
        return None
    return Position(line=token.line, column=token.column)


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into tree model nodes."""

    def declaration(self, items: list[Token]) -> Declaration:
        prop, value = items
        return Declaration(prop=str(prop), value=str(value).strip(), source=_position(prop))

    def rule(self, items: list[object]) -> Rule:
        selector = items[0]
        assert isinstance(selector, Token)
        decls = [item for item in items[1:] if isinstance(item, Declaration)]
        return Rule(selector=str(selector).strip(), nodes=decls, source=_position(selector))

    def block(self, items: list[Node]) -> list[Node]:
        return list(items)

    def at_rule(self, items: list[object]) -> AtRule:
        keyword = items[0]
        assert isinstance(keyword, Token)
        params = ""
        body: list[Node] | None = None
        for item in items[1:]:
            if isinstance(item, Token):
                params = str(item).strip()
            elif isinstance(item, list):
                body = item
        return AtRule(
            name=str(keyword)[1:],
            params=params,
            nodes=body if body is not None else [],
            bodyless=body is None,
            source=_position(keyword),
        )

    def start(self, items: list[Node]) -> list[Node]:
        return list(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def _reason(exc: UnexpectedInput) -> str:
    if isinstance(exc, UnexpectedEOF):
        return "Unclosed block"
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            return "Unclosed block"
        return f"Unexpected {str(exc.token)!r}"
    if isinstance(exc, UnexpectedCharacters):
        return "Unknown word"
    return "Invalid CSS"


def _location(exc: UnexpectedInput, attr: str) -> int | None:
    value = getattr(exc, attr, None)
    if isinstance(value, int) and value > 0:
        return value
    return None


def parse_stylesheet(source: str, name: str | None = None) -> Root:
    """Parse CSS *source* into a Root node.

    *name* (usually a file path) is recorded on the Root and appears in the
    location of any error raised while parsing or transforming the tree.
    """
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        raise CssSyntaxError(
            _reason(e),
            line=_location(e, "line"),
            column=_location(e, "column"),
            source=source,
            file=name,
        ) from e
    nodes = StylesheetTransformer().transform(tree)
    return Root(nodes=nodes, input_css=source, input_name=name)
