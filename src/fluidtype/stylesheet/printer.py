"""Canonical CSS printer for style-sheet trees.

Output layout:
    - two-space indentation per nesting level
    - one declaration per line, always terminated with ``;``
    - a blank line between top-level statements, and a trailing newline
"""

from __future__ import annotations

from fluidtype.stylesheet.model import AtRule, Container, Declaration, Node, Root, Rule

__all__ = ["to_css"]

INDENT = "  "


def _render_children(container: Container, depth: int) -> list[str]:
    return [_render(child, depth) for child in container.nodes]


def _render_block(header: str, container: Container, depth: int) -> str:
    pad = INDENT * depth
    lines = [f"{pad}{header} {{"]
    lines.extend(_render_children(container, depth + 1))
    lines.append(f"{pad}}}")
    return "\n".join(lines)


def _render(node: Node, depth: int) -> str:
    pad = INDENT * depth
    if isinstance(node, Declaration):
        return f"{pad}{node.prop}: {node.value};"
    if isinstance(node, Rule):
        return _render_block(node.selector, node, depth)
    if isinstance(node, AtRule):
        header = f"@{node.name} {node.params}" if node.params else f"@{node.name}"
        if node.bodyless:
            return f"{pad}{header};"
        return _render_block(header, node, depth)
    raise TypeError(f"Cannot print node of type {type(node).__name__}")


def to_css(root: Root) -> str:
    """Serialize *root* to CSS text."""
    statements = _render_children(root, 0)
    if not statements:
        return ""
    return "\n\n".join(statements) + "\n"
