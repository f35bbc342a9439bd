"""Style-sheet tree model: Root, Rule, AtRule, and Declaration nodes.

Nodes are mutable and linked to their parent container, so a transform can
rewrite the tree in place::

    rule.insert_after(decl, Declaration(prop="--size", value="1rem"))
    decl.replace_with(Declaration(prop="font-size", value="1rem"))
    rule.parent.insert_after(rule, AtRule(name="media", params="print"))
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import TypeVar, Union

from fluidtype.stylesheet.errors import CssSyntaxError

PropFilter = Union[str, re.Pattern, None]

_N = TypeVar("_N", bound="Node")


@dataclass(frozen=True)
class Position:
    """A 1-based line/column location in the input CSS."""

    line: int
    column: int


@dataclass(eq=False)
class Node:
    """Base class for every node in the tree.

    Nodes compare by identity so that a container can locate an exact child
    even when two declarations look the same (e.g. a fallback ``font-size``).
    """

    source: Position | None = field(default=None, kw_only=True)
    parent: Container | None = field(default=None, kw_only=True, repr=False)

    def root(self) -> Root | None:
        """Return the Root this node is attached to, if any."""
        node: Node | None = self
        while node is not None and not isinstance(node, Root):
            node = node.parent
        return node

    def remove(self) -> None:
        """Detach this node from its parent. Detached nodes are left as-is."""
        if self.parent is not None:
            self.parent.remove_child(self)

    def replace_with(self, *nodes: Node) -> None:
        """Put *nodes* where this node is and detach this node."""
        if self.parent is None:
            raise ValueError("Cannot replace a node that has no parent")
        self.parent.insert_after(self, *nodes)
        self.remove()

    def clone(self: _N, **overrides: object) -> _N:
        """Return a detached copy of this node, with optional field overrides."""
        overrides.setdefault("parent", None)
        return replace(self, **overrides)  # type: ignore[arg-type]

    def error(self, reason: str, plugin: str | None = None) -> CssSyntaxError:
        """Build a CssSyntaxError pointing at this node."""
        root = self.root()
        return CssSyntaxError(
            reason,
            line=self.source.line if self.source else None,
            column=self.source.column if self.source else None,
            source=root.input_css if root else None,
            file=root.input_name if root else None,
            plugin=plugin,
        )


@dataclass(eq=False)
class Declaration(Node):
    """A single ``prop: value`` declaration."""

    prop: str
    value: str


@dataclass(eq=False)
class Container(Node):
    """A node holding an ordered list of child nodes."""

    nodes: list[Node] = field(default_factory=list, kw_only=True)

    def __post_init__(self) -> None:
        for child in self.nodes:
            child.parent = self

    # --- mutation -------------------------------------------------------------

    def append(self, *nodes: Node) -> Container:
        """Add *nodes* to the end of this container."""
        for node in nodes:
            self._adopt(node)
            self.nodes.append(node)
        return self

    def insert_after(self, existing: Node, *nodes: Node) -> Container:
        """Insert *nodes*, in order, directly after the *existing* child."""
        index = self.index(existing)
        for offset, node in enumerate(nodes, start=1):
            self._adopt(node)
            self.nodes.insert(index + offset, node)
        return self

    def remove_child(self, child: Node) -> None:
        self.nodes.pop(self.index(child))
        child.parent = None

    def index(self, child: Node) -> int:
        """Return the position of *child* (by identity) in this container."""
        for i, node in enumerate(self.nodes):
            if node is child:
                return i
        raise ValueError(f"{child!r} is not a child of this container")

    def _adopt(self, node: Node) -> None:
        if node.parent is not None:
            node.remove()
        node.parent = self

    def clone(self, **overrides: object):  # type: ignore[override]
        """Return a detached deep copy, unless *nodes* is given as an override."""
        if "nodes" not in overrides:
            overrides["nodes"] = [child.clone() for child in self.nodes]
        return super().clone(**overrides)

    # --- traversal ------------------------------------------------------------

    def walk(self) -> Iterator[Node]:
        """Yield every descendant, depth-first in document order."""
        for child in list(self.nodes):
            yield child
            if isinstance(child, Container):
                yield from child.walk()

    def walk_rules(self) -> Iterator[Rule]:
        """Yield every descendant Rule, including rules nested in at-rules."""
        for node in self.walk():
            if isinstance(node, Rule):
                yield node

    def walk_decls(self, prop: PropFilter = None) -> Iterator[Declaration]:
        """Yield descendant declarations, optionally filtered by property.

        *prop* may be an exact property name or a compiled pattern matched
        against the whole property name.
        """
        for node in self.walk():
            if not isinstance(node, Declaration):
                continue
            if prop is None:
                yield node
            elif isinstance(prop, str):
                if node.prop == prop:
                    yield node
            elif prop.fullmatch(node.prop):
                yield node


@dataclass(eq=False)
class Rule(Container):
    """A style rule: ``selector { declarations }``."""

    selector: str


@dataclass(eq=False)
class AtRule(Container):
    """An at-rule such as ``@media screen { ... }`` or ``@import "x.css";``."""

    name: str
    params: str = ""
    bodyless: bool = False


@dataclass(eq=False)
class Root(Container):
    """The top of a parsed style sheet.

    ``input_css`` and ``input_name`` describe where the tree came from, so
    errors raised on any node can point back at the original text.
    """

    input_css: str | None = None
    input_name: str | None = None
