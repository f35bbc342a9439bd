"""Tests for the mutable style-sheet tree."""

import re

import pytest

from fluidtype.stylesheet import AtRule, CssSyntaxError, Declaration, Position, Root, Rule, parse_stylesheet


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rule(*decls: tuple[str, str], selector: str = ".foo") -> Rule:
    return Rule(selector=selector, nodes=[Declaration(prop=p, value=v) for p, v in decls])


def _props(rule: Rule) -> list[str]:
    return [d.prop for d in rule.nodes]


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------


class TestAppend:
    def test_append_sets_parent(self):
        rule = Rule(selector=".a")
        decl = Declaration(prop="color", value="red")
        rule.append(decl)
        assert rule.nodes == [decl]
        assert decl.parent is rule

    def test_append_moves_attached_node(self):
        first = _rule(("color", "red"))
        second = Rule(selector=".b")
        decl = first.nodes[0]
        second.append(decl)
        assert first.nodes == []
        assert decl.parent is second


class TestInsert:
    def test_insert_after(self):
        rule = _rule(("a", "1"), ("c", "3"))
        rule.insert_after(rule.nodes[0], Declaration(prop="b", value="2"))
        assert _props(rule) == ["a", "b", "c"]

    def test_insert_after_multiple_keeps_order(self):
        rule = _rule(("a", "1"))
        rule.insert_after(
            rule.nodes[0], Declaration(prop="b", value="2"), Declaration(prop="c", value="3")
        )
        assert _props(rule) == ["a", "b", "c"]

    def test_repeated_insert_after_puts_latest_first(self):
        root = Root(nodes=[Rule(selector=".a")])
        rule = root.nodes[0]
        root.insert_after(rule, AtRule(name="media", params="first"))
        root.insert_after(rule, AtRule(name="media", params="second"))
        assert [n.params for n in root.nodes[1:]] == ["second", "first"]

    def test_insert_after_unknown_child_raises(self):
        rule = _rule(("a", "1"))
        with pytest.raises(ValueError):
            rule.insert_after(Declaration(prop="x", value="y"), Declaration(prop="b", value="2"))


class TestRemoveReplace:
    def test_remove(self):
        rule = _rule(("a", "1"), ("b", "2"))
        decl = rule.nodes[0]
        decl.remove()
        assert _props(rule) == ["b"]
        assert decl.parent is None

    def test_remove_detached_is_noop(self):
        decl = Declaration(prop="a", value="1")
        decl.remove()
        assert decl.parent is None

    def test_remove_picks_exact_node_among_duplicates(self):
        rule = _rule(("font-size", "16px"), ("font-size", "16px"))
        second = rule.nodes[1]
        second.remove()
        assert len(rule.nodes) == 1
        assert rule.nodes[0] is not second

    def test_replace_with(self):
        rule = _rule(("a", "1"), ("b", "2"), ("c", "3"))
        rule.nodes[1].replace_with(Declaration(prop="x", value="9"))
        assert _props(rule) == ["a", "x", "c"]

    def test_replace_detached_raises(self):
        with pytest.raises(ValueError):
            Declaration(prop="a", value="1").replace_with(Declaration(prop="b", value="2"))


# ---------------------------------------------------------------------------
# Clone
# ---------------------------------------------------------------------------


class TestClone:
    def test_clone_is_detached_and_deep(self):
        root = parse_stylesheet(".a { color: red; }")
        rule = root.nodes[0]
        copy = rule.clone()
        assert copy.parent is None
        assert copy.selector == ".a"
        assert copy.nodes[0] is not rule.nodes[0]
        assert copy.nodes[0].parent is copy

    def test_clone_with_override(self):
        rule = _rule(("a", "1"))
        copy = rule.clone(selector=".b")
        assert copy.selector == ".b"
        assert _props(copy) == ["a"]

    def test_clone_with_new_children(self):
        rule = _rule(("a", "1"))
        copy = rule.clone(nodes=[Declaration(prop="b", value="2")])
        assert _props(copy) == ["b"]
        assert copy.nodes[0].parent is copy
        assert _props(rule) == ["a"]
        assert rule.nodes[0].parent is rule

    def test_mutating_clone_leaves_original(self):
        rule = _rule(("a", "1"))
        copy = rule.clone()
        copy.nodes[0].value = "2"
        assert rule.nodes[0].value == "1"


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


class TestWalk:
    def test_walk_rules_includes_nested(self):
        root = parse_stylesheet(".a {}\n@media print { .b {} }\n.c {}")
        assert [r.selector for r in root.walk_rules()] == [".a", ".b", ".c"]

    def test_walk_decls_by_name(self):
        rule = _rule(("font-size", "1"), ("color", "red"), ("font-size", "2"))
        assert [d.value for d in rule.walk_decls("font-size")] == ["1", "2"]

    def test_walk_decls_by_pattern_is_anchored(self):
        rule = _rule(("font-size", "1"), ("min-font-size", "2"), ("line-height", "3"))
        pattern = re.compile(r"font-size|line-height")
        assert [d.prop for d in rule.walk_decls(pattern)] == ["font-size", "line-height"]

    def test_walk_decls_all(self):
        rule = _rule(("a", "1"), ("b", "2"))
        assert len(list(rule.walk_decls())) == 2

    def test_walk_survives_removal(self):
        rule = _rule(("a", "1"), ("b", "2"), ("c", "3"))
        for decl in rule.walk_decls():
            decl.remove()
        assert rule.nodes == []


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestNodeError:
    def test_error_points_at_node(self):
        source = ".foo {\n  line-height: fluid 1.5 2;\n}\n"
        root = parse_stylesheet(source, name="in.css")
        err = root.nodes[0].error("bad value", plugin="fluidtype")
        assert isinstance(err, CssSyntaxError)
        assert err.reason == "bad value"
        assert (err.line, err.column) == (1, 1)
        assert err.source == source
        assert str(err) == "fluidtype: in.css:1:1: bad value"

    def test_error_on_detached_node(self):
        err = Declaration(prop="a", value="1", source=Position(line=2, column=3)).error("x")
        assert err.source is None
        assert (err.line, err.column) == (2, 3)

    def test_root_lookup(self):
        root = parse_stylesheet("@media print { .a { color: red; } }")
        decl = next(root.walk_decls())
        assert decl.root() is root
