# tests/parser_tests/test_tree_builder.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Test suite for expression tree construction from postfix tokens

"""Test suite for the tree builder and the expression tree nodes."""

import sys

import pytest
from parser import build_tree, parse, ParseError
from parser.ast_nodes import (
    OPERATORS_BY_SYMBOL,
    Atom,
    Compound,
    Not,
    Operator,
    postorder,
    preorder,
    render_all,
)


class TestTreeBuilder:
    """Test cases for building trees from postfix sequences."""

    def test_single_operand(self, registry):
        root = build_tree(["a"], registry)
        assert root is registry["a"]
        assert root == Atom("a", 0)

    def test_binary_operand_order(self, registry):
        root = build_tree(["a", "b", "->"], registry)

        assert root.operator is Operator.IMPLIES
        assert root.children == (registry["a"], registry["b"])

    def test_negation_wraps_top_operand(self, registry):
        root = build_tree(["a", "b", "!", "&"], registry)
        assert str(root) == "(a&(!b))"

    def test_repeated_variable_shares_one_atom(self, registry):
        root = build_tree(["a", "a", "!", "&"], registry)

        left, right = root.children
        assert left is right.children[0]
        assert len(registry) == 1

    def test_registry_extended_in_place(self, registry):
        build_tree(["q", "p", "|"], registry)
        assert registry.names == ("q", "p")

    @pytest.mark.parametrize(
        "postfix, message",
        [
            ([], "empty"),
            (["&"], "missing an operand"),
            (["a", "&"], "missing an operand"),
            (["!"], "missing an operand"),
            (["a", "b"], "single expression"),
            (["a", "b", "c", "&"], "single expression"),
            (["1"], "Unexpected token"),
            (["("], "Unexpected token"),
            (["ab"], "Unexpected token"),
        ],
    )
    def test_malformed_postfix_rejected(self, registry, postfix, message):
        with pytest.raises(ParseError, match=message):
            build_tree(postfix, registry)


class TestExpressionNodes:
    """Test cases for Atom and Compound nodes."""

    def test_compound_arity_checked(self):
        a = Atom("a", 0)
        with pytest.raises(ValueError):
            Compound(Operator.NOT, (a, a))
        with pytest.raises(ValueError):
            Compound(Operator.AND, (a,))

    def test_compound_children_stored_as_tuple(self):
        a = Atom("a", 0)
        node = Compound(Operator.OR, [a, a])
        assert node.children == (a, a)

    def test_nodes_are_immutable(self):
        a = Atom("a", 0)
        with pytest.raises(AttributeError):
            a.name = "b"

    def test_nodes_are_hashable(self):
        a = Atom("a", 0)
        assert len({Not(a), Not(a), a}) == 2

    def test_operator_lookup(self):
        assert Operator.from_symbol("<->") is Operator.BICONDITIONAL
        assert Operator.symbols() == ("!", "&", "|", "->", "<->")
        with pytest.raises(KeyError):
            Operator.from_symbol("=>")

    def test_operator_precedence_order(self):
        ordered = sorted(Operator, key=lambda op: op.precedence, reverse=True)
        assert ordered == [
            Operator.NOT,
            Operator.AND,
            Operator.OR,
            Operator.IMPLIES,
            Operator.BICONDITIONAL,
        ]

    def test_preorder_traversal(self):
        root = parse("(a|b)&!a").root
        assert [str(node) for node in preorder(root)] == [
            "((a|b)&(!a))",
            "(a|b)",
            "a",
            "b",
            "(!a)",
            "a",
        ]

    def test_preorder_count_matches_node_occurrences(self):
        root = parse("a<->a").root
        assert len(list(preorder(root))) == 3

    def test_symbol_table_covers_every_operator(self):
        assert set(OPERATORS_BY_SYMBOL.values()) == set(Operator)
        assert all(OPERATORS_BY_SYMBOL[op.symbol] is op for op in Operator)

    def test_postorder_traversal(self):
        root = parse("(a|b)&!a").root
        assert [str(node) for node in postorder(root)] == [
            "a",
            "b",
            "(a|b)",
            "a",
            "(!a)",
            "((a|b)&(!a))",
        ]

    def test_render_all_labels_every_subtree(self):
        root = parse("a->!b").root
        rendered = render_all(root)

        assert rendered[id(root)] == "(a->(!b))"
        assert rendered[id(root.children[1])] == "(!b)"


class TestDeepTrees:
    """Test cases for trees nested deeper than the interpreter's recursion limit."""

    def setup_method(self):
        self.depth = sys.getrecursionlimit() + 500

    def test_deep_negation_renders(self):
        root = parse("!" * self.depth + "a").root
        rendered = str(root)

        assert rendered == "(!" * self.depth + "a" + ")" * self.depth

    def test_deep_conjunction_chain_traverses(self):
        root = parse("&".join(["a"] * self.depth)).root

        assert len(list(preorder(root))) == 2 * self.depth - 1
        assert len(list(postorder(root))) == 2 * self.depth - 1
        assert str(root).startswith("(" * (self.depth - 1) + "a&a)")
