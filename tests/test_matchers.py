"""Tests for the three pattern matchers and the traversal driver."""

import pytest

from greenforge.analyzer.matchers import (
    MATCHERS,
    find_nested_loops,
    find_repeated_calls,
    find_string_concat_in_loops,
    nesting_level,
)
from greenforge.analyzer.traversal import analyze_tree
from greenforge.models.finding import Description, Severity
from greenforge.models.syntax_tree import NodeKind, SyntaxTree


def java_method(body: str) -> str:
    """Wrap statements in a Java class with a single method."""
    indented = "\n".join("        " + line for line in body.strip("\n").splitlines())
    return (
        "public class TestClass {\n"
        "    public void method(int n) {\n"
        f"{indented}\n"
        "    }\n"
        "}\n"
    )


def run(tree, matcher):
    routine = tree.routines()[0]
    return matcher(tree, routine)


class TestNestedLoops:
    """Loops nested three or more levels deep."""

    def test_triple_nested_reports_innermost(self, parse):
        tree = parse(java_method("""
for (int i = 0; i < n; i++) {
    for (int j = 0; j < n; j++) {
        for (int k = 0; k < n; k++) {
            System.out.println("Nested loop");
        }
    }
}
"""), "java")

        findings = run(tree, find_nested_loops)

        assert len(findings) == 1
        assert findings[0].description is Description.NESTED_LOOPS
        assert findings[0].severity is Severity.HIGH
        assert findings[0].line == 5
        assert "depth 3" in findings[0].details

    def test_each_deep_level_reports_independently(self, parse):
        tree = parse(java_method("""
for (int a = 0; a < n; a++) {
    for (int b = 0; b < n; b++) {
        for (int c = 0; c < n; c++) {
            for (int d = 0; d < n; d++) {
                n--;
            }
        }
    }
}
"""), "java")

        findings = run(tree, find_nested_loops)

        assert [f.line for f in findings] == [5, 6]
        assert "depth 3" in findings[0].details
        assert "depth 4" in findings[1].details

    def test_two_levels_is_fine(self, parse):
        tree = parse(java_method("""
for (int i = 0; i < n; i++) {
    for (int j = 0; j < n; j++) {
        n--;
    }
}
"""), "java")

        assert run(tree, find_nested_loops) == []

    def test_braceless_nesting(self, parse):
        tree = parse(java_method("""
for (int i = 0; i < n; i++)
    for (int j = 0; j < n; j++)
        for (int k = 0; k < n; k++)
            n--;
"""), "java")

        findings = run(tree, find_nested_loops)

        assert [f.line for f in findings] == [5]

    def test_mixed_loop_kinds_count(self, parse):
        tree = parse(java_method("""
while (n > 0) {
    do {
        for (int x : new int[] {1, 2}) {
            n--;
        }
    } while (n > 10);
}
"""), "java")

        findings = run(tree, find_nested_loops)

        assert len(findings) == 1
        assert findings[0].line == 5

    def test_non_loop_ancestor_ends_chain(self, parse):
        tree = parse(java_method("""
for (int i = 0; i < n; i++) {
    for (int j = 0; j < n; j++) {
        if (i == j) {
            for (int k = 0; k < n; k++) {
                n--;
            }
        }
    }
}
"""), "java")

        innermost = tree.find_all(NodeKind.LOOP)[-1]

        assert nesting_level(tree, innermost) == 1
        assert run(tree, find_nested_loops) == []


class TestStringConcatInLoop:
    """String literals next to a concatenation operator inside loops."""

    def test_single_literal(self, parse):
        tree = parse(java_method("""
String result = "";
for (int i = 0; i < 10; i++) {
    result += "item" + i;
}
"""), "java")

        findings = run(tree, find_string_concat_in_loops)

        assert len(findings) == 1
        assert findings[0].description is Description.STRING_CONCAT_IN_LOOP
        assert findings[0].severity is Severity.MEDIUM
        assert findings[0].line == 5
        assert findings[0].column == 23

    def test_one_finding_per_literal(self, parse):
        tree = parse(java_method("""
String s = "";
for (int i = 0; i < n; i++) {
    s = s + "a" + "b" + "c" + "d" + "e";
}
"""), "java")

        assert len(run(tree, find_string_concat_in_loops)) == 5

    def test_literal_in_nested_loops_reported_once(self, parse):
        tree = parse(java_method("""
String s = "";
for (int i = 0; i < n; i++) {
    for (int j = 0; j < n; j++) {
        s += "x" + j;
    }
}
"""), "java")

        assert len(run(tree, find_string_concat_in_loops)) == 1

    def test_literal_without_concatenation(self, parse):
        tree = parse(java_method("""
for (int i = 0; i < 10; i++) {
    System.out.println("Clean code");
}
"""), "java")

        assert run(tree, find_string_concat_in_loops) == []

    def test_concatenation_outside_loop(self, parse):
        tree = parse(java_method("""
String s = "a" + n;
for (int i = 0; i < 10; i++) {
    n--;
}
"""), "java")

        assert run(tree, find_string_concat_in_loops) == []


class TestRepeatedCalls:
    """Calls sharing a callee name and argument count."""

    def test_three_calls_give_three_pairs(self, parse):
        tree = parse(java_method("""
for (int i = 0; i < 10; i++) {
    process(expensiveCalculation());
    validate(expensiveCalculation());
    log(expensiveCalculation());
}
"""), "java")

        findings = run(tree, find_repeated_calls)

        assert len(findings) == 3
        assert all(f.description is Description.REPEATED_CALL for f in findings)
        assert all("expensiveCalculation()" in f.details for f in findings)
        assert [f.line for f in findings] == [5, 6, 6]

    def test_k_calls_give_k_choose_2(self, parse):
        tree = parse(java_method("""
a.get();
b.get();
c.get();
d.get();
"""), "java")

        assert len(run(tree, find_repeated_calls)) == 6

    def test_different_arity_not_reported(self, parse):
        tree = parse(java_method("""
fetch(n);
fetch(n, n);
fetch();
"""), "java")

        assert run(tree, find_repeated_calls) == []

    def test_argument_values_not_compared(self, parse):
        tree = parse(java_method("""
fetch(1);
fetch(n * 2);
"""), "java")

        findings = run(tree, find_repeated_calls)

        assert len(findings) == 1
        assert findings[0].line == 4

    def test_comments_do_not_count_as_arguments(self, parse):
        tree = parse(java_method("""
fetch(n, 1);
fetch(n /* again */, 2);
"""), "java")

        assert len(run(tree, find_repeated_calls)) == 1


class TestTraversal:
    """Driver ordering and routine boundaries."""

    def test_empty_routine(self, parse):
        tree = parse(java_method(""), "java")

        assert analyze_tree(tree) == []
        for matcher in MATCHERS:
            assert run(tree, matcher) == []

    def test_matcher_order_within_routine(self, parse):
        tree = parse(java_method("""
for (int i = 0; i < n; i++) {
    for (int j = 0; j < n; j++) {
        for (int k = 0; k < n; k++) {
            String s = "v" + k;
            touch();
            touch();
        }
    }
}
"""), "java")

        descriptions = [f.description for f in analyze_tree(tree)]

        assert descriptions == [
            Description.NESTED_LOOPS,
            Description.STRING_CONCAT_IN_LOOP,
            Description.REPEATED_CALL,
        ]

    def test_routine_order(self, parse):
        tree = parse("""
            public class TwoMethods {
                void first() {
                    go();
                    go();
                }

                void second() {
                    stop(1);
                    stop(2);
                }
            }
        """, "java")

        findings = analyze_tree(tree)

        assert [f.details for f in findings] == [
            "Consider caching result of go() to avoid repeated computation",
            "Consider caching result of stop() to avoid repeated computation",
        ]

    def test_file_path_on_findings(self, parse):
        tree = parse(java_method("go();\ngo();"), "java", filepath="src/Test.java")

        findings = analyze_tree(tree)

        assert findings[0].file == "src/Test.java"
        assert findings[0].location == "src/Test.java:4"

    def test_tree_not_modified(self, parse):
        tree = parse(java_method("go();\ngo();"), "java")
        before = [(n.kind, n.children[:], n.position) for n in tree.nodes]

        analyze_tree(tree)

        assert [(n.kind, n.children[:], n.position) for n in tree.nodes] == before


def hand_built_routine(source: bytes, with_positions: bool):
    """A routine with three nested loops, a concatenated literal and two calls."""
    tree = SyntaxTree(source, filepath="hand.txt")
    pos = (lambda line: (line, 1)) if with_positions else (lambda line: None)

    routine = tree.add_node(NodeKind.ROUTINE, "routine", position=pos(1))
    outer = tree.add_node(NodeKind.LOOP, "loop", parent=routine, position=pos(2))
    middle = tree.add_node(NodeKind.LOOP, "loop", parent=outer, position=pos(3))
    inner = tree.add_node(NodeKind.LOOP, "loop", parent=middle, position=pos(4))
    expr = tree.add_node(NodeKind.OTHER, "binary", parent=inner, position=pos(5),
                         start_byte=0, end_byte=len(source))
    tree.add_node(NodeKind.STRING, "string", parent=expr, position=pos(5), start_byte=0, end_byte=3)
    tree.add_node(NodeKind.CALL, "call", parent=inner, position=pos(6), name="f", arity=0)
    tree.add_node(NodeKind.CALL, "call", parent=inner, position=pos(7), name="f", arity=0)
    tree.add_node(NodeKind.CALL, "call", parent=inner, position=pos(8), name=None, arity=0)
    return tree


class TestHandBuiltTrees:
    """Matchers run on trees that did not come from a parser."""

    def test_all_patterns(self):
        tree = hand_built_routine(b'"a" + b', with_positions=True)

        findings = analyze_tree(tree)

        assert [(f.description, f.line) for f in findings] == [
            (Description.NESTED_LOOPS, 4),
            (Description.STRING_CONCAT_IN_LOOP, 5),
            (Description.REPEATED_CALL, 7),
        ]

    def test_nodes_without_position_are_skipped(self):
        tree = hand_built_routine(b'"a" + b', with_positions=False)

        assert analyze_tree(tree) == []

    @pytest.mark.parametrize("matcher", MATCHERS)
    def test_matchers_do_not_fail_on_bare_routine(self, matcher):
        tree = SyntaxTree(b"")
        routine = tree.add_node(NodeKind.ROUTINE, "routine")

        assert matcher(tree, routine) == []
