"""
Pattern matchers for CPU-wasting code idioms

Each matcher takes a SyntaxTree and one routine node and returns the
findings for that routine. Matchers never look into routines declared
inside the one they are given; those are analyzed on their own.
"""
from typing import Callable, List

from greenforge.models.finding import Description, Finding
from greenforge.models.syntax_tree import NodeKind, SyntaxNode, SyntaxTree

# A loop is reported once its nesting level (itself included) exceeds this
MAX_LOOP_NESTING = 2

CONCAT_OPERATOR = '+'

ROUTINE_BOUNDARY = frozenset({NodeKind.ROUTINE})

Matcher = Callable[[SyntaxTree, SyntaxNode], List[Finding]]


def nesting_level(tree: SyntaxTree, loop: SyntaxNode) -> int:
    """
    Count the loops directly enclosing `loop`, itself included

    Statement blocks between two loops are looked through; any other
    ancestor ends the chain.
    """
    level = 1
    for ancestor in tree.ancestors(loop):
        if ancestor.kind is NodeKind.LOOP:
            level += 1
        elif ancestor.kind is not NodeKind.BLOCK:
            break
    return level


def find_nested_loops(tree: SyntaxTree, routine: SyntaxNode) -> List[Finding]:
    """Report every loop nested more than MAX_LOOP_NESTING levels deep"""
    findings = []
    for loop in tree.find_all(NodeKind.LOOP, routine, ROUTINE_BOUNDARY):
        if loop.position is None:
            continue

        level = nesting_level(tree, loop)
        if level > MAX_LOOP_NESTING:
            line, column = loop.position
            findings.append(Finding(
                description=Description.NESTED_LOOPS,
                file=tree.filepath,
                line=line,
                column=column,
                details=f"Nested loops with depth {level} can cause exponential time complexity"
            ))
    return findings


def find_string_concat_in_loops(tree: SyntaxTree, routine: SyntaxNode) -> List[Finding]:
    """
    Report string literals used with the concatenation operator inside loops

    The check is textual: a literal qualifies when the source text of its
    immediate parent contains CONCAT_OPERATOR. A literal inside several
    nested loops is reported once.
    """
    findings = []
    seen = set()
    for loop in tree.find_all(NodeKind.LOOP, routine, ROUTINE_BOUNDARY):
        for literal in tree.find_all(NodeKind.STRING, loop, ROUTINE_BOUNDARY):
            if literal.index in seen:
                continue
            seen.add(literal.index)

            parent = tree.parent(literal)
            if parent is None or literal.position is None:
                continue

            if CONCAT_OPERATOR in tree.text(parent):
                line, column = literal.position
                findings.append(Finding(
                    description=Description.STRING_CONCAT_IN_LOOP,
                    file=tree.filepath,
                    line=line,
                    column=column,
                    details="Consider using a string builder or join() for string concatenation in loops"
                ))
    return findings


def find_repeated_calls(tree: SyntaxTree, routine: SyntaxNode) -> List[Finding]:
    """
    Report calls repeating an earlier call with the same name and arity

    Every matching pair (i, j), i < j, is reported at the later call, so a
    group of k equivalent calls yields k * (k - 1) / 2 findings. Argument
    values are not compared.
    """
    calls = [
        c for c in tree.find_all(NodeKind.CALL, routine, ROUTINE_BOUNDARY)
        if c.name is not None
    ]

    findings = []
    for i in range(len(calls)):
        first = calls[i]
        for j in range(i + 1, len(calls)):
            second = calls[j]
            if second.position is None:
                continue

            if first.name == second.name and first.arity == second.arity:
                line, column = second.position
                findings.append(Finding(
                    description=Description.REPEATED_CALL,
                    file=tree.filepath,
                    line=line,
                    column=column,
                    details=f"Consider caching result of {first.name}() to avoid repeated computation"
                ))
    return findings


# Run order within a routine
MATCHERS: List[Matcher] = [
    find_nested_loops,
    find_string_concat_in_loops,
    find_repeated_calls,
]
