"""
Traversal driver: run every matcher over every routine of a syntax tree
"""
import logging
from typing import List

from greenforge.analyzer.matchers import MATCHERS
from greenforge.models.finding import Finding
from greenforge.models.syntax_tree import NodeKind, SyntaxTree

log = logging.getLogger(__name__)


def analyze_tree(tree: SyntaxTree) -> List[Finding]:
    """
    Collect the findings for one parsed file

    Findings are ordered by routine (source order), then by matcher
    (MATCHERS order). The tree is not modified.

    Args:
        tree: SyntaxTree of a single file

    Returns:
        List of Finding objects
    """
    findings: List[Finding] = []
    if tree.root is None:
        return findings

    for node in tree.iter_subtree(tree.root):
        if node.kind is not NodeKind.ROUTINE:
            continue

        for matcher in MATCHERS:
            routine_findings = matcher(tree, node)
            for finding in routine_findings:
                log.debug("%s in %s(): %s", finding.description.value, node.name, finding.location)
            findings.extend(routine_findings)

    return findings
