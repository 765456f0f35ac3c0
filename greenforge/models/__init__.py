"""
Data models: syntax tree arena and analysis findings
"""
from .syntax_tree import NodeKind, SyntaxNode, SyntaxTree
from .finding import (
    AnalysisResult,
    Description,
    Finding,
    Severity,
    SEVERITY_BY_DESCRIPTION,
    TITLES,
)

__all__ = [
    'NodeKind',
    'SyntaxNode',
    'SyntaxTree',
    'AnalysisResult',
    'Description',
    'Finding',
    'Severity',
    'SEVERITY_BY_DESCRIPTION',
    'TITLES',
]
