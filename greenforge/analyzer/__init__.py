"""
Pattern-detection engine
"""
from .matchers import (
    MATCHERS,
    find_nested_loops,
    find_repeated_calls,
    find_string_concat_in_loops,
    nesting_level,
)
from .traversal import analyze_tree
from .code_analyzer import CodeAnalyzer

__all__ = [
    'MATCHERS',
    'find_nested_loops',
    'find_repeated_calls',
    'find_string_concat_in_loops',
    'nesting_level',
    'analyze_tree',
    'CodeAnalyzer',
]
