"""
Optimization suggestions
"""
from .optimization_suggester import OptimizationSuggester, Suggestion, SuggestionResult

__all__ = ['OptimizationSuggester', 'Suggestion', 'SuggestionResult']
