"""
Source parsing and file discovery
"""
from .source_parser import SourceParser
from .repository_scanner import RepositoryScanner

__all__ = ['SourceParser', 'RepositoryScanner']
