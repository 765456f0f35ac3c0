"""
Language-specific syntax tree builders
"""
from .base_extractor import BaseExtractor
from .python_extractor import PythonExtractor
from .java_extractor import JavaExtractor
from .c_extractor import CExtractor
from .cpp_extractor import CppExtractor

__all__ = [
    'BaseExtractor',
    'PythonExtractor',
    'JavaExtractor',
    'CExtractor',
    'CppExtractor'
]
