"""
Utility modules
"""
from .language_detector import LanguageDetector
from .report_printer import ReportPrinter

__all__ = [
    'LanguageDetector',
    'ReportPrinter'
]
