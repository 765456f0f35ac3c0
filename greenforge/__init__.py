"""
greenforge: flag code patterns that waste CPU cycles

Parses Python, Java, C and C++ sources with tree-sitter and reports deeply
nested loops, string concatenation inside loops and repeated calls.
"""
__version__ = '1.0.0'
