"""
Tree-sitter based source parser producing language-neutral syntax trees
"""
import logging

from tree_sitter import Language, Parser
import tree_sitter_python as tspython
import tree_sitter_java as tsjava
import tree_sitter_c as tsc
import tree_sitter_cpp as tscpp

from greenforge.errors import ParseError
from greenforge.extractors.python_extractor import PythonExtractor
from greenforge.extractors.java_extractor import JavaExtractor
from greenforge.extractors.c_extractor import CExtractor
from greenforge.extractors.cpp_extractor import CppExtractor

log = logging.getLogger(__name__)

GRAMMARS = {
    'python': (tspython, PythonExtractor),
    'java': (tsjava, JavaExtractor),
    'c': (tsc, CExtractor),
    'cpp': (tscpp, CppExtractor),
}


class SourceParser:
    """Parse source text into SyntaxTree objects for Python, Java, C and C++"""

    def __init__(self):
        self.parsers = {}
        self.extractors = {}
        self._setup_parsers()

    def _setup_parsers(self):
        """Initialize parsers for all supported languages"""
        for language, (grammar, extractor_cls) in GRAMMARS.items():
            try:
                self.parsers[language] = Parser(Language(grammar.language()))
                self.extractors[language] = extractor_cls()
                log.debug("%s parser loaded", language)
            except (TypeError, ValueError) as e:
                log.warning("%s parser failed to load: %s", language, e)

    def supports(self, language):
        return language in self.parsers

    def parse(self, source_code, language, filepath='<string>'):
        """
        Parse source code into a SyntaxTree

        Args:
            source_code: File contents (bytes or str)
            language: Language identifier ('python', 'java', 'c', 'cpp')
            filepath: Path reported in findings and errors

        Returns:
            SyntaxTree for the file

        Raises:
            ParseError: the language is unsupported or the source is malformed
        """
        if language not in self.parsers:
            raise ParseError(filepath, f"no parser available for language {language!r}")

        if isinstance(source_code, str):
            source_code = source_code.encode('utf-8')

        tree = self.parsers[language].parse(source_code)
        root = tree.root_node
        if root.has_error:
            raise ParseError(filepath, self._describe_error(root))

        return self.extractors[language].extract(root, source_code, str(filepath))

    def parse_file(self, filepath, language):
        """Read a file as bytes and parse it; OSError propagates to the caller"""
        with open(filepath, 'rb') as f:
            source_code = f.read()
        return self.parse(source_code, language, str(filepath))

    @staticmethod
    def _describe_error(root):
        """Locate the first ERROR or MISSING node below a tree root"""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.is_error or node.is_missing:
                row, column = node.start_point
                kind = 'missing ' + node.type if node.is_missing else 'syntax error'
                return f"{kind} at line {row + 1}, column {column + 1}"
            if node.has_error:
                stack.extend(reversed(node.children))
        return 'syntax error'
