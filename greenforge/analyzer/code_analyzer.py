"""
Finding aggregator: analyze files or prepared trees into one AnalysisResult
"""
import logging
import os
from typing import Iterable, Optional, Union

from greenforge.analyzer.traversal import analyze_tree
from greenforge.config import ForgeConfig
from greenforge.errors import ParseError, SourcePathError
from greenforge.models.finding import AnalysisResult
from greenforge.models.syntax_tree import SyntaxTree
from greenforge.parsers.repository_scanner import RepositoryScanner
from greenforge.parsers.source_parser import SourceParser

log = logging.getLogger(__name__)


class CodeAnalyzer:
    """
    Entry point of the pattern-detection engine

    Files are parsed and analyzed one after another. A file that cannot be
    read or parsed is logged, listed in `files_skipped` and left out of
    `files_analyzed`; it never aborts the run.
    """

    def __init__(self, config: Optional[ForgeConfig] = None, parser: Optional[SourceParser] = None):
        """
        Args:
            config: ForgeConfig, defaults to built-in values
            parser: SourceParser to reuse across runs
        """
        self.config = config or ForgeConfig()
        self.parser = parser or SourceParser()
        self.scanner = RepositoryScanner(ignore_patterns=self.config.ignore_patterns)

    def analyze(
        self,
        path_or_trees: Union[str, os.PathLike, Iterable[SyntaxTree]],
        language: Optional[str] = None
    ) -> AnalysisResult:
        """
        Analyze a file, a directory, or already-built syntax trees

        Args:
            path_or_trees: File/directory path, or an iterable of SyntaxTree
            language: Force (for a file) or filter (for a directory) the
                source language; None detects it from the extension

        Returns:
            AnalysisResult, possibly empty

        Raises:
            SourcePathError: the path does not exist
        """
        if isinstance(path_or_trees, (str, os.PathLike)):
            return self.analyze_path(path_or_trees, language)
        return self.analyze_trees(path_or_trees)

    def analyze_path(self, path, language=None) -> AnalysisResult:
        if not os.path.exists(path):
            raise SourcePathError(path)
        if os.path.isdir(path) and not os.access(path, os.R_OK | os.X_OK):
            raise SourcePathError(path)

        log.info("Analyzing %s", path)
        results = [
            self.analyze_file(filepath, file_language)
            for filepath, file_language in self.scanner.scan(path, language)
        ]
        result = AnalysisResult.merge(results)

        log.info(
            "Analyzed %d files, skipped %d, found %d issues",
            result.files_analyzed, len(result.files_skipped), len(result.findings)
        )
        return result

    def analyze_file(self, filepath, language) -> AnalysisResult:
        """Parse and analyze a single file; read and parse failures yield a skip"""
        log.debug("[%-6s] Parsing: %s", language, filepath)
        try:
            tree = self.parser.parse_file(filepath, language)
        except ParseError as e:
            log.warning("Could not parse %s: %s", filepath, e.cause)
            return AnalysisResult(files_skipped=(str(filepath),))
        except OSError as e:
            log.warning("Could not read %s: %s", filepath, e)
            return AnalysisResult(files_skipped=(str(filepath),))

        return AnalysisResult(findings=tuple(analyze_tree(tree)), files_analyzed=1)

    def analyze_source(self, source_code, language, filepath='<string>') -> AnalysisResult:
        """Analyze in-memory source text as if it were one file"""
        try:
            tree = self.parser.parse(source_code, language, filepath)
        except ParseError as e:
            log.warning("Could not parse %s: %s", filepath, e.cause)
            return AnalysisResult(files_skipped=(str(filepath),))

        return AnalysisResult(findings=tuple(analyze_tree(tree)), files_analyzed=1)

    def analyze_trees(self, trees: Iterable[SyntaxTree]) -> AnalysisResult:
        """Analyze syntax trees produced elsewhere, one file per tree"""
        return AnalysisResult.merge(
            AnalysisResult(findings=tuple(analyze_tree(tree)), files_analyzed=1)
            for tree in trees
        )
