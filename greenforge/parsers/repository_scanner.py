"""
Multi-language source file scanner
"""
import fnmatch
import logging
import os

from greenforge.utils.language_detector import LanguageDetector

log = logging.getLogger(__name__)


class RepositoryScanner:
    """Enumerate analyzable source files under a file or directory path"""

    DEFAULT_IGNORE = {
        '.git', '.svn', 'node_modules', '__pycache__', '.venv', 'venv',
        'env', 'build', 'dist', '.idea', '.vscode', 'target', 'out',
        '.pytest_cache', '.mypy_cache', 'htmlcov', '.tox', 'eggs',
        '*.egg-info', '.eggs',
    }

    def __init__(self, ignore_patterns=None):
        self.ignore_patterns = self.DEFAULT_IGNORE.copy()
        if ignore_patterns:
            self.ignore_patterns.update(ignore_patterns)

    def should_ignore(self, name):
        """Check if a file or directory name should be skipped"""
        if name.startswith('.') and name != '.':
            return True

        for pattern in self.ignore_patterns:
            if fnmatch.fnmatch(name, pattern):
                return True

        return False

    def scan(self, path, language=None):
        """
        List source files to analyze

        A single file is returned as-is when its language is known (or
        forced through `language`). Directories are walked with ignored
        names pruned; entries are sorted so repeated runs visit files in
        the same order.

        Args:
            path: File or directory path
            language: Only keep files of this language (None keeps all)

        Returns:
            List of (filepath, language) tuples
        """
        path = str(path)

        if os.path.isfile(path):
            detected = LanguageDetector.detect(path)
            if language is not None:
                if detected is None or detected == language:
                    return [(path, language)]
                return []
            if detected is None:
                log.info("Skipping %s: unsupported file type", path)
                return []
            return [(path, detected)]

        files = []
        for root, dirs, filenames in os.walk(path):
            dirs[:] = sorted(d for d in dirs if not self.should_ignore(d))

            for filename in sorted(filenames):
                if self.should_ignore(filename):
                    continue

                detected = LanguageDetector.detect(filename)
                if detected is None:
                    continue
                if language is not None and detected != language:
                    continue

                files.append((os.path.join(root, filename), detected))

        log.debug("Found %d source files under %s", len(files), path)
        return files
