"""
Map source file extensions onto the languages greenforge can parse
"""
import os

# Extensions per language; C headers default to C since .h is ambiguous
EXTENSIONS = {
    'java': ('.java',),
    'python': ('.py', '.pyw'),
    'c': ('.c', '.h'),
    'cpp': ('.cpp', '.cc', '.cxx', '.c++', '.hpp', '.hxx', '.hh'),
}


class LanguageDetector:
    """Detect the language of a source file from its extension"""

    LANGUAGE_BY_EXTENSION = {
        ext: language
        for language, extensions in EXTENSIONS.items()
        for ext in extensions
    }

    @classmethod
    def detect(cls, filepath):
        """
        Args:
            filepath: Path (str or PathLike) to a source file

        Returns:
            Language identifier, or None for files greenforge does not analyze
        """
        ext = os.path.splitext(os.fspath(filepath))[1].lower()
        return cls.LANGUAGE_BY_EXTENSION.get(ext)

    @staticmethod
    def supported_languages():
        return sorted(EXTENSIONS)
