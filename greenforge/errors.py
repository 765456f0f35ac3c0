"""
Exception types raised by greenforge
"""


class ForgeError(Exception):
    """Base class for greenforge errors"""


class ParseError(ForgeError):
    """A source file could not be turned into a syntax tree"""

    def __init__(self, file, cause):
        self.file = str(file)
        self.cause = cause
        super().__init__(f"Could not parse {self.file}: {cause}")


class SourcePathError(ForgeError):
    """The path handed to the analyzer does not exist or is not readable"""

    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Path does not exist or is not accessible: {self.path}")


class ConfigError(ForgeError):
    """Invalid configuration value"""
