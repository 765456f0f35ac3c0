"""Pytest configuration and fixtures."""

import textwrap
from pathlib import Path

import pytest

from greenforge.analyzer.code_analyzer import CodeAnalyzer
from greenforge.parsers.source_parser import SourceParser


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def source_parser() -> SourceParser:
    """A parser shared across tests; it holds no per-run state."""
    return SourceParser()


@pytest.fixture
def analyzer(source_parser: SourceParser) -> CodeAnalyzer:
    return CodeAnalyzer(parser=source_parser)


@pytest.fixture
def sample_java_path() -> Path:
    """Java class with every pattern the engine reports."""
    return FIXTURES_DIR / "SampleInefficientCode.java"


@pytest.fixture
def write_source(tmp_path: Path):
    """Write dedented source text to a file under tmp_path and return its path."""

    def _write(name: str, code: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(code), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def parse(source_parser: SourceParser):
    """Parse dedented source text into a SyntaxTree."""

    def _parse(code: str, language: str, filepath: str = "Test"):
        return source_parser.parse(textwrap.dedent(code), language, filepath)

    return _parse
