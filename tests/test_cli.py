"""Tests for CLI."""

import json

import pytest

from greenforge.cli import main


def test_cli_help():
    """Test --help flag."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_cli_version(capsys):
    """Test --version flag."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert "1.0.0" in capsys.readouterr().out


def test_cli_no_command():
    """Test running with no command shows help."""
    assert main([]) == 1


def test_cli_missing_path(tmp_path, capsys):
    result = main(["analyze", str(tmp_path / "nope")])

    assert result == 1
    assert "does not exist" in capsys.readouterr().err


def test_cli_analyze_text(sample_java_path, capsys):
    assert main(["analyze", str(sample_java_path)]) == 0

    out = capsys.readouterr().out
    assert "Files analyzed: 1" in out
    assert "Issues found: 10" in out
    assert "Deep nested loops detected" in out


def test_cli_analyze_clean_directory(tmp_path, capsys):
    assert main(["analyze", str(tmp_path)]) == 0

    assert "No inefficiencies detected" in capsys.readouterr().out


def test_cli_analyze_json(sample_java_path, capsys):
    assert main(["analyze", str(sample_java_path), "--output", "json", "--lang", "java"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["files_analyzed"] == 1
    assert output["issue_count"] == 10


def test_cli_estimate_json(sample_java_path, capsys):
    assert main(["estimate", str(sample_java_path), "-o", "json"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["potential_savings"] > 0


def test_cli_estimate_text(sample_java_path, capsys):
    assert main(["estimate", str(sample_java_path)]) == 0

    out = capsys.readouterr().out
    assert "CPU Time" in out
    assert "Potential Savings" in out


def test_cli_suggest_text(sample_java_path, capsys):
    assert main(["suggest", str(sample_java_path)]) == 0

    out = capsys.readouterr().out
    assert "Suggestions found: 10" in out
    assert "Cache method call results" in out


def test_cli_rejects_unknown_language(sample_java_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["analyze", str(sample_java_path), "--lang", "cobol"])
    assert exc_info.value.code == 2
