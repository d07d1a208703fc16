"""Tests for the command-line interface."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from rename_command.cli import build_transform, main


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


def test_replace(runner: CliRunner) -> None:
    """Test renaming with a regex replacement."""
    with runner.isolated_filesystem():
        Path("IMG 0001.JPG").write_text("")
        result = runner.invoke(main, ["--replace", r"\s+", "_", "--case", "lower", "IMG 0001.JPG"])
        assert result.exit_code == 0, result.output
        assert "'IMG 0001.JPG' renamed to 'img_0001.JPG'" in result.output
        assert Path("img_0001.JPG").exists()


def test_dry_run(runner: CliRunner) -> None:
    """Test that --dry-run reports without renaming."""
    with runner.isolated_filesystem():
        Path("notes.txt").write_text("")
        result = runner.invoke(main, ["-n", "--prefix", "2024-", "notes.txt"])
        assert result.exit_code == 0, result.output
        assert "'notes.txt' renamed to '2024-notes.txt'" in result.output
        assert Path("notes.txt").exists()
        assert not Path("2024-notes.txt").exists()


def test_quiet(runner: CliRunner) -> None:
    """Test that --quiet prints nothing for a real run."""
    with runner.isolated_filesystem():
        Path("notes.txt").write_text("")
        result = runner.invoke(main, ["-q", "--suffix", "-old", "notes.txt"])
        assert result.exit_code == 0, result.output
        assert result.output == ""
        assert Path("notes-old.txt").exists()


def test_try(runner: CliRunner) -> None:
    """Test --try with a hypothetical, unquoted name."""
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["--try", "--case", "upper", "annual", "report.txt"])
        assert result.exit_code == 0, result.output
        assert result.output == "'annual report.txt' renamed to 'ANNUAL REPORT.txt'\n"
        assert list(Path(".").iterdir()) == []


def test_missing_file(runner: CliRunner) -> None:
    """Test that a missing file exits with an error."""
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["--case", "upper", "missing.txt"])
        assert result.exit_code == 1
        assert "file not found" in result.output


def test_invalid_pattern(runner: CliRunner) -> None:
    """Test that an invalid regex is a usage error."""
    result = runner.invoke(main, ["--replace", "(", "x", "--try", "a.txt"])
    assert result.exit_code == 2
    assert "invalid pattern" in result.output


def test_invalid_template(runner: CliRunner) -> None:
    """Test that a replacement referencing a missing group fails the run."""
    result = runner.invoke(main, ["--replace", "a", r"\3", "--try", "abc.txt"])
    assert result.exit_code == 1
    assert "transform failed" in result.output


def test_requires_files(runner: CliRunner) -> None:
    """Test that at least one file is required."""
    result = runner.invoke(main, ["--case", "upper"])
    assert result.exit_code == 2


def test_build_transform_order() -> None:
    """Test that steps apply as replace-first, replace, case, prefix, suffix."""
    transform = build_transform(
        (("o", "0"),),
        (("^f", "F"),),
        ignore_case=False,
        case="title",
        prefix="[",
        suffix="]",
    )
    assert transform("foo boo", "txt") == "[F00 B00]"


def test_build_transform_identity() -> None:
    """Test that no options leaves names unchanged."""
    transform = build_transform((), (), ignore_case=False, case=None, prefix="", suffix="")
    assert transform("name", "txt") == "name"


def test_directory_argument(runner: CliRunner) -> None:
    """Test that the working directory cannot be renamed."""
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["--case", "upper", "."])
        assert result.exit_code == 1
        assert "file not found" in result.output
