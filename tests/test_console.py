"""Tests for `studysite/console.py`: rich output helpers."""

import doctest
from pathlib import Path

import studysite.console as console_mod
from studysite.pipeline.website_generator.runner import BuildReport


def test_module_doctests_pass():
    result = doctest.testmod(console_mod)
    assert result.attempted > 0
    assert result.failed == 0


def test_rprint_writes_plain_text(capsys):
    console_mod.rprint("[bold]Building site[/bold]")
    assert capsys.readouterr().out.strip() == "Building site"


def test_build_summary_table_relative_paths(tmp_path: Path):
    report = BuildReport(output_dir=tmp_path)
    report.add("en", "/", tmp_path / "en" / "index.html")
    report.add("en", "(root)", Path("/elsewhere/index.html"))
    table = console_mod.build_summary_table(report)
    assert table.row_count == 2
    files = list(table.columns[2].cells)
    assert files[0] == str(Path("en") / "index.html")
    assert files[1] == str(Path("/elsewhere/index.html"))
