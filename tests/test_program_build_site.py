"""Tests for the site build CLI.

Covers argument parsing, logging setup, exit codes and the root launcher.
"""

import logging
from pathlib import Path

import build_site
import studysite.program_build_site as prog
from studysite.config import DEFAULT_OUTPUT_DIR, LOCALES_DIR
from studysite.pipeline.website_generator.runner import BuildReport


def test_parse_cli_args_defaults():
    args = prog.parse_cli_args([])
    assert args.locales_dir == LOCALES_DIR
    assert args.output == DEFAULT_OUTPUT_DIR
    assert args.strict is True
    assert args.check_assets is False
    assert args.log_level == "INFO"


def test_parse_cli_args_flags(tmp_path: Path):
    args = prog.parse_cli_args(
        [
            "--locales-dir",
            str(tmp_path),
            "--output",
            str(tmp_path / "out"),
            "--no-strict",
            "--check-assets",
            "--log-level",
            "DEBUG",
        ]
    )
    assert args.locales_dir == tmp_path
    assert args.output == tmp_path / "out"
    assert args.strict is False
    assert args.check_assets is True
    assert args.log_level == "DEBUG"


def test_setup_logging_filehandler_error(monkeypatch):
    class BadFH:
        def __init__(self, *a, **k):
            raise OSError("read-only")

    monkeypatch.setattr(prog.logging, "FileHandler", BadFH)
    prog.setup_logging("DEBUG", enable_file=True)
    assert logging.getLogger().level == logging.DEBUG
    assert all(not isinstance(h, BadFH) for h in logging.getLogger().handlers)


def test_setup_logging_without_file():
    prog.setup_logging("warning", enable_file=False)
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)


def test_main_success(monkeypatch, tmp_path: Path):
    calls = {}

    def fake_run(locales_dir, output_dir, *, strict, check_assets):
        calls.update(
            locales_dir=locales_dir, output_dir=output_dir, strict=strict, check=check_assets
        )
        report = BuildReport(output_dir=output_dir)
        report.add("en", "/", output_dir / "en" / "index.html")
        return report

    printed = []
    monkeypatch.setattr(prog, "run_from_config", fake_run)
    monkeypatch.setattr(prog, "setup_logging", lambda *a, **k: None)
    monkeypatch.setattr(prog, "rprint", lambda *a, **k: printed.append(a))
    code = prog.main(["--output", str(tmp_path), "--no-strict"])
    assert code == 0
    assert calls == {
        "locales_dir": LOCALES_DIR,
        "output_dir": tmp_path,
        "strict": False,
        "check": False,
    }
    assert printed and printed[0][0].row_count == 1


def test_main_failure(monkeypatch):
    printed = []
    monkeypatch.setattr(prog, "run_from_config", lambda *a, **k: None)
    monkeypatch.setattr(prog, "setup_logging", lambda *a, **k: None)
    monkeypatch.setattr(prog, "rprint", lambda *a, **k: printed.append(a))
    assert prog.main([]) == 1
    assert "failed" in printed[0][0]


def test_main_end_to_end(monkeypatch, locales_dir: Path, tmp_path: Path):
    monkeypatch.setattr(prog, "setup_logging", lambda *a, **k: None)
    out = tmp_path / "site"
    assert prog.main(["--locales-dir", str(locales_dir), "--output", str(out)]) == 0
    assert (out / "index.html").exists()
    assert (out / "th" / "index.html").exists()


def test_root_launcher_delegates(monkeypatch):
    seen = []
    monkeypatch.setattr(prog, "main", lambda argv=None: seen.append(argv) or 0)
    assert build_site.entry_point(["--no-strict"]) == 0
    assert seen == [["--no-strict"]]
