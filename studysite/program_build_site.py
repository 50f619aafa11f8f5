"""Build the static study website.

Loads the locale content files, validates them against the content schema,
renders the home page and the informational pages for every supported
locale, and writes the site to the output directory. A summary table is
printed when the build succeeds.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from studysite.config import (
    DEFAULT_OUTPUT_DIR,
    LOCALES_DIR,
    LOG_DIR,
    LOG_FILENAME_BUILD_SITE,
    LOG_FORMAT,
)
from studysite.console import build_summary_table, rprint
from studysite.pipeline.website_generator.runner import run_from_config

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO", enable_file: bool = True) -> None:
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0,
                logging.FileHandler(LOG_DIR / LOG_FILENAME_BUILD_SITE, mode="a"),
            )
        except OSError:
            logger.warning("File logging disabled: cannot write to %s", LOG_DIR)
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional argv to parse. When ``None`` the real CLI args are used.

    Returns
    -------
    argparse.Namespace
        Fields ``locales_dir``, ``output``, ``strict``, ``check_assets`` and
        ``log_level``.
    """
    parser = argparse.ArgumentParser(
        description="Generate the static research-study website for every locale."
    )
    parser.add_argument("--locales-dir", type=Path, default=LOCALES_DIR)
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT_DIR)
    parser.add_argument(
        "--no-strict",
        dest="strict",
        action="store_false",
        help="Render missing content as empty sections instead of failing",
    )
    parser.add_argument(
        "--check-assets",
        action="store_true",
        help="Probe the profile image and bake in the fallback if unreachable",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for site generation; returns the process exit code."""
    args = parse_cli_args(argv)
    setup_logging(args.log_level, enable_file=not os.environ.get("DISABLE_FILE_LOGS"))
    report = run_from_config(
        args.locales_dir,
        args.output,
        strict=args.strict,
        check_assets=args.check_assets,
    )
    if report is None:
        rprint("[bold red]Site build failed; see the log for details.[/bold red]")
        return 1
    rprint(build_summary_table(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
