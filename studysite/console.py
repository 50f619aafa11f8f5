"""Rich terminal output for the build CLI.

All Rich usage lives here so the pipeline modules stay headless.

Canonical Usage
---------------
>>> from studysite.console import rprint
>>> rprint("[bold]Building site[/bold]")
Building site
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from studysite.pipeline.website_generator.runner import BuildReport

_CONSOLE = Console()


def rprint(*objects: Any, **kwargs: Any) -> None:
    """Print through the shared Rich console."""
    _CONSOLE.print(*objects, **kwargs)


def build_summary_table(report: BuildReport) -> Table:
    """Return a table listing every page written by a build.

    Parameters
    ----------
    report : BuildReport
        Result of ``build_site``.

    Returns
    -------
    rich.table.Table
        One row per page with its locale, route and output path relative
        to the site root.
    """
    table = Table(
        title=f"Study site built in {report.output_dir}",
        show_header=True,
        header_style="bold blue",
    )
    table.add_column("Locale", style="bold")
    table.add_column("Route")
    table.add_column("File")
    for locale, route, path in report.pages:
        try:
            shown = path.relative_to(report.output_dir)
        except ValueError:
            shown = path
        table.add_row(locale, route, str(shown))
    return table
