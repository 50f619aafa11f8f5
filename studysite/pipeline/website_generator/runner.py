"""Build the static study site for every locale.

This module provides a headless runner that loads and validates the locale
content, composes every route for every supported locale and writes the
resulting pages under the output directory. It is intended for
programmatic invocation and is wrapped by the CLI.

Usage Examples
--------------
Typical programmatic usage with config defaults::

    from studysite.pipeline.website_generator.runner import run_from_config
    assert run_from_config() is not None

Explicit paths, production error policy::

    from pathlib import Path
    from studysite.pipeline.website_generator.runner import run_from_config

    run_from_config(
        locales_dir=Path("content/locales"),
        output_dir=Path("public"),
        strict=False,
    )

"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path

from studysite.config import (
    DEFAULT_OUTPUT_DIR,
    OUTPUT_INDEX_FILENAME,
    PAGE_TEMPLATE_PATH,
    PROFILE_IMAGE_NAME,
    PROFILE_IMAGE_URL,
    REDIRECT_TEMPLATE_PATH,
    SUPPORTED_LOCALES,
)
from studysite.content.loader import load_content_store
from studysite.content.store import ContentStore
from studysite.exceptions import ContentValidationError

from .asset_probe import resolve_profile_src
from .components import ProfileImage
from .composer import RenderContext, compose_page
from .renderer import generate_final_html, generate_redirect_html, write_html_output
from .router import ROUTES, href_for, output_path_for

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """Pages written by one build, in write order."""

    output_dir: Path
    pages: list[tuple[str, str, Path]] = field(default_factory=list)

    def add(self, locale: str, route: str, path: Path) -> None:
        self.pages.append((locale, route, path))


def build_site(
    store: ContentStore,
    output_dir: Path,
    *,
    strict: bool = True,
    profile_src: str | None = None,
    locales: tuple[str, ...] | None = None,
) -> BuildReport:
    """Render and write every route for every locale.

    Parameters
    ----------
    store : ContentStore
        Loaded content.
    output_dir : Path
        Site root; pages are written to ``<locale>/.../index.html``.
    strict : bool, optional
        Abort on content errors (True) or render empty sections (False).
    profile_src : str | None, optional
        Profile image URL override decided by the asset probe.
    locales : tuple[str, ...] | None, optional
        Locales to build; defaults to every locale in the store.

    Returns
    -------
    BuildReport
        The written pages.

    Raises
    ------
    ContentError
        In strict mode, for any missing or mis-shaped content.
    OSError
        If a page cannot be written.
    """
    report = BuildReport(output_dir=output_dir)
    build_locales = locales or store.locales()
    for locale in build_locales:
        context = RenderContext(store, locale, strict=strict, profile_src=profile_src)
        alternates = [loc for loc in build_locales if loc != locale]
        alternate = alternates[0] if alternates else None
        for route in ROUTES:
            page = compose_page(route, context, alternate_locale=alternate)
            target = output_dir / output_path_for(route, locale)
            write_html_output(generate_final_html(page, PAGE_TEMPLATE_PATH), target)
            report.add(locale, route, target)
            logger.debug("Wrote %s (%s) to %s", route, locale, target)

    root_index = output_dir / OUTPUT_INDEX_FILENAME
    write_html_output(
        generate_redirect_html(href_for("/", store.default_locale), REDIRECT_TEMPLATE_PATH),
        root_index,
    )
    report.add(store.default_locale, "(root)", root_index)
    return report


def _warn_content_problems(store: ContentStore) -> None:
    """Log schema problems as warnings; the affected sections render empty."""
    try:
        store.validate()
    except ContentValidationError as exc:
        for problem in exc.problems:
            logger.warning("Content problem: %s", problem)


def run_from_config(
    locales_dir: Path | None = None,
    output_dir: Path | None = None,
    *,
    strict: bool = True,
    check_assets: bool = False,
) -> BuildReport | None:
    """Load content and build the site, logging instead of raising.

    If an argument is ``None``, project-level defaults from
    ``studysite.config`` are used. In strict mode content is validated
    against the schema at load time; otherwise schema problems are logged
    as warnings and the affected sections render as empty placeholders.

    Returns
    -------
    BuildReport | None
        The build report on success; ``None`` if any error occurred (the
        exception is logged).
    """
    output_dir = Path(output_dir) if output_dir is not None else DEFAULT_OUTPUT_DIR
    try:
        store = load_content_store(locales_dir, SUPPORTED_LOCALES, validate=strict)
        if not strict:
            _warn_content_problems(store)
        image = ProfileImage(PROFILE_IMAGE_URL, PROFILE_IMAGE_NAME)
        profile_src = asyncio.run(resolve_profile_src(image, check_assets))
        report = build_site(store, output_dir, strict=strict, profile_src=profile_src)
    except Exception:
        logger.exception("Failed to build site")
        return None
    logger.info("Wrote %d pages to %s", len(report.pages), output_dir)
    return report


__all__ = ["BuildReport", "build_site", "run_from_config"]
