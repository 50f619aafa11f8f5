"""Load locale content files from disk into a ``ContentStore``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from studysite.config import DEFAULT_LOCALE, LOCALES_DIR, SUPPORTED_LOCALES
from studysite.content.store import ContentStore
from studysite.exceptions import ContentLoadError

logger = logging.getLogger(__name__)


def load_locale_file(path: Path) -> dict[str, Any]:
    """Read one ``<locale>.json`` content file.

    Parameters
    ----------
    path : Path
        UTF-8 JSON file whose top level is an object.

    Returns
    -------
    dict[str, Any]
        The parsed content tree.

    Raises
    ------
    ContentLoadError
        If the file is missing, is not UTF-8 JSON, or is not an object.
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ContentLoadError(
            f"Cannot read content file {path}: {exc}", context={"path": str(path)}
        ) from exc
    if not isinstance(data, dict):
        raise ContentLoadError(
            f"Content file {path} must contain a JSON object",
            context={"path": str(path)},
        )
    return data


def load_content_store(
    locales_dir: Path | None = None,
    locales: tuple[str, ...] = SUPPORTED_LOCALES,
    *,
    validate: bool = True,
) -> ContentStore:
    """Build a ``ContentStore`` from ``<locales_dir>/<locale>.json`` files.

    When ``validate`` is true the store is checked against the content
    schema before it is returned, so shape problems surface at load time.
    """
    base = Path(locales_dir) if locales_dir is not None else LOCALES_DIR
    dictionaries = {
        locale: load_locale_file(base / f"{locale}.json") for locale in locales
    }
    logger.info("Loaded content for %s from %s", ", ".join(locales), base)
    default = DEFAULT_LOCALE if DEFAULT_LOCALE in dictionaries else locales[0]
    store = ContentStore(dictionaries, default_locale=default)
    if validate:
        store.validate()
    return store
