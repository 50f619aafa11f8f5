"""Route table for the generated site.

Maps the public paths to page keys and to output files. Each locale gets its
own copy of every route under ``/<locale>/``.

Examples
--------
>>> resolve_route("/about-the-study/")
'about'
>>> href_for("/", "th")
'/th/'
>>> output_path_for("/volunteer-information", "en").as_posix()
'en/volunteer-information/index.html'
"""

from __future__ import annotations

from pathlib import PurePosixPath

from studysite.config import OUTPUT_INDEX_FILENAME
from studysite.exceptions import RouteNotFoundError

HOME = "home"
ABOUT = "about"
VOLUNTEER = "volunteer"

ROUTES: dict[str, str] = {
    "/": HOME,
    "/about-the-study": ABOUT,
    "/volunteer-information": VOLUNTEER,
}


def normalize_path(path: str) -> str:
    """Strip a trailing slash (except for ``/``) and ensure a leading one."""
    cleaned = "/" + path.strip().strip("/")
    return cleaned


def resolve_route(path: str) -> str:
    """Return the page key served at ``path``.

    Raises
    ------
    RouteNotFoundError
        If no page is registered for the path.
    """
    key = ROUTES.get(normalize_path(path))
    if key is None:
        raise RouteNotFoundError(path)
    return key


def href_for(path: str, locale: str) -> str:
    """Return the site-absolute link to ``path`` in ``locale``."""
    route = normalize_path(path)
    if route == "/":
        return f"/{locale}/"
    return f"/{locale}{route}/"


def output_path_for(path: str, locale: str) -> PurePosixPath:
    """Return the output file, relative to the site root, for a route."""
    resolve_route(path)
    route = normalize_path(path)
    base = PurePosixPath(locale)
    if route != "/":
        base = base / route.lstrip("/")
    return base / OUTPUT_INDEX_FILENAME
