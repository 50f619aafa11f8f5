"""Build-time reachability check for the researcher's profile image.

The browser already swaps in a generated avatar when the profile image
fails to load. When a build runs with ``--check-assets`` the primary URL is
probed once with a HEAD request; if it is unreachable the fallback avatar
is written into the page directly. The probe is cosmetic: it never raises
and never retries, and a failed probe only changes which URL is rendered.

Examples
--------
>>> import asyncio
>>> from studysite.pipeline.website_generator.components import ProfileImage
>>> image = ProfileImage("https://example.org/me.svg", "Chawin H")
>>> asyncio.run(resolve_profile_src(image, check=False)) is None
True
"""

from __future__ import annotations

import logging

import aiohttp

from studysite.config import ASSET_PROBE_TIMEOUT_SECONDS

from .components import ProfileImage

logger = logging.getLogger(__name__)


async def probe_image(
    session: aiohttp.ClientSession,
    url: str,
    timeout: float = ASSET_PROBE_TIMEOUT_SECONDS,
) -> tuple[bool, dict[str, object]]:
    r"""Send one HEAD request to ``url`` and report whether it succeeded.

    Parameters
    ----------
    session : aiohttp.ClientSession
        Session used for the request; not closed by this function.
    url : str
        Image URL to check.
    timeout : float, optional
        Total request timeout in seconds.

    Returns
    -------
    tuple[bool, dict[str, object]]
        ``(ok, details)``. ``ok`` is True for a 2xx/3xx response. ``details``
        holds ``status_code`` or ``error_type`` and ``message``.
    """
    try:
        async with session.head(
            url,
            allow_redirects=True,
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as response:
            status = response.status
            return status < 400, {"status_code": status}
    except aiohttp.ClientError as exc:
        return False, {"error_type": "ClientError", "message": str(exc)}
    except TimeoutError:
        return False, {"error_type": "TimeoutError"}


async def resolve_profile_src(image: ProfileImage, check: bool) -> str | None:
    """Return the URL to bake into the page, or None to keep the primary.

    When ``check`` is true and the primary image is unreachable, the
    image's one-shot fallback is consumed and returned.
    """
    if not check:
        return None
    async with aiohttp.ClientSession() as session:
        ok, details = await probe_image(session, image.primary_url)
    if ok:
        return None
    logger.warning(
        "Profile image %s unreachable (%s); using fallback avatar",
        image.primary_url,
        details,
    )
    return image.on_error()
