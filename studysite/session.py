"""A rendering session: one route path and one active locale.

``SiteSession`` ties a ``LocaleSelector`` to the page composer. Rendering
is cached until something that affects the output changes; a locale change
drops the cache, so the next ``render`` re-resolves every content node for
the new locale. Switching locales never touches the current path.

Examples
--------
>>> from studysite.content import load_content_store
>>> session = SiteSession(load_content_store())
>>> session.selector.set_locale("th")
>>> session.render().locale
'th'
>>> session.path
'/'
"""

from __future__ import annotations

import logging

from studysite.content.store import ContentStore
from studysite.i18n import LocaleSelector
from studysite.pipeline.website_generator import router
from studysite.pipeline.website_generator.composer import (
    RenderContext,
    RenderedPage,
    compose_page,
)

logger = logging.getLogger(__name__)


class SiteSession:
    def __init__(
        self,
        store: ContentStore,
        selector: LocaleSelector | None = None,
        path: str = "/",
        *,
        strict: bool = True,
    ) -> None:
        self.store = store
        self.selector = selector or LocaleSelector(
            supported=store.locales(), default=store.default_locale
        )
        self.strict = strict
        router.resolve_route(path)
        self.path = router.normalize_path(path)
        self._cached: RenderedPage | None = None
        self.render_count = 0
        self._unsubscribe = self.selector.subscribe(self._on_locale_change)

    def _on_locale_change(self, old: str, new: str) -> None:
        logger.debug("Invalidating render for %s after switch %s -> %s", self.path, old, new)
        self._cached = None

    def navigate(self, path: str) -> None:
        """Move to ``path``; raises ``RouteNotFoundError`` if unknown."""
        router.resolve_route(path)
        normalized = router.normalize_path(path)
        if normalized != self.path:
            self.path = normalized
            self._cached = None

    def render(self) -> RenderedPage:
        """Return the current page, composing it if the cache is stale."""
        if self._cached is None:
            locale = self.selector.current_locale()
            alternates = self.selector.alternate_locales()
            context = RenderContext(self.store, locale, strict=self.strict)
            self._cached = compose_page(
                self.path, context, alternate_locale=alternates[0] if alternates else None
            )
            self.render_count += 1
        return self._cached

    def close(self) -> None:
        """Detach from the locale selector."""
        self._unsubscribe()
