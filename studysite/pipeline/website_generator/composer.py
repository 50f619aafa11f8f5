"""Page composition: resolve content per section and hand it to components.

The home page is assembled from five sections in a fixed order: hero,
stats grid, performance and insights panel, tech stack strip, researcher
bio. Each section resolves its own content paths once per render, so a
content error in one section does not stop the others from resolving.

In strict mode (the default for development builds) a ``ContentError``
propagates and aborts the render. In non-strict mode the failing section
is logged and replaced by an empty placeholder.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from studysite.config import (
    INSIGHT_CARD_BASE_DELAY_MS,
    INSIGHT_CARD_STEP_MS,
    MISSING_SECTION_HTML_FORMAT,
    PERFORMANCE_BAR_STEP_MS,
    PROFILE_IMAGE_NAME,
    PROFILE_IMAGE_URL,
    STAT_CARD_BASE_DELAY_MS,
    STAT_CARD_DURATION_MS,
    STAT_CARD_STEP_MS,
    STAT_CARDS,
)
from studysite.content.schema import Shape
from studysite.content.store import ContentStore
from studysite.exceptions import ContentError
from studysite.i18n import language_class

from . import router
from .animation import fade_in, fade_up
from .components import (
    ProfileImage,
    apply_components,
    esc,
    render_hero_badge,
    render_insight_card,
    render_performance_bar,
    render_profile_image,
    render_stat_card,
    render_tech_pill,
)
from .icons import render_icon
from .pages import compose_info_page

logger = logging.getLogger(__name__)


@dataclass
class RenderContext:
    """Everything a render pass needs: content, locale and error policy."""

    store: ContentStore
    locale: str
    strict: bool = True
    profile_src: str | None = None

    def text(self, path: str) -> Any:
        return self.store.resolve(path, self.locale, Shape.SCALAR)

    def records(self, path: str) -> list[Any]:
        return self.store.resolve_records(path, self.locale)

    def href(self, path: str) -> str:
        return router.href_for(path, self.locale)


@dataclass(frozen=True)
class RenderedPage:
    route: str
    locale: str
    title: str
    language_class: str
    navbar: str
    main: str
    footer: str


def render_section(context: RenderContext, name: str, build: Callable[[], str]) -> str:
    """Run one section builder under the context's error policy."""
    try:
        return build()
    except ContentError as exc:
        if context.strict:
            raise
        logger.warning("Section '%s' rendered empty: %s", name, exc.to_dict())
        return MISSING_SECTION_HTML_FORMAT.format(section=name)


# Home page sections


def compose_hero(context: RenderContext) -> str:
    badge = context.text("homePage.hero.badge")
    title = context.text("homePage.hero.title")
    subtitle = context.text("homePage.hero.subtitle")
    cta_primary = context.text("homePage.hero.ctaPrimary")
    cta_secondary = context.text("homePage.hero.ctaSecondary")
    return (
        '<section data-section="hero" class="relative isolate px-6 pt-14 lg:px-8 pb-20 bg-white">'
        '<div class="mx-auto max-w-4xl text-center pt-10 sm:pt-16">'
        f"{render_hero_badge(badge)}"
        f'<h1 class="text-4xl font-extrabold tracking-tight text-slate-900 sm:text-6xl mb-6" '
        f'{fade_up(duration_ms=600, trigger="mount").to_attribute()}>{esc(title)}</h1>'
        f'<p class="mt-6 text-lg leading-8 text-slate-600 max-w-2xl mx-auto" '
        f"{fade_in(200).to_attribute()}>{esc(subtitle)}</p>"
        f'<div class="mt-10 flex items-center justify-center gap-x-6" '
        f'{fade_up(400, 600, trigger="mount").to_attribute()}>'
        f'<a href="#performance" class="rounded-full bg-indigo-600 px-8 py-3.5 text-sm '
        f'font-semibold text-white shadow-lg">{esc(cta_primary)}</a>'
        f'<a href="{esc(context.href("/about-the-study"))}" class="text-sm font-semibold '
        f'leading-6 text-slate-900 flex items-center gap-1">{esc(cta_secondary)} '
        f'{render_icon("arrow-right", "h-4 w-4")}</a>'
        "</div></div></section>"
    )


def compose_stats(context: RenderContext) -> str:
    """Render the four stat cards in their fixed order.

    Values are literals; labels come from ``homePage.stats``. Delays step
    by 100 ms from 500 ms.
    """
    cards = []
    for index, (icon, value, label_key) in enumerate(STAT_CARDS):
        label = context.text(f"homePage.stats.{label_key}")
        delay = STAT_CARD_BASE_DELAY_MS + index * STAT_CARD_STEP_MS
        cards.append(
            render_stat_card(label, value, icon, fade_up(delay, STAT_CARD_DURATION_MS))
        )
    return (
        '<section data-section="stats" class="container mx-auto px-6 -mt-10 relative z-10">'
        f'<dl class="grid grid-cols-2 md:grid-cols-4 gap-4">{"".join(cards)}</dl></section>'
    )


def compose_performance(context: RenderContext) -> str:
    base = "homePage.performanceSection"
    title = context.text(f"{base}.title")
    description = context.text(f"{base}.description")
    subtitle = context.text(f"{base}.subtitle")
    note = context.text(f"{base}.note")
    score_label = context.text(f"{base}.scoreLabel")
    peak_label = context.text(f"{base}.peakLabel")
    metrics = context.records(f"{base}.metrics")
    bars = "".join(
        render_performance_bar(
            metric, index * PERFORMANCE_BAR_STEP_MS, str(score_label), str(peak_label)
        )
        for index, metric in enumerate(metrics)
    )
    return (
        '<div data-section="performance">'
        f'<div class="mb-10"><h2 class="text-3xl font-bold tracking-tight text-slate-900 '
        f'sm:text-4xl mb-4">{esc(title)}</h2>'
        f'<p class="text-lg text-slate-600">{esc(description)}</p></div>'
        '<div class="bg-white p-8 rounded-2xl shadow-lg ring-1 ring-slate-900/5">'
        f'<h3 class="font-semibold text-slate-900 mb-6 border-b pb-2">{esc(subtitle)}</h3>'
        f"{bars}"
        f'<p class="text-xs text-slate-400 mt-6 italic">{esc(note)}</p></div></div>'
    )


def compose_insights(context: RenderContext) -> str:
    title = context.text("homePage.insightsSection.title")
    cards = context.records("homePage.insightsSection.cards")
    rendered = "".join(
        render_insight_card(card, INSIGHT_CARD_BASE_DELAY_MS + index * INSIGHT_CARD_STEP_MS)
        for index, card in enumerate(cards)
    )
    return (
        '<div data-section="insights" class="space-y-8 lg:pt-20">'
        '<div class="pl-4 border-l-4 border-indigo-600">'
        f'<h3 class="text-2xl font-bold text-slate-900">{esc(title)}</h3></div>'
        f'<div class="grid gap-6">{rendered}</div></div>'
    )


def compose_tech_stack(context: RenderContext) -> str:
    title = context.text("homePage.techStack.title")
    description = context.text("homePage.techStack.description")
    stack = context.records("homePage.techStack.stack")
    return (
        '<section data-section="techStack" class="bg-slate-900 py-16 text-white">'
        '<div class="mx-auto max-w-7xl px-6 lg:px-8 text-center">'
        f'{render_icon("code-bracket", "h-12 w-12 text-indigo-400 mx-auto mb-4")}'
        f'<h2 class="text-2xl font-bold tracking-tight mb-2">{esc(title)}</h2>'
        f'<p class="text-slate-400 mb-8 max-w-2xl mx-auto">{esc(description)}</p>'
        f'<div class="flex flex-wrap justify-center gap-4">'
        f'{"".join(render_tech_pill(tech) for tech in stack)}</div></div></section>'
    )


def compose_researcher(context: RenderContext) -> str:
    name = context.text("homePage.researcher.name")
    role = context.text("homePage.researcher.role")
    bio = context.text("homePage.researcher.bio")
    trust = context.text("homePage.trust.text")
    image = ProfileImage(PROFILE_IMAGE_URL, PROFILE_IMAGE_NAME)
    return (
        '<section data-section="researcher" class="py-24 bg-white">'
        '<div class="mx-auto max-w-3xl px-6 lg:px-8 text-center">'
        '<div class="relative inline-block mb-6">'
        '<div class="h-32 w-32 rounded-full border-4 border-white shadow-lg mx-auto '
        f'overflow-hidden bg-slate-50 relative">{render_profile_image(image, context.profile_src)}</div>'
        '<div class="absolute bottom-1 right-2 h-6 w-6 bg-green-500 border-4 border-white '
        'rounded-full z-10"></div></div>'
        f'<h2 class="text-2xl font-bold text-slate-900 mt-4">{esc(name)}</h2>'
        f'<p class="text-indigo-600 font-medium mb-4">{esc(role)}</p>'
        f'<div class="text-slate-600 leading-relaxed mb-8">{apply_components(str(bio))}</div>'
        '<div class="flex items-center justify-center gap-4 text-sm text-slate-500 border-t pt-8">'
        f'{render_icon("shield-check", "h-5 w-5 text-green-600")}<span>{esc(trust)}</span>'
        "</div></div></section>"
    )


def compose_home_page(context: RenderContext) -> str:
    """Assemble the home page body in its fixed section order."""
    hero = render_section(context, "hero", lambda: compose_hero(context))
    stats = render_section(context, "stats", lambda: compose_stats(context))
    performance = render_section(context, "performance", lambda: compose_performance(context))
    insights = render_section(context, "insights", lambda: compose_insights(context))
    tech = render_section(context, "techStack", lambda: compose_tech_stack(context))
    researcher = render_section(context, "researcher", lambda: compose_researcher(context))
    return (
        '<div class="overflow-hidden bg-slate-50/50">'
        f"{hero}{stats}"
        '<section id="performance" class="py-24 sm:py-32">'
        '<div class="mx-auto max-w-7xl px-6 lg:px-8">'
        '<div class="grid grid-cols-1 lg:grid-cols-2 gap-16 items-start">'
        f"{performance}{insights}</div></div></section>"
        f"{tech}{researcher}</div>"
    )


# Layout


def compose_navbar(context: RenderContext, route: str, alternate_locale: str | None) -> str:
    """Render the site navigation with a switcher to ``alternate_locale``."""
    links = [
        ("/", "nav.home"),
        ("/about-the-study", "nav.about"),
        ("/volunteer-information", "nav.volunteer"),
    ]
    items = "".join(
        f'<a href="{esc(context.href(path))}" class="text-sm font-semibold text-slate-700'
        f'{" text-indigo-600" if router.normalize_path(route) == path else ""}">'
        f"{esc(context.text(key))}</a>"
        for path, key in links
    )
    switcher = ""
    if alternate_locale is not None:
        switcher = (
            f'<a href="{esc(router.href_for(route, alternate_locale))}" '
            f'hreflang="{esc(alternate_locale)}" class="language-switch text-sm">'
            f'{esc(context.text("nav.switchLanguage"))}</a>'
        )
    return (
        '<nav class="mx-auto flex max-w-7xl items-center justify-between p-6 lg:px-8">'
        f'<a href="{esc(context.href("/"))}" class="font-bold text-slate-900">'
        f'{esc(context.text("nav.brand"))}</a>'
        f'<div class="flex gap-x-8">{items}</div>{switcher}</nav>'
    )


def compose_footer(context: RenderContext) -> str:
    return (
        '<div class="mx-auto max-w-7xl px-6 py-12 text-center text-sm text-slate-500">'
        f'<p>{esc(context.text("footer.text"))}</p>'
        f'<p class="mt-2">{esc(context.text("footer.contact"))}</p></div>'
    )


def _page_title(context: RenderContext, page_key: str) -> str:
    path = {
        router.HOME: "homePage.meta.title",
        router.ABOUT: "aboutPage.title",
        router.VOLUNTEER: "volunteerPage.title",
    }[page_key]
    try:
        return str(context.text(path))
    except ContentError:
        if context.strict:
            raise
        return ""


def compose_page(
    route: str, context: RenderContext, alternate_locale: str | None = None
) -> RenderedPage:
    """Compose the full page served at ``route`` for the context's locale.

    Raises
    ------
    RouteNotFoundError
        If ``route`` is not registered.
    ContentError
        In strict mode, for any missing or mis-shaped content.
    """
    page_key = router.resolve_route(route)
    if page_key == router.HOME:
        main = compose_home_page(context)
    else:
        main = render_section(context, page_key, lambda: compose_info_page(page_key, context))
    return RenderedPage(
        route=router.normalize_path(route),
        locale=context.locale,
        title=_page_title(context, page_key),
        language_class=language_class(context.locale),
        navbar=render_section(
            context, "navbar", lambda: compose_navbar(context, route, alternate_locale)
        ),
        main=main,
        footer=render_section(context, "footer", lambda: compose_footer(context)),
    )
