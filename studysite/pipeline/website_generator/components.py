"""HTML view components for the study landing page.

Each function takes already-resolved content and returns an HTML fragment.
Components are pure: they never read the content store and never raise for
cosmetic problems. An unknown badge status, an unknown insight colour or an
unknown icon degrades to a defined default presentation.

Examples
--------
>>> fill_width(1.5)
50.0
>>> fill_width(4.2)
100.0
>>> badge_style(StatusCode.WINNER) == BADGE_STYLE_POSITIVE
True
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from urllib.parse import quote_plus

from studysite.config import (
    BADGE_STYLE_NEGATIVE,
    BADGE_STYLE_NEUTRAL,
    BADGE_STYLE_POSITIVE,
    DEFAULT_INSIGHT_STYLE,
    FALLBACK_AVATAR_URL_FORMAT,
    INSIGHT_CARD_DURATION_MS,
    INSIGHT_STYLES,
    PERFORMANCE_BAR_FILL_DURATION_MS,
    PERFORMANCE_BAR_FILL_OFFSET_MS,
    PERFORMANCE_REFERENCE_SCALE,
)
from studysite.content.schema import InsightCard, PerformanceMetric, StatusCode

from .animation import AnimationSpec, fade_up, grow_width, scale_in, slide_in
from .icons import render_icon

# Numbered component tags inside translated strings, e.g. "by <1>Chawin</1>".
_COMPONENT_TAG = re.compile(r"<(\d+)>(.*?)</\1>", re.DOTALL)

BIO_COMPONENTS: dict[str, tuple[str, str]] = {
    "1": ("span", "font-semibold text-slate-900"),
}


def esc(value: object) -> str:
    """HTML-escape a scalar; ``None`` becomes an empty string."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def format_number(value: float | int) -> str:
    """Format a score without trailing zeros (``2.50`` -> ``'2.5'``)."""
    return f"{value:g}"


def fill_width(score: float, scale: float = PERFORMANCE_REFERENCE_SCALE) -> float:
    """Return the bar fill in percent: ``min(score / scale * 100, 100)``.

    Negative scores clamp to 0 so the bar never renders a negative width.
    """
    return max(0.0, min(score / scale * 100, 100.0))


def badge_style(status_code: StatusCode) -> str:
    """Return the badge classes for a resolved status."""
    if status_code is StatusCode.WINNER:
        return BADGE_STYLE_POSITIVE
    if status_code is StatusCode.FAILED:
        return BADGE_STYLE_NEGATIVE
    return BADGE_STYLE_NEUTRAL


def insight_style(color: str) -> str:
    """Return the card classes for ``color``, falling back to the default."""
    return INSIGHT_STYLES.get(color, DEFAULT_INSIGHT_STYLE)


def apply_components(
    text: str, components: dict[str, tuple[str, str]] = BIO_COMPONENTS
) -> str:
    r"""Escape ``text`` and turn numbered tags into styled elements.

    ``<1>name</1>`` becomes ``<span class="...">name</span>`` for every
    index found in ``components``. Tags with an unknown index keep only
    their inner text.

    Examples
    --------
    >>> apply_components("By <1>Chawin</1> & co")
    'By <span class="font-semibold text-slate-900">Chawin</span> &amp; co'
    """
    parts: list[str] = []
    cursor = 0
    for match in _COMPONENT_TAG.finditer(text):
        parts.append(esc(text[cursor : match.start()]))
        inner = esc(match.group(2))
        component = components.get(match.group(1))
        if component is None:
            parts.append(inner)
        else:
            tag, css = component
            parts.append(f'<{tag} class="{esc(css)}">{inner}</{tag}>')
        cursor = match.end()
    parts.append(esc(text[cursor:]))
    return "".join(parts)


def render_hero_badge(text: object) -> str:
    anim = fade_up(offset=-10, trigger="mount")
    return (
        f'<div class="inline-flex items-center rounded-full border border-sky-200 bg-sky-50 '
        f'px-3 py-1 text-sm font-medium text-sky-800 mb-6" {anim.to_attribute()}>'
        f'{render_icon("check-badge", "mr-1.5 h-4 w-4 text-sky-600")}{esc(text)}</div>'
    )


def render_stat_card(
    label: object, value: object, icon: str | None, animation: AnimationSpec
) -> str:
    """Render one headline statistic.

    A missing ``value`` or ``label`` leaves its slot empty instead of
    failing the render.
    """
    return (
        '<div class="stat-card flex flex-col items-center justify-center p-6 bg-white '
        f'rounded-2xl shadow-sm border border-slate-100" {animation.to_attribute()}>'
        f'<div class="p-3 bg-indigo-50 rounded-full mb-3">'
        f'{render_icon(icon, "h-6 w-6 text-indigo-600")}</div>'
        f'<dt class="text-3xl font-bold text-slate-900">{esc(value)}</dt>'
        f'<dd class="text-sm font-medium text-slate-500 uppercase tracking-wide mt-1">'
        f"{esc(label)}</dd></div>"
    )


def render_performance_bar(
    metric: PerformanceMetric,
    delay_ms: int,
    score_label: str = "Avg F0.5",
    peak_label: str = "Peak",
) -> str:
    """Render one labelled progress bar with its status badge."""
    width = fill_width(metric.score)
    bar_anim = grow_width(
        width,
        delay_ms + PERFORMANCE_BAR_FILL_OFFSET_MS,
        PERFORMANCE_BAR_FILL_DURATION_MS,
    )
    return (
        f'<div class="performance-bar mb-6 last:mb-0" {slide_in(delay_ms).to_attribute()}>'
        '<div class="flex justify-between items-center mb-2">'
        f'<span class="font-semibold text-slate-700">{esc(metric.name)}</span>'
        f'<span class="status-badge text-xs px-2 py-0.5 rounded-full font-medium '
        f'{badge_style(metric.status_code)}">{esc(metric.status)}</span></div>'
        '<div class="w-full bg-slate-100 rounded-full h-3 mb-1 overflow-hidden">'
        f'<div class="bar-fill bg-indigo-600 h-3 rounded-full" data-fill="{width:g}" '
        f'style="width: {width:g}%" {bar_anim.to_attribute()}></div></div>'
        '<div class="flex justify-between text-xs text-slate-500">'
        f"<span>{esc(score_label)}: {format_number(metric.score)}%</span>"
        f"<span>{esc(peak_label)}: {format_number(metric.peak)}%</span></div></div>"
    )


def render_insight_card(card: InsightCard, delay_ms: int) -> str:
    """Render a titled, coloured callout block."""
    anim = scale_in(delay_ms, INSIGHT_CARD_DURATION_MS)
    return (
        f'<div class="insight-card p-6 rounded-r-xl border-l-4 {insight_style(card.color)} '
        f'shadow-sm" {anim.to_attribute()}>'
        f'<h3 class="text-lg font-bold text-slate-800 mb-2">{esc(card.title)}</h3>'
        f'<p class="text-slate-600 leading-relaxed text-sm">{esc(card.content)}</p></div>'
    )


def render_tech_pill(tech: str) -> str:
    return (
        '<span class="tech-pill px-4 py-2 rounded-full bg-slate-800 border border-slate-700 '
        f'text-sm font-mono text-indigo-200">{esc(tech)}</span>'
    )


@dataclass
class ProfileImage:
    """Remote profile picture with a one-shot fallback.

    ``on_error`` hands out the generated avatar URL the first time the
    primary image fails and ``None`` afterwards, so a failing fallback can
    never trigger another substitution.

    Examples
    --------
    >>> img = ProfileImage("https://example.org/me.svg", "Chawin H")
    >>> img.fallback_url
    'https://ui-avatars.com/api/?name=Chawin+H&background=random'
    >>> img.on_error() == img.fallback_url
    True
    >>> img.on_error() is None
    True
    """

    primary_url: str
    name: str
    _fallback_used: bool = field(default=False, init=False, repr=False)

    @property
    def fallback_url(self) -> str:
        return FALLBACK_AVATAR_URL_FORMAT.format(name=quote_plus(self.name))

    def on_error(self) -> str | None:
        if self._fallback_used:
            return None
        self._fallback_used = True
        return self.fallback_url


def render_profile_image(image: ProfileImage, src: str | None = None) -> str:
    """Render the researcher's avatar.

    ``src`` overrides the primary URL (used when the build already knows
    the primary image is unreachable). The ``onerror`` handler clears
    itself before swapping in the fallback, so the browser substitutes at
    most once.
    """
    fallback = image.fallback_url
    onerror = f"this.onerror=null;this.src='{fallback}'"
    return (
        '<img class="w-full h-full object-cover object-center transform scale-125" '
        f'src="{esc(src or image.primary_url)}" alt="{esc(image.name)}" '
        f'onerror="{esc(onerror)}"/>'
    )
