"""Informational pages (about the study, volunteer information).

Each page has a ``title`` and ``lead`` scalar and a ``body`` authored in
Markdown. The body is converted with ``markdown2`` and normalised with
``clean_html_output`` before it is placed in the page.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

import markdown2

from .animation import fade_up
from .components import esc
from .renderer import clean_html_output

if TYPE_CHECKING:
    from .composer import RenderContext

INFO_PAGE_CONTENT_ROOTS: dict[str, str] = {
    "about": "aboutPage",
    "volunteer": "volunteerPage",
}

MARKDOWN_EXTRAS: list[str] = ["tables", "fenced-code-blocks"]


def markdown_to_html(markdown_text: str) -> str:
    r"""Convert a Markdown content string to cleaned HTML.

    Examples
    --------
    >>> markdown_to_html("## Goals\n\n* one\n* two")
    '<h2>Goals</h2><ul><li>one</li><li>two</li></ul>'
    """
    converted = cast(str, markdown2.markdown(markdown_text, extras=MARKDOWN_EXTRAS))
    return clean_html_output(converted)


def compose_info_page(page_key: str, context: RenderContext) -> str:
    """Render the body of an informational page.

    Raises
    ------
    KeyError
        If ``page_key`` is not an informational page.
    ContentError
        For missing or mis-shaped content.
    """
    root = INFO_PAGE_CONTENT_ROOTS[page_key]
    title = context.text(f"{root}.title")
    lead = context.text(f"{root}.lead")
    body = markdown_to_html(str(context.text(f"{root}.body")))
    return (
        f'<article data-section="{page_key}" class="mx-auto max-w-3xl px-6 py-24 lg:px-8">'
        f'<h1 class="text-4xl font-bold tracking-tight text-slate-900" '
        f'{fade_up(trigger="mount").to_attribute()}>{esc(title)}</h1>'
        f'<p class="mt-6 text-lg leading-8 text-slate-600">{esc(lead)}</p>'
        f'<div class="prose prose-slate mt-10">{body}</div></article>'
    )
