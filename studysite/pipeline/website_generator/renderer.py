"""HTML output utilities for the static study site.

This module is the lowest rendering layer: it normalises HTML fragments,
injects a composed page into the page template and writes the result to
disk. It knows nothing about content paths or locales beyond the fields of
a ``RenderedPage``.

System Boundaries
-----------------
- Accepts already composed pages; agnostic to the content store.
- Template placeholders are ``{lang}``, ``{language_class}``, ``{title}``,
  ``{navbar}``, ``{main}`` and ``{footer}``.
- File-system errors propagate to the build runner, which logs them.

Example
-------
>>> from studysite.pipeline.website_generator import renderer
>>> renderer.clean_html_output("<p></p><h1>Hi</h1>")
'<h1>Hi</h1>'
"""

from __future__ import annotations

import html
import re
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .composer import RenderedPage

TEMPLATE_PLACEHOLDERS: tuple[str, ...] = (
    "lang",
    "language_class",
    "title",
    "navbar",
    "main",
    "footer",
)


def clean_html_output(html_content: str) -> str:
    r"""Perform lightweight normalization and cleaning of generated HTML strings.

    Cleans HTML (typically from Markdown conversion) by removing empty paragraphs,
    redundant breaks, excess whitespace, and normalizing block structure.

    Parameters
    ----------
    html_content : str
        Raw HTML string.

    Returns
    -------
    str
        Fully cleaned HTML string.

    Raises
    ------
    TypeError
        If input is not str.

    Examples
    --------
    >>> raw = "<p></p><h1>Hi</h1><p>&nbsp;</p><br><br>"
    >>> clean_html_output(raw)
    '<h1>Hi</h1><br>'
    """
    if not isinstance(html_content, str):
        raise TypeError("Input must be a string.")
    html_content = re.sub(r"<p>\s*</p>", "", html_content)
    html_content = re.sub(r"<p>&nbsp;</p>", "", html_content)
    html_content = re.sub(r"<p><br\s*/?>\s*</p>", "", html_content)
    html_content = re.sub(r"(<br\s*/?>\s*){2,}", "<br>", html_content)
    html_content = re.sub(r">\s+<", "><", html_content)
    return html_content.strip()


def fill_template(template: str, values: dict[str, str]) -> str:
    """Replace every ``{name}`` placeholder in ``template``.

    Only the known placeholders are replaced, so literal braces in inline
    CSS or scripts survive untouched.
    """
    for name in TEMPLATE_PLACEHOLDERS:
        template = template.replace("{" + name + "}", values.get(name, ""))
    return template


def generate_final_html(page: RenderedPage, template_path: Path) -> str:
    r"""Render a full HTML document by injecting ``page`` into the template.

    Parameters
    ----------
    page : RenderedPage
        Composed page fragments and metadata.
    template_path : Path
        Path to the HTML page template.

    Returns
    -------
    str
        Complete HTML document.

    Raises
    ------
    OSError
        If the template file cannot be read.
    """
    with template_path.open("r", encoding="utf-8") as fh:
        tpl = fh.read()
    return fill_template(
        tpl,
        {
            "lang": html.escape(page.locale),
            "language_class": page.language_class,
            "title": html.escape(page.title),
            "navbar": page.navbar,
            "main": page.main,
            "footer": page.footer,
        },
    )


def generate_redirect_html(target: str, template_path: Path) -> str:
    """Render the root page that forwards visitors to ``target``."""
    with template_path.open("r", encoding="utf-8") as fh:
        tpl = fh.read()
    return tpl.replace("{target}", html.escape(target, quote=True))


def write_html_output(html_content: str, output_file: Path) -> None:
    r"""Write the provided HTML content to disk, creating parent directories.

    Parameters
    ----------
    html_content : str
        Full HTML string to be written.
    output_file : Path
        Output file path.

    Raises
    ------
    OSError
        If the directory cannot be created or the file cannot be written.
    """
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(html_content, encoding="utf-8")
