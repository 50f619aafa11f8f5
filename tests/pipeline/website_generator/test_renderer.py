"""Unit tests for website renderer utilities."""

from pathlib import Path

import pytest

from studysite.config import PAGE_TEMPLATE_PATH, REDIRECT_TEMPLATE_PATH
from studysite.pipeline.website_generator import renderer as r
from studysite.pipeline.website_generator.composer import RenderedPage


def _page(**overrides) -> RenderedPage:
    fields = dict(
        route="/",
        locale="th",
        title="A & B",
        language_class="lang-th",
        navbar="<nav>N</nav>",
        main="<main-body/>",
        footer="<p>F</p>",
    )
    fields.update(overrides)
    return RenderedPage(**fields)


def test_clean_html_output():
    raw = "<p>\n</p><p>&nbsp;</p><h1>Title</h1>\n<p><br/></p>\n<br/><br/>"
    assert r.clean_html_output(raw) == "<h1>Title</h1><br>"


def test_clean_html_output_type_error():
    with pytest.raises(TypeError):
        r.clean_html_output(None)  # type: ignore[arg-type]


def test_fill_template_leaves_other_braces():
    tpl = "<style>body { margin: 0 }</style>{title}|{unknown}"
    assert r.fill_template(tpl, {"title": "T"}) == (
        "<style>body { margin: 0 }</style>T|{unknown}"
    )


def test_generate_final_html(tmp_path: Path) -> None:
    tpl = tmp_path / "tpl.html"
    tpl.write_text(
        '<html lang="{lang}"><title>{title}</title>'
        '<body class="{language_class}">{navbar}{main}{footer}</body></html>',
        encoding="utf-8",
    )
    out = r.generate_final_html(_page(), tpl)
    assert out == (
        '<html lang="th"><title>A &amp; B</title>'
        '<body class="lang-th"><nav>N</nav><main-body/><p>F</p></body></html>'
    )


def test_generate_final_html_shipped_template():
    out = r.generate_final_html(_page(), PAGE_TEMPLATE_PATH)
    for name in r.TEMPLATE_PLACEHOLDERS:
        assert "{" + name + "}" not in out
    assert "<main-body/>" in out
    assert "IntersectionObserver" in out


def test_generate_final_html_missing_template(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        r.generate_final_html(_page(), tmp_path / "missing.html")


def test_generate_redirect_html():
    out = r.generate_redirect_html("/en/", REDIRECT_TEMPLATE_PATH)
    assert 'content="0; url=/en/"' in out
    assert "{target}" not in out


def test_write_html_output(tmp_path: Path) -> None:
    out = tmp_path / "en" / "about-the-study" / "index.html"
    r.write_html_output("<html></html>", out)
    assert out.read_text(encoding="utf-8") == "<html></html>"


def test_write_html_output_propagates(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(OSError):
        r.write_html_output("<html></html>", blocker / "index.html")
