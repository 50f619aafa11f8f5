"""Unit tests for the HTML view components."""

import html
import json
import re

import pytest

from studysite.config import (
    BADGE_STYLE_NEGATIVE,
    BADGE_STYLE_NEUTRAL,
    BADGE_STYLE_POSITIVE,
    DEFAULT_INSIGHT_STYLE,
    INSIGHT_STYLES,
)
from studysite.content.schema import InsightCard, PerformanceMetric, StatusCode, resolve_status
from studysite.pipeline.website_generator import components as c
from studysite.pipeline.website_generator.animation import fade_up


def _metric(score=1.5, status="Winner", peak=4.0):
    return PerformanceMetric("XGBoost", score, peak, status, resolve_status(status))


def _animations(fragment: str) -> list[dict]:
    return [
        json.loads(html.unescape(raw))
        for raw in re.findall(r'data-animate="([^"]*)"', fragment)
    ]


@pytest.mark.parametrize(
    "score, expected",
    [(0, 0.0), (0.75, 25.0), (1.5, 50.0), (3, 100.0), (3.0001, 100.0), (42, 100.0), (-1, 0.0)],
)
def test_fill_width(score, expected):
    assert c.fill_width(score) == pytest.approx(expected)


def test_fill_width_monotonic_below_saturation():
    widths = [c.fill_width(s / 10) for s in range(0, 31)]
    assert widths == sorted(widths)
    assert widths[-1] == 100.0


def test_badge_styles():
    assert c.badge_style(StatusCode.WINNER) == BADGE_STYLE_POSITIVE
    assert c.badge_style(StatusCode.FAILED) == BADGE_STYLE_NEGATIVE
    assert c.badge_style(StatusCode.OTHER) == BADGE_STYLE_NEUTRAL


def test_badge_identical_across_languages():
    en = c.render_performance_bar(_metric(status="Winner"), 0)
    th = c.render_performance_bar(_metric(status="ชนะเลิศ"), 0)
    assert BADGE_STYLE_POSITIVE in en and BADGE_STYLE_POSITIVE in th
    en_f = c.render_performance_bar(_metric(status="Failed"), 0)
    th_f = c.render_performance_bar(_metric(status="ล้มเหลว"), 0)
    assert BADGE_STYLE_NEGATIVE in en_f and BADGE_STYLE_NEGATIVE in th_f


def test_unknown_status_is_neutral():
    out = c.render_performance_bar(_metric(status="Pending"), 0)
    assert BADGE_STYLE_NEUTRAL in out
    assert ">Pending</span>" in out


def test_performance_bar_clamps_and_labels():
    out = c.render_performance_bar(_metric(score=4.5, peak=8.26), 300, "Avg F0.5", "Peak")
    assert 'data-fill="100"' in out
    assert "width: 100%" in out
    assert "Avg F0.5: 4.5%" in out
    assert "Peak: 8.26%" in out
    row, fill = _animations(out)
    assert row["delay"] == 300
    assert fill["delay"] == 500
    assert fill["duration"] == 1000
    assert fill["rest"] == {"width": "100%"}


def test_insight_card_styles():
    for color, style in INSIGHT_STYLES.items():
        assert style in c.render_insight_card(InsightCard("T", "C", color), 0)
    purple = c.render_insight_card(InsightCard("T", "C", "purple"), 200)
    assert DEFAULT_INSIGHT_STYLE in purple
    assert _animations(purple)[0]["delay"] == 200
    assert _animations(purple)[0]["duration"] == 400


def test_insight_card_escapes():
    out = c.render_insight_card(InsightCard("<b>", "a & b", "blue"), 0)
    assert "&lt;b&gt;" in out and "a &amp; b" in out


def test_stat_card_renders_value_and_label():
    out = c.render_stat_card("Models", "7", "beaker", fade_up(500))
    assert '<dt class="text-3xl font-bold text-slate-900">7</dt>' in out
    assert ">Models</dd>" in out
    assert "<svg" in out


def test_stat_card_fail_soft():
    out = c.render_stat_card(None, None, "no-such-icon", fade_up(0))
    assert '<dt class="text-3xl font-bold text-slate-900"></dt>' in out
    assert "<svg" not in out


def test_apply_components():
    assert c.apply_components("By <1>Chawin</1>.") == (
        'By <span class="font-semibold text-slate-900">Chawin</span>.'
    )
    assert c.apply_components("<2>x</2> <script>") == "x &lt;script&gt;"
    assert c.apply_components("plain") == "plain"


def test_profile_image_fallback_once():
    img = c.ProfileImage("https://example.org/a.svg", "Chawin H")
    assert img.fallback_url == "https://ui-avatars.com/api/?name=Chawin+H&background=random"
    assert img.on_error() == img.fallback_url
    assert img.on_error() is None
    assert img.on_error() is None


def test_profile_image_latch_not_constructor_arg():
    with pytest.raises(TypeError):
        c.ProfileImage("https://example.org/a.svg", "Chawin H", _fallback_used=True)
    assert "_fallback_used" not in repr(c.ProfileImage("u", "n"))


def test_render_profile_image_guards_onerror():
    img = c.ProfileImage("https://example.org/a.svg", "Chawin H")
    out = c.render_profile_image(img)
    assert 'src="https://example.org/a.svg"' in out
    assert "this.onerror=null" in out
    assert out.index("this.onerror=null") < out.index("this.src=")
    override = c.render_profile_image(img, img.fallback_url)
    assert 'src="https://ui-avatars.com/api/?name=Chawin+H&amp;background=random"' in override


def test_format_number():
    assert c.format_number(2.50) == "2.5"
    assert c.format_number(7) == "7"
