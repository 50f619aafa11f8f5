"""Website generator pipeline.

Public import surface for composing and writing the study site: the render
context and page composer, the HTML components, the router and the build
runner. All concrete logic lives in the submodules.

Usage
-----
    >>> from studysite.content import load_content_store
    >>> from studysite.pipeline.website_generator import RenderContext, compose_page
    >>> store = load_content_store()
    >>> page = compose_page("/", RenderContext(store, "en"))
    >>> page.title
    'Predicting the Unpredictable'

"""

from .animation import AnimationSpec, ViewportLatch
from .components import (
    ProfileImage,
    badge_style,
    fill_width,
    insight_style,
    render_insight_card,
    render_performance_bar,
    render_stat_card,
)
from .composer import RenderContext, RenderedPage, compose_home_page, compose_page
from .renderer import clean_html_output, generate_final_html, write_html_output
from .router import ROUTES, resolve_route
from .runner import BuildReport, build_site, run_from_config

__all__ = [
    "AnimationSpec",
    "BuildReport",
    "ProfileImage",
    "ROUTES",
    "RenderContext",
    "RenderedPage",
    "ViewportLatch",
    "badge_style",
    "build_site",
    "clean_html_output",
    "compose_home_page",
    "compose_page",
    "fill_width",
    "generate_final_html",
    "insight_style",
    "render_insight_card",
    "render_performance_bar",
    "render_stat_card",
    "resolve_route",
    "run_from_config",
    "write_html_output",
]
