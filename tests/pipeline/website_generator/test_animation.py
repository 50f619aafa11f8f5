"""Tests for animation specs and the viewport latch."""

import html
import json

from studysite.pipeline.website_generator.animation import (
    TRIGGER_IN_VIEW,
    TRIGGER_MOUNT,
    AnimationSpec,
    ViewportLatch,
    fade_in,
    fade_up,
    grow_width,
    scale_in,
    slide_in,
)


def test_latch_fires_once():
    latch = ViewportLatch()
    assert latch.observe(False) is False
    assert latch.observe(True) is True
    assert latch.entered
    assert latch.observe(True) is False
    assert latch.observe(False) is False
    assert latch.observe(True) is False


def test_independent_latches():
    a, b = ViewportLatch(), ViewportLatch()
    assert a.observe(True)
    assert b.observe(True)


def test_attribute_round_trip():
    spec = fade_up(700, 500)
    attr = spec.to_attribute()
    assert attr.startswith('data-animate="') and attr.endswith('"')
    payload = json.loads(html.unescape(attr[len('data-animate="') : -1]))
    assert payload == {
        "delay": 700,
        "duration": 500,
        "initial": {"opacity": 0, "y": 20},
        "rest": {"opacity": 1, "y": 0},
        "trigger": TRIGGER_IN_VIEW,
    }


def test_factories():
    assert fade_in().trigger == TRIGGER_MOUNT
    assert slide_in(100).initial_state == {"opacity": 0, "x": -20}
    assert scale_in().duration_ms == 400
    assert grow_width(62.5).rest_state == {"width": "62.5%"}
    assert fade_up(offset=-10).initial_state["y"] == -10
    assert isinstance(fade_up(), AnimationSpec)
