"""Entrance animation specs and the one-shot viewport latch.

An ``AnimationSpec`` is attached to a rendered element as a ``data-animate``
JSON attribute. The page template's script reads it: ``"mount"`` specs play
on load, ``"in-view"`` specs play the first time the element enters the
viewport and never replay. ``ViewportLatch`` is the same one-shot rule in
Python so it can be exercised without a browser.
"""

from __future__ import annotations

import html
import json
from dataclasses import dataclass, field
from typing import Any

TRIGGER_MOUNT = "mount"
TRIGGER_IN_VIEW = "in-view"


@dataclass(frozen=True)
class AnimationSpec:
    initial_state: dict[str, Any]
    rest_state: dict[str, Any]
    trigger: str = TRIGGER_IN_VIEW
    delay_ms: int = 0
    duration_ms: int = 500

    def to_dict(self) -> dict[str, Any]:
        return {
            "initial": self.initial_state,
            "rest": self.rest_state,
            "trigger": self.trigger,
            "delay": self.delay_ms,
            "duration": self.duration_ms,
        }

    def to_attribute(self) -> str:
        """Return the escaped ``data-animate="..."`` attribute."""
        payload = json.dumps(self.to_dict(), separators=(",", ":"), sort_keys=True)
        return f'data-animate="{html.escape(payload, quote=True)}"'


def fade_up(
    delay_ms: int = 0,
    duration_ms: int = 500,
    *,
    offset: int = 20,
    trigger: str = TRIGGER_IN_VIEW,
) -> AnimationSpec:
    """Fade in while moving up by ``offset`` pixels (negative moves down)."""
    return AnimationSpec(
        {"opacity": 0, "y": offset}, {"opacity": 1, "y": 0}, trigger, delay_ms, duration_ms
    )


def fade_in(
    delay_ms: int = 0, duration_ms: int = 600, *, trigger: str = TRIGGER_MOUNT
) -> AnimationSpec:
    return AnimationSpec({"opacity": 0}, {"opacity": 1}, trigger, delay_ms, duration_ms)


def slide_in(delay_ms: int = 0, duration_ms: int = 500) -> AnimationSpec:
    return AnimationSpec(
        {"opacity": 0, "x": -20}, {"opacity": 1, "x": 0}, TRIGGER_IN_VIEW, delay_ms, duration_ms
    )


def scale_in(delay_ms: int = 0, duration_ms: int = 400) -> AnimationSpec:
    return AnimationSpec(
        {"opacity": 0, "scale": 0.95},
        {"opacity": 1, "scale": 1},
        TRIGGER_IN_VIEW,
        delay_ms,
        duration_ms,
    )


def grow_width(percent: float, delay_ms: int = 0, duration_ms: int = 1000) -> AnimationSpec:
    """Grow an element's width from 0 to ``percent``."""
    return AnimationSpec(
        {"width": "0%"},
        {"width": f"{percent:g}%"},
        TRIGGER_IN_VIEW,
        delay_ms,
        duration_ms,
    )


@dataclass
class ViewportLatch:
    """Per-element "has entered view" flag.

    Examples
    --------
    >>> latch = ViewportLatch()
    >>> [latch.observe(v) for v in (False, True, True, False, True)]
    [False, True, False, False, False]
    """

    entered: bool = field(default=False)

    def observe(self, visible: bool) -> bool:
        """Return True only the first time ``visible`` is true."""
        if self.entered or not visible:
            return False
        self.entered = True
        return True
