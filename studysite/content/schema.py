"""Content shapes and the path schema shared by the store and the renderers.

The shape expected at each content path is declared once in
``CONTENT_SCHEMA``. Record-list paths carry a validator that turns raw
records into typed values (``PerformanceMetric``, ``InsightCard`` or plain
strings), so a malformed list fails when content is loaded instead of when
a page is rendered.

Examples
--------
>>> resolve_status("ชนะเลิศ") is resolve_status("Winner")
True
>>> CONTENT_SCHEMA["homePage.techStack.stack"].shape
<Shape.RECORD_LIST: 'record-list'>
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from studysite.config import STATUS_VOCABULARY


class Shape(str, Enum):
    """Structural type of a content node."""

    SCALAR = "scalar"
    RECORD_LIST = "record-list"


class StatusCode(str, Enum):
    """Locale-independent outcome of a performance metric."""

    WINNER = "winner"
    FAILED = "failed"
    OTHER = "other"


@dataclass(frozen=True)
class PerformanceMetric:
    name: str
    score: float
    peak: float
    status: str
    status_code: StatusCode


@dataclass(frozen=True)
class InsightCard:
    title: str
    content: str
    color: str


@dataclass(frozen=True)
class PathSchema:
    """Expected shape of one path and, for lists, how to validate records."""

    shape: Shape
    record_validator: Callable[[Any], Any] | None = None


def is_scalar(value: Any) -> bool:
    """Return True for strings and real numbers (booleans excluded)."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def resolve_status(display: str, code: str | None = None) -> StatusCode:
    """Map a status to its ``StatusCode``.

    An explicit ``code`` (the record's ``statusCode`` field) wins over the
    translated display string. Unknown values map to ``StatusCode.OTHER``.

    Parameters
    ----------
    display : str
        Translated status text shown in the badge.
    code : str | None
        Optional machine code such as ``"winner"`` or ``"failed"``.

    Returns
    -------
    StatusCode
        Resolved status; never raises.

    Examples
    --------
    >>> resolve_status("Failed")
    <StatusCode.FAILED: 'failed'>
    >>> resolve_status("Pending")
    <StatusCode.OTHER: 'other'>
    >>> resolve_status("Anything", code="winner")
    <StatusCode.WINNER: 'winner'>
    """
    candidate = code if code is not None else STATUS_VOCABULARY.get(display)
    try:
        return StatusCode(candidate)
    except ValueError:
        return StatusCode.OTHER


def _require_fields(record: Any, fields: tuple[str, ...]) -> dict[str, Any]:
    if not isinstance(record, dict):
        raise TypeError(f"expected a record, got {type(record).__name__}")
    missing = [f for f in fields if f not in record]
    if missing:
        raise TypeError(f"record is missing field(s) {', '.join(missing)}")
    return record


def to_performance_metric(record: Any) -> PerformanceMetric:
    """Validate one ``{name, score, peak, status}`` record."""
    rec = _require_fields(record, ("name", "score", "peak", "status"))
    if not _is_number(rec["score"]) or not _is_number(rec["peak"]):
        raise TypeError("score and peak must be numbers")
    if not isinstance(rec["name"], str) or not isinstance(rec["status"], str):
        raise TypeError("name and status must be strings")
    status_code = rec.get("statusCode")
    return PerformanceMetric(
        name=rec["name"],
        score=rec["score"],
        peak=rec["peak"],
        status=rec["status"],
        status_code=resolve_status(rec["status"], status_code),
    )


def to_insight_card(record: Any) -> InsightCard:
    """Validate one ``{title, content, color}`` record."""
    rec = _require_fields(record, ("title", "content", "color"))
    for field in ("title", "content", "color"):
        if not isinstance(rec[field], str):
            raise TypeError(f"{field} must be a string")
    return InsightCard(title=rec["title"], content=rec["content"], color=rec["color"])


def to_plain_string(record: Any) -> str:
    """Validate a plain string entry (tech stack)."""
    if not isinstance(record, str):
        raise TypeError(f"expected a string, got {type(record).__name__}")
    return record


_SCALAR = PathSchema(Shape.SCALAR)

CONTENT_SCHEMA: dict[str, PathSchema] = {
    # Layout
    "nav.brand": _SCALAR,
    "nav.home": _SCALAR,
    "nav.about": _SCALAR,
    "nav.volunteer": _SCALAR,
    "nav.switchLanguage": _SCALAR,
    "footer.text": _SCALAR,
    "footer.contact": _SCALAR,
    # Home page
    "homePage.meta.title": _SCALAR,
    "homePage.hero.badge": _SCALAR,
    "homePage.hero.title": _SCALAR,
    "homePage.hero.subtitle": _SCALAR,
    "homePage.hero.ctaPrimary": _SCALAR,
    "homePage.hero.ctaSecondary": _SCALAR,
    "homePage.stats.models": _SCALAR,
    "homePage.stats.volunteers": _SCALAR,
    "homePage.stats.accuracy": _SCALAR,
    "homePage.stats.duration": _SCALAR,
    "homePage.performanceSection.title": _SCALAR,
    "homePage.performanceSection.description": _SCALAR,
    "homePage.performanceSection.subtitle": _SCALAR,
    "homePage.performanceSection.note": _SCALAR,
    "homePage.performanceSection.scoreLabel": _SCALAR,
    "homePage.performanceSection.peakLabel": _SCALAR,
    "homePage.performanceSection.metrics": PathSchema(
        Shape.RECORD_LIST, to_performance_metric
    ),
    "homePage.insightsSection.title": _SCALAR,
    "homePage.insightsSection.cards": PathSchema(Shape.RECORD_LIST, to_insight_card),
    "homePage.techStack.title": _SCALAR,
    "homePage.techStack.description": _SCALAR,
    "homePage.techStack.stack": PathSchema(Shape.RECORD_LIST, to_plain_string),
    "homePage.researcher.name": _SCALAR,
    "homePage.researcher.role": _SCALAR,
    "homePage.researcher.bio": _SCALAR,
    "homePage.trust.text": _SCALAR,
    # Informational pages
    "aboutPage.title": _SCALAR,
    "aboutPage.lead": _SCALAR,
    "aboutPage.body": _SCALAR,
    "volunteerPage.title": _SCALAR,
    "volunteerPage.lead": _SCALAR,
    "volunteerPage.body": _SCALAR,
}
