"""Content store package: locale dictionaries, dotted-path lookup and schema."""

from .loader import load_content_store, load_locale_file
from .schema import (
    CONTENT_SCHEMA,
    InsightCard,
    PerformanceMetric,
    Shape,
    StatusCode,
    resolve_status,
)
from .store import ContentStore

__all__ = [
    "CONTENT_SCHEMA",
    "ContentStore",
    "InsightCard",
    "PerformanceMetric",
    "Shape",
    "StatusCode",
    "load_content_store",
    "load_locale_file",
    "resolve_status",
]
