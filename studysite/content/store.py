"""Locale-keyed content store addressed by dotted paths.

``ContentStore`` is the single boundary through which renderers read
content. Lookups are synchronous dictionary walks with no side effects.
There is no fallback to the default locale: a path that is absent for the
requested locale raises ``MissingContentError`` and the caller decides
whether that aborts the render.

Examples
--------
>>> store = ContentStore({"en": {"hero": {"title": "Hi"}}})
>>> store.resolve("hero.title", "en", Shape.SCALAR)
'Hi'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from studysite.config import DEFAULT_LOCALE
from studysite.content.schema import CONTENT_SCHEMA, PathSchema, Shape, is_scalar
from studysite.exceptions import (
    ContentError,
    ContentValidationError,
    MissingContentError,
    ShapeMismatchError,
)

logger = logging.getLogger(__name__)


class ContentStore:
    """Read-only content dictionaries for every supported locale.

    Parameters
    ----------
    dictionaries : Mapping[str, Mapping[str, Any]]
        Nested content tree per locale, e.g. ``{"en": {"homePage": {...}}}``.
    default_locale : str, optional
        Locale used by callers when none is selected. Must be present in
        ``dictionaries``.
    schema : Mapping[str, PathSchema] | None, optional
        Path schema; defaults to ``CONTENT_SCHEMA``.
    """

    def __init__(
        self,
        dictionaries: Mapping[str, Mapping[str, Any]],
        default_locale: str = DEFAULT_LOCALE,
        schema: Mapping[str, PathSchema] | None = None,
    ) -> None:
        self._dictionaries = dict(dictionaries)
        self.default_locale = default_locale
        self.schema = dict(CONTENT_SCHEMA if schema is None else schema)

    def locales(self) -> tuple[str, ...]:
        """Return the locales held by the store, in insertion order."""
        return tuple(self._dictionaries)

    def resolve(self, path: str, locale: str, shape: Shape) -> Any:
        """Resolve ``path`` for ``locale`` and check the node's shape.

        Parameters
        ----------
        path : str
            Non-empty dotted path such as ``"homePage.hero.title"``.
        locale : str
            Locale whose dictionary is searched.
        shape : Shape
            Expected structure of the node.

        Returns
        -------
        Any
            The node: a string or number for ``Shape.SCALAR``, a list for
            ``Shape.RECORD_LIST``.

        Raises
        ------
        MissingContentError
            If the locale or any path segment is absent.
        ShapeMismatchError
            If the node's structure disagrees with ``shape``.
        """
        if locale not in self._dictionaries or not path:
            raise MissingContentError(path, locale)
        node: Any = self._dictionaries[locale]
        for segment in path.split("."):
            if not segment or not isinstance(node, Mapping) or segment not in node:
                raise MissingContentError(path, locale)
            node = node[segment]

        if shape is Shape.SCALAR and not is_scalar(node):
            raise ShapeMismatchError(
                path, locale, shape.value, f"found {type(node).__name__}"
            )
        if shape is Shape.RECORD_LIST and not isinstance(node, list):
            raise ShapeMismatchError(
                path, locale, shape.value, f"found {type(node).__name__}"
            )
        return node

    def resolve_records(self, path: str, locale: str) -> list[Any]:
        """Resolve a record-list path into typed records.

        The record validator declared for ``path`` in the schema is applied
        to every entry, preserving list order.

        Raises
        ------
        MissingContentError
            If the path is absent.
        ShapeMismatchError
            If the node is not a list or a record fails validation.
        """
        raw = self.resolve(path, locale, Shape.RECORD_LIST)
        entry = self.schema.get(path)
        if entry is None or entry.record_validator is None:
            return list(raw)
        records = []
        for index, item in enumerate(raw):
            try:
                records.append(entry.record_validator(item))
            except TypeError as exc:
                raise ShapeMismatchError(
                    path, locale, entry.shape.value, f"entry {index}: {exc}"
                ) from exc
        return records

    def validate(self) -> None:
        """Check every schema path for every locale.

        Raises
        ------
        ContentValidationError
            Listing every missing or mis-shaped path, when any is found.
        """
        problems: list[str] = []
        for locale in self.locales():
            for path, entry in self.schema.items():
                try:
                    if entry.shape is Shape.RECORD_LIST:
                        self.resolve_records(path, locale)
                    else:
                        self.resolve(path, locale, entry.shape)
                except ContentError as exc:
                    problems.append(f"[{locale}] {exc.message}")
        if problems:
            raise ContentValidationError(problems)
        logger.debug(
            "Validated %d content paths for locales %s",
            len(self.schema),
            ", ".join(self.locales()),
        )
