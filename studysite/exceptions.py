"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and the
specialized subclasses used throughout the study site generator. Two tiers
exist: content errors (missing paths, mis-shaped nodes, unsupported
locales) that abort a strict render, and general failures (configuration
and data validation) raised by the loader and the build
runner. Cosmetic degradation (unknown badge status, unknown colour, failed
image) never raises.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'MISSING_CONTENT'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.
    transient : bool, optional
        Whether the error is temporary and may be retried.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'k': 'v'})
    >>> e.code
    'CODE'
    >>> str(e)
    'CODE: message'
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class ConfigurationError(AppError):
    """Raised for invalid or missing configuration."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "CONFIGURATION_ERROR", message, context=context, transient=False
        )


class DataValidationError(AppError):
    """Raised for data that fails schema or content validation."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        code: str = "DATA_VALIDATION_ERROR",
    ) -> None:
        super().__init__(code, message, context=context, transient=False)


class ContentLoadError(DataValidationError):
    """Raised when a locale content file cannot be read or parsed."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(message, context=context, code="CONTENT_LOAD_ERROR")


class ContentValidationError(DataValidationError):
    """Raised when loaded content does not satisfy the content schema.

    All problems found during a validation pass are collected in
    ``problems`` so a content author sees every broken path at once.
    """

    def __init__(
        self,
        problems: list[str],
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.problems = list(problems)
        summary = f"{len(self.problems)} content problem(s): " + "; ".join(
            self.problems
        )
        super().__init__(
            summary,
            context={**dict(context or {}), "problems": self.problems},
            code="CONTENT_VALIDATION_ERROR",
        )


class ContentError(AppError):
    """Base class for errors raised at the content store boundary."""


class MissingContentError(ContentError):
    """Raised when a dotted path is absent for the requested locale."""

    def __init__(self, path: str, locale: str) -> None:
        super().__init__(
            "MISSING_CONTENT",
            f"No content at '{path}' for locale '{locale}'",
            context={"path": path, "locale": locale},
        )
        self.path = path
        self.locale = locale


class ShapeMismatchError(ContentError):
    """Raised when a resolved node does not have the expected shape."""

    def __init__(self, path: str, locale: str, expected: str, detail: str) -> None:
        super().__init__(
            "SHAPE_MISMATCH",
            f"Content at '{path}' for locale '{locale}' is not a {expected}: {detail}",
            context={"path": path, "locale": locale, "expected": expected},
        )
        self.path = path
        self.locale = locale


class UnsupportedLocaleError(ContentError):
    """Raised when selecting a locale outside the supported set."""

    def __init__(self, locale: str, supported: tuple[str, ...]) -> None:
        super().__init__(
            "UNSUPPORTED_LOCALE",
            f"Locale '{locale}' is not one of {', '.join(supported)}",
            context={"locale": locale, "supported": list(supported)},
        )
        self.locale = locale


class RouteNotFoundError(AppError):
    """Raised when a path is not served by the router."""

    def __init__(self, path: str) -> None:
        super().__init__(
            "ROUTE_NOT_FOUND", f"No page is registered for '{path}'", context={"path": path}
        )
        self.path = path

