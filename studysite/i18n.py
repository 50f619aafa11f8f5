"""Locale selection for rendering.

Holds the active locale for a rendering session and notifies subscribers
when it changes, so views bound to content can re-resolve against the new
locale's dictionary. The selector is an explicit object passed to whoever
renders; there is no module-level language global.

Typical usage::

    from studysite.i18n import LocaleSelector, language_class

    selector = LocaleSelector()
    selector.set_locale("th")
    language_class(selector.current_locale())  # 'lang-th'

"""

from __future__ import annotations

import logging
from collections.abc import Callable

from studysite.config import (
    DEFAULT_LOCALE,
    LANGUAGE_CLASS_DEFAULT,
    LANGUAGE_CLASS_THAI,
    SUPPORTED_LOCALES,
    THAI_LOCALE_PREFIX,
)
from studysite.exceptions import ConfigurationError, UnsupportedLocaleError

logger = logging.getLogger(__name__)

LocaleListener = Callable[[str, str], None]


def language_class(locale: str) -> str:
    r"""Return the presentation class for ``locale``.

    Parameters
    ----------
    locale : str
        Locale identifier such as ``'en'`` or ``'th'``.

    Returns
    -------
    str
        ``'lang-th'`` when the locale starts with ``'th'``, else ``'lang-en'``.

    Examples
    --------
    >>> language_class("th")
    'lang-th'
    >>> language_class("en-GB")
    'lang-en'
    """
    if locale.startswith(THAI_LOCALE_PREFIX):
        return LANGUAGE_CLASS_THAI
    return LANGUAGE_CLASS_DEFAULT


class LocaleSelector:
    """Single active locale with change notification.

    Parameters
    ----------
    supported : tuple[str, ...], optional
        Locales that may be selected.
    default : str, optional
        Initially active locale; must be in ``supported``.

    Raises
    ------
    ConfigurationError
        If ``default`` is not one of ``supported``.
    """

    def __init__(
        self,
        supported: tuple[str, ...] = SUPPORTED_LOCALES,
        default: str = DEFAULT_LOCALE,
    ) -> None:
        if default not in supported:
            raise ConfigurationError(
                f"Default locale '{default}' is not supported",
                context={"supported": list(supported)},
            )
        self.supported = tuple(supported)
        self.default = default
        self._locale = default
        self._listeners: list[LocaleListener] = []

    def current_locale(self) -> str:
        """Return the active locale."""
        return self._locale

    def set_locale(self, new_locale: str) -> None:
        """Activate ``new_locale`` and notify listeners if it changed.

        Raises
        ------
        UnsupportedLocaleError
            If ``new_locale`` is not in the supported set. The active
            locale is left unchanged.
        """
        if new_locale not in self.supported:
            raise UnsupportedLocaleError(new_locale, self.supported)
        old = self._locale
        if new_locale == old:
            return
        self._locale = new_locale
        logger.debug("Locale changed from %s to %s", old, new_locale)
        for listener in list(self._listeners):
            listener(old, new_locale)

    def subscribe(self, listener: LocaleListener) -> Callable[[], None]:
        """Register ``listener(old, new)``; return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def alternate_locales(self) -> tuple[str, ...]:
        """Return the supported locales other than the active one."""
        return tuple(loc for loc in self.supported if loc != self._locale)
