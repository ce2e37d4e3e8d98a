"""Locale code handling shared by plural selection and message lookup.

Callers may pass BCP-47 ("pt-BR") or POSIX ("pt_BR") codes. Everything
inside zerointl compares and caches the POSIX spelling Babel expects.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from zerointl.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "locales_equivalent",
    "normalize_locale",
]

# Environment variables consulted after the OS locale, highest priority first
_LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")

# Pseudo-locales that carry no language information
_PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Canonical POSIX spelling of a locale code.

    Example:
        >>> normalize_locale(" pt-BR ")
        'pt_BR'
        >>> normalize_locale("zh-Hans-CN")
        'zh_Hans_CN'
    """
    return locale_code.strip().replace("-", "_")


def locales_equivalent(first: str, second: str) -> bool:
    """True when two codes name the same locale after normalization.

    Example:
        >>> locales_equivalent("en-US", "en_US")
        True
    """
    return normalize_locale(first) == normalize_locale(second)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Parsed Babel Locale for a code, memoized per spelling.

    Raises:
        babel.core.UnknownLocaleError: No CLDR data for the locale
        ValueError: The code is not a syntactically valid locale
    """
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def _language_part(raw: str | None) -> str | None:
    """Strip the codeset suffix ('.UTF-8'); None for empty and pseudo-locales."""
    if not raw:
        return None
    code = raw.split(".", 1)[0]
    if not code or code in _PSEUDO_LOCALES:
        return None
    return normalize_locale(code)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Locale of the running process, used as a default-locale hint.

    The OS locale reported by ``locale.getlocale()`` wins; otherwise the
    first usable value of LC_ALL, LC_MESSAGES and LANG is taken.

    Args:
        raise_on_failure: Raise RuntimeError instead of returning DEFAULT_LOCALE
            when nothing usable is found (keyword-only)

    Returns:
        POSIX locale code
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        detected = _language_part(locale_module.getlocale()[0])
    except ValueError:
        detected = None
    if detected is not None:
        return detected

    for name in _LOCALE_ENV_VARS:
        detected = _language_part(os.environ.get(name))
        if detected is not None:
            return detected

    if raise_on_failure:
        msg = f"Could not determine system locale from the OS or {', '.join(_LOCALE_ENV_VARS)}"
        raise RuntimeError(msg)
    return DEFAULT_LOCALE
