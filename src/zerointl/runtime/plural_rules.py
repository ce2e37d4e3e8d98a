"""Plural category selection backed by Babel's CLDR data.

LocalePluralRules pairs the cardinal and ordinal selectors of one locale.
PluralRulesCache keeps them per locale and is handed to formatters by
whoever owns it.

Python 3.13+. Depends on Babel.
"""

import logging
import threading
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from babel.core import UnknownLocaleError

from zerointl.constants import MAX_LOCALE_CACHE_SIZE, OTHER_CATEGORY
from zerointl.enums import PluralType
from zerointl.locale_utils import get_babel_locale, normalize_locale

__all__ = [
    "LocalePluralRules",
    "PluralRulesCache",
    "select_ordinal_category",
    "select_plural_category",
]

logger = logging.getLogger(__name__)

type Number = int | float | Decimal
type CategorySelector = Callable[[Number], str]


def _fallback_cardinal(n: Number) -> str:
    # English-style rule
    return "one" if abs(n) == 1 else OTHER_CATEGORY


def _fallback_ordinal(n: Number) -> str:  # noqa: ARG001
    return OTHER_CATEGORY


@dataclass(frozen=True, slots=True)
class LocalePluralRules:
    """Cardinal and ordinal category selectors for one locale.

    Attributes:
        locale: Normalized locale code
        cardinal: Category selector for counts (plural)
        ordinal: Category selector for rankings (selectordinal)
        is_fallback: True when the locale was unknown and simple rules apply
    """

    locale: str
    cardinal: CategorySelector
    ordinal: CategorySelector
    is_fallback: bool = False

    @classmethod
    def for_locale(cls, locale: str) -> "LocalePluralRules":
        """Load rules from Babel CLDR data, degrading for unknown locales.

        If locale parsing fails, falls back to the one/other cardinal rule and
        the 'other' ordinal rule.
        """
        normalized = normalize_locale(locale)
        try:
            locale_obj = get_babel_locale(normalized)
        except (UnknownLocaleError, ValueError):
            logger.warning("Unknown locale %r; using one/other plural rules", locale)
            return cls(normalized, _fallback_cardinal, _fallback_ordinal, is_fallback=True)
        return cls(normalized, locale_obj.plural_form, locale_obj.ordinal_form)

    def select(self, n: Number, plural_type: PluralType = PluralType.CARDINAL) -> str:
        """Category for n under the cardinal or ordinal rule set."""
        if plural_type is PluralType.ORDINAL:
            return self.ordinal(n)
        return self.cardinal(n)


def select_plural_category(n: Number, locale: str) -> str:
    """Cardinal category of n in locale, without going through a cache object.

    Unknown locales get the one/other rule.

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "pl")
        'many'
        >>> select_plural_category(2, "ar-SA")
        'two'
    """
    try:
        return get_babel_locale(locale).plural_form(n)
    except (UnknownLocaleError, ValueError):
        return _fallback_cardinal(n)


def select_ordinal_category(n: Number, locale: str) -> str:
    """Ordinal category of n in locale; 'other' for unknown locales.

    Examples:
        >>> [select_ordinal_category(k, "en") for k in (1, 2, 3, 11, 21)]
        ['one', 'two', 'few', 'other', 'one']
    """
    try:
        return get_babel_locale(locale).ordinal_form(n)
    except (UnknownLocaleError, ValueError):
        return _fallback_ordinal(n)


class PluralRulesCache:
    """Lazily populated, bounded mapping from locale to plural rules.

    Owned by the caller and passed to formatters. Safe to share across
    threads: lookups and insertions happen under a lock. Least recently used
    locales are evicted once max_size is reached.

    Example:
        >>> cache = PluralRulesCache()
        >>> cache.select(3, "pl")
        'few'
        >>> cache.select(3, "en", PluralType.ORDINAL)
        'few'
        >>> len(cache)
        2
    """

    __slots__ = ("_entries", "_lock", "_max_size")

    def __init__(self, max_size: int = MAX_LOCALE_CACHE_SIZE) -> None:
        """Initialize cache.

        Args:
            max_size: Maximum number of cached locales (must be positive)

        Raises:
            ValueError: If max_size is not positive
        """
        if max_size <= 0:
            msg = f"max_size must be positive, got {max_size}"
            raise ValueError(msg)
        self._max_size = max_size
        self._entries: OrderedDict[str, LocalePluralRules] = OrderedDict()
        self._lock = threading.RLock()

    @property
    def max_size(self) -> int:
        """Maximum number of cached locales."""
        return self._max_size

    def get(self, locale: str) -> LocalePluralRules:
        """Rules for locale, loading them on first use."""
        key = normalize_locale(locale)
        with self._lock:
            rules = self._entries.get(key)
            if rules is not None:
                self._entries.move_to_end(key)
                return rules

            rules = LocalePluralRules.for_locale(key)
            self._entries[key] = rules
            logger.debug("Cached plural rules for locale %s", key)
            if len(self._entries) > self._max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted plural rules for locale %s", evicted)
            return rules

    def select(
        self, n: Number, locale: str, plural_type: PluralType = PluralType.CARDINAL
    ) -> str:
        """Category for n in locale."""
        return self.get(locale).select(n, plural_type)

    def clear(self) -> None:
        """Drop all cached locales."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, locale: str) -> bool:
        with self._lock:
            return normalize_locale(locale) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
