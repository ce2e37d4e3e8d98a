"""Shared constants for zerointl.

This module provides centralized configuration constants used across the
syntax, runtime and localization packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and resolution
- Cache limits: Memory bounds for locale caches
- Locale defaults: Fallback locale when nothing else is known
- Fallback strings: Literal text emitted for unresolved placeholders

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Plural categories
    "PLURAL_CATEGORIES",
    "OTHER_CATEGORY",
    # Fallback strings
    "FALLBACK_MISSING_VARIABLE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum nesting depth for ICU constructs and rich-text tags.
# Used by: ICU parser (nested rule bodies), markup parser (nested tags),
# resolver (nested constructs). Real templates rarely exceed 3-4 levels;
# 100 levels is malformed or adversarial input and degrades to literal text.
MAX_DEPTH: int = 100

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale objects and per-locale plural rule entries.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when the system locale cannot be detected.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================

# CLDR plural categories in canonical order.
PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Fallback rule key for plural, selectordinal and select constructs.
OTHER_CATEGORY: str = "other"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Rich-text placeholder whose value is undefined, e.g. {name}
FALLBACK_MISSING_VARIABLE: str = "{{{name}}}"
