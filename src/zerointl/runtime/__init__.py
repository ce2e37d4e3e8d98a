"""Formatting runtime package.

Provides the ICU formatter, the rich-text formatter, plural rule selection
and the value types they consume. Depends on syntax package for parsing.

Python 3.13+.
"""

from .formatter import IcuFormatter, format_icu
from .plural_rules import (
    LocalePluralRules,
    PluralRulesCache,
    select_ordinal_category,
    select_plural_category,
)
from .rich import RichTextFormatter, format_rich, render_text
from .value_types import (
    Node,
    Primitive,
    RenderFunction,
    Value,
    ValueBag,
    coerce_number,
    format_value,
    is_primitive,
    normalize_renderer,
    normalize_value,
)

__all__ = [
    "IcuFormatter",
    "LocalePluralRules",
    "Node",
    "PluralRulesCache",
    "Primitive",
    "RenderFunction",
    "RichTextFormatter",
    "Value",
    "ValueBag",
    "coerce_number",
    "format_icu",
    "format_rich",
    "format_value",
    "is_primitive",
    "normalize_renderer",
    "normalize_value",
    "render_text",
    "select_ordinal_category",
    "select_plural_category",
]
