"""zerointl - ICU message formatting with rich-text tags.

Formats ICU-style message templates (variables, plural, select and
selectordinal constructs, nested arbitrarily) to strings, and templates with
XML-like inline tags to sequences of caller-rendered content. Malformed
templates never raise: the offending span renders as literal text.

Public API:
    format_icu - Format an ICU template to a string
    format_rich - Format a template with tag renderers to a content sequence
    IcuFormatter / RichTextFormatter - Reusable formatter objects
    IntlLocalization - Message tables with default-locale fallback
    format_message - One-shot message lookup and formatting
    PluralRulesCache - Shared per-locale CLDR plural rules (Babel)
    Node / RenderFunction - Rich values for the rich-text path

Exceptions:
    IntlError - Base exception class
    IntlSyntaxError - Malformed template in strict parsing
    IntlReferenceError - Unknown message references
    MessageNotFoundError - Message id missing from every fallback source
    IntlResolutionError - Runtime resolution errors

Submodules:
    zerointl.syntax - Template and markup parsers, AST node types, validation
    zerointl.runtime - Formatters, plural rules, value types
    zerointl.localization - Message resolution and translators
    zerointl.introspection - Variable, construct and tag extraction
    zerointl.diagnostics - Diagnostic codes, formatting and validation results
"""

from .diagnostics import (
    IntlError,
    IntlReferenceError,
    IntlResolutionError,
    IntlSyntaxError,
    MessageNotFoundError,
    ValidationResult,
)
from .introspection import TemplateIntrospection, introspect_template
from .localization import (
    IntlLocalization,
    MessageDescriptor,
    TranslationRecord,
    Translator,
    format_message,
    interpolate_message,
)
from .runtime import (
    IcuFormatter,
    Node,
    PluralRulesCache,
    RenderFunction,
    RichTextFormatter,
    Value,
    format_icu,
    format_rich,
    render_text,
    select_ordinal_category,
    select_plural_category,
)
from .syntax import parse_markup, parse_template, validate_template

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("zerointl")
except PackageNotFoundError:
    __version__ = "0.0.0+dev"

__all__ = [
    "IcuFormatter",
    "IntlError",
    "IntlLocalization",
    "IntlReferenceError",
    "IntlResolutionError",
    "IntlSyntaxError",
    "MessageDescriptor",
    "MessageNotFoundError",
    "Node",
    "PluralRulesCache",
    "RenderFunction",
    "RichTextFormatter",
    "TemplateIntrospection",
    "TranslationRecord",
    "Translator",
    "ValidationResult",
    "Value",
    "__version__",
    "format_icu",
    "format_message",
    "format_rich",
    "interpolate_message",
    "introspect_template",
    "parse_markup",
    "parse_template",
    "render_text",
    "select_ordinal_category",
    "select_plural_category",
    "validate_template",
]
