"""Message resolution package.

Provides message-table lookup with default-locale fallback, the host
binding that chooses between string and rich-text formatting, and the
records handed to callbacks.

Submodules:
    types        - Type aliases, MessageDescriptor, TranslationRecord, FallbackInfo
    orchestrator - format_message, interpolate_message, IntlLocalization, Translator

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from zerointl.localization.orchestrator import (
    IntlLocalization,
    Translator,
    format_message,
    interpolate_message,
)
from zerointl.localization.types import (
    ErrorCallback,
    FallbackCallback,
    FallbackInfo,
    LocaleCode,
    MessageDescriptor,
    MessageId,
    MessageTable,
    RenderCallback,
    TranslationRecord,
)

__all__ = [
    # Main orchestrator
    "IntlLocalization",
    "Translator",
    # Functions
    "format_message",
    "interpolate_message",
    # Records
    "MessageDescriptor",
    "TranslationRecord",
    "FallbackInfo",
    # Type aliases for user code type annotations
    "ErrorCallback",
    "FallbackCallback",
    "LocaleCode",
    "MessageId",
    "MessageTable",
    "RenderCallback",
]
