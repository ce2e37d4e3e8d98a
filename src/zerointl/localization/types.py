"""Types for the message resolution domain.

Provides semantic type aliases and the immutable records exchanged with
callers and callbacks of IntlLocalization.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from zerointl.diagnostics import MessageNotFoundError
from zerointl.runtime import ValueBag

__all__ = [
    "ErrorCallback",
    "FallbackCallback",
    "FallbackInfo",
    "LocaleCode",
    "MessageDescriptor",
    "MessageId",
    "MessageTable",
    "RenderCallback",
    "TranslationRecord",
]

type MessageId = str
"""Identifier for a message (e.g., 'welcome', 'cart.items')."""

type LocaleCode = str
"""BCP-47 or POSIX locale code (e.g., 'en', 'pl', 'pt-BR')."""

type MessageTable = Mapping[MessageId, str]
"""Message id to ICU template for one locale."""


@dataclass(frozen=True, slots=True)
class MessageDescriptor:
    """Request to format one message.

    Attributes:
        id: Message identifier looked up in the message tables
        default_message: Template used when no table has the id
        description: Context for translators; not used when formatting
        values: Value bag for the template
    """

    id: MessageId
    default_message: str | None = None
    description: str | None = None
    values: ValueBag | None = None


@dataclass(frozen=True, slots=True)
class TranslationRecord:
    """A translated string handed to the on_render hook.

    Attributes:
        translation_key: Message id that was translated
        translation: Formatted text
        locale: Locale the text was formatted in
        values: Value bag used for formatting
    """

    translation_key: MessageId
    translation: str
    locale: LocaleCode
    values: ValueBag | None = None


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a default-locale fallback event.

    Provided to the on_fallback callback when a message is resolved from the
    default locale's table instead of the requested locale's.

    Attributes:
        requested_locale: Locale the caller asked for
        resolved_locale: Locale whose table contained the message
        message_id: The message identifier that was resolved

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"Fallback: {info.message_id} resolved from "
        ...           f"{info.resolved_locale} (requested {info.requested_locale})")
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    message_id: MessageId


type ErrorCallback = Callable[[MessageNotFoundError], None]
type FallbackCallback = Callable[[FallbackInfo], None]
type RenderCallback = Callable[[TranslationRecord], object]
