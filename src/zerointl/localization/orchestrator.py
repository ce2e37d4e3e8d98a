"""Message resolution with default-locale fallback.

Looks up ICU templates in per-locale message tables and hands them to the
formatters. The fallback chain for a message id is:

1. The requested locale's table
2. The default locale's table (when it differs from the requested locale)
3. The descriptor's default message
4. The message id itself, after reporting the miss to ``on_error``

Empty templates count as missing. Formatting itself never raises; the only
exception raised here is ValueError for an empty locale at construction.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType

from zerointl.diagnostics import ErrorTemplate, MessageNotFoundError
from zerointl.locale_utils import locales_equivalent
from zerointl.runtime import (
    IcuFormatter,
    PluralRulesCache,
    RichTextFormatter,
    ValueBag,
    format_value,
    is_primitive,
)

from .types import (
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

__all__ = ["IntlLocalization", "Translator", "format_message", "interpolate_message"]

logger = logging.getLogger(__name__)

_PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def _shield_prefix(template: str) -> str:
    """Variable-name prefix that occurs nowhere in template."""
    prefix = "_zv"
    while prefix in template:
        prefix += "_"
    return prefix


def _resolve_template(
    messages: MessageTable,
    descriptor: MessageDescriptor,
    locale: LocaleCode,
    default_locale: LocaleCode | None,
    default_messages: MessageTable | None,
    on_fallback: FallbackCallback | None,
) -> tuple[str, LocaleCode] | None:
    """Find the template for a descriptor and the locale it belongs to."""
    template = messages.get(descriptor.id)
    if template:
        return template, locale

    if (
        default_locale
        and default_messages is not None
        and not locales_equivalent(locale, default_locale)
    ):
        template = default_messages.get(descriptor.id)
        if template:
            logger.debug(
                "Message '%s' resolved from default locale %s (requested %s)",
                descriptor.id,
                default_locale,
                locale,
            )
            if on_fallback is not None:
                on_fallback(FallbackInfo(locale, default_locale, descriptor.id))
            return template, default_locale

    if descriptor.default_message:
        return descriptor.default_message, locale

    return None


def _report_missing(
    message_id: MessageId,
    locale: LocaleCode,
    default_locale: LocaleCode | None,
    on_error: ErrorCallback | None,
) -> str:
    """Log and report a message id with no template; returns the fallback."""
    diagnostic = ErrorTemplate.message_not_found(message_id, locale, default_locale)
    logger.warning("%s", diagnostic.message)
    if on_error is not None:
        on_error(
            MessageNotFoundError(
                diagnostic,
                message_id=message_id,
                locale=locale,
                default_locale=default_locale,
            )
        )
    return message_id


def format_message(
    messages: MessageTable,
    descriptor: MessageDescriptor,
    locale: LocaleCode,
    *,
    default_locale: LocaleCode | None = None,
    default_messages: MessageTable | None = None,
    on_error: ErrorCallback | None = None,
    on_fallback: FallbackCallback | None = None,
    plural_rules: PluralRulesCache | None = None,
) -> str:
    """Resolve and format one message.

    Args:
        messages: Message table of the requested locale
        descriptor: Message id, default message and values
        locale: Requested locale
        default_locale: Locale of default_messages (keyword-only)
        default_messages: Fallback message table (keyword-only)
        on_error: Called with MessageNotFoundError when nothing resolves
        on_fallback: Called with FallbackInfo when default_messages is used
        plural_rules: Shared plural rules cache

    Returns:
        Formatted message, or the message id when no template exists

    Example:
        >>> format_message({"hi": "Hi {name}!"}, MessageDescriptor("hi", values={"name": "Ana"}), "en")
        'Hi Ana!'
        >>> format_message({}, MessageDescriptor("missing.key"), "en")
        'missing.key'
    """
    resolved = _resolve_template(
        messages, descriptor, locale, default_locale, default_messages, on_fallback
    )
    if resolved is None:
        return _report_missing(descriptor.id, locale, default_locale, on_error)

    template, resolved_locale = resolved
    formatter = IcuFormatter(plural_rules=plural_rules)
    return formatter.format(template, descriptor.values, resolved_locale)


def interpolate_message(message: str, values: ValueBag | None = None) -> str:
    """Substitute plain `{name}` placeholders only.

    No plural/select handling. Undefined names and non-primitive values leave
    the placeholder unchanged.

    Example:
        >>> interpolate_message("Hello {name}, you have {count} messages", {"name": "Ana", "count": 3})
        'Hello Ana, you have 3 messages'
    """
    if not values:
        return message

    def substitute(match: re.Match[str]) -> str:
        value = values.get(match.group(1))
        return format_value(value) if is_primitive(value) else match.group(0)

    return _PLACEHOLDER_PATTERN.sub(substitute, message)


class IntlLocalization:
    """Message formatting for one locale with default-locale fallback.

    Holds the message tables and callbacks a host application configures
    once, and exposes string, hook-rendered and rich-text formatting.

    Example:
        >>> intl = IntlLocalization("pl", {"cart": "{n, plural, one {# produkt} few {# produkty} other {# produktów}}"})
        >>> intl.translate("cart", {"n": 3})
        '3 produkty'
        >>> t = intl.translator("auth")
        >>> t("login", default_message="Log in")
        'Log in'

    Attributes:
        locale: Requested locale
        default_locale: Locale of the fallback message table (or None)
    """

    __slots__ = (
        "_default_locale",
        "_default_messages",
        "_default_rich_components",
        "_icu",
        "_locale",
        "_messages",
        "_on_error",
        "_on_fallback",
        "_on_render",
        "_plural_rules",
        "_rich",
    )

    def __init__(
        self,
        locale: LocaleCode,
        messages: MessageTable | None = None,
        *,
        default_locale: LocaleCode | None = None,
        default_messages: MessageTable | None = None,
        on_error: ErrorCallback | None = None,
        on_fallback: FallbackCallback | None = None,
        on_render: RenderCallback | None = None,
        default_rich_components: Mapping[str, object] | None = None,
        plural_rules: PluralRulesCache | None = None,
    ) -> None:
        """Initialize localization.

        Args:
            locale: Requested locale (e.g., 'en', 'pl-PL')
            messages: Message table for locale
            default_locale: Locale of default_messages
            default_messages: Fallback message table
            on_error: Called with MessageNotFoundError for unresolvable ids
            on_fallback: Called with FallbackInfo when default_messages is used
            on_render: Hook turning a TranslationRecord into the rendered result
            default_rich_components: Tag renderers available to every rich call
            plural_rules: Plural rules cache shared by the formatters

        Raises:
            ValueError: If locale is empty
        """
        if not locale or not locale.strip():
            msg = "locale must be a non-empty locale code"
            raise ValueError(msg)

        self._locale = locale
        self._messages: Mapping[MessageId, str] = MappingProxyType(dict(messages or {}))
        self._default_locale = default_locale
        self._default_messages: Mapping[MessageId, str] | None = (
            MappingProxyType(dict(default_messages)) if default_messages is not None else None
        )
        self._on_error = on_error
        self._on_fallback = on_fallback
        self._on_render = on_render
        self._default_rich_components: Mapping[str, object] = MappingProxyType(
            dict(default_rich_components or {})
        )
        self._plural_rules = plural_rules if plural_rules is not None else PluralRulesCache()
        self._icu = IcuFormatter(plural_rules=self._plural_rules)
        self._rich = RichTextFormatter()

    @property
    def locale(self) -> LocaleCode:
        """Requested locale."""
        return self._locale

    @property
    def default_locale(self) -> LocaleCode | None:
        """Locale of the fallback message table."""
        return self._default_locale

    @property
    def messages(self) -> Mapping[MessageId, str]:
        """Read-only message table of the requested locale."""
        return self._messages

    @property
    def default_rich_components(self) -> Mapping[str, object]:
        """Read-only tag renderers applied to every rich call."""
        return self._default_rich_components

    @property
    def plural_rules(self) -> PluralRulesCache:
        """Plural rules cache shared by the formatters."""
        return self._plural_rules

    def has_message(self, message_id: MessageId) -> bool:
        """Check whether a table (own or default) has a template for message_id."""
        if self._messages.get(message_id):
            return True
        return bool(self._default_messages and self._default_messages.get(message_id))

    def format_message(self, descriptor: MessageDescriptor) -> str:
        """Resolve and format a descriptor through the fallback chain."""
        resolved = self._resolve(descriptor)
        if resolved is None:
            return self._missing(descriptor.id)
        template, locale = resolved
        return self._icu.format(template, descriptor.values, locale)

    def translate(
        self,
        message_id: MessageId,
        values: ValueBag | None = None,
        default_message: str | None = None,
    ) -> str:
        """Format a message by id.

        Args:
            message_id: Message identifier
            values: Value bag
            default_message: Template used when no table has the id

        Returns:
            Formatted message, or message_id when nothing resolves
        """
        return self.format_message(MessageDescriptor(message_id, default_message, values=values))

    def render(
        self,
        message_id: MessageId,
        values: ValueBag | None = None,
        default_message: str | None = None,
    ) -> object:
        """Translate, then pass the result through the on_render hook if configured.

        Returns:
            The hook's return value, or the translated string without a hook
        """
        translation = self.translate(message_id, values, default_message)
        if self._on_render is None:
            return translation
        record = TranslationRecord(
            translation_key=message_id,
            translation=translation,
            locale=self._locale,
            values=values,
        )
        return self._on_render(record)

    def format_rich(
        self,
        message_id: MessageId,
        default_message: str | None = None,
        components: Mapping[str, object] | None = None,
        values: ValueBag | None = None,
    ) -> list[object]:
        """Format a message with tag renderers and rich values.

        Primitive values are resolved by the ICU pass; Node and render
        function values stay as placeholders until the rich-text pass. Text
        substituted from values is never read as markup.
        Renderers in components override default_rich_components.

        Returns:
            Ordered content; [message_id] when nothing resolves
        """
        resolved = self._resolve(MessageDescriptor(message_id, default_message))
        if resolved is None:
            return [self._missing(message_id)]

        template, locale = resolved
        bag = dict(values or {})
        primitives = {name: value for name, value in bag.items() if is_primitive(value)}

        # Substituted text goes back in as {prefixN} variables so the markup
        # pass never reads caller data as tags or placeholders
        prefix = _shield_prefix(template)
        shielded: dict[str, str] = {}

        def shield(value_text: str) -> str:
            name = f"{prefix}{len(shielded)}"
            shielded[name] = value_text
            return f"{{{name}}}"

        text = self._icu.format(template, primitives, locale, emit_value=shield)
        renderers = {**self._default_rich_components, **(components or {})}
        return self._rich.format(text, bag | shielded, renderers)

    def translator(self, namespace: str | None = None) -> Translator:
        """Translation function, optionally scoped to a key namespace.

        Example:
            >>> intl = IntlLocalization("en", {"auth.login": "Log in"})
            >>> intl.translator("auth")("login")
            'Log in'
        """
        return Translator(self, namespace)

    def _resolve(self, descriptor: MessageDescriptor) -> tuple[str, LocaleCode] | None:
        return _resolve_template(
            self._messages,
            descriptor,
            self._locale,
            self._default_locale,
            self._default_messages,
            self._on_fallback,
        )

    def _missing(self, message_id: MessageId) -> str:
        return _report_missing(message_id, self._locale, self._default_locale, self._on_error)

    def __repr__(self) -> str:
        return (
            f"IntlLocalization(locale={self._locale!r}, "
            f"messages={len(self._messages)}, default_locale={self._default_locale!r})"
        )


class Translator:
    """Callable translation function bound to an IntlLocalization.

    With a namespace, every id is looked up as ``"<namespace>.<id>"``.
    """

    __slots__ = ("_intl", "_namespace")

    def __init__(self, intl: IntlLocalization, namespace: str | None = None) -> None:
        self._intl = intl
        self._namespace = namespace or None

    @property
    def namespace(self) -> str | None:
        """Key prefix, or None for unscoped translators."""
        return self._namespace

    def key(self, message_id: MessageId) -> MessageId:
        """Full message id for message_id in this namespace."""
        if self._namespace is None:
            return message_id
        return f"{self._namespace}.{message_id}"

    def __call__(
        self,
        message_id: MessageId,
        values: ValueBag | None = None,
        default_message: str | None = None,
    ) -> str:
        return self._intl.translate(self.key(message_id), values, default_message)

    def rich(
        self,
        message_id: MessageId,
        default_message: str | None = None,
        components: Mapping[str, object] | None = None,
        values: ValueBag | None = None,
    ) -> list[object]:
        """Rich-text formatting of a namespaced id (see IntlLocalization.format_rich)."""
        return self._intl.format_rich(self.key(message_id), default_message, components, values)
