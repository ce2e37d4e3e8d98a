"""Tests for message resolution and the IntlLocalization facade.

Covers the fallback chain (locale table, default-locale table, default
message, message id), error and fallback callbacks, the render hook,
rich-text formatting, namespaced translators and plain interpolation.
"""

from __future__ import annotations

import logging

import pytest

from zerointl.diagnostics import DiagnosticCode, MessageNotFoundError
from zerointl.localization import (
    FallbackInfo,
    IntlLocalization,
    MessageDescriptor,
    TranslationRecord,
    format_message,
    interpolate_message,
)
from zerointl.runtime import Node, PluralRulesCache

EN_MESSAGES = {
    "welcome": "Welcome, {name}!",
    "items": "{count, plural, one {# item} other {# items}}",
    "fallback.only": "This is a fallback message",
    "legal": "Read the <link>terms</link>.",
}

PL_MESSAGES = {
    "welcome": "Witaj, {name}!",
    "files": "{count, plural, one {# plik} few {# pliki} many {# plików} other {# pliku}}",
}


# ============================================================================
# format_message()
# ============================================================================


class TestFormatMessage:
    """Module-level resolution function."""

    def test_basic(self) -> None:
        """Messages are formatted with their values."""
        descriptor = MessageDescriptor("welcome", values={"name": "John"})

        assert format_message(EN_MESSAGES, descriptor, "en") == "Welcome, John!"

    def test_icu_pattern(self) -> None:
        """ICU constructs are resolved."""
        descriptor = MessageDescriptor("items", values={"count": 5})

        assert format_message(EN_MESSAGES, descriptor, "en") == "5 items"

    def test_default_message(self) -> None:
        """The descriptor's default message is used for unknown ids."""
        descriptor = MessageDescriptor(
            "nonexistent", default_message="Default message with {value}", values={"value": "test"}
        )

        assert format_message(EN_MESSAGES, descriptor, "en") == "Default message with test"

    def test_default_locale_fallback(self) -> None:
        """The default-locale table is consulted before the default message."""
        descriptor = MessageDescriptor("fallback.only", default_message="unused")

        result = format_message(
            PL_MESSAGES,
            descriptor,
            "pl",
            default_locale="en",
            default_messages=EN_MESSAGES,
        )

        assert result == "This is a fallback message"

    def test_message_preferred_over_default_message(self) -> None:
        """The locale table wins over the default message."""
        descriptor = MessageDescriptor(
            "welcome", default_message="Hello, {name}!", values={"name": "Alice"}
        )

        assert format_message(EN_MESSAGES, descriptor, "en") == "Welcome, Alice!"

    def test_missing_values(self) -> None:
        """Undefined placeholders are kept."""
        descriptor = MessageDescriptor("welcome")

        assert format_message(EN_MESSAGES, descriptor, "en") == "Welcome, {name}!"

    def test_missing_key_reports_error(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unresolvable ids return the id and report a MessageNotFoundError."""
        errors: list[MessageNotFoundError] = []

        with caplog.at_level(logging.WARNING, logger="zerointl.localization.orchestrator"):
            result = format_message(
                {}, MessageDescriptor("missing.key"), "en", on_error=errors.append
            )

        assert result == "missing.key"
        (error,) = errors
        assert str(error) == "Missing message for key: missing.key in locale: en"
        assert error.message_id == "missing.key"
        assert error.locale == "en"
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.MESSAGE_NOT_FOUND
        assert "Missing message for key: missing.key" in caplog.text

    def test_missing_key_mentions_default_locale(self) -> None:
        """The error text names the default locale when one was configured."""
        errors: list[MessageNotFoundError] = []

        format_message(
            {},
            MessageDescriptor("nope"),
            "pl",
            default_locale="en",
            default_messages={},
            on_error=errors.append,
        )

        assert str(errors[0]) == "Missing message for key: nope in locale: pl and default locale: en"

    def test_empty_template_counts_as_missing(self) -> None:
        """Empty strings fall through to the default message."""
        descriptor = MessageDescriptor("blank", default_message="filled")

        assert format_message({"blank": ""}, descriptor, "en") == "filled"

    def test_same_locale_skips_default_table(self) -> None:
        """The default table is not consulted when locales are equivalent."""
        descriptor = MessageDescriptor("fallback.only")

        result = format_message(
            {}, descriptor, "en-US", default_locale="en_US", default_messages=EN_MESSAGES
        )

        assert result == "fallback.only"

    def test_fallback_uses_default_locale_rules(self) -> None:
        """Messages from the default table use the default locale's plural rules."""
        descriptor = MessageDescriptor("files", values={"count": 3})

        result = format_message(
            {}, descriptor, "en", default_locale="pl", default_messages=PL_MESSAGES
        )

        assert result == "3 pliki"

    def test_shared_plural_rules(self, plural_rules: PluralRulesCache) -> None:
        """A supplied cache is used for category selection."""
        descriptor = MessageDescriptor("files", values={"count": 2})

        format_message(PL_MESSAGES, descriptor, "pl", plural_rules=plural_rules)

        assert "pl" in plural_rules


# ============================================================================
# interpolate_message()
# ============================================================================


class TestInterpolateMessage:
    """Plain placeholder substitution."""

    def test_simple(self) -> None:
        """Placeholders are replaced."""
        assert interpolate_message("Hello {name}!", {"name": "John"}) == "Hello John!"

    def test_multiple(self) -> None:
        """Several placeholders."""
        result = interpolate_message(
            "Hello {name}, you are {age} years old", {"name": "Alice", "age": 25}
        )

        assert result == "Hello Alice, you are 25 years old"

    def test_missing_values(self) -> None:
        """Undefined names are left unchanged."""
        assert interpolate_message("Hello {name}!", {}) == "Hello {name}!"
        assert interpolate_message("Hello {name}!") == "Hello {name}!"

    def test_conversion(self) -> None:
        """Values are stringified."""
        assert interpolate_message("Count: {count}", {"count": 42}) == "Count: 42"
        assert interpolate_message("Flag: {flag}", {"flag": True}) == "Flag: true"

    def test_constructs_not_resolved(self) -> None:
        """Plural syntax is not interpreted."""
        template = "{n, plural, other {#}}"

        assert interpolate_message(template, {"n": 1}) == template


# ============================================================================
# IntlLocalization
# ============================================================================


class TestIntlLocalization:
    """Facade behaviour."""

    def test_empty_locale_rejected(self) -> None:
        """Construction requires a locale."""
        with pytest.raises(ValueError, match="locale"):
            IntlLocalization("")
        with pytest.raises(ValueError, match="locale"):
            IntlLocalization("   ")

    def test_translate(self) -> None:
        """translate() formats by id."""
        intl = IntlLocalization("en", EN_MESSAGES)

        assert intl.translate("welcome", {"name": "Ana"}) == "Welcome, Ana!"
        assert intl.translate("items", {"count": 1}) == "1 item"

    def test_polish_plurals(self) -> None:
        """Plural rules follow the requested locale."""
        intl = IntlLocalization("pl", PL_MESSAGES)

        assert intl.translate("files", {"count": 5}) == "5 plików"

    def test_messages_are_read_only_copies(self) -> None:
        """Later changes to the caller's dict do not leak in."""
        messages = {"a": "A"}
        intl = IntlLocalization("en", messages)
        messages["a"] = "changed"

        assert intl.translate("a") == "A"
        with pytest.raises(TypeError):
            intl.messages["b"] = "B"  # type: ignore[index]

    def test_fallback_callback(self) -> None:
        """on_fallback receives FallbackInfo for default-table resolutions."""
        events: list[FallbackInfo] = []
        intl = IntlLocalization(
            "pl",
            PL_MESSAGES,
            default_locale="en",
            default_messages=EN_MESSAGES,
            on_fallback=events.append,
        )

        assert intl.translate("fallback.only") == "This is a fallback message"
        assert intl.translate("welcome", {"name": "Ola"}) == "Witaj, Ola!"
        assert events == [FallbackInfo("pl", "en", "fallback.only")]

    def test_error_callback(self) -> None:
        """on_error is called once per unresolved id."""
        errors: list[MessageNotFoundError] = []
        intl = IntlLocalization("en", {}, on_error=errors.append)

        assert intl.translate("missing") == "missing"
        assert [error.message_id for error in errors] == ["missing"]

    def test_has_message(self) -> None:
        """has_message() consults both tables."""
        intl = IntlLocalization(
            "pl", PL_MESSAGES, default_locale="en", default_messages=EN_MESSAGES
        )

        assert intl.has_message("files")
        assert intl.has_message("fallback.only")
        assert not intl.has_message("nope")

    def test_format_message_descriptor(self) -> None:
        """format_message() accepts a full descriptor."""
        intl = IntlLocalization("en", EN_MESSAGES)
        descriptor = MessageDescriptor("welcome", description="Greeting", values={"name": "Bo"})

        assert intl.format_message(descriptor) == "Welcome, Bo!"

    def test_render_without_hook(self) -> None:
        """render() returns the string when no hook is configured."""
        intl = IntlLocalization("en", EN_MESSAGES)

        assert intl.render("welcome", {"name": "Ana"}) == "Welcome, Ana!"

    def test_render_hook(self) -> None:
        """on_render receives a TranslationRecord and its result is returned."""
        records: list[TranslationRecord] = []

        def hook(record: TranslationRecord) -> object:
            records.append(record)
            return {"text": record.translation}

        values = {"count": 2}
        intl = IntlLocalization("en", EN_MESSAGES, on_render=hook)

        assert intl.render("items", values) == {"text": "2 items"}
        assert records == [TranslationRecord("items", "2 items", "en", values)]

    def test_repr(self) -> None:
        """repr shows locale and table size."""
        intl = IntlLocalization("en", EN_MESSAGES, default_locale="en")

        assert repr(intl) == "IntlLocalization(locale='en', messages=4, default_locale='en')"


# ============================================================================
# Rich formatting
# ============================================================================


class TestFormatRich:
    """IntlLocalization.format_rich()."""

    def test_default_components(self) -> None:
        """Default renderers apply to every call."""
        intl = IntlLocalization(
            "en", EN_MESSAGES, default_rich_components={"link": lambda c: ("a", *c)}
        )

        assert intl.format_rich("legal") == ["Read the ", ("a", "terms"), "."]

    def test_components_override_defaults(self) -> None:
        """Per-call renderers win over defaults."""
        intl = IntlLocalization(
            "en", EN_MESSAGES, default_rich_components={"link": lambda c: ("a", *c)}
        )

        result = intl.format_rich("legal", components={"link": lambda c: ("u", *c)})

        assert result == ["Read the ", ("u", "terms"), "."]

    def test_icu_then_rich(self) -> None:
        """Plurals resolve first; Node values render in the rich pass."""
        intl = IntlLocalization("en")
        template = "{icon} <b>{count, plural, one {# file} other {# files}}</b>"

        result = intl.format_rich(
            "files",
            default_message=template,
            components={"b": lambda c: ("b", *c)},
            values={"icon": Node("[i]"), "count": 3},
        )

        assert result == ["[i]", " ", ("b", "3 files")]

    def test_value_text_not_read_as_markup(self) -> None:
        """Tags and placeholders inside a string value stay literal text."""
        intl = IntlLocalization("en", {"greet": "Hello {name}"})

        result = intl.format_rich(
            "greet",
            components={"b": lambda c: ("BOLD", *c)},
            values={"name": "<b>evil</b> {icon}", "icon": Node("ICON")},
        )

        assert result == ["Hello <b>evil</b> {icon}"]

    def test_value_text_inside_template_tag(self) -> None:
        """A value wrapped by a template tag reaches the renderer verbatim."""
        intl = IntlLocalization("en", {"greet": "Hi <b>{name}</b>"})

        result = intl.format_rich(
            "greet",
            components={"b": lambda c: ("BOLD", *c)},
            values={"name": "<i>x</i>"},
        )

        assert result == ["Hi ", ("BOLD", "<i>x</i>")]

    def test_number_sign_and_unmatched_select_stay_literal(self) -> None:
        """'#' and unmatched select values are shielded like variables."""
        intl = IntlLocalization("en")

        plural = intl.format_rich(
            "p", default_message="{n, plural, other {# left}}", values={"n": "<b>1</b>"}
        )
        select = intl.format_rich(
            "s", default_message="{g, select, male {he}}", values={"g": "{icon}"}
        )

        assert plural == ["<b>1</b> left"]
        assert select == ["{icon}"]

    def test_template_mentioning_prefix(self) -> None:
        """Templates containing the internal prefix still resolve correctly."""
        intl = IntlLocalization("en", {"m": "_zv0 _zv {a}"})

        assert intl.format_rich("m", values={"a": "{_zv0}"}) == ["_zv0 _zv {_zv0}"]

    def test_missing_message(self) -> None:
        """Unresolved ids yield [id]."""
        errors: list[MessageNotFoundError] = []
        intl = IntlLocalization("en", on_error=errors.append)

        assert intl.format_rich("nope") == ["nope"]
        assert len(errors) == 1


# ============================================================================
# Translator
# ============================================================================


class TestTranslator:
    """Namespaced translation functions."""

    def test_unscoped(self) -> None:
        """Without a namespace ids are used as-is."""
        t = IntlLocalization("en", EN_MESSAGES).translator()

        assert t.namespace is None
        assert t("welcome", {"name": "Ana"}) == "Welcome, Ana!"

    def test_namespace_prefix(self) -> None:
        """Ids are prefixed with the namespace."""
        intl = IntlLocalization("en", {"auth.login": "Log in", "auth.hi": "Hi {name}"})
        t = intl.translator("auth")

        assert t.key("login") == "auth.login"
        assert t("login") == "Log in"
        assert t("hi", {"name": "Ana"}) == "Hi Ana"

    def test_namespace_default_message(self) -> None:
        """Default messages apply to the prefixed id."""
        t = IntlLocalization("en").translator("auth")

        assert t("logout", default_message="Log out") == "Log out"

    def test_namespace_missing_returns_full_key(self) -> None:
        """Unresolved ids return the namespaced id."""
        t = IntlLocalization("en").translator("auth")

        assert t("missing") == "auth.missing"

    def test_rich(self) -> None:
        """Translator.rich() formats namespaced rich messages."""
        intl = IntlLocalization("en", {"docs.legal": "See <b>docs</b>"})
        t = intl.translator("docs")

        assert t.rich("legal", components={"b": lambda c: ("b", *c)}) == ["See ", ("b", "docs")]
