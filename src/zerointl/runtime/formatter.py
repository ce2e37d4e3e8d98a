"""ICU message formatter - resolves parsed templates to strings.

Parses the template once, then walks the tree interpolating variables and
selecting plural/select/selectordinal rules. Substituted values are emitted
as-is and never re-parsed.

Python 3.13+. Indirect dependency: Babel (via plural_rules).

Thread Safety:
    Resolution state lives on the call stack. The only shared object is the
    PluralRulesCache, which is lock-guarded.
"""

import logging
from collections.abc import Callable
from decimal import Decimal

from zerointl.constants import DEFAULT_LOCALE, MAX_DEPTH, OTHER_CATEGORY
from zerointl.enums import ConstructType, PluralType
from zerointl.syntax import (
    Junk,
    Pattern,
    Rule,
    SelectConstruct,
    TemplateParser,
    TextElement,
    VariableReference,
)

from .plural_rules import PluralRulesCache
from .value_types import ValueBag, coerce_number, format_value, is_primitive

__all__ = ["IcuFormatter", "format_icu"]

logger = logging.getLogger(__name__)

# Placeholder for the selector value inside plural/selectordinal bodies
_NUMBER_SIGN = "#"

type ValueEmitter = Callable[[str], str]


def _verbatim(text: str) -> str:
    return text


class IcuFormatter:
    """Formats ICU templates to plain strings.

    Never raises for template content: malformed spans render literally and
    undefined values leave their placeholder text unchanged. Values that are
    not primitives (Node, render functions) are treated as undefined here;
    the rich-text formatter renders them.

    Example:
        >>> formatter = IcuFormatter()
        >>> formatter.format("{count, plural, one {# item} other {# items}}", {"count": 2}, "en")
        '2 items'
    """

    __slots__ = ("_parser", "_plural_rules")

    def __init__(
        self,
        *,
        plural_rules: PluralRulesCache | None = None,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Initialize formatter.

        Args:
            plural_rules: Shared plural rules cache (default: a private cache)
            max_depth: Maximum nesting depth of constructs (keyword-only)
        """
        self._plural_rules = plural_rules if plural_rules is not None else PluralRulesCache()
        self._parser = TemplateParser(max_depth=max_depth)

    @property
    def plural_rules(self) -> PluralRulesCache:
        """Plural rules cache used for category selection."""
        return self._plural_rules

    def format(
        self,
        template: str,
        values: ValueBag | None = None,
        locale: str = DEFAULT_LOCALE,
        *,
        emit_value: ValueEmitter | None = None,
    ) -> str:
        """Format a template.

        Args:
            template: ICU template text
            values: Value bag (default: empty)
            locale: Locale for plural and ordinal categories
            emit_value: Maps the text of every substituted value (variables,
                "#" and unmatched selector values) to what is written out;
                template text is never passed to it (keyword-only)

        Returns:
            Formatted string
        """
        if "{" not in template:
            return template

        parts: list[str] = []
        emit = emit_value if emit_value is not None else _verbatim
        self._resolve_pattern(self._parser.parse(template), values or {}, locale, None, emit, parts)
        return "".join(parts)

    def _resolve_pattern(
        self,
        pattern: Pattern,
        values: ValueBag,
        locale: str,
        number_text: str | None,
        emit: ValueEmitter,
        parts: list[str],
    ) -> None:
        """Append the resolved elements of pattern to parts.

        number_text is the replacement for '#', or None outside plural bodies.
        """
        for element in pattern.elements:
            match element:
                case TextElement(value=text):
                    if number_text is not None and _NUMBER_SIGN in text:
                        text = text.replace(_NUMBER_SIGN, number_text)
                    parts.append(text)
                case VariableReference(name=name, source=source):
                    value = values.get(name)
                    parts.append(emit(format_value(value)) if is_primitive(value) else source)
                case SelectConstruct():
                    self._resolve_construct(element, values, locale, number_text, emit, parts)
                case Junk(content=content):
                    parts.append(content)

    def _resolve_construct(
        self,
        construct: SelectConstruct,
        values: ValueBag,
        locale: str,
        number_text: str | None,
        emit: ValueEmitter,
        parts: list[str],
    ) -> None:
        value = values.get(construct.name)
        if not is_primitive(value):
            parts.append(construct.source)
            return

        value_text = format_value(value)
        rule = self._select_rule(construct, value, value_text, locale)
        if rule is None:
            logger.debug(
                "No rule matches %r in %s construct on '%s'; emitting value",
                value,
                construct.kind,
                construct.name,
            )
            parts.append(emit(value_text))
            return

        if construct.kind.is_numeric:
            number_text = emit(value_text)
        self._resolve_pattern(rule.body, values, locale, number_text, emit, parts)

    def _select_rule(
        self,
        construct: SelectConstruct,
        value: object,
        value_text: str,
        locale: str,
    ) -> Rule | None:
        """Pick the rule for value.

        Matching priority:
            1. Exact '=N' key (plural/selectordinal)
            2. Plural category (plural/selectordinal) or option name (select)
            3. 'other'
        """
        if construct.kind is ConstructType.SELECT:
            rule = construct.find_category(value_text)
            return rule if rule is not None else construct.find_category(OTHER_CATEGORY)

        number = coerce_number(value)
        if number is not None:
            exact = construct.find_exact(Decimal(number))
            if exact is not None:
                return exact

            plural_type = (
                PluralType.ORDINAL
                if construct.kind is ConstructType.SELECTORDINAL
                else PluralType.CARDINAL
            )
            category = self._plural_rules.select(number, locale, plural_type)
            rule = construct.find_category(category)
            if rule is not None:
                return rule

        return construct.find_category(OTHER_CATEGORY)


def format_icu(
    template: str,
    values: ValueBag | None = None,
    locale: str = DEFAULT_LOCALE,
    *,
    plural_rules: PluralRulesCache | None = None,
) -> str:
    """Format an ICU template to a string.

    Convenience function for IcuFormatter().format().

    Args:
        template: ICU template text
        values: Value bag (default: empty)
        locale: Locale for plural and ordinal categories
        plural_rules: Shared plural rules cache (keyword-only, optional)

    Returns:
        Formatted string; never raises for malformed templates

    Examples:
        >>> format_icu("{count, plural, =0 {No items} one {# item} other {# items}}", {"count": 0}, "en")
        'No items'
        >>> format_icu("{unterminated", {}, "en")
        '{unterminated'
    """
    return IcuFormatter(plural_rules=plural_rules).format(template, values, locale)
