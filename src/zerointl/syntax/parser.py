"""ICU message template parser.

Parses a template once into a Pattern tree of text, variables,
plural/select/selectordinal constructs and Junk. Rule bodies are captured by
balanced-brace matching (one brace table per parse) and parsed recursively,
so bodies that contain their own `{...}` are never truncated at the first inner '}'.

Robustness principle: outside strict mode the parser never raises for template
content. A span that cannot be parsed becomes Junk holding the raw text:
- The opening '{' has a balanced '}': the whole balanced span is Junk.
- Otherwise: the text from '{' to where parsing gave up is Junk, and scanning
  resumes at that point.

Python 3.13+.
"""

from __future__ import annotations

import bisect
import logging
import re
from dataclasses import dataclass
from decimal import Decimal

from zerointl.constants import MAX_DEPTH
from zerointl.core import DepthGuard, DepthLimitExceededError
from zerointl.diagnostics import ErrorTemplate, IntlSyntaxError, SourceSpan
from zerointl.enums import ConstructType

from .ast import (
    CategoryKey,
    ExactKey,
    Junk,
    Pattern,
    PatternElement,
    Rule,
    RuleKey,
    SelectConstruct,
    Span,
    TextElement,
    VariableReference,
)
from .cursor import Cursor, ParseError, ParseResult, is_identifier_char

__all__ = ["TemplateParser", "parse_template"]

logger = logging.getLogger(__name__)

_NEWLINE = re.compile(r"\n")

_EXACT_KEY_PATTERN = re.compile(r"=(-?\d+(?:\.\d+)?)")

# Characters that terminate a rule key
_KEY_TERMINATORS: frozenset[str] = frozenset(" \t\n\r{}")


def _is_key_char(char: str) -> bool:
    return char not in _KEY_TERMINATORS


def _match_braces(source: str) -> dict[int, int]:
    """Offset of every '{' that has a matching '}', mapped to that '}'.

    Example:
        >>> _match_braces("{a {b}} {")
        {3: 5, 0: 6}
    """
    closes: dict[int, int] = {}
    opened: list[int] = []
    for index, char in enumerate(source):
        if char == "{":
            opened.append(index)
        elif char == "}" and opened:
            closes[opened.pop()] = index
    return closes


@dataclass(frozen=True, slots=True)
class _ParseContext:
    """State shared by one parse() call."""

    guard: DepthGuard
    closes: dict[int, int]
    line_starts: list[int]

    def close_of(self, pos: int, end: int) -> int:
        """Offset of the '}' closing the '{' at pos, or -1 when it is not before end."""
        close = self.closes.get(pos, -1)
        return close if close < end else -1

    def span(self, cursor: Cursor, end_pos: int) -> SourceSpan:
        """SourceSpan from cursor to end_pos, located through the line table."""
        line = bisect.bisect_right(self.line_starts, cursor.pos)
        column = cursor.pos - self.line_starts[line - 1] + 1
        return SourceSpan(
            start=cursor.pos, end=max(end_pos, cursor.pos), line=line, column=column
        )


class TemplateParser:
    """ICU template parser.

    Stateless apart from configuration; a single instance may be shared
    across threads. Each parse() call owns its own DepthGuard.

    Example:
        >>> pattern = TemplateParser().parse("Hi {name}!")
        >>> [type(e).__name__ for e in pattern.elements]
        ['TextElement', 'VariableReference', 'TextElement']
    """

    __slots__ = ("_max_depth", "_strict")

    def __init__(self, *, max_depth: int = MAX_DEPTH, strict: bool = False) -> None:
        """Initialize parser.

        Args:
            max_depth: Maximum nesting depth of rule bodies (keyword-only)
            strict: Raise IntlSyntaxError for the first malformed placeable
                instead of keeping it as Junk (keyword-only)
        """
        self._max_depth = max_depth
        self._strict = strict

    def parse(self, template: str) -> Pattern:
        """Parse a template into a Pattern tree.

        Raises:
            IntlSyntaxError: Malformed placeable, in strict mode only
        """
        ctx = _ParseContext(
            DepthGuard(max_depth=self._max_depth),
            _match_braces(template),
            [0, *(m.end() for m in _NEWLINE.finditer(template))],
        )
        return self._parse_pattern(Cursor(template, 0), len(template), ctx)

    def _parse_pattern(self, cursor: Cursor, end: int, ctx: _ParseContext) -> Pattern:
        """Parse source[cursor.pos:end] into pattern elements."""
        elements: list[PatternElement] = []
        source = cursor.source

        while cursor.pos < end:
            brace = source.find("{", cursor.pos, end)
            if brace < 0:
                elements.append(TextElement(source[cursor.pos : end]))
                break
            if brace > cursor.pos:
                elements.append(TextElement(source[cursor.pos : brace]))
            element, cursor = self._parse_placeable(cursor.jump(brace), end, ctx)
            elements.append(element)

        return Pattern(elements=tuple(elements))

    def _parse_placeable(
        self, start: Cursor, end: int, ctx: _ParseContext
    ) -> tuple[PatternElement, Cursor]:
        """Parse the placeable at start, degrading to Junk on failure."""
        try:
            result = self._parse_placeable_body(start, end, ctx)
        except DepthLimitExceededError as e:
            diagnostic = e.diagnostic or ErrorTemplate.nesting_depth_exceeded(ctx.guard.max_depth)
            result = ParseError(diagnostic, start.advance())

        match result:
            case ParseResult(value=node, cursor=after):
                return node, after
            case ParseError(diagnostic=diagnostic, cursor=stop):
                if self._strict:
                    raise IntlSyntaxError(diagnostic)
                close = ctx.close_of(start.pos, end)
                if close >= 0:
                    stop = start.jump(close + 1)
                elif stop.pos <= start.pos:
                    stop = start.advance()
                content = start.slice_to(stop.pos)
                logger.debug(
                    "Unparseable placeable at offset %d kept as text: %s",
                    start.pos,
                    diagnostic.message,
                )
                junk = Junk(
                    content=content,
                    span=Span(start.pos, stop.pos),
                    diagnostic=diagnostic,
                )
                return junk, stop

    def _parse_placeable_body(  # noqa: PLR0911  # One return per failure mode
        self, start: Cursor, end: int, ctx: _ParseContext
    ) -> ParseResult[VariableReference | SelectConstruct] | ParseError:
        """Parse `{name}` or `{name, type, rules...}` starting at '{'."""
        source = start.source
        cursor = start.advance().skip_whitespace()

        name_end = cursor.read_while(is_identifier_char)
        if name_end.pos == cursor.pos:
            return self._invalid(start, name_end, end, ctx)
        name = cursor.slice_to(name_end.pos)
        cursor = name_end.skip_whitespace()

        if cursor.pos >= end:
            diagnostic = ErrorTemplate.unterminated_placeable(ctx.span(start, end))
            return ParseError(diagnostic, cursor)
        if cursor.current == "}":
            after = cursor.advance()
            return ParseResult(VariableReference(name, source[start.pos : after.pos]), after)
        if cursor.current != ",":
            return self._invalid(start, cursor, end, ctx)

        cursor = cursor.advance().skip_whitespace()
        type_end = cursor.read_while(is_identifier_char)
        type_token = cursor.slice_to(type_end.pos)
        try:
            kind = ConstructType(type_token)
        except ValueError:
            diagnostic = ErrorTemplate.unknown_construct_type(type_token, ctx.span(start, end))
            return ParseError(diagnostic, type_end)

        cursor = type_end.skip_whitespace()
        after_comma = cursor.expect(",")
        if after_comma is None:
            return self._invalid(start, cursor, end, ctx)

        rules = self._parse_rules(after_comma, end, ctx)
        if isinstance(rules, ParseError):
            return rules

        after = rules.cursor
        construct = SelectConstruct(
            name=name,
            kind=kind,
            rules=rules.value,
            source=source[start.pos : after.pos],
            span=Span(start.pos, after.pos),
        )
        return ParseResult(construct, after)

    def _parse_rules(
        self, cursor: Cursor, end: int, ctx: _ParseContext
    ) -> ParseResult[tuple[Rule, ...]] | ParseError:
        """Parse `key {body}` pairs up to and including the closing '}'."""
        rules: list[Rule] = []

        while True:
            cursor = cursor.skip_whitespace()
            if cursor.pos >= end:
                return ParseError(ErrorTemplate.unterminated_placeable(), cursor)
            if cursor.current == "}":
                return ParseResult(tuple(rules), cursor.advance())

            key_end = cursor.read_while(_is_key_char)
            key_text = cursor.slice_to(key_end.pos)
            key = self._parse_key(key_text)
            if key is None:
                diagnostic = ErrorTemplate.invalid_rule_key(key_text, ctx.span(cursor, key_end.pos))
                return ParseError(diagnostic, key_end)

            cursor = key_end.skip_whitespace()
            if cursor.pos >= end or cursor.current != "{":
                span = ctx.span(cursor, cursor.pos)
                diagnostic = ErrorTemplate.expected_rule_body(key_text, span)
                return ParseError(diagnostic, cursor)

            close = ctx.close_of(cursor.pos, end)
            if close < 0:
                return ParseError(ErrorTemplate.unterminated_placeable(), cursor.jump(end))

            with ctx.guard:
                body = self._parse_pattern(cursor.advance(), close, ctx)
            rules.append(Rule(key=key, body=body))
            cursor = cursor.jump(close + 1)

    @staticmethod
    def _parse_key(key_text: str) -> RuleKey | None:
        """Classify a rule key; None when it is empty or a malformed '=N'."""
        if not key_text:
            return None
        if key_text.startswith("="):
            match = _EXACT_KEY_PATTERN.fullmatch(key_text)
            if match is None:
                return None
            return ExactKey(value=Decimal(match.group(1)), source=key_text)
        return CategoryKey(name=key_text)

    @staticmethod
    def _invalid(start: Cursor, stop: Cursor, end: int, ctx: _ParseContext) -> ParseError:
        """Placeable that is neither a variable nor a construct."""
        text = start.slice_to(min(stop.pos + 1, end))
        return ParseError(ErrorTemplate.invalid_placeable(text, ctx.span(start, stop.pos)), stop)


def parse_template(
    template: str, *, max_depth: int = MAX_DEPTH, strict: bool = False
) -> Pattern:
    """Parse an ICU template into a Pattern tree.

    Args:
        template: Template text
        max_depth: Maximum nesting depth of rule bodies (keyword-only)
        strict: Raise IntlSyntaxError instead of producing Junk (keyword-only)

    Returns:
        Pattern tree; malformed spans are Junk elements unless strict

    Example:
        >>> pattern = parse_template("{n, plural, one {# item} other {# items}}")
        >>> construct = pattern.elements[0]
        >>> [rule.key_text for rule in construct.rules]
        ['one', 'other']
    """
    return TemplateParser(max_depth=max_depth, strict=strict).parse(template)
