"""Template AST (Abstract Syntax Tree) node definitions.

Two small trees share this module:
- ICU patterns: text, variables, plural/select/selectordinal constructs and
  Junk (malformed spans kept byte-for-byte)
- Rich-text parts: literal text, {name} variables and <tag>...</tag> components

Every node is a frozen dataclass; trees are built once per formatting call
and never mutated.

Python 3.13+.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import TypeIs

from zerointl.diagnostics import Diagnostic
from zerointl.enums import ConstructType, RichPartKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Pattern elements
    "Pattern",
    "TextElement",
    "VariableReference",
    "SelectConstruct",
    "Junk",
    # Rule keys
    "Rule",
    "ExactKey",
    "CategoryKey",
    # Rich-text parts
    "RichText",
    "RichVariable",
    "RichComponent",
    # Type aliases
    "PatternElement",
    "RuleKey",
    "RichPart",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Character offsets of a node in its template.

    Attributes:
        start: Starting offset (inclusive)
        end: Ending offset (exclusive)

    Example:
        Template: "Hi {name}!"
        VariableReference span: Span(start=3, end=9)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


# ============================================================================
# PATTERN ELEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text. A '#' inside plural bodies is replaced at resolution."""

    value: str


@dataclass(frozen=True, slots=True)
class VariableReference:
    """Plain placeholder: {name}

    Attributes:
        name: Value bag key
        source: Raw template text, emitted unchanged when the value is undefined
    """

    name: str
    source: str


@dataclass(frozen=True, slots=True)
class ExactKey:
    """Exact-match rule key: =0, =1, =42

    Attributes:
        value: Numeric value the key matches
        source: Key as written (including '=')
    """

    value: Decimal
    source: str

    @staticmethod
    def guard(key: object) -> TypeIs["ExactKey"]:
        """Type guard for ExactKey."""
        return isinstance(key, ExactKey)


@dataclass(frozen=True, slots=True)
class CategoryKey:
    """Category or select-option rule key: one, other, male, ..."""

    name: str

    @staticmethod
    def guard(key: object) -> TypeIs["CategoryKey"]:
        """Type guard for CategoryKey."""
        return isinstance(key, CategoryKey)


type RuleKey = ExactKey | CategoryKey


@dataclass(frozen=True, slots=True)
class Rule:
    """One `key {body}` pair of a construct."""

    key: RuleKey
    body: "Pattern"

    @property
    def key_text(self) -> str:
        """Key as written in the template."""
        match self.key:
            case ExactKey(source=source):
                return source
            case CategoryKey(name=name):
                return name


@dataclass(frozen=True, slots=True)
class SelectConstruct:
    """ICU construct: {name, type, key1 {body1} key2 {body2} ...}

    Attributes:
        name: Selector variable name
        kind: plural, select or selectordinal
        rules: Rules in declaration order
        source: Raw template text, emitted unchanged when the value is undefined
        span: Location in the enclosing template
    """

    name: str
    kind: ConstructType
    rules: tuple[Rule, ...]
    source: str
    span: Span

    def find_exact(self, number: Decimal) -> Rule | None:
        """First exact-match rule whose key equals number."""
        for rule in self.rules:
            if ExactKey.guard(rule.key) and rule.key.value == number:
                return rule
        return None

    def find_category(self, name: str) -> Rule | None:
        """First category rule named name."""
        for rule in self.rules:
            if CategoryKey.guard(rule.key) and rule.key.name == name:
                return rule
        return None


@dataclass(frozen=True, slots=True)
class Junk:
    """Malformed span, rendered byte-for-byte as literal text.

    Attributes:
        content: Raw template text of the span
        span: Location in the enclosing template
        diagnostic: Why the span could not be parsed
    """

    content: str
    span: Span
    diagnostic: Diagnostic


type PatternElement = TextElement | VariableReference | SelectConstruct | Junk


@dataclass(frozen=True, slots=True)
class Pattern:
    """Ordered template elements (top-level template or a rule body)."""

    elements: tuple[PatternElement, ...]

    @property
    def is_plain_text(self) -> bool:
        """True when the pattern contains nothing but literal text."""
        return all(isinstance(element, TextElement) for element in self.elements)


# ============================================================================
# RICH-TEXT PARTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class RichText:
    """Literal text between recognized spans."""

    content: str

    @property
    def kind(self) -> RichPartKind:
        """Part discriminator."""
        return RichPartKind.TEXT


@dataclass(frozen=True, slots=True)
class RichVariable:
    """Placeholder: {name}"""

    name: str

    @property
    def kind(self) -> RichPartKind:
        """Part discriminator."""
        return RichPartKind.VARIABLE


@dataclass(frozen=True, slots=True)
class RichComponent:
    """Tag span: <tag_name>content</tag_name>

    Attributes:
        tag_name: Tag name shared by the opening and closing tag
        content: Raw inner text
        children: Inner text parsed into parts
    """

    tag_name: str
    content: str
    children: tuple["RichPart", ...]

    @property
    def kind(self) -> RichPartKind:
        """Part discriminator."""
        return RichPartKind.COMPONENT


type RichPart = RichText | RichVariable | RichComponent
