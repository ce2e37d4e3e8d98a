"""Template syntax package.

Provides the ICU template parser, the rich-text markup parser, AST
definitions and template validation.
Separate from runtime to enable tooling (linters, editors, CI checks).

Python 3.13+.
"""

from .ast import (
    CategoryKey,
    ExactKey,
    Junk,
    Pattern,
    PatternElement,
    RichComponent,
    RichPart,
    RichText,
    RichVariable,
    Rule,
    RuleKey,
    SelectConstruct,
    Span,
    TextElement,
    VariableReference,
)
from .cursor import Cursor, ParseError, ParseResult
from .markup import parse_markup
from .parser import TemplateParser, parse_template
from .validator import TemplateValidator, validate_template

__all__ = [
    "CategoryKey",
    "Cursor",
    "ExactKey",
    "Junk",
    "ParseError",
    "ParseResult",
    "Pattern",
    "PatternElement",
    "RichComponent",
    "RichPart",
    "RichText",
    "RichVariable",
    "Rule",
    "RuleKey",
    "SelectConstruct",
    "Span",
    "TemplateParser",
    "TemplateValidator",
    "TextElement",
    "VariableReference",
    "parse_markup",
    "parse_template",
    "validate_template",
]
