"""Template validation.

Two-level validation:
1. Syntax: spans the parser could not read (Junk). These format as literal
   text, so they are reported as errors.
2. Structure: constructs that format, but probably not as intended (missing
   'other' rule, duplicate keys, no rules, rich tags without a closing tag).
   Reported as warnings.

Validation never raises for template content.
"""

import re

from zerointl.diagnostics import Diagnostic, ErrorTemplate, ValidationResult

from .ast import Junk, Pattern, RichComponent, RichPart, RichText, SelectConstruct
from .markup import parse_markup
from .parser import TemplateParser

__all__ = ["TemplateValidator", "validate_template"]

_OPENING_TAG_PATTERN = re.compile(r"<(\w+)>")


class TemplateValidator:
    """Validator for ICU templates with optional rich-text tags.

    Thread-safe: all validation state is local to the validate() call.

    Usage:
        validator = TemplateValidator()
        result = validator.validate("{n, plural, one {# item}}")
        for warning in result.warnings:
            print(warning.message)
    """

    __slots__ = ("_parser",)

    def __init__(self, parser: TemplateParser | None = None) -> None:
        self._parser = parser or TemplateParser()

    def validate(self, template: str) -> ValidationResult:
        """Validate a template.

        Args:
            template: Template text

        Returns:
            ValidationResult with syntax errors and structural warnings
        """
        errors: list[Diagnostic] = []
        warnings: list[Diagnostic] = []

        self._validate_pattern(self._parser.parse(template), errors, warnings)
        self._validate_markup(parse_markup(template), warnings)

        if not errors and not warnings:
            return ValidationResult.valid()
        return ValidationResult.invalid(errors=tuple(errors), warnings=tuple(warnings))

    def _validate_pattern(
        self,
        pattern: Pattern,
        errors: list[Diagnostic],
        warnings: list[Diagnostic],
    ) -> None:
        for element in pattern.elements:
            match element:
                case Junk(diagnostic=diagnostic):
                    errors.append(diagnostic)
                case SelectConstruct():
                    self._validate_construct(element, warnings)
                    for rule in element.rules:
                        self._validate_pattern(rule.body, errors, warnings)

    @staticmethod
    def _validate_construct(construct: SelectConstruct, warnings: list[Diagnostic]) -> None:
        if not construct.rules:
            warnings.append(ErrorTemplate.empty_construct(construct.name))
            return

        seen: set[str] = set()
        for rule in construct.rules:
            key_text = rule.key_text
            if key_text in seen:
                warnings.append(ErrorTemplate.duplicate_rule(construct.name, key_text))
            seen.add(key_text)

        if construct.find_category("other") is None:
            warnings.append(ErrorTemplate.missing_other_rule(construct.name, construct.kind))

    def _validate_markup(self, parts: tuple[RichPart, ...], warnings: list[Diagnostic]) -> None:
        """Report opening tags left as literal text."""
        for part in parts:
            match part:
                case RichText(content=content):
                    for tag in _OPENING_TAG_PATTERN.finditer(content):
                        warnings.append(ErrorTemplate.unclosed_tag(tag.group(1)))
                case RichComponent(children=children):
                    self._validate_markup(children, warnings)


def validate_template(template: str) -> ValidationResult:
    """Validate a template.

    Convenience function for TemplateValidator().validate().

    Example:
        >>> validate_template("{n, plural, one {# item}}").warning_count
        1
        >>> validate_template("{n, plural, one {x} other {y}").is_valid
        False
    """
    return TemplateValidator().validate(template)
