"""Template introspection.

Reports which values and renderers a template needs without formatting it:
variable names (placeholders and construct selectors, at any nesting depth),
plural/select/selectordinal constructs with their rule keys, and rich-text
tag names.

Python 3.13+.
"""

from dataclasses import dataclass

from .enums import ConstructType
from .syntax import (
    Pattern,
    RichComponent,
    RichPart,
    SelectConstruct,
    VariableReference,
    parse_markup,
    parse_template,
)

__all__ = ["ConstructInfo", "TemplateIntrospection", "introspect_template"]


@dataclass(frozen=True, slots=True)
class ConstructInfo:
    """Immutable metadata about an ICU construct in a template."""

    name: str
    """Selector variable name."""

    kind: ConstructType
    """plural, select or selectordinal."""

    keys: tuple[str, ...]
    """Rule keys as written, in declaration order."""

    @property
    def has_other(self) -> bool:
        """Whether the construct declares an 'other' fallback rule."""
        return "other" in self.keys


@dataclass(frozen=True, slots=True)
class TemplateIntrospection:
    """Complete introspection result for a template.

    Example:
        >>> info = introspect_template("<b>{count, plural, one {# new} other {# new}}</b> {user}")
        >>> sorted(info.variables)
        ['count', 'user']
        >>> info.tags
        frozenset({'b'})
    """

    variables: frozenset[str]
    """All variable names the template references."""

    constructs: tuple[ConstructInfo, ...]
    """ICU constructs in document order (outer before inner)."""

    tags: frozenset[str]
    """Rich-text tag names with a matching closing tag."""

    @property
    def has_rich_syntax(self) -> bool:
        """Whether the template contains rich-text tags."""
        return bool(self.tags)

    @property
    def has_selectors(self) -> bool:
        """Whether the template contains plural/select/selectordinal constructs."""
        return bool(self.constructs)

    def requires_variable(self, name: str) -> bool:
        """Check if the template references a specific variable."""
        return name in self.variables


def _collect_pattern(
    pattern: Pattern, variables: set[str], constructs: list[ConstructInfo]
) -> None:
    for element in pattern.elements:
        match element:
            case VariableReference(name=name):
                variables.add(name)
            case SelectConstruct(name=name, kind=kind, rules=rules):
                variables.add(name)
                constructs.append(ConstructInfo(name, kind, tuple(rule.key_text for rule in rules)))
                for rule in rules:
                    _collect_pattern(rule.body, variables, constructs)


def _collect_tags(parts: tuple[RichPart, ...], tags: set[str]) -> None:
    for part in parts:
        if isinstance(part, RichComponent):
            tags.add(part.tag_name)
            _collect_tags(part.children, tags)


def introspect_template(template: str) -> TemplateIntrospection:
    """Extract variables, constructs and tags from a template.

    Malformed spans (rendered literally) contribute no variables.

    Args:
        template: Template text

    Returns:
        TemplateIntrospection
    """
    variables: set[str] = set()
    constructs: list[ConstructInfo] = []
    tags: set[str] = set()

    _collect_pattern(parse_template(template), variables, constructs)
    _collect_tags(parse_markup(template), tags)

    return TemplateIntrospection(
        variables=frozenset(variables),
        constructs=tuple(constructs),
        tags=frozenset(tags),
    )
