"""Enumerations for zerointl type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ConstructType(StrEnum):
    """Type token of an ICU construct.

    StrEnum provides automatic string conversion: str(ConstructType.PLURAL) == "plural"
    """

    PLURAL = "plural"
    """Cardinal plural: {count, plural, one {# item} other {# items}}"""

    SELECT = "select"
    """String selection: {gender, select, male {He} other {They}}"""

    SELECTORDINAL = "selectordinal"
    """Ordinal plural: {place, selectordinal, one {#st} other {#th}}"""

    @property
    def is_numeric(self) -> bool:
        """True for constructs that select by locale plural rules."""
        return self is not ConstructType.SELECT


class PluralType(StrEnum):
    """Kind of CLDR plural rule set.

    StrEnum provides automatic string conversion: str(PluralType.ORDINAL) == "ordinal"
    """

    CARDINAL = "cardinal"
    """Counting forms: 1 item, 2 items"""

    ORDINAL = "ordinal"
    """Ranking forms: 1st, 2nd, 3rd"""


class RichPartKind(StrEnum):
    """Kind of a parsed rich-text part.

    StrEnum provides automatic string conversion: str(RichPartKind.TEXT) == "text"
    """

    TEXT = "text"
    """Literal text between recognized spans"""

    VARIABLE = "variable"
    """Placeholder: {name}"""

    COMPONENT = "component"
    """Tag span: <b>bold</b>"""


__all__ = [
    "ConstructType",
    "PluralType",
    "RichPartKind",
]
