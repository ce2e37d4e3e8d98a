"""Diagnostic codes, source spans and the Diagnostic record.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for every diagnostic zerointl emits.

    Ranges:
        1xxx: message lookup
        3xxx: template syntax (spans rendered literally)
        5xxx: template structure (formats, but likely not as intended)
    """

    MESSAGE_NOT_FOUND = 1001

    UNEXPECTED_EOF = 3001
    UNTERMINATED_PLACEABLE = 3002
    INVALID_PLACEABLE = 3003
    UNKNOWN_CONSTRUCT_TYPE = 3004
    PARSE_NESTING_DEPTH_EXCEEDED = 3005
    INVALID_RULE_KEY = 3006
    EXPECTED_RULE_BODY = 3007

    VALIDATION_MISSING_OTHER = 5001
    VALIDATION_DUPLICATE_RULE = 5002
    VALIDATION_UNCLOSED_TAG = 5003
    VALIDATION_EMPTY_CONSTRUCT = 5004


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a diagnostic inside a template.

    Offsets count code points. Lines and columns start at 1.

    Attributes:
        start: Offset of the first character
        end: Offset one past the last character
        line: Line of start
        column: Column of start
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        problems = (
            (self.start < 0, f"start must be >= 0, got {self.start}"),
            (self.end < self.start, f"end ({self.end}) must be >= start ({self.start})"),
            (self.line < 1, f"line must be >= 1, got {self.line}"),
            (self.column < 1, f"column must be >= 1, got {self.column}"),
        )
        for failed, detail in problems:
            if failed:
                msg = f"SourceSpan.{detail}"
                raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One structured problem report.

    Attributes:
        code: Stable identifier
        message: Human-readable description
        span: Template location, when the problem has one
        hint: Suggested fix
        help_url: Further reading
        severity: "error" for syntax problems, "warning" for structural ones
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Compiler-style rendering (see DiagnosticFormatter)."""
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
