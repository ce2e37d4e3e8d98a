"""Rendering of diagnostics for terminals, logs and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# ANSI SGR sequences keyed by severity
_SEVERITY_COLORS: dict[str, str] = {"error": "1;31", "warning": "1;33"}


class OutputFormat(StrEnum):
    """Diagnostic rendering styles."""

    RUST = "rust"
    """Multi-line, compiler style: header, location, help and note lines."""

    SIMPLE = "simple"
    """One line: CODE: message."""

    JSON = "json"
    """One JSON object per diagnostic."""


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Configurable diagnostic renderer.

    Attributes:
        output_format: Rendering style
        sanitize: Truncate message and hint text to max_content_length
        color: Colorize the severity label (RUST style only)
        max_content_length: Truncation limit used when sanitize is set

    Example:
        >>> from zerointl.diagnostics import ErrorTemplate
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> formatter.format(ErrorTemplate.unknown_construct_type("number"))
        "UNKNOWN_CONSTRUCT_TYPE: Unknown construct type 'number'"
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._to_json(diagnostic)
            case _:
                return self._to_rust(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, separated by blank lines."""
        return "\n\n".join(map(self.format, diagnostics))

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Summary line followed by one indented entry per diagnostic."""
        if not result.errors and not result.warnings:
            return "Validation passed"

        if result.is_valid:
            summary = f"Validation passed with {result.warning_count} warning(s)"
        else:
            summary = (
                f"Validation failed: {result.error_count} error(s), "
                f"{result.warning_count} warning(s)"
            )
        entries = [f"  {self.format(d)}" for d in (*result.errors, *result.warnings)]
        return "\n".join([summary, *entries])

    def _to_rust(self, diagnostic: Diagnostic) -> str:
        label = diagnostic.severity
        if self.color:
            label = f"\033[{_SEVERITY_COLORS[label]}m{label}\033[0m"

        lines = [f"{label}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        if (span := diagnostic.span) is not None:
            lines.append(f"  --> line {span.line}, column {span.column}")
        if diagnostic.hint:
            lines.append(f"  = help: {self._clip(diagnostic.hint)}")
        if diagnostic.help_url:
            lines.append(f"  = note: see {diagnostic.help_url}")
        return "\n".join(lines)

    def _to_json(self, diagnostic: Diagnostic) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "severity": diagnostic.severity,
            "message": self._clip(diagnostic.message),
        }
        if (span := diagnostic.span) is not None:
            payload |= {
                "line": span.line,
                "column": span.column,
                "start": span.start,
                "end": span.end,
            }
        if diagnostic.hint:
            payload["hint"] = self._clip(diagnostic.hint)
        if diagnostic.help_url:
            payload["help_url"] = diagnostic.help_url
        return json.dumps(payload, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return f"{text[: self.max_content_length]}..."
