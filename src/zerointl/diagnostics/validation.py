"""Outcome of validate_template().

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["ValidationResult"]


def _describe(diagnostic: Diagnostic, *, with_location: bool) -> str:
    where = ""
    if with_location and (span := diagnostic.span) is not None:
        where = f" at line {span.line}, column {span.column}"
    return f"  [{diagnostic.code.name}]{where}: {diagnostic.message}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Diagnostics found in one template.

    Errors mark spans the formatter will copy through as literal text.
    Warnings mark constructs that format, though probably not as meant.
    Only errors make a result invalid.

    Example:
        >>> ValidationResult.valid().is_valid
        True
    """

    errors: tuple[Diagnostic, ...]
    warnings: tuple[Diagnostic, ...]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Result without diagnostics."""
        return ValidationResult(errors=(), warnings=())

    @staticmethod
    def invalid(
        errors: tuple[Diagnostic, ...] = (),
        warnings: tuple[Diagnostic, ...] = (),
    ) -> "ValidationResult":
        """Result carrying the given diagnostics."""
        return ValidationResult(errors=errors, warnings=warnings)

    def format(self, *, include_warnings: bool = True) -> str:
        """Plain-text listing, errors first, each with its location.

        Args:
            include_warnings: List warnings after the errors (default: True)
        """
        sections: list[str] = []
        if self.errors:
            sections.append(f"Errors ({self.error_count}):")
            sections.extend(_describe(d, with_location=True) for d in self.errors)
        if include_warnings and self.warnings:
            sections.append(f"Warnings ({self.warning_count}):")
            sections.extend(_describe(d, with_location=False) for d in self.warnings)
        return "\n".join(sections) or "Validation passed: no errors or warnings"
