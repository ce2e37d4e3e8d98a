"""Structured diagnostics: codes, spans, templates, exceptions and renderers.

Every problem zerointl reports is a Diagnostic built by ErrorTemplate, either
attached to a Junk node, returned in a ValidationResult or carried by an
IntlError subclass.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    IntlError,
    IntlReferenceError,
    IntlResolutionError,
    IntlSyntaxError,
    MessageNotFoundError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IntlError",
    "IntlReferenceError",
    "IntlResolutionError",
    "IntlSyntaxError",
    "MessageNotFoundError",
    "OutputFormat",
    "SourceSpan",
    "ValidationResult",
]
