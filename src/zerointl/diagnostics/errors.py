"""zerointl exception hierarchy with structured diagnostics.

Template formatting never raises for malformed input; these exceptions are
collected, passed to diagnostic callbacks, or raised for invalid API usage.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class IntlError(Exception):
    """Base exception for all zerointl errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IntlError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class IntlSyntaxError(IntlError):
    """Template syntax error.

    Raised by TemplateParser and parse_template when strict=True, carrying the
    diagnostic of the first malformed placeable. Without strict, malformed
    spans become Junk elements that render as literal text.
    """


class IntlReferenceError(IntlError):
    """Unknown message or variable reference."""


class MessageNotFoundError(IntlReferenceError):
    """No template found for a message id in any fallback source.

    Handed to the ``on_error`` callback of the message resolution layer.
    Fallback: the message id itself is returned.

    Attributes:
        message_id: The id that could not be resolved
        locale: Requested locale
        default_locale: Default locale that was also consulted (if any)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        message_id: str = "",
        locale: str = "",
        default_locale: str | None = None,
    ) -> None:
        """Initialize MessageNotFoundError.

        Args:
            message: Error message string OR Diagnostic object
            message_id: The id that could not be resolved
            locale: Requested locale
            default_locale: Default locale that was also consulted
        """
        super().__init__(message)
        self.message_id = message_id
        self.locale = locale
        self.default_locale = default_locale


class IntlResolutionError(IntlError):
    """Runtime error during template resolution."""
