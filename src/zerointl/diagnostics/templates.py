"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://unicode-org.github.io/icu/userguide/format_parse/messages"

    @staticmethod
    def message_not_found(
        message_id: str, locale: str, default_locale: str | None = None
    ) -> Diagnostic:
        """No template for a message id in any fallback source.

        Args:
            message_id: The message identifier that was not found
            locale: Requested locale
            default_locale: Default locale consulted as fallback (optional)

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"Missing message for key: {message_id} in locale: {locale}"
        if default_locale:
            msg += f" and default locale: {default_locale}"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Add the key to the message table or pass a default message",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of template.

        Args:
            position: Character offset where input ended

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_EOF, message=msg)

    @staticmethod
    def unterminated_placeable(span: SourceSpan | None = None) -> Diagnostic:
        """Opening brace without a matching closing brace.

        Args:
            span: Location of the opening brace (optional)

        Returns:
            Diagnostic for UNTERMINATED_PLACEABLE
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_PLACEABLE,
            message="Unterminated placeable: missing '}'",
            span=span,
            hint="Close every '{' with a matching '}'",
            help_url=ErrorTemplate._DOCS_BASE,
        )

    @staticmethod
    def invalid_placeable(text: str, span: SourceSpan | None = None) -> Diagnostic:
        """Brace expression that is neither a variable nor a construct.

        Args:
            text: Raw text of the placeable
            span: Location of the placeable (optional)

        Returns:
            Diagnostic for INVALID_PLACEABLE
        """
        msg = f"Invalid placeable '{text}': expected '{{name}}' or '{{name, type, ...}}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLACEABLE,
            message=msg,
            span=span,
            hint="Variable names may not contain spaces or punctuation",
        )

    @staticmethod
    def unknown_construct_type(type_token: str, span: SourceSpan | None = None) -> Diagnostic:
        """Construct type other than plural, select or selectordinal.

        Args:
            type_token: The unrecognized type token
            span: Location of the construct (optional)

        Returns:
            Diagnostic for UNKNOWN_CONSTRUCT_TYPE
        """
        msg = f"Unknown construct type '{type_token}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_CONSTRUCT_TYPE,
            message=msg,
            span=span,
            hint="Use one of: plural, select, selectordinal",
            help_url=ErrorTemplate._DOCS_BASE,
        )

    @staticmethod
    def invalid_rule_key(key: str, span: SourceSpan | None = None) -> Diagnostic:
        """Rule key that is empty or a malformed exact match.

        Args:
            key: The offending key text
            span: Location of the key (optional)

        Returns:
            Diagnostic for INVALID_RULE_KEY
        """
        msg = f"Invalid rule key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RULE_KEY,
            message=msg,
            span=span,
            hint="Rule keys are '=<integer>' or a category name such as 'one' or 'other'",
        )

    @staticmethod
    def expected_rule_body(key: str, span: SourceSpan | None = None) -> Diagnostic:
        """Rule key not followed by a brace-delimited body.

        Args:
            key: The rule key missing its body
            span: Location where the body was expected (optional)

        Returns:
            Diagnostic for EXPECTED_RULE_BODY
        """
        msg = f"Expected '{{' to open the body of rule '{key}'"
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_RULE_BODY,
            message=msg,
            span=span,
            hint="Write rules as: key {text}",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, span: SourceSpan | None = None) -> Diagnostic:
        """Template nesting exceeds the configured depth limit.

        Args:
            max_depth: The configured limit
            span: Location of the construct that exceeded it (optional)

        Returns:
            Diagnostic for PARSE_NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=span,
            hint="Flatten nested constructs or split the message",
        )

    @staticmethod
    def missing_other_rule(name: str, construct_type: str) -> Diagnostic:
        """Construct without an 'other' fallback rule.

        Args:
            name: Selector variable name
            construct_type: plural, select or selectordinal

        Returns:
            Diagnostic for VALIDATION_MISSING_OTHER
        """
        msg = f"{construct_type} construct on '{name}' has no 'other' rule"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_MISSING_OTHER,
            message=msg,
            hint="Unmatched values will render as the raw value",
            severity="warning",
        )

    @staticmethod
    def duplicate_rule(name: str, key: str) -> Diagnostic:
        """Same rule key declared twice in one construct.

        Args:
            name: Selector variable name
            key: Duplicated rule key

        Returns:
            Diagnostic for VALIDATION_DUPLICATE_RULE
        """
        msg = f"Rule '{key}' is declared more than once in construct on '{name}'"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_DUPLICATE_RULE,
            message=msg,
            hint="Only the first occurrence can ever be selected",
            severity="warning",
        )

    @staticmethod
    def empty_construct(name: str) -> Diagnostic:
        """Construct with no rules at all.

        Args:
            name: Selector variable name

        Returns:
            Diagnostic for VALIDATION_EMPTY_CONSTRUCT
        """
        msg = f"Construct on '{name}' declares no rules"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_EMPTY_CONSTRUCT,
            message=msg,
            severity="warning",
        )

    @staticmethod
    def unclosed_tag(tag_name: str) -> Diagnostic:
        """Rich-text opening tag without a matching closing tag.

        Args:
            tag_name: Tag name

        Returns:
            Diagnostic for VALIDATION_UNCLOSED_TAG
        """
        msg = f"Tag <{tag_name}> has no matching </{tag_name}> and renders as text"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_UNCLOSED_TAG,
            message=msg,
            severity="warning",
        )
