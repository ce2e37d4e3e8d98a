"""Position tracking for the template and markup parsers.

A Cursor never changes: moving returns a new Cursor, so a parser that fails
part way simply keeps the cursor it started from. Line and column numbers are
only worked out when a diagnostic needs them.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass

from zerointl.diagnostics import Diagnostic, ErrorTemplate

__all__ = ["Cursor", "ParseError", "ParseResult", "is_identifier_char"]

# Whitespace allowed between tokens inside a construct
_WHITESPACE: frozenset[str] = frozenset(" \t\n\r")


def is_identifier_char(char: str) -> bool:
    """Check whether char may appear in a placeholder or tag name."""
    return char.isalnum() or char == "_"


@dataclass(frozen=True, slots=True)
class Cursor:
    """Read position within a template.

    Example:
        >>> start = Cursor("ab", 0)
        >>> start.advance().current
        'b'
        >>> start.current
        'a'
        >>> start.advance(5).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True once every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: The cursor is at the end of the source
        """
        if self.pos >= len(self.source):
            raise EOFError(ErrorTemplate.unexpected_eof(self.pos).message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character offset places ahead, or None past the end."""
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else None

    def advance(self, count: int = 1) -> "Cursor":
        """Cursor count characters further on, stopping at the end."""
        return self.jump(self.pos + count)

    def jump(self, pos: int) -> "Cursor":
        """Cursor at an absolute offset, stopping at the end."""
        return Cursor(self.source, min(pos, len(self.source)))

    def slice_to(self, end_pos: int) -> str:
        """Source text from here up to (not including) end_pos.

        Example:
            >>> here = Cursor("key=value", 0)
            >>> here.slice_to(here.read_while(str.isalpha).pos)
            'key'
        """
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Cursor at the next non-whitespace character."""
        return self.read_while(_WHITESPACE.__contains__)

    def read_while(self, predicate: Callable[[str], bool]) -> "Cursor":
        """Cursor at the first character for which predicate is false (or the end)."""
        source = self.source
        index = self.pos
        while index < len(source) and predicate(source[index]):
            index += 1
        return Cursor(source, index)

    def expect(self, char: str) -> "Cursor | None":
        """Step over char when it is next; None when something else is.

        Example:
            >>> Cursor("{x}", 0).expect("{").pos
            1
            >>> Cursor("{x}", 0).expect("}") is None
            True
        """
        if self.peek() == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """1-based (line, column) of the cursor.

        Scans the source up to the cursor, so keep it to error paths.

        Example:
            >>> Cursor("first\\nsecond", 8).compute_line_col()
            (2, 3)
        """
        line_start = self.source.rfind("\n", 0, self.pos) + 1
        return (self.source.count("\n", 0, self.pos) + 1, self.pos - line_start + 1)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Value produced by a sub-parser plus the cursor just after it.

    Sub-parsers return ``ParseResult[Node] | ParseError`` and callers match on
    the type.
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Point where a sub-parser gave up.

    Attributes:
        diagnostic: What was wrong
        cursor: Position where parsing stopped (literal text runs up to here)
    """

    diagnostic: Diagnostic
    cursor: Cursor

    def format_error(self) -> str:
        """Render as line:column: message for the stop position.

        Example:
            >>> ParseError(ErrorTemplate.unexpected_eof(2), Cursor("ab", 2)).format_error()
            '1:3: Unexpected EOF at position 2'
        """
        line, column = self.cursor.compute_line_col()
        return f"{line}:{column}: {self.diagnostic.message}"
