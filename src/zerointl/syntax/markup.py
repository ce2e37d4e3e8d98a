"""Rich-text markup parser.

Recognizes two kinds of spans in one left-to-right scan:
- `<name>...</name>`: same-name tag pair, closed by the FIRST matching
  `</name>` after the opening tag; inner content is parsed recursively
- `{name}`: strict placeholder (identifier characters only, no whitespace)

Everything else, including unmatched tags and stray braces, is literal text.
Nesting beyond MAX_DEPTH leaves the inner content of the deepest tag as text.

Closing tags are indexed once per template, so an opening tag finds its
partner with a binary search instead of a scan of the remaining text.

Python 3.13+.
"""

import bisect
import logging
import re
from collections import defaultdict

from zerointl.constants import MAX_DEPTH
from zerointl.core import DepthGuard, DepthLimitExceededError

from .ast import RichComponent, RichPart, RichText, RichVariable
from .cursor import Cursor, is_identifier_char

__all__ = ["parse_markup"]

logger = logging.getLogger(__name__)

# \w matches exactly is_identifier_char: str.isalnum() or underscore
_CLOSING_TAG = re.compile(r"</(\w+)>")

type ClosingIndex = dict[str, list[int]]


def _index_closing_tags(source: str) -> ClosingIndex:
    """Offsets of every `</name>` in source, ascending, keyed by name."""
    index: ClosingIndex = defaultdict(list)
    for match in _CLOSING_TAG.finditer(source):
        index[match.group(1)].append(match.start())
    return index


def _find_closing(index: ClosingIndex, tag_name: str, start: int, end: int) -> int:
    """Offset of the first `</tag_name>` lying wholly within [start, end), or -1."""
    offsets = index.get(tag_name)
    if not offsets:
        return -1
    position = bisect.bisect_left(offsets, start)
    if position == len(offsets):
        return -1
    close = offsets[position]
    return close if close + len(f"</{tag_name}>") <= end else -1


def _read_name(cursor: Cursor, terminator: str) -> tuple[str, Cursor] | None:
    """Read `identifier` + terminator; None when either is missing."""
    name_end = cursor.read_while(is_identifier_char)
    if name_end.pos == cursor.pos:
        return None
    after = name_end.expect(terminator)
    if after is None:
        return None
    return cursor.slice_to(name_end.pos), after


def _parse_parts(
    source: str, start: int, end: int, guard: DepthGuard, closings: ClosingIndex
) -> tuple[RichPart, ...]:
    parts: list[RichPart] = []
    text_start = start
    pos = start

    def flush(upto: int) -> None:
        if upto > text_start:
            parts.append(RichText(source[text_start:upto]))

    while pos < end:
        char = source[pos]

        if char == "{":
            read = _read_name(Cursor(source, pos + 1), "}")
            if read is not None and read[1].pos <= end:
                name, after = read
                flush(pos)
                parts.append(RichVariable(name))
                pos = text_start = after.pos
                continue

        elif char == "<":
            read = _read_name(Cursor(source, pos + 1), ">")
            if read is not None and read[1].pos <= end:
                tag_name, after = read
                closing = f"</{tag_name}>"
                close = _find_closing(closings, tag_name, after.pos, end)
                if close >= 0:
                    flush(pos)
                    content = source[after.pos : close]
                    try:
                        with guard:
                            children = _parse_parts(source, after.pos, close, guard, closings)
                    except DepthLimitExceededError:
                        logger.debug("Markup nesting limit reached in <%s>", tag_name)
                        children = (RichText(content),) if content else ()
                    parts.append(RichComponent(tag_name, content, children))
                    pos = text_start = close + len(closing)
                    continue

        pos += 1

    flush(end)
    return tuple(parts)


def parse_markup(template: str, *, max_depth: int = MAX_DEPTH) -> tuple[RichPart, ...]:
    """Parse a template into rich-text parts.

    Args:
        template: Template text
        max_depth: Maximum tag nesting depth (keyword-only)

    Returns:
        Ordered parts; adjacent literal text is merged into one RichText

    Example:
        >>> parts = parse_markup("Hi <b>{name}</b>!")
        >>> [part.kind.value for part in parts]
        ['text', 'component', 'text']
        >>> parts[1].children
        (RichVariable(name='name'),)
    """
    guard = DepthGuard(max_depth=max_depth)
    return _parse_parts(template, 0, len(template), guard, _index_closing_tags(template))
