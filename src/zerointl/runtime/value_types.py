"""Core value types for template formatting.

Defines the tagged union of values a caller may place in a value bag:
    - Primitive: str, int, float, Decimal, bool
    - Node: pre-built renderable, emitted as-is by the rich-text formatter
    - RenderFunction: `(children) -> renderable`, invoked for tags and variables

Formatters dispatch on these shapes with `match`, never on ad hoc attribute
checks. Plain callables are normalized to RenderFunction at the boundary.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TypeIs

__all__ = [
    "Node",
    "Primitive",
    "RenderFunction",
    "RenderableFunction",
    "Value",
    "ValueBag",
    "coerce_number",
    "format_value",
    "is_primitive",
    "normalize_renderer",
    "normalize_value",
]


@dataclass(frozen=True, slots=True)
class Node:
    """Pre-built renderable value.

    The wrapped object is opaque to zerointl: the host (a UI layer, an HTML
    builder, a test) decides what it is. As a tag renderer it ignores the
    tag's children.

    Example:
        >>> icon = Node("<svg/>")
        >>> icon.value
        '<svg/>'
    """

    value: object


type RenderableFunction = Callable[[tuple[object, ...]], object]


@dataclass(frozen=True, slots=True)
class RenderFunction:
    """Render function receiving the assembled children of a tag.

    Attributes:
        render: Callable taking a tuple of children and returning a renderable
    """

    render: RenderableFunction

    def __call__(self, children: tuple[object, ...] = ()) -> object:
        return self.render(children)


# Primitive values stringify into templates; rich values only render in the
# rich-text path.
type Primitive = str | int | float | Decimal | bool
type Value = Primitive | Node | RenderFunction | RenderableFunction | None
type ValueBag = Mapping[str, Value]

_PRIMITIVE_TYPES = (str, int, float, Decimal, bool)


def is_primitive(value: object) -> TypeIs[Primitive]:
    """True for values that stringify into plain text."""
    return isinstance(value, _PRIMITIVE_TYPES)


def format_value(value: Primitive) -> str:
    """Stringify a primitive value (no grouping, no locale formatting).

    Examples:
        >>> format_value(True)
        'true'
        >>> format_value(3.0)
        '3'
        >>> format_value(2.5)
        '2.5'
        >>> format_value(Decimal("1.50"))
        '1.50'
    """
    match value:
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case float() if math.isfinite(value) and value.is_integer():
            return str(int(value))
        case float():
            return repr(value)
        case Decimal():
            return str(value)
        case _:
            return str(value)


def coerce_number(value: object) -> int | Decimal | None:
    """Numeric value used for plural selection and exact-key matching.

    Integral floats become int so that 1.0 selects like 1. Numeric strings
    are accepted. Booleans, non-finite numbers and anything else yield None
    (no exact or category rule can match; the 'other' rule applies).

    Examples:
        >>> coerce_number(2.0)
        2
        >>> coerce_number("1.5")
        Decimal('1.5')
        >>> coerce_number(True) is None
        True
    """
    match value:
        case bool():
            return None
        case int():
            return value
        case float():
            if not math.isfinite(value):
                return None
            return int(value) if value.is_integer() else Decimal(repr(value))
        case Decimal():
            return value if value.is_finite() else None
        case str():
            try:
                number = Decimal(value.strip())
            except InvalidOperation:
                return None
            return number if number.is_finite() else None
        case _:
            return None


def normalize_value(value: Value) -> Primitive | Node | RenderFunction | None:
    """Map a value-bag entry onto the tagged union.

    Plain callables become RenderFunction; Node, RenderFunction, primitives
    and None pass through. Any other object is wrapped as a Node.
    """
    match value:
        case None | Node() | RenderFunction():
            return value
        case str() | int() | float() | Decimal():
            return value
        case _ if callable(value):
            return RenderFunction(value)
        case _:
            return Node(value)


def normalize_renderer(renderer: object) -> RenderFunction:
    """Normalize a tag renderer to the function form.

    A Node (or any non-callable object) ignores children and is returned
    as-is on every call.

    Example:
        >>> normalize_renderer(Node("x"))(("ignored",))
        'x'
        >>> normalize_renderer(lambda children: ["b", *children])(("hi",))
        ['b', 'hi']
    """
    match renderer:
        case RenderFunction():
            return renderer
        case Node(value=fixed):
            return RenderFunction(lambda _children: fixed)
        case _ if callable(renderer):
            return RenderFunction(renderer)
        case _:
            return RenderFunction(lambda _children: renderer)
