"""Rich-text formatter - assembles tag markup into renderable sequences.

Parses `<tag>...</tag>` and `{name}` spans, then walks the parts:
- text is emitted as a string
- variables emit their Node, the output of their render function, their
  string form, or the unchanged `{name}` placeholder when undefined
- components invoke the registered renderer with their assembled children;
  without a renderer the children are spliced in and the tag is dropped

Adjacent strings in the result are merged. Exceptions raised by caller
render functions propagate unchanged.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Mapping

from zerointl.constants import FALLBACK_MISSING_VARIABLE, MAX_DEPTH
from zerointl.syntax import RichComponent, RichPart, RichText, RichVariable, parse_markup

from .value_types import (
    Node,
    RenderFunction,
    ValueBag,
    format_value,
    normalize_renderer,
    normalize_value,
)

__all__ = ["RichTextFormatter", "format_rich", "render_text"]


def _append(output: list[object], item: object) -> None:
    """Append item, merging consecutive strings."""
    if isinstance(item, str):
        if not item:
            return
        if output and isinstance(output[-1], str):
            output[-1] += item
            return
    output.append(item)


class RichTextFormatter:
    """Formats rich-text templates to ordered sequences of content.

    Thread-safe: no state beyond configuration.

    Example:
        >>> formatter = RichTextFormatter()
        >>> formatter.format("Hi <b>{name}</b>!", {"name": "Ana"}, {"b": lambda c: ("B", *c)})
        ['Hi ', ('B', 'Ana'), '!']
    """

    __slots__ = ("_max_depth",)

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        self._max_depth = max_depth

    def format(
        self,
        template: str,
        values: ValueBag | None = None,
        components: Mapping[str, object] | None = None,
    ) -> list[object]:
        """Format a template.

        Args:
            template: Template text
            values: Value bag; may hold Node and render-function values
            components: Tag name to renderer (callable, RenderFunction or Node)

        Returns:
            Ordered content: strings and whatever the renderers returned
        """
        bag = {name: normalize_value(value) for name, value in (values or {}).items()}
        renderers = {tag: normalize_renderer(renderer) for tag, renderer in (components or {}).items()}

        output: list[object] = []
        self._assemble(parse_markup(template, max_depth=self._max_depth), bag, renderers, output)
        return output

    def _assemble(
        self,
        parts: tuple[RichPart, ...],
        values: Mapping[str, object],
        renderers: Mapping[str, RenderFunction],
        output: list[object],
    ) -> None:
        for part in parts:
            match part:
                case RichText(content=content):
                    _append(output, content)
                case RichVariable(name=name):
                    self._emit_variable(name, values.get(name), output)
                case RichComponent(tag_name=tag_name, children=children):
                    inner: list[object] = []
                    self._assemble(children, values, renderers, inner)
                    renderer = renderers.get(tag_name)
                    if renderer is None:
                        for item in inner:
                            _append(output, item)
                    else:
                        output.append(renderer(tuple(inner)))

    @staticmethod
    def _emit_variable(name: str, value: object, output: list[object]) -> None:
        """Rendered values are emitted as-is; text merges with its neighbours."""
        match value:
            case None:
                _append(output, FALLBACK_MISSING_VARIABLE.format(name=name))
            case Node(value=renderable):
                output.append(renderable)
            case RenderFunction():
                output.append(value())
            case _:
                _append(output, format_value(value))  # type: ignore[arg-type]


def format_rich(
    template: str,
    values: ValueBag | None = None,
    components: Mapping[str, object] | None = None,
) -> list[object]:
    """Format a rich-text template.

    Convenience function for RichTextFormatter().format().

    Examples:
        >>> format_rich("Click <link>here</link>", {}, {})
        ['Click here']
        >>> format_rich("Hello {name}", {"name": Node(["icon"])})
        ['Hello ', ['icon']]
    """
    return RichTextFormatter().format(template, values, components)


def render_text(parts: Iterable[object]) -> str:
    """Flatten assembled content to a string.

    Strings are kept, Node values and nested sequences are flattened, and any
    other object is converted with str().

    Example:
        >>> render_text(["Hi ", ("B", "Ana"), "!"])
        'Hi BAna!'
    """
    chunks: list[str] = []
    for part in parts:
        match part:
            case str():
                chunks.append(part)
            case Node(value=value):
                chunks.append(render_text([value]))
            case list() | tuple():
                chunks.append(render_text(part))
            case _:
                chunks.append(str(part))
    return "".join(chunks)
