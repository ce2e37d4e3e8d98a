"""Tests for the rich-text markup parser."""

from __future__ import annotations

from zerointl.enums import RichPartKind
from zerointl.syntax import RichComponent, RichText, RichVariable, parse_markup


class TestMarkupSpans:
    """Recognized tag and placeholder spans."""

    def test_plain_text(self) -> None:
        """Text without spans is one part."""
        assert parse_markup("just text") == (RichText("just text"),)

    def test_empty(self) -> None:
        """Empty template has no parts."""
        assert parse_markup("") == ()

    def test_variable(self) -> None:
        """{name} becomes a RichVariable."""
        assert parse_markup("Hi {name}!") == (
            RichText("Hi "),
            RichVariable("name"),
            RichText("!"),
        )

    def test_component(self) -> None:
        """A same-name tag pair becomes a RichComponent."""
        (text, component) = parse_markup("Click <link>here</link>")

        assert text == RichText("Click ")
        assert component == RichComponent("link", "here", (RichText("here"),))
        assert component.kind is RichPartKind.COMPONENT

    def test_nested_components(self) -> None:
        """Inner content is parsed recursively."""
        (button,) = parse_markup("<button>Save <icon>X</icon></button>")

        assert isinstance(button, RichComponent)
        assert button.content == "Save <icon>X</icon>"
        assert button.children == (
            RichText("Save "),
            RichComponent("icon", "X", (RichText("X"),)),
        )

    def test_variable_inside_component(self) -> None:
        """Placeholders inside tags are recognized."""
        (component,) = parse_markup("<b>{name}</b>")

        assert isinstance(component, RichComponent)
        assert component.children == (RichVariable("name"),)

    def test_first_closing_tag_wins(self) -> None:
        """Same-name nesting closes at the first matching closing tag."""
        parts = parse_markup("<b>a<b>c</b>d</b>")

        assert parts[0] == RichComponent("b", "a<b>c", (RichText("a<b>c"),))
        assert parts[1] == RichText("d</b>")


class TestMarkupLiterals:
    """Anything unrecognized stays literal."""

    def test_unmatched_tag(self) -> None:
        """An opening tag without its closing tag is text."""
        assert parse_markup("a <b>bold") == (RichText("a <b>bold"),)

    def test_mismatched_tags(self) -> None:
        """Tags with different names do not pair."""
        assert parse_markup("<a>x</b>") == (RichText("<a>x</b>"),)

    def test_placeholder_with_whitespace(self) -> None:
        """Markup placeholders are strict: no whitespace."""
        assert parse_markup("{ name }") == (RichText("{ name }"),)

    def test_icu_construct_is_text(self) -> None:
        """ICU constructs are not markup."""
        template = "{n, plural, other {x}}"

        assert parse_markup(template) == (RichText(template),)

    def test_comparison_operator(self) -> None:
        """A lone '<' is text."""
        assert parse_markup("1 < 2") == (RichText("1 < 2"),)

    def test_many_unclosed_tags(self) -> None:
        """A run of unclosed tags is one text part."""
        assert parse_markup("<a>" * 50) == (RichText("<a>" * 50),)

    def test_closing_tag_outside_parent(self) -> None:
        """An inner tag cannot pair with a closing tag past its parent's end."""
        (outer, rest) = parse_markup("<a><b>x</a></b>")

        assert outer == RichComponent("a", "<b>x", (RichText("<b>x"),))
        assert rest == RichText("</b>")

    def test_closing_name_must_match_exactly(self) -> None:
        """'</a>' does not close '<ab>'."""
        (component,) = parse_markup("<ab>x</a></ab>")

        assert component == RichComponent("ab", "x</a>", (RichText("x</a>"),))

    def test_unicode_tag_names(self) -> None:
        """Tag names use the same identifier characters as placeholders."""
        (component,) = parse_markup("<ważne>!</ważne>")

        assert component == RichComponent("ważne", "!", (RichText("!"),))


class TestMarkupDepth:
    """Nesting limit."""

    def test_deep_content_kept_as_text(self) -> None:
        """Content of the tag at the limit becomes literal text."""
        (outer,) = parse_markup("<a><b><c>x</c></b></a>", max_depth=1)

        assert isinstance(outer, RichComponent)
        (middle,) = outer.children
        assert isinstance(middle, RichComponent)
        assert middle.children == (RichText("<c>x</c>"),)

    def test_pathological_nesting(self) -> None:
        """Very deep tag nesting does not raise."""
        template = "<a>" * 500 + "x" + "</a>" * 500

        assert parse_markup(template)
