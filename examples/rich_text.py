"""Rich-text and localization example for zerointl.

Demonstrates IntlLocalization with default-locale fallback, error and
fallback callbacks, namespaced translators, and tag rendering with
render functions and Node values.

Renderers here build simple HTML strings; any host object works, since
zerointl never inspects what a renderer returns.

Python 3.13+.
"""

from __future__ import annotations

from zerointl import IntlLocalization, MessageNotFoundError, Node, render_text
from zerointl.localization import FallbackInfo

EN = {
    "cart.items": "{count, plural, one {# item} other {# items}} in your cart",
    "cart.checkout": "<button>Checkout <icon>→</icon></button>",
    "legal.terms": "By continuing you accept the <link>terms of service</link>.",
    "profile.badge": "{badge} Welcome back, <b>{name}</b>!",
}

LV = {
    "cart.items": "{count, plural, zero {# preču} one {# prece} other {# preces}} grozā",
}


def link(children: tuple[object, ...]) -> str:
    return f'<a href="/terms">{render_text(children)}</a>'


def example_1_fallback() -> None:
    """Missing Latvian keys resolve from English."""
    print("=" * 50)
    print("Example 1: Default-Locale Fallback")
    print("=" * 50)

    def on_fallback(info: FallbackInfo) -> None:
        print(f"  [fallback] {info.message_id}: {info.requested_locale} -> {info.resolved_locale}")

    def on_error(error: MessageNotFoundError) -> None:
        print(f"  [missing] {error}")

    intl = IntlLocalization(
        "lv",
        LV,
        default_locale="en",
        default_messages=EN,
        on_error=on_error,
        on_fallback=on_fallback,
    )
    cart = intl.translator("cart")

    for count in (0, 1, 21):
        print(cart("items", {"count": count}))
    print(intl.format_rich("legal.terms", components={"link": link}))
    print(cart("missing"))


def example_2_rich_rendering() -> None:
    """Tags call renderers with their assembled children."""
    print("\n" + "=" * 50)
    print("Example 2: Rich Text")
    print("=" * 50)

    intl = IntlLocalization(
        "en",
        EN,
        default_rich_components={
            "b": lambda children: f"<strong>{render_text(children)}</strong>",
            "link": link,
        },
    )

    parts = intl.format_rich(
        "cart.checkout",
        components={
            "button": lambda children: f"<button>{render_text(children)}</button>",
            "icon": Node('<svg class="arrow"/>'),
        },
    )
    print(parts)
    # Output: ['<button>Checkout <svg class="arrow"/></button>']

    parts = intl.format_rich(
        "profile.badge",
        values={"badge": Node("<img src='star.svg'/>"), "name": "Ana"},
    )
    print(parts)
    print(render_text(parts))


def example_3_render_hook() -> None:
    """on_render post-processes every translation."""
    print("\n" + "=" * 50)
    print("Example 3: Render Hook")
    print("=" * 50)

    intl = IntlLocalization(
        "en",
        EN,
        on_render=lambda record: f"<span data-key='{record.translation_key}'>{record.translation}</span>",
    )
    print(intl.render("cart.items", {"count": 2}))
    # Output: <span data-key='cart.items'>2 items in your cart</span>


if __name__ == "__main__":
    example_1_fallback()
    example_2_rich_rendering()
    example_3_render_hook()
