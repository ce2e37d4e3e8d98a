"""Parse time grows linearly with template length on adversarial input.

Each case times a template and one eight times as long, then normalizes:
(time(8n) / time(n)) / 8 is near 1.0 for linear work and near 8.0 when every
unmatched brace or tag rescans the rest of the template.
"""

from __future__ import annotations

import time
from collections.abc import Callable

import pytest

from zerointl.runtime import format_icu, format_rich
from zerointl.syntax import parse_markup, parse_template

pytestmark = pytest.mark.fuzz

_SMALL = 2_000
_GROWTH = 8
_MAX_NORMALIZED_RATIO = 3.0


def _best_time(work: Callable[[], object], rounds: int = 3) -> float:
    best = float("inf")
    for _ in range(rounds):
        started = time.perf_counter()
        work()
        best = min(best, time.perf_counter() - started)
    return best


def _normalized_ratio(run: Callable[[str], object], build: Callable[[int], str]) -> float:
    small, large = build(_SMALL), build(_SMALL * _GROWTH)
    run(small)  # warm caches
    ratio = _best_time(lambda: run(large)) / max(_best_time(lambda: run(small)), 1e-6)
    return ratio / _GROWTH


def _assert_linear(run: Callable[[str], object], build: Callable[[int], str]) -> None:
    ratio = _normalized_ratio(run, build)
    assert ratio < _MAX_NORMALIZED_RATIO, (
        f"normalized ratio {ratio:.2f} (expected ~1.0 for O(n))"
    )


@pytest.mark.fuzz
class TestTemplateParserScaling:
    """Unbalanced braces."""

    @pytest.mark.parametrize(
        "build",
        [
            pytest.param(lambda n: "{" * n, id="open-braces"),
            pytest.param(lambda n: "{a b " * n, id="invalid-placeables"),
            pytest.param(lambda n: "{n, plural, one {x}" * n, id="unclosed-constructs"),
            pytest.param(lambda n: "\n{" * n, id="multiline"),
        ],
    )
    def test_parse_is_linear(self, build: Callable[[int], str]) -> None:
        """Eight times the input takes about eight times as long."""
        _assert_linear(parse_template, build)

    def test_format_is_linear(self) -> None:
        """format_icu on a run of '{' stays linear."""
        _assert_linear(lambda t: format_icu(t, {}, "en"), lambda n: "{" * n)


@pytest.mark.fuzz
class TestMarkupParserScaling:
    """Unclosed tags."""

    @pytest.mark.parametrize(
        "build",
        [
            pytest.param(lambda n: "<a>" * n, id="same-name"),
            pytest.param(lambda n: "".join(f"<t{i}>" for i in range(n)), id="distinct-names"),
            pytest.param(lambda n: "<a>" * n + "</b>" * n, id="other-closings"),
        ],
    )
    def test_parse_is_linear(self, build: Callable[[int], str]) -> None:
        """Unclosed tags do not trigger a scan of the remaining text."""
        _assert_linear(parse_markup, build)

    def test_format_rich_is_linear(self) -> None:
        """format_rich on unclosed tags stays linear."""
        _assert_linear(format_rich, lambda n: "<b>{x}" * n)
