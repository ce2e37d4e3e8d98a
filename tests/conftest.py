"""Shared pytest setup for the zerointl suite.

Hypothesis profiles (max_examples):
    dev      500, local default
    ci       50, derandomized; chosen when CI=true
    verbose  100, prints each example

HYPOTHESIS_PROFILE=<name> overrides the choice.

Tests marked ``fuzz`` are skipped unless the run asks for them with
``-m fuzz`` or by naming a path under tests/fuzz.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from zerointl.runtime import PluralRulesCache

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_ALL_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]
_PROFILES = ("dev", "ci", "verbose")

settings.register_profile("dev", max_examples=500, phases=_ALL_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_ALL_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_ALL_PHASES, verbosity=Verbosity.verbose
)


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "fuzz: long-running property tests, skipped by default"
    )


def _fuzz_requested(config: pytest.Config) -> bool:
    if "fuzz" in str(config.getoption("-m", default="")):
        return True
    return any("tests/fuzz" in str(arg) for arg in config.invocation_params.args)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the run asked for them."""
    if _fuzz_requested(config):
        return
    skip = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def plural_rules() -> PluralRulesCache:
    """Empty plural rules cache, one per test."""
    return PluralRulesCache()
