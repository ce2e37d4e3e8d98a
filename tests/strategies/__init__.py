"""Hypothesis strategies for zerointl property-based testing.

Usage:
    from tests.strategies import templates, chaos_templates, value_bags
    from tests.strategies.icu import constructs, pathological_nesting

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - constructs, templates, chaos_templates, pathological_nesting
"""

from .icu import (
    CATEGORY_KEYS,
    LOCALES,
    chaos_templates,
    constructs,
    exact_keys,
    identifiers,
    locales,
    numbers,
    pathological_nesting,
    primitive_values,
    safe_text,
    templates,
    value_bags,
)

__all__ = [
    "CATEGORY_KEYS",
    "LOCALES",
    "chaos_templates",
    "constructs",
    "exact_keys",
    "identifiers",
    "locales",
    "numbers",
    "pathological_nesting",
    "primitive_values",
    "safe_text",
    "templates",
    "value_bags",
]
