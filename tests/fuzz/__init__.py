"""Intensive property tests, excluded from normal runs (pytest -m fuzz)."""
