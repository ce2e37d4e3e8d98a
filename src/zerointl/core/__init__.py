"""Shared infrastructure for the syntax and runtime layers.

Dependency direction: core <- syntax <- runtime <- localization.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError

__all__ = ["DepthGuard", "DepthLimitExceededError"]
