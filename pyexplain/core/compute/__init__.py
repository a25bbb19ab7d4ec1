"""
Shared compute infrastructure for pyexplain.

This module provides timing utilities and the numerical defaults shared by
every domain module.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/.

Submodules:
    timing: Execution timing utilities
    tolerances: Default thresholds and tolerance tiers
"""

from pyexplain.core.compute.timing import Timer
from pyexplain.core.compute.tolerances import (
    DEFAULT_JITTER_DELTA,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_ZERO_THRESHOLD,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Defaults and tolerances
    "DEFAULT_JITTER_DELTA",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_ZERO_THRESHOLD",
    "ToleranceTier",
    "select_tolerance",
]
