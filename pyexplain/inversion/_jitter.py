"""
Jitter step of the retry inversion.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyexplain.core.protocols import RandomSource


def jitter_matrix(x: NDArray[np.floating[Any]], delta: float, rng: RandomSource) -> None:
    """
    Add delta * U(0, 1) to every entry of `x`, IN PLACE.

    One independent draw per entry, taken from `rng` in row-major order.
    """
    x += delta * np.asarray(rng.random(x.shape), dtype=np.float64)
