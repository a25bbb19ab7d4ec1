"""
Numerical defaults and tolerance tiers.

Defaults follow common LIME-style usage of the jitter-inversion routine:
a tiny jitter (1e-8) and a handful of retries. Every default can be
overridden per call.

Tolerance tiers describe how closely A @ inv(A) is expected to match the
identity:
- Exact path: the matrix was inverted as given
- Jittered path: the matrix was perturbed before a successful attempt, so
  the inverse belongs to a slightly different matrix
"""

from dataclasses import dataclass


# A pivot whose magnitude is below this is treated as numerically zero.
DEFAULT_ZERO_THRESHOLD = 1e-10

# Scale of the uniform(0, 1) perturbation added to every entry per retry.
DEFAULT_JITTER_DELTA = 1e-8

# Total inversion attempts, the first one on the unperturbed matrix.
DEFAULT_MAX_ATTEMPTS = 5


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Inverse of the matrix exactly as given
INVERSE_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-9,
    name='inverse_fp64',
    description='Double precision Gauss-Jordan, unperturbed input',
)

# Inverse obtained after jittering; checked against the jittered matrix,
# but near-singular inputs amplify rounding error
INVERSE_JITTERED = ToleranceTier(
    rtol=1e-6,
    atol=1e-4,
    name='inverse_jittered',
    description='Double precision Gauss-Jordan after jitter recovery',
)


def select_tolerance(jittered: bool = False) -> ToleranceTier:
    """Select the tolerance tier for an inversion result."""
    if jittered:
        return INVERSE_JITTERED
    return INVERSE_FP64
