"""
Core protocols for pyexplain.

These define the structural interfaces the engine expects from its
collaborators. We use Protocol (structural typing) rather than ABC
(nominal typing) so prediction types from the surrounding explainability
pipeline, or numpy's own Generator, satisfy them without inheriting
anything from this package.

Design Principles:
    - Minimal contracts: prescribe only what's truly needed
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, Sequence, TypeVar, Any, TYPE_CHECKING, runtime_checkable

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from pyexplain.core.result import Result

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class NumericSample(Protocol):
    """
    A single prediction input or output that can be read as numbers.

    The explainability pipeline's feature/output containers implement this
    by returning their values in feature order. Nothing else about the
    sample is used.
    """

    def numeric_values(self) -> Sequence[float]:
        """Ordered numeric feature (or output) values."""
        ...


@runtime_checkable
class RandomSource(Protocol):
    """
    Source of uniform [0, 1) draws used by the jitter step.

    numpy.random.Generator satisfies this protocol. Passing one explicitly
    (seeded in tests) keeps jitter retries reproducible.

    isinstance() only checks that a random attribute exists, so
    random.Random also passes it; check_random_source() rejects it.
    """

    def random(self, size: Any = None) -> NDArray[np.floating[Any]]:
        """Draw uniform samples with the given shape."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter payload
    wrapped in a Result. Backends are stateless: all configuration travels
    on the design, randomness is passed per call.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gauss_jordan'.
        """
        ...

    def solve(self, design: D, rng: RandomSource) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
