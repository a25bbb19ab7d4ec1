"""
Generic result container for pyexplain computations.

The Result class is the standard envelope returned by backends. It keeps
the numeric payload separate from diagnostics (attempt counts, pivot
order, timing, warnings) so callers that only want the numbers never have
to look at the rest.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (attempts, pivot order, thresholds)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for numerical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (inverse matrix, pivot order, ...)
        info: Structured metadata (method, attempts, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=InversionParams(inverse=inv, attempts=1, ...),
        ...     info={'method': 'gauss_jordan', 'attempts': 1},
        ...     timing={'total_seconds': 0.001, 'gauss_jordan': 0.0009},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
