"""
Square matrix inversion with jitter-based singularity recovery.

Public API:
    invert(x)                 -> Matrix (one attempt, may raise SingularMatrixError)
    invert_with_retry(x, ...) -> Matrix (jitter retries, may raise UninvertibleMatrixError)
    jitter_invert(x, ...)     -> InversionSolution (same, with diagnostics)

Example:
    >>> from pyexplain.inversion import invert
    >>> inv = invert([[4, 7], [2, 6]])   # ~[[0.6, -0.7], [-0.2, 0.4]]
"""

from pyexplain.inversion.design import InversionDesign
from pyexplain.inversion.solution import InversionParams, InversionSolution
from pyexplain.inversion.solvers import invert, invert_with_retry, jitter_invert

__all__ = [
    "invert",
    "invert_with_retry",
    "jitter_invert",
    "InversionDesign",
    "InversionParams",
    "InversionSolution",
]
