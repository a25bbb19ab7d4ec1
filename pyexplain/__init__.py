"""
pyexplain: dense linear algebra for local surrogate explainers.

The numerical core behind LIME-style explanations: build design matrices
from perturbed prediction samples, combine them into normal equations,
and invert those with a Gauss-Jordan solver that survives the singular
matrices degenerate sampling produces.

Submodules:
    matrix: Matrix primitive, construction, operators, statistics
    inversion: Pivoted Gauss-Jordan inversion with jitter recovery
"""

__version__ = "0.1.0"

from pyexplain import matrix
from pyexplain import inversion

__all__ = [
    "__version__",
    "matrix",
    "inversion",
]
