"""
CPU backend for matrix inversion.

Runs the diagonal-pivoted Gauss-Jordan kernel and, when an attempt finds
the matrix singular, jitters it and tries again, up to the design's
attempt budget.
"""

from typing import Any
import warnings

from pyexplain.core.compute.timing import Timer
from pyexplain.core.exceptions import SingularMatrixError, UninvertibleMatrixError
from pyexplain.core.protocols import RandomSource
from pyexplain.core.result import Result
from pyexplain.inversion._gauss_jordan import gauss_jordan_inverse
from pyexplain.inversion._jitter import jitter_matrix
from pyexplain.inversion.design import InversionDesign
from pyexplain.inversion.solution import InversionParams
from pyexplain.matrix._matrix import Matrix


class CPUGaussJordanBackend:
    """
    CPU backend using in-place Gauss-Jordan elimination with jitter retry.

    Implements the Backend protocol for InversionDesign -> InversionParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: InversionDesign, rng: RandomSource) -> Result[InversionParams]:
        """
        Invert the design matrix, jittering between singular attempts.

        Algorithm:
            1. Attempt Gauss-Jordan inversion on a fresh copy of the matrix
            2. On SingularMatrixError, if attempts remain, add
               jitter_delta * U(0, 1) to every entry of the design matrix
               in place and go back to 1
            3. If every attempt was singular, raise UninvertibleMatrixError

        Args:
            design: Validated inversion design
            rng: Source of the uniform jitter draws

        Returns:
            Result containing InversionParams

        Raises:
            UninvertibleMatrixError: If all attempts were singular
        """
        timer = Timer()
        timer.start()

        data = design.matrix.data
        last_error: SingularMatrixError | None = None
        inverse = None
        pivot_order: tuple[int, ...] = ()
        attempts = 0

        for attempt in range(1, design.max_attempts + 1):
            attempts = attempt
            try:
                with timer.section('gauss_jordan'):
                    inverse, pivot_order = gauss_jordan_inverse(data, design.zero_threshold)
                break
            except SingularMatrixError as e:
                last_error = e
                if attempt < design.max_attempts:
                    with timer.section('jitter'):
                        jitter_matrix(data, design.jitter_delta, rng)

        timer.stop()

        if inverse is None:
            raise UninvertibleMatrixError(
                f"Matrix is singular and could not be inverted via jittering "
                f"after {attempts} attempt(s) (jitter_delta={design.jitter_delta:.1e}, "
                f"zero_threshold={design.zero_threshold:.1e})",
                attempts=attempts,
                threshold=design.zero_threshold,
                jitter_delta=design.jitter_delta,
            ) from last_error

        jittered = attempts > 1
        warn_msgs: list[str] = []
        if jittered:
            msg = (
                f"Matrix was singular; inverted after jittering on attempt "
                f"{attempts} of {design.max_attempts}. The result is the inverse "
                f"of the perturbed matrix."
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=2)
            warn_msgs.append(msg)

        params = InversionParams(
            inverse=Matrix(_data=inverse),
            attempts=attempts,
            pivot_order=pivot_order,
            jittered=jittered,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'pivoting': 'diagonal',
            'attempts': attempts,
            'max_attempts': design.max_attempts,
            'pivot_order': pivot_order,
            'jittered': jittered,
            'zero_threshold': design.zero_threshold,
            'jitter_delta': design.jitter_delta,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warn_msgs),
        )
