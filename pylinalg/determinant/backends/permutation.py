"""
Permutation (Leibniz) expansion backend.

det(A) = sum over permutations s of sgn(s) * prod_i A[row i, column s(i)].

Permutations are enumerated lexicographically from the identity. The sum
is order-independent, so the enumeration order only fixes the rounding
path, not the result.
"""

from typing import Any

from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.determinant._common import factorial_cost_warning
from pylinalg.determinant.design import DeterminantDesign
from pylinalg.determinant.solution import DeterminantParams
from pylinalg.determinant._permutations import (
    permutations_lexicographic,
    cycle_parity_sign,
)


class PermutationBackend:
    """
    Leibniz formula over all n! permutations.

    Implements the Backend protocol for DeterminantDesign -> DeterminantParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_permutation'

    def solve(self, design: DeterminantDesign) -> Result[DeterminantParams]:
        n = design.n
        numbers = design.matrix.to_numpy()

        determinant = 0.0
        n_permutations = 0
        with Timer() as timer, timer.section('expansion'):
            # n == 0 yields the single empty permutation with product 1
            for perm in permutations_lexicographic(n):
                product = 1.0
                for row, column in enumerate(perm):
                    product *= numbers[row, column]
                determinant += cycle_parity_sign(perm) * product
                n_permutations += 1

        warning = factorial_cost_warning('Permutation', n)

        info: dict[str, Any] = {
            'method': 'permutation',
            'n_permutations': n_permutations,
        }

        return Result(
            params=DeterminantParams(value=float(determinant), n=n),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(warning,) if warning else (),
        )
