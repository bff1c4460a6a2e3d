"""
Core protocols for PyLinalg.

These define structural interfaces that algorithm implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing): a
backend is anything with a name and a solve() method, no base class needed.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Validation lives in the Design, never in the backend
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, runtime_checkable

from pylinalg.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take an already-validated Design and produce
    a parameter payload. Backends are stateless: all configuration is passed
    at construction time, so they are easy to test and swap.

    Type Parameters:
        D: The Design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_cofactor', 'cpu_permutation', 'cpu_gauss_jordan'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution (singularity)
        """
        ...
