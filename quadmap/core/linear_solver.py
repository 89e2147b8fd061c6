"""
Linear System Solver
Gaussian elimination with partial pivoting for small square systems
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from .errors import ShapeError, SingularSystemError

EPS = 1e-12


def solve_linear_system(A: Sequence[Sequence[float]], b: Sequence[float]) -> List[float]:
    """
    Solve A x = b for square A

    Args:
        A: n x n coefficient matrix (rows)
        b: Right-hand side of length n

    Returns:
        Solution vector x of length n

    Raises:
        ShapeError: A is not square or b does not match
        SingularSystemError: Best pivot magnitude is below EPS
    """
    n = len(A)
    if any(len(row) != n for row in A):
        raise ShapeError("A must be square")
    if len(b) != n:
        raise ShapeError(f"b must have length {n}, got {len(b)}")

    # Augmented working copy, the inputs are never touched
    M = [[float(v) for v in row] + [float(b[r])] for r, row in enumerate(A)]

    for col in range(n):
        pivot_row = col
        best = abs(M[col][col])
        for r in range(col + 1, n):
            v = abs(M[r][col])
            if v > best:
                best = v
                pivot_row = r

        if best < EPS:
            raise SingularSystemError(f"Singular system (pivot ~ 0 in column {col})")

        if pivot_row != col:
            M[col], M[pivot_row] = M[pivot_row], M[col]

        pivot = M[col][col]
        for c in range(col, n + 1):
            M[col][c] /= pivot

        for r in range(n):
            if r == col:
                continue
            factor = M[r][col]
            if abs(factor) < EPS:
                continue
            for c in range(col, n + 1):
                M[r][c] -= factor * M[col][c]

    return [row[n] for row in M]


class LinearSolver(ABC):
    """Strategy seam for solving the estimation system"""

    @abstractmethod
    def solve(self, A: Sequence[Sequence[float]], b: Sequence[float]) -> List[float]:
        ...


class GaussianEliminationSolver(LinearSolver):
    def solve(self, A, b):
        return solve_linear_system(A, b)


DEFAULT_SOLVER = GaussianEliminationSolver()
