# gpdemo/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Dense linear-algebra primitives used by the posterior engine.

The factorization and the triangular solves deliberately do not check
their inputs: a matrix that is not positive definite gives a factor
containing NaNs, and NaNs propagate through the solves to the caller.
Callers add jitter to the diagonal before factorizing.
"""
import gpdemo.num as gnp
from gpdemo.config import get_logger

_logger = get_logger()


def full(n, value):
    """Vector of length n filled with value."""
    return gnp.full((n,), value)


def linspace(start, stop, num):
    """num evenly spaced points from start to stop, both included."""
    return gnp.linspace(start, stop, num)


def transpose(A):
    return gnp.asarray(A).T


def mat_mul(A, B):
    return gnp.matmul(gnp.asarray(A), gnp.asarray(B))


def mat_vec(A, x):
    return gnp.matmul(gnp.asarray(A), gnp.asvector(x))


def cholesky(M):
    """Lower-triangular Cholesky factor L of M, with L Lᵀ = M.

    Parameters
    ----------
    M : array_like, shape (n, n)
        Symmetric matrix, presumed positive definite.

    Returns
    -------
    L : gnp.array, shape (n, n)
        Lower-triangular factor.

    Notes
    -----
    Column-by-column recurrence:

    .. math::
        L_{jj} = \\sqrt{M_{jj} - \\sum_{k<j} L_{jk}^2}, \\qquad
        L_{ij} = \\Big(M_{ij} - \\sum_{k<j} L_{ik} L_{jk}\\Big) / L_{jj}, \\; i > j.

    If M is not positive definite a pivot is nonpositive; its square
    root is NaN and the NaN spreads to the remaining columns. A warning
    is logged but no exception is raised.
    """
    M = gnp.asarray(M)
    n = M.shape[0]
    L = gnp.zeros((n, n))
    bad_pivot = None
    with gnp.errstate(invalid="ignore", divide="ignore"):
        for j in range(n):
            Lj = L[j, :j]
            pivot = M[j, j] - gnp.matmul(Lj, Lj)
            if bad_pivot is None and not pivot > 0.0:
                bad_pivot = (j, pivot)
            L[j, j] = gnp.sqrt(pivot)
            L[j + 1 :, j] = (M[j + 1 :, j] - gnp.matmul(L[j + 1 :, :j], Lj)) / L[j, j]
    if bad_pivot is not None:
        _logger.warning(
            "cholesky: nonpositive pivot %g at column %d, matrix is not "
            "positive definite; factor contains NaN/inf",
            bad_pivot[1],
            bad_pivot[0],
        )
    return L


def solve_l(L, b):
    """Forward substitution: solve L z = b for lower-triangular L.

    Parameters
    ----------
    L : array_like, shape (n, n)
    b : array_like, shape (n,) or (n, k)
        Right-hand side(s); columns are solved independently.

    Returns
    -------
    z : gnp.array, same shape as b
    """
    return gnp.solve_triangular(
        gnp.asarray(L), gnp.asarray(b), lower=True, check_finite=False
    )


def cholesky_solve(L, b):
    """Solve L Lᵀ x = b given the Cholesky factor L.

    Forward substitution with L followed by back substitution with Lᵀ.
    """
    L = gnp.asarray(L)
    z = solve_l(L, b)
    return gnp.solve_triangular(L.T, z, lower=False, check_finite=False)


def randn(*shape, rng=None):
    """i.i.d. standard normal draws.

    Uses the package generator (see ``gpdemo.num.set_seed``) unless a
    ``numpy.random.Generator`` is passed as ``rng``.
    """
    return gnp.randn(*shape, rng=rng)
