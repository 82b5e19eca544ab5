# gpdemo/core/posterior.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
GP posterior mean/variance and sample paths.

Functions
---------
compute_posterior(points, test_x, params)
    Posterior mean and variance at test inputs (prior if no points).
sample_paths(points, sample_x, params, nb_paths=1, rng=None)
    Prior or posterior sample paths, one column per path.
sample_from_gp(points, sample_x, params, rng=None)
    A single prior or posterior sample path.

The GP has zero prior mean. Observations are noisy, with noise standard
deviation ``params.noise_level``.
"""
from typing import NamedTuple
import gpdemo.num as gnp
from gpdemo.config import get_logger

from .covariance import kernel_matrix, add_diag
from .linalg import cholesky, solve_l, cholesky_solve, randn
from .utils import as_kernel_params, points_to_arrays

_logger = get_logger()

# Diagonal jitter added before each factorization
OBSERVATION_JITTER = 1e-8
PRIOR_JITTER = 1e-8
POSTERIOR_JITTER = 1e-6

VARIANCE_FLOOR = 1e-10


class Posterior(NamedTuple):
    mean: gnp.ndarray
    variance: gnp.ndarray


def _factor_observations(X, params):
    """Cholesky factor of K(X, X) + (noise_level² + jitter) I."""
    K_XX = kernel_matrix(X, X, params)
    K_XX = add_diag(K_XX, params.noise_level**2 + OBSERVATION_JITTER)
    return cholesky(K_XX)


def compute_posterior(points, test_x, params) -> Posterior:
    """Posterior mean and variance at the test inputs.

    Parameters
    ----------
    points : sequence
        Observation points (see ``points_to_arrays``).
    test_x : array_like, shape (m,)
        Test inputs.
    params : KernelParams or mapping
        Kernel name, length scale, signal variance and noise level.

    Returns
    -------
    Posterior
        ``mean`` and ``variance``, both of shape (m,). Variances are
        floored at VARIANCE_FLOOR.

    Notes
    -----
    With L the Cholesky factor of the regularized K(X, X), and
    :math:`v_i = L^{-1} k(X, x_i)`,

    .. math::
        \\mu_i = v_i^T (L^{-1} y), \\qquad
        \\sigma_i^2 = \\sigma^2 - v_i^T v_i,

    which only needs forward substitutions.
    """
    params = as_kernel_params(params)
    test_x = gnp.asvector(test_x)
    n = len(points)
    m = test_x.shape[0]

    # Prior case: no observations
    if n == 0:
        return Posterior(gnp.zeros((m,)), gnp.full((m,), params.signal_variance))

    _logger.debug(
        "compute_posterior: n=%d, m=%d, kernel=%s", n, m, params.kernel
    )
    X, y = points_to_arrays(points)
    L = _factor_observations(X, params)

    K_Xs = kernel_matrix(test_x, X, params)  # (m, n)

    alpha = solve_l(L, y)
    # column i of V is v_i = L^{-1} K_Xs[i]
    V = solve_l(L, K_Xs.T)  # (n, m)

    mean = gnp.matmul(V.T, alpha)
    vTv = gnp.sum(V * V, axis=0)
    variance = gnp.maximum(params.signal_variance - vTv, VARIANCE_FLOOR)

    return Posterior(mean, variance)


def sample_paths(points, sample_x, params, nb_paths=1, rng=None):
    """Draw sample paths of the GP at ``sample_x``.

    Without observations the paths are drawn from the prior
    GP(0, k); otherwise from the posterior given ``points``.

    Parameters
    ----------
    points : sequence
        Observation points (may be empty).
    sample_x : array_like, shape (m,)
        Inputs where the paths are evaluated.
    params : KernelParams or mapping
    nb_paths : int, optional
        Number of independent paths (default 1).
    rng : numpy.random.Generator, optional
        Random source; the package generator is used if None.

    Returns
    -------
    gnp.array, shape (m, nb_paths)

    Notes
    -----
    Prior: :math:`L z` with :math:`L L^T = K(x_s, x_s) + 10^{-8} I`.

    Posterior: :math:`\\mu + L_\\Sigma z` with
    :math:`\\mu = K(x_s, X) K^{-1} y` (full Cholesky solve) and
    :math:`L_\\Sigma L_\\Sigma^T = K(x_s, x_s) - V^T V + 10^{-6} I`,
    :math:`V = L^{-1} K(X, x_s)`.
    """
    params = as_kernel_params(params)
    sample_x = gnp.asvector(sample_x)
    n = len(points)
    m = sample_x.shape[0]

    if n == 0:
        _logger.debug("sample_paths: prior, m=%d, nb_paths=%d", m, nb_paths)
        K = kernel_matrix(sample_x, sample_x, params)
        K = add_diag(K, PRIOR_JITTER)
        L = cholesky(K)
        z = randn(m, nb_paths, rng=rng)
        return gnp.matmul(L, z)

    _logger.debug(
        "sample_paths: posterior, n=%d, m=%d, nb_paths=%d", n, m, nb_paths
    )
    X, y = points_to_arrays(points)
    L_XX = _factor_observations(X, params)

    K_Xs = kernel_matrix(sample_x, X, params)  # (m, n)
    K_ss = kernel_matrix(sample_x, sample_x, params)

    # Posterior mean
    alpha = cholesky_solve(L_XX, y)
    mu = gnp.matmul(K_Xs, alpha)

    # Posterior covariance: K_ss - K_sX K_XX^-1 K_Xs
    V = solve_l(L_XX, K_Xs.T)  # (n, m)
    Sigma = K_ss - gnp.matmul(V.T, V)
    Sigma = add_diag(Sigma, POSTERIOR_JITTER)

    L_Sigma = cholesky(Sigma)
    z = randn(m, nb_paths, rng=rng)
    return mu[:, None] + gnp.matmul(L_Sigma, z)


def sample_from_gp(points, sample_x, params, rng=None):
    """Draw one prior or posterior sample path, shape (m,).

    See :func:`sample_paths`.
    """
    return sample_paths(points, sample_x, params, nb_paths=1, rng=rng)[:, 0]
