# gpdemo/core/covariance.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance matrix construction.

Functions
---------
build_kernel_matrix(a, b, lengthscale, signal_variance, kernel_fn=rbf)
    Evaluate a covariance function pairwise over two input sequences.
kernel_matrix(a, b, params)
    Same, with the kernel resolved by name from a parameter record.
add_diag(M, eps)
    Copy of a square matrix with eps added to its diagonal.
"""
import gpdemo.num as gnp
from gpdemo.kernel import rbf, get_kernel, KERNEL_FNS
from .utils import as_kernel_params


def build_kernel_matrix(a, b, lengthscale, signal_variance, kernel_fn=rbf):
    """Covariance matrix K[i, j] = kernel_fn(a[i], b[j], lengthscale, signal_variance).

    Parameters
    ----------
    a : array_like, shape (p,)
    b : array_like, shape (q,)
    lengthscale : float
    signal_variance : float
    kernel_fn : callable, optional
        Covariance function of two scalar inputs. Registered kernels
        are evaluated in one broadcast call; any other function is
        evaluated entry by entry. Default: rbf.

    Returns
    -------
    K : gnp.array, shape (p, q)
    """
    a = gnp.asvector(a)
    b = gnp.asvector(b)
    if kernel_fn in KERNEL_FNS.values():
        return kernel_fn(a[:, None], b[None, :], lengthscale, signal_variance)
    pairwise = gnp.vectorize(kernel_fn, otypes=[gnp.float64])
    return pairwise(a[:, None], b[None, :], lengthscale, signal_variance)


def kernel_matrix(a, b, params):
    """Covariance matrix between a and b for the kernel named in params."""
    params = as_kernel_params(params)
    return build_kernel_matrix(
        a,
        b,
        params.length_scale,
        params.signal_variance,
        get_kernel(params.kernel),
    )


def add_diag(M, eps):
    """Return M + eps * I; M is not modified."""
    M_ = gnp.copy(gnp.asarray(M))
    n = min(M_.shape)
    idx = gnp.arange(n)
    M_[idx, idx] += eps
    return M_
