# gpdemo/kernel/exponential.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpdemo.num as gnp


def exponential_kernel(h):
    """Exponential kernel.

    .. math::
        k(h) = \\exp(-h)

    Parameters
    ----------
    h : gnp.array or float
        Scaled distances :math:`|x_1 - x_2| / \\ell`.

    Returns
    -------
    gnp.array or float
        Kernel values.
    """
    return gnp.exp(-h)


def matern12(x1, x2, lengthscale, signal_variance):
    """Matérn 1/2 covariance (Ornstein-Uhlenbeck).

    .. math::
        k(x_1, x_2) = \\sigma^2 \\exp(-|x_1 - x_2| / \\ell)

    The roughest member of the Matérn family: sample paths are
    continuous but nowhere differentiable.

    Parameters
    ----------
    x1, x2 : float or gnp.array
        Inputs (broadcast against each other).
    lengthscale : float
        Length scale :math:`\\ell > 0`.
    signal_variance : float
        Signal variance :math:`\\sigma^2 > 0`.

    Returns
    -------
    float or gnp.array
        Covariance values.
    """
    h = gnp.abs(x1 - x2) / lengthscale
    return signal_variance * exponential_kernel(h)
