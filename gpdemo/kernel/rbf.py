# gpdemo/kernel/rbf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpdemo.num as gnp


def squared_exponential_kernel(h):
    """Squared exponential kernel.

    .. math::
        k(h) = \\exp(-h^2 / 2)

    Parameters
    ----------
    h : gnp.array or float
        Scaled distances :math:`|x_1 - x_2| / \\ell`.

    Returns
    -------
    gnp.array or float
        Kernel values.
    """
    return gnp.exp(-0.5 * h * h)


def rbf(x1, x2, lengthscale, signal_variance):
    """RBF (squared exponential) covariance.

    .. math::
        k(x_1, x_2) = \\sigma^2 \\exp\\left(-\\frac{(x_1 - x_2)^2}{2\\ell^2}\\right)

    Infinitely differentiable sample paths.

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
    d = x1 - x2
    return signal_variance * gnp.exp(-0.5 * d * d / lengthscale**2)
