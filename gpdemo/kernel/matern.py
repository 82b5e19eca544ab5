# gpdemo/kernel/matern.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import sqrt
import gpdemo.num as gnp

_SQRT3 = sqrt(3.0)
_SQRT5 = sqrt(5.0)


def matern32_kernel(h):
    """Matérn 3/2 kernel.

    .. math::
        K(h) = (1 + \\sqrt{3}\\,h) \\exp(-\\sqrt{3}\\,h)

    Parameters
    ----------
    h : gnp.array or float
        Scaled distances :math:`r = |x_1 - x_2| / \\ell`.

    Returns
    -------
    gnp.array or float
        Kernel values.
    """
    t = _SQRT3 * h
    return (1.0 + t) * gnp.exp(-t)


def matern52_kernel(h):
    """Matérn 5/2 kernel.

    .. math::
        K(h) = (1 + \\sqrt{5}\\,h + 5h^2/3) \\exp(-\\sqrt{5}\\,h)

    Parameters
    ----------
    h : gnp.array or float
        Scaled distances :math:`r = |x_1 - x_2| / \\ell`.

    Returns
    -------
    gnp.array or float
        Kernel values.
    """
    t = _SQRT5 * h
    return (1.0 + t + (5.0 * h * h) / 3.0) * gnp.exp(-t)


def matern32(x1, x2, lengthscale, signal_variance):
    """Matérn 3/2 covariance, :math:`\\sigma^2 K(|x_1 - x_2| / \\ell)`.

    Sample paths are once differentiable.
    """
    r = gnp.abs(x1 - x2) / lengthscale
    return signal_variance * matern32_kernel(r)


def matern52(x1, x2, lengthscale, signal_variance):
    """Matérn 5/2 covariance, :math:`\\sigma^2 K(|x_1 - x_2| / \\ell)`.

    Sample paths are twice differentiable.
    """
    r = gnp.abs(x1 - x2) / lengthscale
    return signal_variance * matern52_kernel(r)
