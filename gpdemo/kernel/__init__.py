# gpdemo/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance functions for one-dimensional GP regression.

Modules
-------
rbf
    Squared exponential (RBF) kernel.
exponential
    Exponential kernel, i.e. Matérn 1/2.
matern
    Matérn 3/2 and 5/2 kernels.
registry
    Name -> kernel lookup with RBF fallback.

Public API
-----------
- Covariance functions k(x1, x2, lengthscale, signal_variance):
    rbf, matern12, matern32, matern52
- Unit-variance kernels of a scaled distance h:
    squared_exponential_kernel, exponential_kernel,
    matern32_kernel, matern52_kernel
- Registry:
    KernelName, KernelInfo, KERNELS, KERNEL_FNS, get_kernel,
    evaluate, list_kernels, describe
"""

from .rbf import rbf, squared_exponential_kernel
from .exponential import matern12, exponential_kernel
from .matern import matern32, matern52, matern32_kernel, matern52_kernel
from .registry import (
    KernelName,
    KernelInfo,
    KERNELS,
    KERNEL_FNS,
    DEFAULT_KERNEL,
    get_kernel,
    evaluate,
    list_kernels,
    describe,
)

__all__ = [
    # Covariance functions
    "rbf",
    "matern12",
    "matern32",
    "matern52",
    # Unit kernels
    "squared_exponential_kernel",
    "exponential_kernel",
    "matern32_kernel",
    "matern52_kernel",
    # Registry
    "KernelName",
    "KernelInfo",
    "KERNELS",
    "KERNEL_FNS",
    "DEFAULT_KERNEL",
    "get_kernel",
    "evaluate",
    "list_kernels",
    "describe",
]
