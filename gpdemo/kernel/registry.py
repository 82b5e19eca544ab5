# gpdemo/kernel/registry.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Name -> covariance function registry.

Kernels are looked up by name (``"rbf"``, ``"matern12"``,
``"matern32"``, ``"matern52"``). Lookups never fail: an unknown, empty
or ``None`` name resolves to the RBF kernel.
"""
from enum import Enum
from typing import Callable, Dict, List, NamedTuple, Optional, Union

from gpdemo.config import get_logger
from .rbf import rbf
from .exponential import matern12
from .matern import matern32, matern52

_logger = get_logger()

KernelFunction = Callable[..., float]


class KernelName(str, Enum):
    RBF = "rbf"
    MATERN12 = "matern12"
    MATERN32 = "matern32"
    MATERN52 = "matern52"


class KernelInfo(NamedTuple):
    name: str
    fn: KernelFunction
    description: str


# Display order: smoothest first
KERNELS: Dict[str, KernelInfo] = {
    KernelName.RBF.value: KernelInfo(
        "RBF (Squared Exponential)", rbf, "Infinitely differentiable, very smooth"
    ),
    KernelName.MATERN52.value: KernelInfo(
        "Matérn 5/2", matern52, "Twice differentiable, fairly smooth"
    ),
    KernelName.MATERN32.value: KernelInfo(
        "Matérn 3/2", matern32, "Once differentiable, moderately smooth"
    ),
    KernelName.MATERN12.value: KernelInfo(
        "Matérn 1/2 (Exponential)",
        matern12,
        "Continuous but rough, not differentiable",
    ),
}

KERNEL_FNS: Dict[str, KernelFunction] = {k: v.fn for k, v in KERNELS.items()}

DEFAULT_KERNEL = KernelName.RBF.value


def _key(name) -> Optional[str]:
    if isinstance(name, KernelName):
        return name.value
    return name


def get_kernel(name: Union[str, KernelName, None]) -> KernelFunction:
    """Return the covariance function registered under ``name``.

    Unknown names fall back to :func:`rbf` without raising.
    """
    fn = KERNEL_FNS.get(_key(name)) if name else None
    if fn is None:
        _logger.debug("kernel %r not registered, using %s", name, DEFAULT_KERNEL)
        return rbf
    return fn


def evaluate(kernel, x1, x2, lengthscale, signal_variance):
    """Evaluate the kernel named ``kernel`` at (x1, x2)."""
    return get_kernel(kernel)(x1, x2, lengthscale, signal_variance)


def list_kernels() -> List[str]:
    return list(KERNELS.keys())


def describe(name) -> KernelInfo:
    """Registry entry for ``name`` (RBF entry for unknown names)."""
    return KERNELS.get(_key(name) or DEFAULT_KERNEL, KERNELS[DEFAULT_KERNEL])
