# gpdemo/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

from . import config
from . import num
from . import kernel
from . import core
from .core import (
    Model,
    ObservationPoint,
    KernelParams,
    Posterior,
    build_kernel_matrix,
    kernel_matrix,
    compute_posterior,
    sample_from_gp,
    sample_paths,
)

__version__ = config.__version__

__all__ = [
    "config",
    "num",
    "kernel",
    "core",
    "Model",
    "ObservationPoint",
    "KernelParams",
    "Posterior",
    "build_kernel_matrix",
    "kernel_matrix",
    "compute_posterior",
    "sample_from_gp",
    "sample_paths",
    "__version__",
]
