# gpdemo/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Core components of the gpdemo package.

This subpackage contains the GP inference engine: covariance matrix
construction, Cholesky-based linear algebra, posterior mean/variance
and prior/posterior sampling.

Public API
----------
compute_posterior, sample_from_gp, sample_paths : functions
    Stateless engine entry points.
Model : class
    Facade bundling a parameter record with the engine.
"""

from . import linalg
from .utils import ObservationPoint, KernelParams, as_kernel_params, make_points
from .covariance import build_kernel_matrix, kernel_matrix, add_diag
from .posterior import Posterior, compute_posterior, sample_from_gp, sample_paths
from .model import Model

__all__ = [
    "linalg",
    "ObservationPoint",
    "KernelParams",
    "as_kernel_params",
    "make_points",
    "build_kernel_matrix",
    "kernel_matrix",
    "add_diag",
    "Posterior",
    "compute_posterior",
    "sample_from_gp",
    "sample_paths",
    "Model",
]
