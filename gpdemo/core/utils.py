# gpdemo/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Records and conversion helpers used across `gpdemo.core` modules.

This file hosts:
- ObservationPoint and KernelParams records
- Conversion of observation sequences to (x, y) arrays
- Coercion of parameter mappings to KernelParams
"""
from typing import Any, Mapping, NamedTuple, Sequence, Tuple
import gpdemo.num as gnp


class ObservationPoint(NamedTuple):
    x: float
    y: float


class KernelParams(NamedTuple):
    """Covariance parameters, passed per call.

    Attributes
    ----------
    kernel : str
        Registered kernel name ('rbf', 'matern12', 'matern32', 'matern52').
        Unknown names are treated as 'rbf'.
    length_scale : float
        Length scale, strictly positive.
    signal_variance : float
        Prior variance, strictly positive.
    noise_level : float
        Observation noise standard deviation, nonnegative.
    """

    kernel: str = "rbf"
    length_scale: float = 1.0
    signal_variance: float = 1.0
    noise_level: float = 0.1


_PARAM_ALIASES = {
    "kernel": "kernel",
    "length_scale": "length_scale",
    "lengthscale": "length_scale",
    "lengthScale": "length_scale",
    "signal_variance": "signal_variance",
    "signalVariance": "signal_variance",
    "noise_level": "noise_level",
    "noiseLevel": "noise_level",
}


def as_kernel_params(params: Any = None) -> KernelParams:
    """Return ``params`` as a KernelParams.

    Parameters
    ----------
    params : KernelParams, mapping or None
        Mappings may use snake_case or camelCase keys. Missing entries
        take the KernelParams defaults; None gives all defaults.

    Raises
    ------
    TypeError
        If a mapping has an unknown key, or ``params`` has an unsupported type.
    """
    if params is None:
        return KernelParams()
    if isinstance(params, KernelParams):
        return params
    if isinstance(params, Mapping):
        kwargs = {}
        for key, value in params.items():
            try:
                kwargs[_PARAM_ALIASES[key]] = value
            except KeyError:
                raise TypeError(f"unknown kernel parameter {key!r}") from None
        if not kwargs.get("kernel", True):
            kwargs["kernel"] = "rbf"
        return KernelParams(**kwargs)
    raise TypeError(
        f"params must be a KernelParams or a mapping, not {type(params).__name__}"
    )


def _point_xy(p) -> Tuple[float, float]:
    if isinstance(p, Mapping):
        return p["x"], p["y"]
    if hasattr(p, "x") and hasattr(p, "y"):
        return p.x, p.y
    x, y = p
    return x, y


def points_to_arrays(points: Sequence) -> Tuple[Any, Any]:
    """Split observation points into index-aligned arrays.

    Parameters
    ----------
    points : sequence
        Items are ObservationPoints, objects with ``x``/``y``
        attributes, mappings with 'x'/'y' keys, or (x, y) pairs.

    Returns
    -------
    x : gnp.array, shape (n,)
    y : gnp.array, shape (n,)
    """
    xy = [_point_xy(p) for p in points]
    if not xy:
        return gnp.zeros((0,)), gnp.zeros((0,))
    x, y = zip(*xy)
    return gnp.asvector(x), gnp.asvector(y)


def make_points(x, y) -> list:
    """Build a list of ObservationPoints from two aligned sequences."""
    return [ObservationPoint(float(xi), float(yi)) for xi, yi in zip(x, y)]
