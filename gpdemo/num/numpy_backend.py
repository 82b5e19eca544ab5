# gpdemo/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for GPdemo.

This module defines the NumPy implementation of the gpdemo.num API.
All floating point arrays are created as float64.
"""

from typing import Any, Optional

import numpy
from numpy.typing import NDArray
from gpdemo.config import get_config, get_logger

ArrayLike = Any

_config = get_config()
_logger = get_logger()

_np_dtype = numpy.float64

ndarray = NDArray[numpy.floating]
from numpy import (
    copy,
    isnan,
    isclose,
    allclose,
    diag,
    arange,
    abs,
    sqrt,
    exp,
    sum,
    mean,
    var,
    argmin,
    argmax,
    maximum,
    matmul,
    tril,
    errstate,
    all,
    vectorize,
)
from numpy import nan, float64
from scipy.linalg import solve_triangular

# ..................................................

def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.number):
        return out.astype(_np_dtype, copy=False)
    return out

def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    elif isinstance(x, (int, float)):
        return numpy.array([x], dtype=_np_dtype)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.number):
            return out.astype(_np_dtype, copy=False)
        return out

def asvector(x):
    """Return ``x`` as a 1-D float64 array (a copy is made only if needed)."""
    return asarray(x, dtype=_np_dtype).reshape(-1)

def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)

def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)

def full(shape, fill_value, dtype=None):
    return numpy.full(
        shape, fill_value, dtype=_np_dtype if dtype is None else dtype
    )

def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)

def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start,
        stop,
        num=num,
        endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )

# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=_config.seed)

def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _config.seed = seed
    _np_rng = numpy.random.default_rng(seed=seed)

def default_rng(seed: Optional[int] = None) -> numpy.random.Generator:
    """Independent generator, for callers that need their own stream."""
    return numpy.random.default_rng(seed=seed)

def randn(*shape: int, rng: Optional[numpy.random.Generator] = None) -> ArrayLike:
    g = _np_rng if rng is None else rng
    return g.standard_normal(size=shape).astype(_np_dtype, copy=False)
