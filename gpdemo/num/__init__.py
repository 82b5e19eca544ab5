# gpdemo/num/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Numerical backend for GPdemo.

Import as ``import gpdemo.num as gnp``. Only the NumPy backend is
provided; the names below are re-exported from it.
"""

from . import numpy_backend as _backend

_gpdemo_backend_ = "numpy"
_backend._logger.debug("Using backend: %s", _gpdemo_backend_)

# Re-export backend API.
for _name in dir(_backend):
    if _name.startswith("__"):
        continue
    globals()[_name] = getattr(_backend, _name)
