# gpdemo/plot/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
GPdemo plotting and interaction utilities.
"""

from .viewport import Viewport, Bounds, grid_step
from .plotutils import Figure
from .interactive import InteractiveGP

__all__ = ["Viewport", "Bounds", "grid_step", "Figure", "InteractiveGP", "plotutils"]

from . import plotutils
