# gpdemo/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process model class.
"""
from gpdemo.kernel import get_kernel, describe

from . import posterior
from . import covariance
from . import utils


class Model:
    """One-dimensional zero-mean GP regression model.

    A Model only bundles a parameter record with the stateless
    functions of :mod:`gpdemo.core.posterior`; it holds no data and no
    cached factorization, so every call recomputes from its arguments.

    Attributes
    ----------
    params : KernelParams
        Kernel name, length scale, signal variance and noise level.

    Examples
    --------
    >>> import gpdemo as gd
    >>> model = gd.Model(kernel="matern32", length_scale=0.5, noise_level=0.05)
    >>> points = [gd.ObservationPoint(0.0, 1.0), gd.ObservationPoint(2.0, -1.0)]
    >>> xt = gd.core.linalg.linspace(-3.0, 3.0, 61)
    >>> zpm, zpv = model.predict(points, xt)
    >>> paths = model.sample_paths(points, xt, nb_paths=5)
    """

    def __init__(self, params=None, **overrides):
        """
        Parameters
        ----------
        params : KernelParams or mapping, optional
            Initial parameters (defaults of KernelParams if None).
        **overrides
            Individual KernelParams fields replacing those of ``params``.
        """
        params = utils.as_kernel_params(params)
        if overrides:
            params = params._replace(**overrides)
        self.params = params

    def __repr__(self):
        output = str("<gpdemo.core.Model object> " + hex(id(self)))
        return output

    def __str__(self):
        info = describe(self.params.kernel)
        return (
            f"GP Model:\n"
            f"  Kernel: {info.name}\n"
            f"  Length Scale: {self.params.length_scale}\n"
            f"  Signal Variance: {self.params.signal_variance}\n"
            f"  Noise Level: {self.params.noise_level}"
        )

    @property
    def kernel_fn(self):
        return get_kernel(self.params.kernel)

    def set_params(self, **changes):
        """Replace some parameters; returns the new KernelParams."""
        self.params = self.params._replace(**changes)
        return self.params

    def covariance(self, a, b=None):
        """Covariance matrix K(a, b); K(a, a) if b is None."""
        if b is None:
            b = a
        return covariance.kernel_matrix(a, b, self.params)

    def predict(self, points, xt):
        """Posterior mean and variance at xt.

        Parameters
        ----------
        points : sequence
            Observation points.
        xt : array_like, shape (m,)
            Prediction points.

        Returns
        -------
        Posterior
            (mean, variance), each of shape (m,).
        """
        return posterior.compute_posterior(points, xt, self.params)

    def sample_paths(self, points, xt, nb_paths=1, rng=None):
        """Sample paths on xt, shape (m, nb_paths); prior if points is empty."""
        return posterior.sample_paths(points, xt, self.params, nb_paths, rng=rng)

    def sample(self, points, xt, rng=None):
        """One sample path on xt, shape (m,)."""
        return posterior.sample_from_gp(points, xt, self.params, rng=rng)
