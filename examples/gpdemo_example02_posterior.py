""" Posterior mean and variance given two noisy observations

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""
import gpdemo.num as gnp
import gpdemo as gd
from gpdemo.plot import plotutils


def generate_data():
    points = [gd.ObservationPoint(0.0, 1.0), gd.ObservationPoint(2.0, -1.0)]
    xt = gnp.linspace(-3.0, 3.0, 301)
    return points, xt


def visualization(points, xt, zpm, zpv):
    fig = plotutils.Figure(isinteractive=True)
    fig.plotgp(xt, zpm, zpv, ci=[0.95, 0.99])
    fig.plotdata([p.x for p in points], [p.y for p in points])
    fig.title('Posterior distribution')
    fig.legend()
    fig.show(grid=True)


def main():
    points, xt = generate_data()

    params = gd.KernelParams(kernel='rbf', length_scale=1.0, signal_variance=1.0, noise_level=0.01)
    zpm, zpv = gd.compute_posterior(points, xt, params)

    visualization(points, xt, zpm, zpv)


if __name__ == '__main__':
    main()
