""" Prior and posterior sample paths for each kernel

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""
import gpdemo.num as gnp
import gpdemo as gd
from gpdemo.plot import plotutils


def main():
    gnp.set_seed(0)
    xt = gnp.linspace(-3.0, 3.0, 200)
    points = gd.core.make_points([-2.0, -0.5, 0.3, 1.8], [0.5, -0.8, 0.2, 1.1])

    kernels = gd.kernel.list_kernels()
    fig = plotutils.Figure(2, len(kernels), isinteractive=True, figsize=(14, 6))
    for j, name in enumerate(kernels):
        model = gd.Model(kernel=name, length_scale=0.8, noise_level=0.05)

        fig.subplot(j + 1)
        fig.plotgp(xt, gnp.zeros(xt.shape), gnp.full(xt.shape, 1.0), mean_label='prior mean')
        fig.plot_samples(xt, model.sample_paths([], xt, nb_paths=4))
        fig.title(gd.kernel.describe(name).name)

        fig.subplot(len(kernels) + j + 1)
        zpm, zpv = model.predict(points, xt)
        fig.plotgp(xt, zpm, zpv)
        fig.plot_samples(xt, model.sample_paths(points, xt, nb_paths=4))
        fig.plotdata([p.x for p in points], [p.y for p in points])

    fig.show()


if __name__ == '__main__':
    main()
