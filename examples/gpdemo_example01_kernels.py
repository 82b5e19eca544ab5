""" Plot the four covariance functions of the demonstrator

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""
import gpdemo.num as gnp
import gpdemo as gd
from gpdemo.plot import plotutils


def main():
    h = gnp.linspace(-3.0, 3.0, 500)

    fig = plotutils.Figure()

    for name in gd.kernel.list_kernels():
        k = gd.kernel.evaluate(name, h, 0.0, 1.0, 1.0)
        fig.plot(h, k, label=gd.kernel.describe(name).name)

    fig.title('Covariance functions, lengthscale = 1')
    fig.xlabel('$x_1 - x_2$')
    fig.ylabel('$k(x_1, x_2)$')
    fig.legend()
    fig.show(grid=True)


if __name__ == '__main__':
    main()
