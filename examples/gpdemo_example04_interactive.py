""" Interactive GP regression

Click to add observations, drag to pan, scroll to zoom, double click to
reset the view. Keys: k (next kernel), c (clear), s (resample),
+/- (length scale).

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""
import gpdemo as gd
from gpdemo.plot import InteractiveGP


def main():
    params = gd.KernelParams(kernel='rbf', length_scale=1.0, signal_variance=1.0, noise_level=0.1)
    points = [(-1.5, 0.6), (0.0, -0.4), (1.2, 0.9)]
    app = InteractiveGP(params, points, nb_samples=3)
    app.show()
    return app


if __name__ == '__main__':
    main()
