## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import sys
import numpy as np
import scipy.stats as stats
import matplotlib.pyplot as plt
from matplotlib import interactive

# Fill colors for the confidence band(s), innermost last
_BAND_COLORS = ["#F2F2F2", "#D8D8D8", "#BFBFBF"]
_SAMPLE_COLORS = ["#FF9696", "#96FF96", "#9696FF", "#E6C800", "#FF96FF"]


class Figure:
    """Figures manager class.

    Attributes
    ----------
    fig : matplotlib.figure.Figure
    axes : list of matplotlib.axes.Axes
    ax : matplotlib.axes.Axes
        Current axes.
    """

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)

        self.nrows = nrows
        self.ncols = ncols
        self.axes = []
        for i in range(nrows * ncols):
            self.axes.append(self.fig.add_subplot(nrows, ncols, i + 1))
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None, xlim=None):
        if grid:
            self.grid()
        if legend:
            self.legend()
        if xlim is not None:
            self.xlim(xlim)
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(
            x, z, "o", color="#f472b6", markersize=7, zorder=5, label=label
        )

    def xlabel(self, s):
        self.ax.set_xlabel(s)

    def ylabel(self, s):
        self.ax.set_ylabel(s)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(
        self,
        visible=True,
        which="major",
        linestyle=(0, (1, 5)),
        linewidth=0.5,
        **kwargs
    ):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth, **kwargs)

    def xlim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_xlim()
        else:
            self.ax.set_xlim(new_limits)
            return new_limits

    def ylim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_ylim()
        else:
            self.ax.set_ylim(new_limits)
            return new_limits

    def plotgp(
        self,
        x,
        mean,
        variance,
        mean_label="posterior mean",
        nsigma=(2.0,),
        ci=None,
        ci_labels=None,
        **kwargs
    ):
        """Posterior mean and confidence band(s).

        By default a single ±2σ band is drawn. Passing coverage levels
        in ``ci`` (e.g. [0.95, 0.99]) draws one band per level instead,
        with half-width norminv((1 + level) / 2) σ.
        """
        mean = np.asarray(mean).flatten()
        x = np.asarray(x).flatten()
        sd = np.sqrt(np.asarray(variance).flatten())

        if ci is not None:
            deltas = [stats.norm.ppf((1 + level) / 2) for level in ci]
            labels = ci_labels or ["CI {:g}%".format(100 * level) for level in ci]
        else:
            deltas = list(nsigma)
            labels = ci_labels or ["±{:g}σ".format(d) for d in nsigma]

        # widest band first so that narrower ones are drawn on top
        order = np.argsort(deltas)[::-1]
        fillcol = _BAND_COLORS[-len(deltas):] if len(deltas) <= 3 else _BAND_COLORS
        kwargs.setdefault("alpha", 0.8)
        kwargs.setdefault("linewidth", 0.5)
        for k, i in enumerate(order):
            upper = mean + deltas[i] * sd
            lower = mean - deltas[i] * sd
            self.ax.fill(
                np.hstack((x, x[::-1])),
                np.hstack((upper, lower[::-1])),
                color=fillcol[k % len(fillcol)],
                label=labels[i],
                **kwargs
            )

        self.ax.plot(x, mean, "#F2404C", linewidth=2.0, label=mean_label)

    def plot_samples(self, x, paths, label="sample paths"):
        """Plot sample paths, one per column of ``paths`` (or a single 1-D path)."""
        x = np.asarray(x).flatten()
        paths = np.asarray(paths)
        if paths.ndim == 1:
            paths = paths.reshape(-1, 1)
        for k in range(paths.shape[1]):
            self.ax.plot(
                x,
                paths[:, k],
                color=_SAMPLE_COLORS[k % len(_SAMPLE_COLORS)],
                linewidth=1.0,
                alpha=0.8,
                label=label if k == 0 else None,
            )
