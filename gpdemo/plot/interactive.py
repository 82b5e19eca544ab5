# gpdemo/plot/interactive.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Interactive GP regression demonstrator on a matplotlib figure.

Controls
--------
left click     add an observation
left drag      pan
scroll         zoom around the pointer
double click   reset the view
k              next kernel
c              clear observations
s              draw new sample paths
+ / -          increase / decrease the length scale
"""
from matplotlib.backend_bases import MouseButton
from matplotlib.ticker import MultipleLocator
import gpdemo.num as gnp
from gpdemo.config import get_logger
from gpdemo.core import (
    ObservationPoint,
    as_kernel_params,
    compute_posterior,
    sample_paths,
)
from gpdemo.kernel import list_kernels, describe
from .plotutils import Figure
from .viewport import Viewport, grid_step

_logger = get_logger()

LENGTH_SCALE_STEP = 1.25


class InteractiveGP:
    """Observations, parameters and view of one demonstrator session.

    Parameters
    ----------
    params : KernelParams or mapping, optional
    points : sequence of ObservationPoint, optional
    nb_samples : int, optional
        Number of sample paths drawn at each redraw (default 3).
    n_test : int, optional
        Number of test inputs across the visible x range (default 200).
    bounds : 4-tuple, optional
        Initial (x_min, x_max, y_min, y_max).
    rng : numpy.random.Generator, optional
        Random source for the sample paths.
    """

    def __init__(
        self,
        params=None,
        points=None,
        nb_samples=3,
        n_test=200,
        bounds=(-3.0, 3.0, -2.0, 2.0),
        rng=None,
        figure=None,
    ):
        self.params = as_kernel_params(params)
        self.points = [ObservationPoint(*p) for p in (points or [])]
        self.nb_samples = nb_samples
        self.n_test = n_test
        self.rng = rng
        self.viewport = Viewport(bounds)
        self.figure = figure if figure is not None else Figure(isinteractive=False)
        self._cids = []
        # results of the last redraw
        self.test_x = None
        self.posterior = None
        self.samples = None

    def connect(self):
        canvas = self.figure.fig.canvas
        self._cids = [
            canvas.mpl_connect("button_press_event", self.on_press),
            canvas.mpl_connect("button_release_event", self.on_release),
            canvas.mpl_connect("motion_notify_event", self.on_motion),
            canvas.mpl_connect("scroll_event", self.on_scroll),
            canvas.mpl_connect("key_press_event", self.on_key),
        ]
        return self

    def disconnect(self):
        for cid in self._cids:
            self.figure.fig.canvas.mpl_disconnect(cid)
        self._cids = []

    # ------------------------------------------------------------------
    # Pixel geometry
    # ------------------------------------------------------------------
    def _canvas_size(self):
        bbox = self.figure.ax.bbox
        return bbox.width, bbox.height

    def _to_canvas(self, event):
        """Display coordinates (y up) -> axes canvas pixels (y down)."""
        bbox = self.figure.ax.bbox
        return event.x - bbox.x0, bbox.y1 - event.y

    # ------------------------------------------------------------------
    # State changes
    # ------------------------------------------------------------------
    def add_point(self, x, y):
        self.points.append(ObservationPoint(float(x), float(y)))
        _logger.debug("added observation (%.4g, %.4g)", x, y)

    def clear_points(self):
        self.points = []

    def next_kernel(self):
        names = list_kernels()
        try:
            i = names.index(self.params.kernel)
        except ValueError:
            i = -1
        self.params = self.params._replace(kernel=names[(i + 1) % len(names)])
        _logger.info("kernel: %s", describe(self.params.kernel).name)
        return self.params.kernel

    def scale_length(self, factor):
        self.params = self.params._replace(
            length_scale=self.params.length_scale * factor
        )
        return self.params.length_scale

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def compute(self):
        """Posterior and sample paths over the visible x range."""
        b = self.viewport.bounds
        self.test_x = gnp.linspace(b.x_min, b.x_max, self.n_test)
        self.posterior = compute_posterior(self.points, self.test_x, self.params)
        if self.nb_samples > 0:
            self.samples = sample_paths(
                self.points, self.test_x, self.params, self.nb_samples, rng=self.rng
            )
        else:
            self.samples = None
        return self.posterior

    def redraw(self):
        self.compute()
        fig = self.figure
        b = self.viewport.bounds
        fig.ax.clear()
        fig.plotgp(self.test_x, self.posterior.mean, self.posterior.variance)
        if self.samples is not None:
            fig.plot_samples(self.test_x, self.samples)
        if self.points:
            fig.plotdata([p.x for p in self.points], [p.y for p in self.points])
        fig.xlim((b.x_min, b.x_max))
        fig.ylim((b.y_min, b.y_max))
        fig.ax.xaxis.set_major_locator(MultipleLocator(grid_step(b.width)))
        fig.ax.yaxis.set_major_locator(MultipleLocator(grid_step(b.height)))
        fig.grid()
        fig.title(
            "{} | ℓ = {:.3g}, σ² = {:.3g}, noise = {:.3g}".format(
                describe(self.params.kernel).name,
                self.params.length_scale,
                self.params.signal_variance,
                self.params.noise_level,
            )
        )
        fig.fig.canvas.draw_idle()

    # ------------------------------------------------------------------
    # matplotlib event callbacks
    # ------------------------------------------------------------------
    def on_press(self, event):
        if event.button != MouseButton.LEFT or event.inaxes is not self.figure.ax:
            return
        if event.dblclick:
            if self.viewport.handle_double_click():
                self.redraw()
            return
        cx, cy = self._to_canvas(event)
        self.viewport.handle_mouse_down(cx, cy)

    def on_motion(self, event):
        if not self.viewport.is_dragging:
            return
        cx, cy = self._to_canvas(event)
        width, height = self._canvas_size()
        if self.viewport.handle_mouse_move(cx, cy, width, height):
            self.redraw()

    def on_release(self, event):
        if event.button != MouseButton.LEFT:
            return
        was_dragging = self.viewport.handle_mouse_up()
        if not was_dragging or self.viewport.has_dragged:
            return
        if event.inaxes is not self.figure.ax:
            return
        cx, cy = self._to_canvas(event)
        width, height = self._canvas_size()
        self.add_point(
            self.viewport.to_data_x(cx, width), self.viewport.to_data_y(cy, height)
        )
        self.redraw()

    def on_scroll(self, event):
        if event.inaxes is not self.figure.ax:
            return
        cx, cy = self._to_canvas(event)
        width, height = self._canvas_size()
        # matplotlib: step > 0 when scrolling up
        if self.viewport.handle_wheel(cx, cy, -event.step, width, height):
            self.redraw()

    def on_key(self, event):
        if event.key == "k":
            self.next_kernel()
        elif event.key == "c":
            self.clear_points()
        elif event.key in ("+", "="):
            self.scale_length(LENGTH_SCALE_STEP)
        elif event.key == "-":
            self.scale_length(1 / LENGTH_SCALE_STEP)
        elif event.key != "s":
            return
        # sample paths are redrawn with fresh randomness
        self.redraw()

    def show(self):
        self.connect()
        self.redraw()
        self.figure.show()
