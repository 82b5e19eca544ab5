# gpdemo/plot/viewport.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Pan/zoom viewport for the interactive demonstrator.

The viewport maps data coordinates to canvas pixels (origin at the top
left, y growing downward) and back. All interaction state lives on the
Viewport instance; event handlers update it and return True when the
view needs to be redrawn.
"""
import math
from typing import NamedTuple, Sequence, Tuple

MAX_SCALE_FACTOR = 5
MIN_ZOOM = 1.0 / MAX_SCALE_FACTOR
MAX_ZOOM = 3.0

WHEEL_ZOOM_OUT = 0.9
WHEEL_ZOOM_IN = 1.1


class Bounds(NamedTuple):
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def width(self):
        return self.x_max - self.x_min

    @property
    def height(self):
        return self.y_max - self.y_min

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x_min + self.x_max) / 2, (self.y_min + self.y_max) / 2


def grid_step(value_range):
    """Spacing of grid lines for an axis spanning value_range."""
    if value_range < 0.25:
        return 0.05
    if value_range < 0.5:
        return 0.1
    if value_range < 1:
        return 0.25
    if value_range < 2:
        return 0.5
    return 1


def _clamp(v, lo, hi):
    return max(lo, min(hi, v))


class Viewport:
    """Visible data window, zoom level and pointer interaction state.

    Parameters
    ----------
    initial_bounds : Bounds or 4-tuple, optional
        (x_min, x_max, y_min, y_max) shown at zoom 1 with no pan.
        Default (-3, 3, -2, 2).
    """

    def __init__(self, initial_bounds=(-3.0, 3.0, -2.0, 2.0)):
        initial_bounds = Bounds(*initial_bounds)
        if initial_bounds.width <= 0 or initial_bounds.height <= 0:
            raise ValueError("initial_bounds must have x_min < x_max and y_min < y_max")
        self.initial_bounds = initial_bounds
        self.bounds = initial_bounds
        self.zoom_level = 1.0
        self.pan_offset = (0.0, 0.0)

        self.is_dragging = False
        self.has_dragged = False
        self.last_pointer = (0.0, 0.0)
        self.initial_touch_distance = 0.0

    def __repr__(self):
        return (
            f"<Viewport bounds={tuple(round(b, 4) for b in self.bounds)} "
            f"zoom={self.zoom_level:.3f}>"
        )

    # ------------------------------------------------------------------
    # Coordinate transforms
    # ------------------------------------------------------------------
    def to_canvas_x(self, x, width):
        b = self.bounds
        return (x - b.x_min) / b.width * width

    def to_canvas_y(self, y, height):
        b = self.bounds
        return height - (y - b.y_min) / b.height * height

    def to_data_x(self, cx, width):
        b = self.bounds
        return b.x_min + cx / width * b.width

    def to_data_y(self, cy, height):
        b = self.bounds
        return b.y_max - cy / height * b.height

    # ------------------------------------------------------------------
    # State updates
    # ------------------------------------------------------------------
    def clamp_pan_offset(self, offset):
        """Restrict a pan offset so the view stays inside the world extent.

        The world is MAX_SCALE_FACTOR times the initial bounds, centered
        on them.
        """
        ib = self.initial_bounds
        world_w = ib.width * MAX_SCALE_FACTOR
        world_h = ib.height * MAX_SCALE_FACTOR
        view_w = ib.width / self.zoom_level
        view_h = ib.height / self.zoom_level

        max_pan_x = max(0.0, (world_w - view_w) / 2)
        max_pan_y = max(0.0, (world_h - view_h) / 2)
        return (
            _clamp(offset[0], -max_pan_x, max_pan_x),
            _clamp(offset[1], -max_pan_y, max_pan_y),
        )

    def _center(self):
        cx, cy = self.initial_bounds.center
        return cx + self.pan_offset[0], cy + self.pan_offset[1]

    def update_bounds(self):
        center_x, center_y = self._center()
        half_w = self.initial_bounds.width / (2 * self.zoom_level)
        half_h = self.initial_bounds.height / (2 * self.zoom_level)
        self.bounds = Bounds(
            center_x - half_w, center_x + half_w, center_y - half_h, center_y + half_h
        )
        return self.bounds

    def reset(self):
        self.zoom_level = 1.0
        self.pan_offset = (0.0, 0.0)
        self.update_bounds()

    def _pan_by_pixels(self, dx, dy, width, height):
        b = self.bounds
        self.pan_offset = self.clamp_pan_offset(
            (
                self.pan_offset[0] - dx / width * b.width,
                self.pan_offset[1] + dy / height * b.height,
            )
        )
        self.update_bounds()

    # ------------------------------------------------------------------
    # Event handlers (return True when a redraw is needed)
    # ------------------------------------------------------------------
    def handle_wheel(self, cx, cy, delta_y, width, height):
        """Zoom around the canvas point (cx, cy).

        Scrolling down (delta_y > 0) zooms out by WHEEL_ZOOM_OUT,
        otherwise in by WHEEL_ZOOM_IN. Returns False if the zoom is
        already at its limit.
        """
        world_x = self.to_data_x(cx, width)
        world_y = self.to_data_y(cy, height)

        factor = WHEEL_ZOOM_OUT if delta_y > 0 else WHEEL_ZOOM_IN
        new_zoom = _clamp(self.zoom_level * factor, MIN_ZOOM, MAX_ZOOM)
        if new_zoom == self.zoom_level:
            return False

        self.zoom_level = new_zoom
        center_x, center_y = self._center()
        self.pan_offset = self.clamp_pan_offset(
            (
                self.pan_offset[0] + (world_x - center_x) * (1 - factor),
                self.pan_offset[1] + (world_y - center_y) * (1 - factor),
            )
        )
        self.update_bounds()
        return True

    def handle_mouse_down(self, cx, cy, click_count=1):
        if click_count == 2:
            return False
        self.is_dragging = True
        self.has_dragged = False
        self.last_pointer = (cx, cy)
        return True

    def handle_mouse_move(self, cx, cy, width, height):
        if not self.is_dragging:
            return False
        dx = cx - self.last_pointer[0]
        dy = cy - self.last_pointer[1]
        if abs(dx) > 1 or abs(dy) > 1:
            self.has_dragged = True
        self._pan_by_pixels(dx, dy, width, height)
        self.last_pointer = (cx, cy)
        return True

    def handle_mouse_up(self):
        was_dragging = self.is_dragging
        self.is_dragging = False
        return was_dragging

    def handle_double_click(self):
        self.reset()
        return True

    def handle_touch_start(self, touches: Sequence[Tuple[float, float]]):
        if len(touches) == 1:
            self.is_dragging = True
            self.last_pointer = tuple(touches[0])
        elif len(touches) == 2:
            self.initial_touch_distance = _distance(touches[0], touches[1])
        return False

    def handle_touch_move(self, touches: Sequence[Tuple[float, float]], width, height):
        """One finger pans, two fingers pinch-zoom."""
        if len(touches) == 1 and self.is_dragging:
            dx = touches[0][0] - self.last_pointer[0]
            dy = touches[0][1] - self.last_pointer[1]
            self._pan_by_pixels(dx, dy, width, height)
            self.last_pointer = tuple(touches[0])
            return True
        if len(touches) == 2 and self.initial_touch_distance > 0:
            current = _distance(touches[0], touches[1])
            factor = current / self.initial_touch_distance
            new_zoom = _clamp(self.zoom_level * factor, MIN_ZOOM, MAX_ZOOM)
            if new_zoom != self.zoom_level:
                self.zoom_level = new_zoom
                self.initial_touch_distance = current
                self.update_bounds()
                return True
        return False

    def handle_touch_end(self):
        self.is_dragging = False
        self.initial_touch_distance = 0.0
        return False


def _distance(p, q):
    return math.hypot(p[0] - q[0], p[1] - q[1])
