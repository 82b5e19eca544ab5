from types import SimpleNamespace
import pytest
import matplotlib.pyplot as plt
from matplotlib.backend_bases import MouseButton
import gpdemo as gd
import gpdemo.num as gnp
from gpdemo.plot import InteractiveGP


@pytest.fixture
def app():
    app = InteractiveGP(
        gd.KernelParams(noise_level=0.1),
        [(0.0, 1.0), (2.0, -1.0)],
        nb_samples=2,
        n_test=50,
        rng=gnp.default_rng(0),
    )
    app.connect()
    yield app
    app.disconnect()
    app.figure.close()
    plt.close("all")


def axes_event(app, fx=0.5, fy=0.5, **kwargs):
    """Event at fraction (fx, fy) of the axes box, display coordinates."""
    bbox = app.figure.ax.bbox
    fields = dict(
        x=bbox.x0 + fx * bbox.width,
        y=bbox.y0 + fy * bbox.height,
        inaxes=app.figure.ax,
        button=MouseButton.LEFT,
        dblclick=False,
        step=0,
        key=None,
    )
    fields.update(kwargs)
    return SimpleNamespace(**fields)


def test_redraw(app):
    app.redraw()
    assert app.test_x.shape == (50,)
    assert app.posterior.mean.shape == (50,)
    assert app.samples.shape == (50, 2)
    assert app.test_x[0] == -3.0 and app.test_x[-1] == 3.0
    assert "RBF" in app.figure.ax.get_title()


def test_no_samples():
    app = InteractiveGP(nb_samples=0, n_test=10)
    app.compute()
    assert app.samples is None
    assert gnp.all(app.posterior.variance == 1.0)
    app.figure.close()


def test_next_kernel_cycles(app):
    seen = [app.next_kernel() for _ in range(4)]
    assert seen == ["matern52", "matern32", "matern12", "rbf"]
    app.params = app.params._replace(kernel="bogus")
    assert app.next_kernel() == "rbf"


def test_keys(app):
    app.on_key(axes_event(app, key="+"))
    assert app.params.length_scale == pytest.approx(1.25)
    app.on_key(axes_event(app, key="-"))
    assert app.params.length_scale == pytest.approx(1.0)
    app.on_key(axes_event(app, key="k"))
    assert app.params.kernel == "matern52"
    app.on_key(axes_event(app, key="c"))
    assert app.points == []
    assert gnp.all(app.posterior.mean == 0.0)
    app.on_key(axes_event(app, key="x"))


def test_click_adds_point(app):
    app.on_press(axes_event(app))
    app.on_release(axes_event(app))
    assert len(app.points) == 3
    x, y = app.points[-1]
    assert abs(x) < 1e-9 and abs(y) < 1e-9


def test_drag_does_not_add_point(app):
    app.on_press(axes_event(app, 0.5))
    app.on_motion(axes_event(app, 0.75))
    app.on_release(axes_event(app, 0.75))
    assert len(app.points) == 2
    assert app.viewport.bounds.x_min == pytest.approx(-4.5)


def test_press_outside_axes(app):
    app.on_press(axes_event(app, inaxes=None))
    assert not app.viewport.is_dragging


def test_scroll_zooms(app):
    app.on_scroll(axes_event(app, step=1))
    assert app.viewport.zoom_level == pytest.approx(1.1)
    app.on_press(axes_event(app, dblclick=True))
    assert app.viewport.zoom_level == 1.0


def test_other_buttons_do_not_add_points(app):
    for button in (MouseButton.RIGHT, MouseButton.MIDDLE):
        app.on_press(axes_event(app, button=button))
        assert not app.viewport.is_dragging
        app.on_release(axes_event(app, button=button))
    assert len(app.points) == 2


def test_other_button_release_keeps_left_drag(app):
    app.on_press(axes_event(app))
    app.on_release(axes_event(app, button=MouseButton.RIGHT))
    assert app.viewport.is_dragging
    app.on_release(axes_event(app))
    assert len(app.points) == 3
