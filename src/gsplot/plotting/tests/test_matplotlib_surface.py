import matplotlib.pyplot as plt
import numpy as np
import pytest

from gsplot.plotting.graph import Graph, ring
from gsplot.plotting.options import SignalPlotOptions
from gsplot.plotting.signal_plot import plot_signal
from gsplot.plotting.surface import MatplotlibSurface, camera_to_view


@pytest.fixture
def fig():
    f = plt.figure()
    yield f
    plt.close(f)


def test_camera_to_view():
    elev, azim = camera_to_view((1.0, 0.0, 0.0))
    assert elev == pytest.approx(0.0)
    assert azim == pytest.approx(0.0)
    elev, azim = camera_to_view((0.0, 0.0, 5.0))
    assert elev == pytest.approx(90.0)


def test_scatter_plot_on_2d_axes(fig):
    ax = fig.add_subplot(111)
    f = np.sin(np.arange(1, 16) * 2 * np.pi / 15)
    surface = plot_signal(ring(15), f, surface=MatplotlibSurface(ax))
    assert surface.ax is ax
    assert not ax.axison
    assert surface.colorbar is not None
    lo, hi = ax.collections[-1].get_clim()
    assert lo < f.min() and hi > f.max()
    assert ax.get_xlim() == (-1.0, 1.0)


def test_bar_mode_switches_to_3d(fig):
    ax = fig.add_subplot(111)
    surface = plot_signal(ring(15), np.linspace(-1, 1, 15), SignalPlotOptions(bar=True),
                          surface=MatplotlibSurface(ax))
    assert surface.is_3d
    assert surface.ax is not ax
    assert surface.colorbar is None
    assert surface.ax.elev == pytest.approx(camera_to_view((-6, -3, 160))[0])


def test_replot_2d_after_3d_restores_2d_axes(fig):
    surface = MatplotlibSurface(fig.add_subplot(111))
    plot_signal(ring(6), np.arange(6.0), SignalPlotOptions(bar=True), surface=surface)
    plot_signal(ring(6), np.arange(6.0), surface=surface)
    assert not surface.is_3d
    assert len(fig.axes) == 2  # plot axes and colorbar


def test_3d_graph_with_directed_edges(fig):
    coords = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 1.0]])
    A = np.array([[0, 1, 1], [0, 0, 1], [0, 0, 0]], dtype=float)
    G = Graph(adjacency=A, directed=True, coords=coords)
    surface = plot_signal(G, [0.0, 1.0, 2.0], SignalPlotOptions(vertex_highlight=1),
                          surface=MatplotlibSurface(fig.add_subplot(111)))
    assert surface.is_3d
    assert surface.colorbar is not None


def test_default_surface_uses_current_axes():
    plt.figure()
    try:
        surface = plot_signal(ring(5), np.arange(5.0))
        assert surface.ax in plt.gcf().axes
        assert not surface.is_3d
    finally:
        plt.close('all')


def test_default_path_replaces_previous_colorbar():
    fig = plt.figure()
    f = np.sin(np.arange(1, 16) * 2 * np.pi / 15)
    for _ in range(3):
        plot_signal(ring(15), f)
    assert len(fig.axes) == 2  # plot axes and one colorbar


def test_new_surface_on_same_axes_removes_colorbar(fig):
    ax = fig.add_subplot(111)
    plot_signal(ring(6), np.arange(6.0), surface=MatplotlibSurface(ax))
    surface = plot_signal(ring(6), np.arange(6.0), SignalPlotOptions(bar=True),
                          surface=MatplotlibSurface(ax))
    assert fig.axes == [surface.ax]


def test_camera_to_view_returns_float_pair():
    view = camera_to_view((-6, -3, 160))
    assert len(view) == 2
    assert all(isinstance(v, float) for v in view)
