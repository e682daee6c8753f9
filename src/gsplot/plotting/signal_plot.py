"""
signal_plot.py

Draw a signal defined on the vertices of a graph.

`plot_signal(graph, signal, options=None, surface=None)` validates its input,
resolves the display options and then issues one linear sequence of drawing
calls on a `RenderSurface`:

1. clear (3D canvas for 3D coordinates or bar mode)
2. edges, as arrows for directed graphs and segments otherwise
3. vertices: bars (2D bar mode), coloured markers (2D) or 3D markers,
   plus an open circle or a thick bar for the highlighted vertex
4. axis limits, camera (3D or bar mode only)
5. colour limits and colorbar (not in bar mode)
6. axes hidden

Example:

    from gsplot.plotting import plot_signal, ring
    import numpy as np

    G = ring(15)
    f = np.sin(np.arange(1, 16) * 2 * np.pi / 15)
    plot_signal(G, f)
"""
from typing import Any, Optional
import logging

import numpy as np

from gsplot.plotting.config import COLORS, HIGHLIGHT_SIZE_DIVISOR_2D, HIGHLIGHT_SIZE_DIVISOR_3D
from gsplot.plotting.errors import MissingCoordinatesError
from gsplot.plotting.graph import Graph, default_plotting_parameters
from gsplot.plotting.options import ResolvedOptions, SignalPlotOptions, check_signal, resolve_options
from gsplot.plotting.surface import MatplotlibSurface, RenderSurface

logger = logging.getLogger(__name__)


def _lift(coords: np.ndarray) -> np.ndarray:
    """Append a zero height column to 2D coordinates."""
    return np.column_stack([coords, np.zeros(coords.shape[0])])


def _draw_edges(surface: RenderSurface, graph: Graph, points: np.ndarray) -> None:
    ki, kj = graph.edges()
    p = graph.plotting
    if graph.directed:
        surface.draw_arrows(points[ki], points[kj] - points[ki], p.edge_width, COLORS['directed_edge'])
    else:
        surface.draw_segments(points[ki], points[kj], p.edge_style, p.edge_width, p.edge_color)
    logger.debug('drew %d %s edges', ki.shape[0], 'directed' if graph.directed else 'undirected')


def _draw_bars(surface: RenderSurface, graph: Graph, signal: np.ndarray, opts: ResolvedOptions) -> None:
    base = _lift(graph.coords)
    tops = np.column_stack([graph.coords, signal])
    style = graph.plotting.edge_style

    neg = signal < 0
    surface.draw_segments(base[neg], tops[neg], style, opts.bar_width, COLORS['bar_negative'])
    surface.draw_segments(base[~neg], tops[~neg], style, opts.bar_width, COLORS['bar_positive'])
    if opts.vertex_highlight > 0:
        vh = opts.vertex_highlight - 1
        surface.draw_segments(base[vh:vh + 1], tops[vh:vh + 1], style,
                              2 * opts.bar_width, COLORS['bar_highlight'])


def _draw_markers(surface: RenderSurface, graph: Graph, signal: np.ndarray, opts: ResolvedOptions) -> None:
    surface.scatter(graph.coords, opts.vertex_size, signal)
    if opts.vertex_highlight > 0:
        divisor = HIGHLIGHT_SIZE_DIVISOR_3D if graph.dimension == 3 else HIGHLIGHT_SIZE_DIVISOR_2D
        surface.mark(graph.coords[opts.vertex_highlight - 1], opts.vertex_size / divisor,
                     COLORS['highlight_marker'])


def plot_signal(graph: Graph, signal: Any,
                options: Optional[SignalPlotOptions] = None,
                surface: Optional[RenderSurface] = None) -> RenderSurface:
    """Plot ``signal`` on the vertices of ``graph``.

    Args:
        graph: graph with vertex coordinates (N x 2 or N x 3).
        signal: length-N values; a complex signal is accepted only when its
            imaginary part is negligible.
        options: display options; unset fields are defaulted.
        surface: where to draw. Defaults to a `MatplotlibSurface` on the
            current pyplot axes.

    Returns:
        the surface drawn on.

    Raises:
        MissingCoordinatesError: the graph has no coordinates.
        InvalidSignalError: the signal has a non-negligible imaginary part.
        DimensionMismatchError: signal length or highlight index does not fit
            the graph.
    """
    if graph.coords is None:
        raise MissingCoordinatesError('cannot plot a graph without coordinates')
    s = check_signal(graph, signal)
    opts = resolve_options(graph, s, options)

    if surface is None:
        surface = MatplotlibSurface()

    three_d = graph.dimension == 3
    surface.clear(three_d or opts.bar)
    graph = default_plotting_parameters(graph)

    if opts.show_edges:
        points = _lift(graph.coords) if (opts.bar and not three_d) else graph.coords
        _draw_edges(surface, graph, points)
    else:
        logger.debug('edge drawing disabled (%d edges)', graph.n_edges)

    if not three_d and opts.bar:
        _draw_bars(surface, graph, s, opts)
    else:
        _draw_markers(surface, graph, s, opts)

    surface.set_limits(graph.plotting.limits)

    if three_d or opts.bar:
        surface.set_camera(opts.camera_position)

    if not opts.bar:
        surface.set_color_limits(*opts.climits)
        if opts.colorbar:
            surface.show_colorbar()

    surface.hide_axes()
    return surface
