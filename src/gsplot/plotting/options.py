"""Display options for `plot_signal` and the rules that fill them in.

`SignalPlotOptions` is what callers pass: every field may be left as ``None``.
`resolve_options` merges it with values derived from the graph and the signal
and returns a `ResolvedOptions` where every field is set. Resolution is pure;
nothing on the graph or the caller's options is modified.
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple
import logging

import numpy as np

from gsplot.plotting.config import SIGNAL_PLOT
from gsplot.plotting.errors import DimensionMismatchError, InvalidSignalError
from gsplot.plotting.graph import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignalPlotOptions:
    """Caller-supplied display options; ``None`` means "use the default".

    ``vertex_highlight`` is a 1-based vertex number, 0 meaning no highlight.
    ``vertex_size`` is scaled by ``SIGNAL_PLOT['vertex_size_scale']``.
    """
    show_edges: Optional[bool] = None
    bar: Optional[bool] = None
    bar_width: Optional[float] = None
    vertex_size: Optional[float] = None
    vertex_highlight: Optional[int] = None
    colorbar: Optional[bool] = None
    climits: Optional[Tuple[float, float]] = None
    camera_position: Optional[Tuple[float, float, float]] = None


@dataclass(frozen=True)
class ResolvedOptions:
    """Fully populated display options used while drawing."""
    show_edges: bool
    bar: bool
    bar_width: float
    vertex_size: float
    vertex_highlight: int
    colorbar: bool
    climits: Tuple[float, float]
    camera_position: Tuple[float, float, float]


def check_signal(graph: Graph, signal: Any) -> np.ndarray:
    """Return the real part of ``signal`` as a flat float array.

    Raises `InvalidSignalError` when the summed imaginary magnitude exceeds
    ``SIGNAL_PLOT['imag_tolerance']`` and `DimensionMismatchError` when the
    length differs from the graph's vertex count or the graph has no vertices.
    """
    if graph.n_vertices == 0:
        raise DimensionMismatchError('cannot plot a signal on a graph without vertices')
    s = np.ravel(np.asarray(signal))
    if np.iscomplexobj(s):
        imag = float(np.sum(np.abs(np.imag(s))))
        if imag > SIGNAL_PLOT['imag_tolerance']:
            raise InvalidSignalError(f'cannot display a complex signal (sum |imag| = {imag:g})')
        s = np.real(s)
    s = s.astype(float)
    if s.shape[0] != graph.n_vertices:
        raise DimensionMismatchError(
            f'signal has {s.shape[0]} values for {graph.n_vertices} vertices')
    return s


def default_color_limits(signal: np.ndarray) -> Tuple[float, float]:
    """Colour-scale limits with min and max of ``signal`` strictly inside.

    Widens the range by ``climits_margin`` of each endpoint's magnitude plus
    machine epsilon, so a constant signal still gets a non-empty interval.
    """
    eps = np.finfo(float).eps
    margin = SIGNAL_PLOT['climits_margin']
    lo = float(np.min(signal))
    hi = float(np.max(signal))
    return lo - margin * abs(lo) - eps, hi + margin * abs(hi) + eps


def _resolve_vertex_size(graph: Graph, options: SignalPlotOptions) -> float:
    scale = SIGNAL_PLOT['vertex_size_scale']
    if options.vertex_size is not None:
        return float(options.vertex_size) * scale
    if graph.plotting.vertex_size is not None:
        return float(graph.plotting.vertex_size) * scale
    return float(SIGNAL_PLOT['default_vertex_size'])


def _resolve_camera(graph: Graph, options: SignalPlotOptions) -> Tuple[float, float, float]:
    cp = options.camera_position
    if cp is None:
        cp = graph.plotting.camera_position
    if cp is None:
        cp = SIGNAL_PLOT['camera_position']
    cp = tuple(float(v) for v in cp)
    if len(cp) != 3:
        raise DimensionMismatchError(f'camera position needs 3 components, got {len(cp)}')
    return cp


def resolve_options(graph: Graph, signal: np.ndarray,
                    options: Optional[SignalPlotOptions] = None) -> ResolvedOptions:
    """Fill every unset option from the graph, the signal and `SIGNAL_PLOT`.

    ``signal`` must already be the real array returned by `check_signal`.
    """
    if options is None:
        options = SignalPlotOptions()

    show_edges = options.show_edges
    if show_edges is None:
        show_edges = graph.n_edges < SIGNAL_PLOT['show_edges_max_edges']

    highlight = int(options.vertex_highlight or 0)
    if not 0 <= highlight <= graph.n_vertices:
        raise DimensionMismatchError(
            f'vertex_highlight {highlight} outside 1..{graph.n_vertices} (0 for none)')

    climits = options.climits
    if climits is None:
        climits = default_color_limits(signal)

    resolved = ResolvedOptions(
        show_edges=bool(show_edges),
        bar=bool(options.bar) if options.bar is not None else False,
        bar_width=float(options.bar_width) if options.bar_width is not None else SIGNAL_PLOT['bar_width'],
        vertex_size=_resolve_vertex_size(graph, options),
        vertex_highlight=highlight,
        colorbar=bool(options.colorbar) if options.colorbar is not None else True,
        climits=(float(climits[0]), float(climits[1])),
        camera_position=_resolve_camera(graph, options),
    )
    logger.debug('resolved signal plot options: %s', resolved)
    return resolved
