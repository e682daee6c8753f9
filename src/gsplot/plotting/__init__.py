"""Plot scalar signals defined on the vertices of a graph."""
from gsplot.plotting.errors import (
    DimensionMismatchError,
    GraphPlotError,
    InvalidSignalError,
    MissingCoordinatesError,
)
from gsplot.plotting.graph import (
    Graph,
    PlottingDefaults,
    default_plotting_parameters,
    from_adjacency,
    from_networkx,
    ring,
)
from gsplot.plotting.options import (
    ResolvedOptions,
    SignalPlotOptions,
    check_signal,
    default_color_limits,
    resolve_options,
)
from gsplot.plotting.surface import MatplotlibSurface, RenderSurface
from gsplot.plotting.signal_plot import plot_signal

__all__ = [
    'DimensionMismatchError',
    'GraphPlotError',
    'InvalidSignalError',
    'MissingCoordinatesError',
    'Graph',
    'PlottingDefaults',
    'default_plotting_parameters',
    'from_adjacency',
    'from_networkx',
    'ring',
    'ResolvedOptions',
    'SignalPlotOptions',
    'check_signal',
    'default_color_limits',
    'resolve_options',
    'MatplotlibSurface',
    'RenderSurface',
    'plot_signal',
]
