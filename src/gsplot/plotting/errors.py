"""Exceptions raised by the graph signal plotting helpers.

All of them derive from ``ValueError`` through ``GraphPlotError`` so callers
can catch bad input broadly or one failure at a time.
"""


class GraphPlotError(ValueError):
    """Base class for input errors detected before anything is drawn."""


class InvalidSignalError(GraphPlotError):
    """Signal carries a non-negligible imaginary component."""


class MissingCoordinatesError(GraphPlotError):
    """Graph has no vertex coordinates to plot against."""


class DimensionMismatchError(GraphPlotError):
    """Array shapes disagree with the graph's vertex count or dimensionality."""
