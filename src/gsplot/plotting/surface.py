"""Rendering surfaces that `plot_signal` draws on.

`RenderSurface` lists the primitives the signal plotter needs. Point arrays
passed to it have one row per point and 2 or 3 columns; the surface picks 2D
or 3D drawing from the column count.

`MatplotlibSurface` implements the primitives on a matplotlib axes, swapping
it for a 3D axes (or back) in the same figure slot when `clear` asks for the
other kind of canvas.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple
import logging
import math

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from mpl_toolkits.mplot3d.art3d import Line3DCollection

logger = logging.getLogger(__name__)


class RenderSurface(ABC):
    """Drawing primitives used by the signal plotter."""

    @abstractmethod
    def clear(self, three_d: bool) -> None:
        """Remove everything drawn so far and prepare a 2D or 3D canvas."""

    @abstractmethod
    def draw_segments(self, starts: np.ndarray, ends: np.ndarray,
                      style: str, width: float, color: Any) -> None:
        """Draw one straight segment per row of ``starts``/``ends``."""

    @abstractmethod
    def draw_arrows(self, starts: np.ndarray, vectors: np.ndarray,
                    width: float, color: Any) -> None:
        """Draw one arrow per row, from ``starts`` along ``vectors`` (unscaled)."""

    @abstractmethod
    def scatter(self, points: np.ndarray, size: float, values: np.ndarray) -> None:
        """Draw markers coloured by ``values`` through the active colour map."""

    @abstractmethod
    def mark(self, point: np.ndarray, size: float, color: Any) -> None:
        """Draw one open circle at ``point``."""

    @abstractmethod
    def set_limits(self, limits: Sequence[float]) -> None:
        """Set axis limits from ``[xmin, xmax, ymin, ymax(, zmin, zmax)]``."""

    @abstractmethod
    def set_camera(self, position: Sequence[float]) -> None:
        """Place the 3D camera at ``position`` (x, y, z)."""

    @abstractmethod
    def set_color_limits(self, lo: float, hi: float) -> None:
        """Fix the colour scale of the last scatter."""

    @abstractmethod
    def show_colorbar(self) -> None:
        """Show a colorbar for the last scatter."""

    @abstractmethod
    def hide_axes(self) -> None:
        """Hide ticks, labels and the axes box."""


def camera_to_view(position: Sequence[float]) -> Tuple[float, float]:
    """Convert a camera position (x, y, z) into matplotlib ``(elev, azim)`` degrees."""
    x, y, z = (float(v) for v in position)
    azim = math.degrees(math.atan2(y, x))
    elev = math.degrees(math.atan2(z, math.hypot(x, y)))
    return elev, azim


class MatplotlibSurface(RenderSurface):
    """`RenderSurface` on a matplotlib axes (the current pyplot axes by default).

    After `clear`, ``self.ax`` may be a different axes object than the one
    passed in: a 3D request on 2D axes replaces them with an ``Axes3D``.
    """

    def __init__(self, ax: Optional[Any] = None, cmap: Optional[str] = None):
        self.ax = ax
        self.cmap = cmap
        self.colorbar = None
        self._mappable = None

    @property
    def figure(self):
        return None if self.ax is None else self.ax.get_figure()

    @property
    def is_3d(self) -> bool:
        return self.ax is not None and getattr(self.ax, 'name', '') == '3d'

    def _remove_colorbars(self) -> None:
        """Remove every colorbar drawn for a mappable of ``self.ax``.

        Covers colorbars left by earlier surfaces on the same axes, which
        ``ax.cla()`` would not remove.
        """
        for artist in list(self.ax.collections) + list(self.ax.images):
            cb = getattr(artist, 'colorbar', None)
            if cb is not None:
                cb.remove()
                logger.debug('removed colorbar left on axes')
        self.colorbar = None

    def clear(self, three_d: bool) -> None:
        if self.ax is None:
            self.ax = plt.gca()
        self._remove_colorbars()
        self._mappable = None

        if self.is_3d != bool(three_d):
            fig = self.ax.get_figure()
            spec = self.ax.get_subplotspec()
            fig.delaxes(self.ax)
            projection = '3d' if three_d else None
            if spec is None:
                self.ax = fig.add_subplot(111, projection=projection)
            else:
                self.ax = fig.add_subplot(spec, projection=projection)
            logger.debug('replaced axes with %s axes', '3d' if three_d else '2d')
        self.ax.cla()

    def draw_segments(self, starts, ends, style, width, color) -> None:
        segs = np.stack([np.asarray(starts, dtype=float), np.asarray(ends, dtype=float)], axis=1)
        if segs.shape[0] == 0:
            return
        if segs.shape[2] == 3:
            col = Line3DCollection(segs, linestyles=style, linewidths=width, colors=[color])
            self.ax.add_collection3d(col)
            self.ax.auto_scale_xyz(segs[..., 0], segs[..., 1], segs[..., 2], had_data=True)
        else:
            col = LineCollection(segs, linestyles=style, linewidths=width, colors=[color])
            self.ax.add_collection(col)
            self.ax.autoscale_view()

    def draw_arrows(self, starts, vectors, width, color) -> None:
        p = np.asarray(starts, dtype=float)
        v = np.asarray(vectors, dtype=float)
        if p.shape[0] == 0:
            return
        if p.shape[1] == 3:
            self.ax.quiver(p[:, 0], p[:, 1], p[:, 2], v[:, 0], v[:, 1], v[:, 2],
                           color=color, linewidths=width, arrow_length_ratio=0.1)
        else:
            self.ax.quiver(p[:, 0], p[:, 1], v[:, 0], v[:, 1],
                           angles='xy', scale_units='xy', scale=1,
                           color=color, linewidth=width)

    def scatter(self, points, size, values) -> None:
        p = np.asarray(points, dtype=float)
        if p.shape[1] == 3:
            self._mappable = self.ax.scatter(p[:, 0], p[:, 1], p[:, 2], s=size, c=values,
                                             marker='.', cmap=self.cmap)
        else:
            self._mappable = self.ax.scatter(p[:, 0], p[:, 1], s=size, c=values,
                                             marker='.', cmap=self.cmap)

    def mark(self, point, size, color) -> None:
        p = np.asarray(point, dtype=float).ravel()
        if p.shape[0] == 3:
            self.ax.scatter([p[0]], [p[1]], [p[2]], s=size, marker='o',
                            facecolors='none', edgecolors=color)
        else:
            self.ax.scatter([p[0]], [p[1]], s=size, marker='o',
                            facecolors='none', edgecolors=color)

    def set_limits(self, limits) -> None:
        lim = [float(v) for v in limits]
        self.ax.set_xlim(lim[0], lim[1])
        self.ax.set_ylim(lim[2], lim[3])
        if len(lim) >= 6 and self.is_3d:
            self.ax.set_zlim(lim[4], lim[5])

    def set_camera(self, position) -> None:
        if not self.is_3d:
            logger.debug('camera position ignored on 2d axes')
            return
        elev, azim = camera_to_view(position)
        self.ax.view_init(elev=elev, azim=azim)

    def set_color_limits(self, lo, hi) -> None:
        if self._mappable is None:
            logger.debug('no scatter drawn; colour limits not applied')
            return
        self._mappable.set_clim(lo, hi)

    def show_colorbar(self) -> None:
        if self._mappable is None:
            logger.debug('no scatter drawn; colorbar skipped')
            return
        self.colorbar = self.figure.colorbar(self._mappable, ax=self.ax)

    def hide_axes(self) -> None:
        self.ax.set_axis_off()
