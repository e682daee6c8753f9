# -*- coding: utf-8 -*-

"""
plotting/config.py

This module centralizes the constants used when drawing graph signals. Keeping
the defaults in one place means the graph builders, option resolution and the
matplotlib surface all agree on widths, colours and thresholds.

Contents:
---------
1. PLOTTING_DEFAULTS:
   - Graph-level drawing defaults (edge width, edge colour, edge line style,
     padding applied to the coordinate bounding box when limits are derived).
   - These are the values `default_plotting_parameters` fills into a graph's
     `PlottingDefaults` when the graph does not carry its own.

2. SIGNAL_PLOT:
   - Defaults and thresholds for `plot_signal` option resolution: vertex
     marker size, the ×10 vertex-size scale, the edge-count threshold above
     which edges are hidden, the imaginary-part tolerance and the default
     camera position.

3. COLORS:
   - Fixed colours used for directed edges, negative/positive bars, the
     highlighted bar and the highlight circle.

Usage:
------
    from gsplot.plotting.config import SIGNAL_PLOT

    SIGNAL_PLOT['default_vertex_size']   # 500

If a different house style is wanted, edit the values here rather than in
the drawing code.
"""
import numpy as np

# ───────────────────────────────────────────────────────────────────────────────
# 1) GRAPH PLOTTING DEFAULTS
# ───────────────────────────────────────────────────────────────────────────────
PLOTTING_DEFAULTS = {
    'edge_width': 1.0,                                      # line width of edges (points)
    'edge_color': tuple(np.array([255, 88, 41]) / 255.0),   # RGB in [0, 1]
    'edge_style': '-',                                      # matplotlib line style
    'limits_margin': 0.05,      # fraction of each coordinate span added on both sides
    'limits_flat_pad': 0.5,     # padding used when a coordinate span is zero
}

# ───────────────────────────────────────────────────────────────────────────────
# 2) SIGNAL PLOT OPTIONS
# ───────────────────────────────────────────────────────────────────────────────
SIGNAL_PLOT = {
    # Marker area when neither the caller nor the graph gives a vertex size
    'default_vertex_size': 500.0,
    # Caller and graph vertex sizes are multiplied by this factor
    'vertex_size_scale': 10.0,
    # Edges are drawn by default only when the graph has fewer edges than this
    'show_edges_max_edges': 10000,
    'bar_width': 1.0,
    # sum(|imag(signal)|) above this is rejected
    'imag_tolerance': 1e-10,
    # Relative widening of the colour scale around the signal range
    'climits_margin': 0.01,
    # Camera position (x, y, z) used for 3D and bar views
    'camera_position': (-6.0, -3.0, 160.0),
}

# Highlight circle size = vertex size / divisor. The 2D and 3D branches differ;
# both values are kept so the two behaviours can be compared directly.
HIGHLIGHT_SIZE_DIVISOR_2D = 3.0
HIGHLIGHT_SIZE_DIVISOR_3D = 1.0

# ───────────────────────────────────────────────────────────────────────────────
# 3) FIXED COLOURS
# ───────────────────────────────────────────────────────────────────────────────
COLORS = {
    'directed_edge': 'r',
    'bar_negative': 'k',
    'bar_positive': 'b',
    'bar_highlight': 'm',
    'highlight_marker': 'k',
}
