"""Graph containers and builders for signal plotting.

A `Graph` bundles an adjacency matrix, a directedness flag, optional vertex
coordinates and a `PlottingDefaults` record. Both types are frozen; helpers
that "fill in" defaults return an updated copy so a graph shared between
callers is never changed behind their back.

Builders:
- `ring(n)` : undirected cycle laid out on the unit circle
- `from_adjacency(adjacency, coords=None, directed=None)` : wrap a matrix
- `from_networkx(g, pos=None)` : import a networkx graph and its layout
"""
from dataclasses import dataclass, field, replace
from typing import Any, List, Mapping, Optional, Sequence, Tuple
import logging

import networkx as nx
import numpy as np
import scipy.sparse as sp

from gsplot.plotting.config import PLOTTING_DEFAULTS
from gsplot.plotting.errors import DimensionMismatchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlottingDefaults:
    """Graph-level drawing defaults. ``None`` means not set."""
    edge_width: Optional[float] = None
    edge_color: Optional[Any] = None
    edge_style: Optional[str] = None
    limits: Optional[Tuple[float, ...]] = None
    vertex_size: Optional[float] = None
    camera_position: Optional[Tuple[float, float, float]] = None


@dataclass(frozen=True, eq=False)
class Graph:
    """Adjacency, coordinates and plotting defaults of a graph.

    ``adjacency`` may be a dense array or any scipy sparse matrix; it is
    stored as CSR. An entry is an edge iff its weight is nonzero.
    """
    adjacency: Any
    directed: bool = False
    coords: Optional[np.ndarray] = None
    plotting: PlottingDefaults = field(default_factory=PlottingDefaults)

    def __post_init__(self):
        A = sp.csr_matrix(self.adjacency, dtype=float, copy=True)
        if A.shape[0] != A.shape[1]:
            raise DimensionMismatchError(f'adjacency must be square, got shape {A.shape}')
        A.eliminate_zeros()
        A.sort_indices()
        object.__setattr__(self, 'adjacency', A)
        object.__setattr__(self, 'directed', bool(self.directed))

        if self.coords is not None:
            coords = np.asarray(self.coords, dtype=float)
            if coords.ndim != 2 or coords.shape[1] not in (2, 3):
                raise DimensionMismatchError(f'coords must be N x 2 or N x 3, got shape {coords.shape}')
            if coords.shape[0] != A.shape[0]:
                raise DimensionMismatchError(
                    f'coords have {coords.shape[0]} rows for {A.shape[0]} vertices')
            object.__setattr__(self, 'coords', coords)

    @property
    def n_vertices(self) -> int:
        return self.adjacency.shape[0]

    @property
    def n_edges(self) -> int:
        """Edge count: every nonzero if directed, upper triangle (with diagonal) otherwise."""
        if self.directed:
            return int(self.adjacency.count_nonzero())
        return int(sp.triu(self.adjacency).count_nonzero())

    @property
    def dimension(self) -> Optional[int]:
        """Number of coordinate columns, or None without coordinates."""
        if self.coords is None:
            return None
        return int(self.coords.shape[1])

    def edges(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``(ki, kj)`` index arrays of every nonzero adjacency entry.

        Entries come in row-major order. Symmetric entries of an undirected
        graph are both returned.
        """
        ki, kj = self.adjacency.nonzero()
        return np.asarray(ki), np.asarray(kj)


def _bounding_limits(coords: np.ndarray) -> Tuple[float, ...]:
    margin = PLOTTING_DEFAULTS['limits_margin']
    flat_pad = PLOTTING_DEFAULTS['limits_flat_pad']
    limits: List[float] = []
    for lo, hi in zip(coords.min(axis=0), coords.max(axis=0)):
        span = hi - lo
        pad = margin * span if span > 0 else flat_pad
        limits.extend([float(lo - pad), float(hi + pad)])
    return tuple(limits)


def default_plotting_parameters(graph: Graph) -> Graph:
    """Return a copy of ``graph`` with unset drawing defaults filled in.

    Vertex size and camera position are left alone: their absence decides
    how `resolve_options` picks its own defaults.
    """
    p = graph.plotting
    updates = {}
    if p.edge_width is None:
        updates['edge_width'] = PLOTTING_DEFAULTS['edge_width']
    if p.edge_color is None:
        updates['edge_color'] = PLOTTING_DEFAULTS['edge_color']
    if p.edge_style is None:
        updates['edge_style'] = PLOTTING_DEFAULTS['edge_style']
    if p.limits is None and graph.coords is not None:
        updates['limits'] = _bounding_limits(graph.coords)
    if not updates:
        return graph
    logger.debug('filling plotting defaults: %s', sorted(updates))
    return replace(graph, plotting=replace(p, **updates))


def ring(n: int, plotting: Optional[PlottingDefaults] = None) -> Graph:
    """Undirected cycle on ``n`` vertices with unit-circle coordinates."""
    if n < 3:
        raise ValueError('a ring needs at least 3 vertices')
    i = np.arange(n)
    rows = np.concatenate([i, (i + 1) % n])
    cols = np.concatenate([(i + 1) % n, i])
    A = sp.coo_matrix((np.ones(2 * n), (rows, cols)), shape=(n, n))
    theta = 2.0 * np.pi * i / n
    coords = np.column_stack([np.cos(theta), np.sin(theta)])
    if plotting is None:
        plotting = PlottingDefaults(limits=(-1.0, 1.0, -1.0, 1.0))
    return Graph(adjacency=A, directed=False, coords=coords, plotting=plotting)


def from_adjacency(adjacency: Any,
                   coords: Optional[Sequence[Sequence[float]]] = None,
                   directed: Optional[bool] = None,
                   plotting: Optional[PlottingDefaults] = None) -> Graph:
    """Wrap an adjacency matrix. Directedness defaults to "not symmetric"."""
    A = sp.csr_matrix(adjacency)
    if directed is None:
        directed = A.shape[0] == A.shape[1] and (A != A.T).nnz > 0
    return Graph(adjacency=A, directed=directed, coords=coords,
                 plotting=plotting if plotting is not None else PlottingDefaults())


def from_networkx(g: nx.Graph,
                  pos: Optional[Mapping[Any, Sequence[float]]] = None,
                  weight: Optional[str] = 'weight',
                  plotting: Optional[PlottingDefaults] = None) -> Graph:
    """Build a `Graph` from a networkx graph.

    Vertex order is ``list(g.nodes)``. Coordinates come from ``pos`` or, when
    that is omitted, from the ``'pos'`` node attribute. If some node has no
    position the graph is built without coordinates.
    """
    nodes = list(g.nodes)
    A = nx.to_scipy_sparse_array(g, nodelist=nodes, weight=weight, format='csr')
    if pos is None:
        pos = nx.get_node_attributes(g, 'pos')
    coords = None
    if nodes and all(node in pos for node in nodes):
        coords = np.array([pos[node] for node in nodes], dtype=float)
    elif pos:
        logger.debug('positions given for %d of %d nodes; graph has no coordinates',
                     len(pos), len(nodes))
    return Graph(adjacency=A, directed=g.is_directed(), coords=coords,
                 plotting=plotting if plotting is not None else PlottingDefaults())
