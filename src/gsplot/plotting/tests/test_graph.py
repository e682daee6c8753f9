import networkx as nx
import numpy as np
import pytest
import scipy.sparse as sp

from gsplot.plotting.errors import DimensionMismatchError
from gsplot.plotting.graph import (
    Graph,
    PlottingDefaults,
    default_plotting_parameters,
    from_adjacency,
    from_networkx,
    ring,
)


def test_ring_structure():
    G = ring(15)
    assert G.n_vertices == 15
    assert G.n_edges == 15
    assert not G.directed
    assert G.dimension == 2
    assert np.allclose(np.hypot(G.coords[:, 0], G.coords[:, 1]), 1.0)
    assert G.plotting.limits == (-1.0, 1.0, -1.0, 1.0)


def test_ring_too_small():
    with pytest.raises(ValueError):
        ring(2)


def test_edges_include_both_symmetric_entries():
    G = ring(4)
    ki, kj = G.edges()
    assert ki.shape[0] == 8
    pairs = set(zip(ki.tolist(), kj.tolist()))
    assert (0, 1) in pairs and (1, 0) in pairs


def test_zero_weights_are_not_edges():
    A = np.array([[0.0, 2.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]])
    G = Graph(adjacency=A, directed=True)
    assert G.n_edges == 1
    ki, kj = G.edges()
    assert ki.tolist() == [0] and kj.tolist() == [1]


def test_adjacency_is_copied():
    A = sp.csr_matrix(np.array([[0.0, 1.0], [0.0, 0.0]]))
    G = Graph(adjacency=A, directed=True)
    G.adjacency[0, 1] = 0.0
    assert A[0, 1] == 1.0


def test_non_square_adjacency_rejected():
    with pytest.raises(DimensionMismatchError):
        Graph(adjacency=np.zeros((2, 3)))


def test_coords_shape_checked():
    with pytest.raises(DimensionMismatchError):
        Graph(adjacency=np.zeros((3, 3)), coords=np.zeros((3, 4)))
    with pytest.raises(DimensionMismatchError):
        Graph(adjacency=np.zeros((3, 3)), coords=np.zeros((2, 2)))


def test_graph_without_coords():
    G = Graph(adjacency=np.zeros((3, 3)))
    assert G.coords is None
    assert G.dimension is None


def test_default_plotting_parameters_returns_copy():
    G = Graph(adjacency=np.zeros((2, 2)), coords=[[0.0, 0.0], [2.0, 1.0]])
    filled = default_plotting_parameters(G)
    assert filled is not G
    assert G.plotting.edge_width is None
    assert filled.plotting.edge_width == 1.0
    assert filled.plotting.edge_style == '-'
    assert filled.plotting.edge_color is not None
    xmin, xmax, ymin, ymax = filled.plotting.limits
    assert xmin < 0.0 and xmax > 2.0 and ymin < 0.0 and ymax > 1.0


def test_default_plotting_parameters_keeps_existing_values():
    p = PlottingDefaults(edge_width=3.0, edge_color='g', edge_style='--', limits=(0, 1, 0, 1))
    G = Graph(adjacency=np.zeros((2, 2)), coords=[[0.0, 0.0], [1.0, 1.0]], plotting=p)
    assert default_plotting_parameters(G) is G


def test_default_limits_flat_span_and_3d():
    G = Graph(adjacency=np.zeros((2, 2)), coords=[[1.0, 0.0, 0.0], [1.0, 2.0, 4.0]])
    lim = default_plotting_parameters(G).plotting.limits
    assert len(lim) == 6
    assert lim[0] < 1.0 < lim[1]


def test_default_plotting_parameters_never_sets_size_or_camera():
    filled = default_plotting_parameters(ring(5))
    assert filled.plotting.vertex_size is None
    assert filled.plotting.camera_position is None


def test_from_adjacency_detects_direction():
    sym = np.array([[0, 1], [1, 0]])
    asym = np.array([[0, 1], [0, 0]])
    assert not from_adjacency(sym).directed
    assert from_adjacency(asym).directed
    assert not from_adjacency(asym, directed=False).directed


def test_from_networkx_with_pos_attribute():
    g = nx.path_graph(3)
    for n in g.nodes:
        g.nodes[n]['pos'] = (float(n), 0.0)
    G = from_networkx(g)
    assert G.n_vertices == 3
    assert G.n_edges == 2
    assert not G.directed
    assert np.allclose(G.coords[:, 0], [0.0, 1.0, 2.0])


def test_from_networkx_directed_with_explicit_pos():
    g = nx.DiGraph([('a', 'b'), ('b', 'c')])
    pos = {'a': (0, 0, 0), 'b': (1, 0, 0), 'c': (1, 1, 1)}
    G = from_networkx(g, pos=pos)
    assert G.directed
    assert G.n_edges == 2
    assert G.dimension == 3


def test_from_networkx_partial_pos_has_no_coords():
    g = nx.path_graph(3)
    G = from_networkx(g, pos={0: (0.0, 0.0)})
    assert G.coords is None
