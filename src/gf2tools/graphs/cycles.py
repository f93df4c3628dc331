from __future__ import annotations

from typing import Hashable, List, Tuple

import networkx as nx

from gf2tools.matrix import GF2Matrix

Edge = Tuple[Hashable, Hashable]


def _simple_graph(G: nx.Graph) -> nx.Graph:
    # edges are keyed by endpoints, so parallel edges collapse to one
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        G = nx.Graph(G)
    elif G.is_directed():
        G = G.to_undirected()
    return G


def incidence_matrix(G: nx.Graph) -> Tuple[GF2Matrix, List[Hashable], List[Edge]]:
    """
    Vertex-edge incidence matrix of G over GF(2).

    Returns (M, nodes, edges) where M[i][j] = 1 iff nodes[i] is an endpoint
    of edges[j]. Nodes are sorted; each edge is written with its endpoints
    in node order and the edge list is sorted by node positions.
    A self-loop gives an all-zero column.
    """
    G = _simple_graph(G)
    nodes = sorted(G.nodes())
    index = {v: i for i, v in enumerate(nodes)}

    edges: List[Edge] = []
    for u, v in G.edges():
        if index[u] > index[v]:
            u, v = v, u
        edges.append((u, v))
    edges.sort(key=lambda e: (index[e[0]], index[e[1]]))

    rows = [[0] * len(edges) for _ in nodes]
    for j, (u, v) in enumerate(edges):
        rows[index[u]][j] ^= 1
        rows[index[v]][j] ^= 1

    return GF2Matrix(rows, ncols=len(edges)), nodes, edges


def cycle_space_basis(G: nx.Graph) -> List[List[Edge]]:
    """
    Basis of the cycle space of G (kernel of the incidence matrix),
    each element given as its list of edges.

    Has m - n + c elements, c the number of connected components.
    """
    M, _nodes, edges = incidence_matrix(G)
    return [[edges[j] for j, a in enumerate(vec) if a] for vec in M.kernel()]


def cut_space_basis(G: nx.Graph) -> List[List[Edge]]:
    """
    Basis of the cut space of G (row space of the incidence matrix),
    each element given as its list of edges.

    Has n - c elements.
    """
    M, _nodes, edges = incidence_matrix(G)
    return [[edges[j] for j, a in enumerate(row) if a] for row in M.image()]
