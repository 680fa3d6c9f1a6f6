import logging

import numpy as np
from scipy.sparse import csr_matrix

logger = logging.getLogger(__name__)


class Vertex:
    def __init__(self, id: int):
        if id < 0:
            raise ValueError(f"Vertex can't have negative id, got {id}.")
        self.id = id
        self.edges = []

    @property
    def degree(self) -> int:
        return len(self.edges)

    def neighbors(self):
        return [e.other(self) for e in self.edges]

    def is_valid(self) -> bool:
        """No loops, no multi-edges, and every neighbour sees this vertex as neighbour."""
        seen = set()
        for e in self.edges:
            other = e.other(self)
            if other is self:
                logger.warning("Loop %s at vertex %d", e, self.id)
                return False
            if other.id in seen:
                logger.warning("Multi-edge between %d and %d", self.id, other.id)
                return False
            seen.add(other.id)
            if e not in other.edges:
                logger.warning("Edge %s missing at vertex %d", e, other.id)
                return False
        return True

    def __repr__(self):
        return f"Vertex({self.id}, deg={self.degree})"


class Edge:
    def __init__(self, start: Vertex, target: Vertex, id: int):
        self.start = start
        self.target = target
        self.id = id

    def other(self, vertex: Vertex) -> Vertex:
        return self.target if vertex is self.start else self.start

    def __repr__(self):
        return f"({self.start.id}-{self.target.id})"


class Graph:
    """
    Plain graph with a fixed vertex set 0..n-1 and a list of edges. Undirected
    edges are stored with the lower vertex id as start.
    """

    def __init__(self, n: int, directed: bool = False, name: str = None):
        self.vertices = [Vertex(i) for i in range(n)]
        self.edges = []
        self.directed = directed
        self.name = name
        self._edge_id_counter = 0

    @property
    def n(self) -> int:
        return len(self.vertices)

    @property
    def m(self) -> int:
        return len(self.edges)

    def add_edge(self, first, second) -> Edge:
        if isinstance(first, int):
            first = self.vertices[first]
        if isinstance(second, int):
            second = self.vertices[second]
        if not self.directed and first.id > second.id:
            first, second = second, first
        edge = Edge(first, second, self._edge_id_counter)
        self._edge_id_counter += 1
        first.edges.append(edge)
        if second is not first:
            second.edges.append(edge)
        self.edges.append(edge)
        return edge

    def remove_edge(self, edge: Edge):
        self.edges.remove(edge)
        edge.start.edges.remove(edge)
        if edge.target is not edge.start:
            edge.target.edges.remove(edge)

    def vertex_by_id(self, vertex_id: int) -> Vertex:
        return self.vertices[vertex_id]

    def edge_by_id(self, edge_id: int):
        for e in self.edges:
            if e.id == edge_id:
                return e
        return None

    def edge_pairs(self):
        return [(e.start.id, e.target.id) for e in self.edges]

    def density(self) -> float:
        """#edges / #possible edges, in [0, 1]."""
        max_m = self.n * (self.n - 1) / 2
        return self.m / max_m if max_m else 0.0

    def is_valid(self) -> bool:
        for i, v in enumerate(self.vertices):
            if v.id != i:
                logger.warning("Vertex at position %d has id %d", i, v.id)
                return False
            if not v.is_valid():
                return False

        ids = [e.id for e in self.edges]
        if len(ids) != len(set(ids)):
            logger.warning("Edges invalid: two edges share an id in %s", self.name)
            return False

        degree_sum = sum(v.degree for v in self.vertices)
        if degree_sum != 2 * self.m:
            logger.warning("Degree of vertices invalid: sum = %d, 2m = %d", degree_sum, 2 * self.m)
            return False
        return True

    def adjacency_matrix(self) -> np.ndarray:
        """Dense 0/1 adjacency matrix; symmetric for undirected graphs."""
        A = np.zeros((self.n, self.n), dtype=np.int8)
        if self.m == 0:
            return A
        pairs = np.array(self.edge_pairs())
        A[pairs[:, 0], pairs[:, 1]] = 1
        if not self.directed:
            A[pairs[:, 1], pairs[:, 0]] = 1
        return A

    def to_sparse(self) -> csr_matrix:
        """Adjacency matrix in CSR form, for scipy.sparse.csgraph."""
        pairs = np.array(self.edge_pairs(), dtype=np.int64).reshape(-1, 2)
        rows, cols = pairs[:, 0], pairs[:, 1]
        if not self.directed:
            rows, cols = np.concatenate([rows, cols]), np.concatenate([cols, rows])
        data = np.ones(len(rows), dtype=np.int8)
        return csr_matrix((data, (rows, cols)), shape=(self.n, self.n))

    def degrees(self) -> np.ndarray:
        return np.array([v.degree for v in self.vertices], dtype=np.int64)

    def copy(self) -> "Graph":
        copy = Graph(self.n, self.directed, self.name)
        for a, b in self.edge_pairs():
            copy.add_edge(a, b)
        return copy

    def __repr__(self):
        return f"Graph: n = {self.n}, m = {self.m}, name = {self.name}"
