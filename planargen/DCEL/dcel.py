import logging

from planargen.DCEL.vertex import PlanarVertex
from planargen.DCEL.halfedge import PlanarEdge
from planargen.DCEL.face import PlanarFace

logger = logging.getLogger(__name__)


class PlanarGraph:
    """
    Planar graph stored as a doubly-connected edge list.

    The graph owns three append-only lists: vertices, edges (one half-edge per
    undirected edge, the one created first by :meth:`PlanarEdge.create`) and faces.
    Ids of vertices and faces are their positions in these lists; nothing is ever
    removed from them.

    None of the mutating methods (or the generators built on top of them) may be
    called while a caller is iterating over ``vertices``, ``edges`` or ``faces``.
    """

    def __init__(self, name: str = None):
        self.vertices = []   # 所有顶点
        self.edges = []      # 每条无向边的代表半边
        self.faces = []      # 所有面（含外部面）
        self.name = name

    @property
    def n(self) -> int:
        return len(self.vertices)

    @property
    def m(self) -> int:
        return len(self.edges)

    @property
    def f(self) -> int:
        return len(self.faces)

    def add_vertex(self) -> PlanarVertex:
        v = PlanarVertex(len(self.vertices))
        self.vertices.append(v)
        return v

    def add_face(self) -> PlanarFace:
        face = PlanarFace(len(self.faces))
        self.faces.append(face)
        return face

    def add_edge(self, edge: PlanarEdge):
        """
        Append an already created edge pair. Vertex rotations and face boundaries
        are not touched; the caller wires them as part of the same construction step.
        """
        self.edges.append(edge)

    def create_edge(self, start: PlanarVertex, target: PlanarVertex,
                    left_face: PlanarFace, right_face: PlanarFace) -> PlanarEdge:
        """Create ``start -> target`` with the next free index and add it."""
        edge = PlanarEdge.create(start, target, left_face, right_face, len(self.edges))
        self.add_edge(edge)
        return edge

    def edge_pairs(self):
        """(start id, target id) of every undirected edge."""
        return [(e.start.id, e.target.id) for e in self.edges]

    # --- 检查 ---
    def is_triangulated(self) -> bool:
        return all(face.size == 3 for face in self.faces)

    def is_three_regular(self) -> bool:
        return all(v.degree == 3 for v in self.vertices)

    def is_valid(self) -> bool:
        """
        合法性检查（O(n+m+f)），供测试及各构造阶段之后调用：
          1. 所有顶点、边（及其反向边）、面各自合法；
          2. 欧拉公式 n - m + f == 2。
        不合法时记录出错的元素并返回 False。
        """
        for v in self.vertices:
            if not v.is_valid():
                logger.warning("Invalid vertex %s in %s", v, self.name)
                return False

        for e in self.edges:
            for half in (e, e.reversed_edge):
                if not half.is_valid():
                    logger.warning("Invalid edge %s in %s", half, self.name)
                    return False

        for face in self.faces:
            if not face.is_valid():
                logger.warning("Invalid face %s in %s", face, self.name)
                return False

        if self.n - self.m + self.f != 2:
            logger.warning("Euler's formula violated in %s: [n = %d, m = %d, f = %d]",
                           self.name, self.n, self.m, self.f)
            return False
        return True

    def summary(self) -> str:
        return f"Planar graph ({self.name}) [n = {self.n}, m = {self.m}, f = {self.f}]"

    def __repr__(self):
        vertices = "\n".join(repr(v) for v in self.vertices)
        faces = "\n".join(repr(face) for face in self.faces)
        return f"{self.summary()}\nvertices:\n{vertices}\nfaces:\n{faces}\n"
