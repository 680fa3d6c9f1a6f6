import logging

from planargen.DCEL.vertex import PlanarVertex
from planargen.DCEL.face import PlanarFace

logger = logging.getLogger(__name__)


class PlanarEdge:
    """
    有向半边。与其反向半边 (reversed_edge) 一起表示一条无向边，
    记录起点 start 与左侧面 left_face；沿面逆时针 (ccw) 前进。

    index 对两条半边相同；index >= 原始边数的边是之后加入的边（例如 1-planar 增边）。
    """

    def __init__(self, start: PlanarVertex, left_face: PlanarFace, index: int):
        self.start = start
        self.left_face = left_face
        self.index = index
        self._reversed_edge = None

    @classmethod
    def create(cls, start: PlanarVertex, target: PlanarVertex,
               left_face: PlanarFace, right_face: PlanarFace, index: int) -> "PlanarEdge":
        """
        Build the half-edge ``start -> target`` together with its reversed twin.
        The edges are not registered at the vertices or faces; callers wire them.
        """
        left_edge = cls(start, left_face, index)
        right_edge = cls(target, right_face, index)
        left_edge._set_reversed_edge(right_edge)
        right_edge._set_reversed_edge(left_edge)
        return left_edge

    def _set_reversed_edge(self, partner):
        if self._reversed_edge is not None:
            raise RuntimeError(f"Edge already has partner edge. {self}/{self._reversed_edge}")
        self._reversed_edge = partner

    @property
    def reversed_edge(self) -> "PlanarEdge":
        return self._reversed_edge

    @property
    def target(self) -> PlanarVertex:
        return self._reversed_edge.start

    @target.setter
    def target(self, new_target: PlanarVertex):
        self._reversed_edge.start = new_target

    @property
    def right_face(self) -> PlanarFace:
        return self._reversed_edge.left_face

    # --- 导航 ---
    def next_edge_at_start(self) -> "PlanarEdge":
        """Next edge clockwise at the start vertex."""
        return self.start.next_edge(self)

    def previous_edge_at_start(self) -> "PlanarEdge":
        """Next edge counter-clockwise at the start vertex."""
        return self.start.previous_edge(self)

    def next_edge(self) -> "PlanarEdge":
        """Next edge counter-clockwise along the left face."""
        return self._reversed_edge.next_edge_at_start()

    def previous_edge(self) -> "PlanarEdge":
        """Previous edge along the left face."""
        return self.start.previous_edge(self).reversed_edge

    def is_valid(self) -> bool:
        # 两条半边都必须在各自起点的旋转中，否则无法导航
        if self._reversed_edge is None:
            logger.warning("Edge %d starting at %d has no reversed edge", self.index, self.start.id)
            return False
        for half in (self, self._reversed_edge):
            if half not in half.start.edges:
                logger.warning("Edge %s is missing from the rotation of its start vertex", self)
                return False
        nxt = self.next_edge()
        if self.left_face is not nxt.left_face:
            logger.warning("Left face of %s not same as of its next %s (%s vs %s)",
                           self, nxt, self.left_face, nxt.left_face)
            return False
        prev = self.previous_edge()
        if self.left_face is not prev.left_face:
            logger.warning("Left face of %s not same as of its previous %s (%s vs %s)",
                           self, prev, self.left_face, prev.left_face)
            return False
        # 起点处顺时针下一条边的前驱必须是反向半边
        if self._reversed_edge is not self.next_edge_at_start().previous_edge():
            logger.warning("Reversed edge of %s is not previous of its next edge at start", self)
            return False
        return True

    def __repr__(self):
        # (0->2)[1/0]
        left = self.left_face.index if self.left_face is not None else None
        right = self.right_face.index if self.right_face is not None else None
        return f"({self.start.id}->{self.target.id})[{left}/{right}]"
