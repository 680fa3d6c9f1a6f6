import logging

logger = logging.getLogger(__name__)


class PlanarVertex:
    """
    平面图中的顶点：保存所有以该顶点为起点的半边，按顺时针 (cw) 排列。
    旋转顺序是嵌入的主要载体，插入与删除都必须保持循环相邻关系。
    """

    def __init__(self, id: int):
        self.id = id
        self.edges = []  # 出边，顺时针

    @property
    def degree(self) -> int:
        return len(self.edges)

    # --- 旋转顺序 ---
    def add_edge_after(self, to_add, after):
        """Insert ``to_add`` directly behind ``after`` in clockwise order."""
        self.edges.insert(self.edges.index(after) + 1, to_add)

    def add_edge_at_end(self, to_add):
        self.edges.append(to_add)

    def remove_edge(self, edge):
        self.edges.remove(edge)

    def next_edge(self, edge):
        """Edge after ``edge`` in clockwise order (wrapping)."""
        i = self.edges.index(edge)
        return self.edges[0] if i == len(self.edges) - 1 else self.edges[i + 1]

    def previous_edge(self, edge):
        """Edge before ``edge`` in clockwise order (wrapping)."""
        i = self.edges.index(edge)
        return self.edges[i - 1]

    # --- 邻居 ---
    def neighbors_cw(self):
        return [e.target for e in self.edges]

    def neighbors_ccw(self):
        return self.neighbors_cw()[::-1]

    def has_neighbor(self, possible_neighbor) -> bool:
        return self.edge_to(possible_neighbor) is not None

    def edge_to(self, target):
        """Outgoing edge towards ``target``, or None if not adjacent."""
        for e in self.edges:
            if e.target is target:
                return e
        return None

    def is_valid(self) -> bool:
        """
        顶点合法当且仅当：
          1. 所有出边的起点都是该顶点；
          2. 顺时针相邻的两条边 a, b 之间是同一个面：a.right_face is b.left_face。
        """
        for e in self.edges:
            if e.start is not self:
                logger.warning("Edge %s in rotation of %s does not start there", e, self)
                return False

        if not self.edges:
            return True
        current = self.edges[-1]
        for nxt in self.edges:
            if current.right_face is not nxt.left_face:
                logger.warning("Face not correct between %s and %s: %s vs %s",
                               current, nxt, current.right_face, nxt.left_face)
                return False
            current = nxt
        return True

    def __repr__(self):
        # <0>[deg:3]{(0->2)(0->7)(0->9)}
        edges = "".join(repr(e) for e in self.edges)
        return f"<{self.id}>[deg:{self.degree}]{{{edges}}}"
