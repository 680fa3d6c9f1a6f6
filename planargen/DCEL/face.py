import logging

logger = logging.getLogger(__name__)


class PlanarFace:
    def __init__(self, index: int):
        self.index = index
        self.edges = []  # 边界半边，逆时针

    @property
    def size(self) -> int:
        return len(self.edges)

    def vertices(self):
        """Vertices counter-clockwise around the face."""
        return [e.start for e in self.edges]

    def add_edge_at_end(self, edge):
        self.edges.append(edge)

    def add_edge_after(self, to_add, after):
        self.edges.insert(self.edges.index(after) + 1, to_add)

    def remove_edge(self, edge):
        self.edges.remove(edge)

    def is_valid(self) -> bool:
        for e in self.edges:
            if e.left_face is not self:
                logger.warning("Edge %s listed at face %s has left face %s",
                               e, self.index, e.left_face)
                return False

        if not self.edges:
            return True
        current = self.edges[-1]
        for nxt in self.edges:
            if nxt.previous_edge() is not current:
                logger.warning("Previous edge not correct for %s, should be %s (is %s)",
                               nxt, current, nxt.previous_edge())
                return False
            if current.next_edge() is not nxt:
                logger.warning("Next edge not correct for %s, should be %s (is %s)",
                               current, nxt, current.next_edge())
                return False
            current = nxt
        return True

    def __repr__(self):
        # <0>[size:3]{(0->2)(2->7)(7->0)}
        edges = "".join(repr(e) for e in self.edges)
        return f"<{self.index}>[size:{self.size}]{{{edges}}}"
