import logging

from planargen.DCEL.dcel import PlanarGraph
from planargen.DCEL.halfedge import PlanarEdge
from planargen.random_util import get_random

logger = logging.getLogger(__name__)


def flip_edge(graph: PlanarGraph, edge: PlanarEdge) -> bool:
    """
    Flip ``edge`` inside the quadrangle formed by its two triangles.

    Let the edge connect v0 and v2 in the cycle v0-v1-v2-v3 with f1 left and f2
    right of it; afterwards it connects v1 and v3 and the faces are
    f1 = v0-v1-v3 and f2 = v1-v3-v2. Nothing is changed and False is returned
    when v1 and v3 are already adjacent or are the same vertex.

          v1                 v1
         /  \\              / | \\
       v0 -- v2    ->    v0  |  v2
         \\  /              \\ | /
          v3                 v3
    """
    v0 = edge.start
    e0 = edge.next_edge_at_start()
    v1 = e0.target
    v2 = edge.target
    e2 = edge.next_edge()
    v3 = e2.target
    # 翻转后的边已存在，或两侧是同一个顶点（三角形）
    if v1 is v3 or v1.has_neighbor(v3):
        return False

    f1 = edge.left_face
    f2 = edge.right_face
    e1 = e0.next_edge()
    e3 = e2.next_edge()

    edge.start = v1
    edge.target = v3

    # 顶点 -> 边
    v0.remove_edge(edge)
    v2.remove_edge(edge.reversed_edge)
    v1.add_edge_after(edge, e0.reversed_edge)
    v3.add_edge_after(edge.reversed_edge, e2.reversed_edge)

    # 边 -> 面；edge 自身的左右面不变
    e0.left_face = f1
    e2.left_face = f2

    # 面 -> 边
    f1.remove_edge(e2)
    f1.add_edge_after(e0, e3)
    f2.remove_edge(e0)
    f2.add_edge_after(e2, e1)
    return True


def flip_edges(graph: PlanarGraph, num_flips: int, seed=None) -> PlanarGraph:
    """
    Apply ``num_flips`` random edge flips to a triangulation. A candidate whose
    flip would duplicate an existing edge is rejected and another edge is drawn;
    rejections do not count towards ``num_flips``.
    """
    if num_flips < 0:
        raise ValueError(f"Number of flips can't be negative, but was {num_flips}.")
    if num_flips == 0:
        return graph
    if graph.n < 5:
        raise ValueError(f"Edge flips need at least 5 vertices, but graph has {graph.n}.")

    rng = get_random(seed)
    edges = graph.edges
    flipped = 0
    rejected = 0
    while flipped < num_flips:
        edge = edges[rng.randrange(len(edges))]
        if flip_edge(graph, edge):
            flipped += 1
        else:
            rejected += 1

    logger.debug("Flipped %d edges of %s (%d candidates rejected)",
                 flipped, graph.name, rejected)
    return graph
