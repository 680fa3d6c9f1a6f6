import logging

from planargen.DCEL.dcel import PlanarGraph
from planargen.random_util import get_random, random_permutation

logger = logging.getLogger(__name__)


def create_one_planar_graph(planar_graph: PlanarGraph, seed=None) -> PlanarGraph:
    """
    Turn a plane triangulation into a 1-planar graph by adding crossing edges.

    For a vertex x and two consecutive neighbours u, v let y be the third vertex of
    the other triangle at u-v. The edge x-y can be drawn crossing only u-v, so it is
    added if x-u, x-v, u-v, u-y and v-y are all original edges and x, y are not
    adjacent yet. Added edges get indices >= m (the original edge count) and are
    never used as one of these five edges again.

    Vertices are taken from a random order and processed once each; the last two
    of the order are skipped. The graph is modified in
    place. Face boundaries are NOT updated: after this step ``is_valid()`` is
    meaningless and only vertex rotations and the edge list can be relied on.

            u                 u
          / | \\            / | \\
        x   |   y   ->    x --|-- y
          \\ | /            \\ | /
            v                 v
    """
    m = planar_graph.m
    if isinstance(seed, int):
        seed += m
    rng = get_random(seed)

    order = random_permutation(planar_graph.n, rng)
    vertices_to_consider = [planar_graph.vertices[k] for k in order]

    while len(vertices_to_consider) > 2:
        x = vertices_to_consider.pop()
        neighbours = x.edges  # 会随新边的插入而变化
        i = 0
        while i < len(neighbours):
            i += _try_add_crossing_edge(planar_graph, x, neighbours, i, m)

    planar_graph.name = f"1-{planar_graph.name}"
    logger.debug("Added %d crossing edges to %s", planar_graph.m - m, planar_graph.summary())
    return planar_graph


def _try_add_crossing_edge(graph: PlanarGraph, x, neighbours, i: int, m: int) -> int:
    """
    检查 x 在位置 i-1, i 的相邻邻居 u, v，能加边时加入 x-y。
    返回下一次检查需要前进的步数。
    """
    j = len(neighbours) - 1 if i == 0 else i - 1
    xu = neighbours[j]
    if xu.index >= m:
        return 1
    xv = neighbours[i]
    if xv.index >= m:
        # v 也不能再作为下一个 u
        return 2
    u = xu.target
    v = xv.target

    uv = xu.reversed_edge.previous_edge_at_start()
    if uv.index >= m:
        return 2
    if uv.target is not v:
        raise RuntimeError(f"Edge {uv} after {xu.reversed_edge} at {u.id} does not lead to {v.id}")
    uy = uv.previous_edge_at_start()
    if uy.index >= m:
        return 1
    y = uy.target

    vu = xv.reversed_edge.next_edge_at_start()
    if vu.index >= m:
        return 1
    if vu.target is not u or vu.reversed_edge is not uv:
        raise RuntimeError(f"Edges {uv} and {vu} around x={x.id} (xv {xv}) do not match")
    vy = vu.next_edge_at_start()
    if vy.index >= m:
        return 1
    if vy.target is not y:
        raise RuntimeError(f"Edge {vy} at {v.id} does not lead to {y.id}")

    # y 是 x 自己（三角形）或已相邻时，y 对下一对邻居也不可用
    if y is x or x.has_neighbor(y):
        return 2

    # 新边的 index 为 len(graph.edges) >= m；面已不再一致，这里不做处理
    xy = graph.create_edge(x, y, xv.left_face, vy.left_face)
    x.add_edge_after(xy, xu)
    y.add_edge_after(xy.reversed_edge, vy.reversed_edge)
    return 1
