import logging

from planargen.DCEL.dcel import PlanarGraph
from planargen.random_util import get_random

logger = logging.getLogger(__name__)


def create_initial_triangle(graph: PlanarGraph):
    """
    构造初始三角形：3 个顶点、2 个面（外部面 f0 与内部面 f1）、3 条边。
    内部面的边界按逆时针给出，外部面的边界按相反顺序给出。
    """
    v0 = graph.add_vertex()
    v1 = graph.add_vertex()
    v2 = graph.add_vertex()
    f0 = graph.add_face()
    f1 = graph.add_face()

    e0 = graph.create_edge(v0, v1, f1, f0)
    e1 = graph.create_edge(v1, v2, f1, f0)
    e2 = graph.create_edge(v2, v0, f1, f0)

    # 顶点 -> 边（顺时针）
    v0.add_edge_at_end(e2.reversed_edge)
    v0.add_edge_at_end(e0)
    v1.add_edge_at_end(e0.reversed_edge)
    v1.add_edge_at_end(e1)
    v2.add_edge_at_end(e1.reversed_edge)
    v2.add_edge_at_end(e2)

    # 面 -> 边
    f0.add_edge_at_end(e0.reversed_edge)
    f0.add_edge_at_end(e2.reversed_edge)
    f0.add_edge_at_end(e1.reversed_edge)
    f1.add_edge_at_end(e0)
    f1.add_edge_at_end(e1)
    f1.add_edge_at_end(e2)
    return f1


def subdivide_face(graph: PlanarGraph, face):
    """
    在三角形面 face 内插入新顶点 x 并连接到三个角点，把它拆成三个三角形。
    原来的面作为其中一个子面继续使用，另外两个是新建的面。

              v2
             /|\\
           /  |  \\
         / f3 x f2 \\
       /   /    \\   \\
     v0 ----- f1 ----- v1    (f1 = v0 v1 x)
    """
    e0, e1, e2 = face.edges
    v0, v1, v2 = e0.start, e1.start, e2.start

    x = graph.add_vertex()
    f2 = graph.add_face()
    f3 = graph.add_face()

    e3 = graph.create_edge(v0, x, f3, face)
    e4 = graph.create_edge(v1, x, face, f2)
    e5 = graph.create_edge(v2, x, f2, f3)

    # 边 -> 面
    e1.left_face = f2
    e2.left_face = f3

    # 顶点 -> 边：插在指向三角形中“下一个”顶点的边之后
    v0.add_edge_after(e3, e2.reversed_edge)
    v1.add_edge_after(e4, e0.reversed_edge)
    v2.add_edge_after(e5, e1.reversed_edge)
    x.add_edge_at_end(e3.reversed_edge)
    x.add_edge_at_end(e5.reversed_edge)
    x.add_edge_at_end(e4.reversed_edge)

    # 面 -> 边
    face.remove_edge(e2)
    face.remove_edge(e1)
    face.add_edge_at_end(e4)
    face.add_edge_at_end(e3.reversed_edge)
    f2.add_edge_at_end(e1)
    f2.add_edge_at_end(e5)
    f2.add_edge_at_end(e4.reversed_edge)
    f3.add_edge_at_end(e2)
    f3.add_edge_at_end(e3)
    f3.add_edge_at_end(e5.reversed_edge)
    return x


def create_apollonian_network(num_vertices: int, seed=None) -> PlanarGraph:
    """
    Create a random Apollonian network: starting from a triangle, repeatedly pick a
    face uniformly at random and subdivide it with a new vertex.

    :param num_vertices: number of vertices, at least 3
    :param seed: int seed or a ``random.Random`` to draw the face choices from
    :return: triangulated planar graph with 3n-6 edges and 2n-4 faces
    """
    if num_vertices < 3:
        raise ValueError(f"An Apollonian network can't have less than 3 vertices, "
                         f"but parameter given was {num_vertices}.")

    rng = get_random(seed)
    graph = PlanarGraph(f"ApollonianNetwork({num_vertices},{seed})")
    create_initial_triangle(graph)

    while graph.n != num_vertices:
        face = graph.faces[rng.randrange(graph.f)]
        subdivide_face(graph, face)

    logger.debug("Built %s", graph.summary())
    return graph
