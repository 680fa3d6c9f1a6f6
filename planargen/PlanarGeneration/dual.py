import logging

from planargen.DCEL.dcel import PlanarGraph
from planargen.DCEL.vertex import PlanarVertex
from planargen.DCEL.face import PlanarFace
from planargen.DCEL.halfedge import PlanarEdge

logger = logging.getLogger(__name__)


def create_dual_planar_graph(primal: PlanarGraph) -> PlanarGraph:
    """
    Create the dual of a triangulated planar graph.

    Every primal face becomes a dual vertex, every primal vertex a dual face, and
    every primal edge e a dual edge from the vertex of its left face to the vertex
    of its right face, with the same index. Primal faces are counter-clockwise and
    primal rotations clockwise, so both orders are reversed when copied.
    """
    if not primal.is_triangulated():
        raise ValueError(f"Planar graph {primal.name} not triangulated.")
    # 1-planar 增边后面表不再更新，边数会超过 3n - 6
    if primal.m != 3 * primal.n - 6:
        raise ValueError(f"Planar graph {primal.name} has {primal.m} edges, "
                         f"a triangulation on {primal.n} vertices has {3 * primal.n - 6}.")

    dual = PlanarGraph(f"PlanarDual({primal.f})")
    dual.vertices = [PlanarVertex(face.index) for face in primal.faces]
    dual.faces = [PlanarFace(v.id) for v in primal.vertices]

    for primal_edge in primal.edges:
        start = dual.vertices[primal_edge.left_face.index]
        target = dual.vertices[primal_edge.right_face.index]
        left_face = dual.faces[primal_edge.target.id]
        right_face = dual.faces[primal_edge.start.id]
        dual.add_edge(PlanarEdge.create(start, target, left_face, right_face, primal_edge.index))
    dual_edges = {e.index: e for e in dual.edges}

    # 顶点 -> 边
    for primal_face in primal.faces:
        dual_vertex = dual.vertices[primal_face.index]
        for around in primal_face.edges:
            dual_edge = dual_edges[around.index]
            if dual_edge.start is not dual_vertex:
                dual_edge = dual_edge.reversed_edge
            if dual_edge.start is not dual_vertex:
                raise RuntimeError(f"Dual edge {dual_edge} does not touch dual vertex {dual_vertex.id}")
            dual_vertex.add_edge_at_end(dual_edge)
        dual_vertex.edges.reverse()

    # 面 -> 边
    for primal_vertex in primal.vertices:
        dual_face = dual.faces[primal_vertex.id]
        for around in primal_vertex.edges:
            dual_edge = dual_edges[around.index]
            if dual_edge.left_face is not dual_face:
                dual_edge = dual_edge.reversed_edge
            if dual_edge.left_face is not dual_face:
                raise RuntimeError(f"Dual edge {dual_edge} does not bound dual face {dual_face.index}")
            dual_face.add_edge_at_end(dual_edge)
        dual_face.edges.reverse()

    logger.debug("Built %s from %s", dual.summary(), primal.name)
    return dual
