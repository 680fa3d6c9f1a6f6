from planargen.DCEL.dcel import PlanarGraph
from planargen.Graph.graph import Graph


def convert_planar_graph_to_graph(planar_graph: PlanarGraph) -> Graph:
    """
    Project a planar graph onto the plain graph model: same vertices, one edge per
    planar edge, no faces. The result need not be planar in the graph theoretical
    sense (e.g. after crossing edges were added).
    """
    if planar_graph is None:
        raise ValueError("Can't convert non-existing graph, but parameter was None.")

    graph = Graph(planar_graph.n, directed=False, name=planar_graph.name)
    for e in planar_graph.edges:
        graph.add_edge(e.start.id, e.target.id)
    return graph
