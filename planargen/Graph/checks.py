from collections import deque

from scipy.sparse.csgraph import connected_components

from planargen.Graph.graph import Graph


def is_connected(graph: Graph) -> bool:
    if graph is None:
        raise ValueError("Can't check a null graph.")
    if graph.n == 0:
        return True
    num_components, _ = connected_components(graph.to_sparse(), directed=False)
    return num_components == 1


def is_bipartite(graph: Graph) -> bool:
    """2-colouring by breadth-first search over every component."""
    partition = [-1] * graph.n
    for source in range(graph.n):
        if partition[source] != -1:
            continue
        partition[source] = 0
        queue = deque([graph.vertex_by_id(source)])
        while queue:
            u = queue.popleft()
            for v in u.neighbors():
                if partition[v.id] == partition[u.id]:
                    return False
                if partition[v.id] == -1:
                    partition[v.id] = 1 - partition[u.id]
                    queue.append(v)
    return True


def is_tree(graph: Graph) -> bool:
    """False for forests with more than one component."""
    if graph.m != graph.n - 1:
        return False
    return is_connected(graph)
