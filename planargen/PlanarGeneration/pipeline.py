import logging
import random
from dataclasses import dataclass

from planargen.DCEL.dcel import PlanarGraph
from planargen.Graph.graph import Graph
from planargen.PlanarGeneration.apollonian import create_apollonian_network
from planargen.PlanarGeneration.flips import flip_edges
from planargen.PlanarGeneration.one_planar import create_one_planar_graph
from planargen.PlanarGeneration.dual import create_dual_planar_graph
from planargen.PlanarGeneration.convert import convert_planar_graph_to_graph

logger = logging.getLogger(__name__)


@dataclass
class GenerationConfig:
    num_vertices: int
    num_flips: int = 0
    seed: int = 0

    # 可选的后续步骤（互斥）
    one_planar: bool = False
    dual: bool = False

    # 每个构造阶段之后调用 is_valid()，失败时抛出 RuntimeError
    validate: bool = True


@dataclass
class GenerationResult:
    planar_graph: PlanarGraph
    graph: Graph


def create_max_planar_graph(num_vertices: int, num_flips: int, seed: int) -> PlanarGraph:
    """Apollonian network (seed) followed by ``num_flips`` edge flips (seed + 1)."""
    graph = create_apollonian_network(num_vertices, seed)
    flip_edges(graph, num_flips, seed + 1)
    graph.name = f"PlanarGraph({num_vertices}/flps{num_flips}/sd{seed})"
    return graph


def create_one_planar_graph_from_scratch(num_vertices: int, num_flips: int, seed: int) -> PlanarGraph:
    graph = create_max_planar_graph(num_vertices, num_flips, seed)
    return create_one_planar_graph(graph, seed + 1)


# --- plain graph model ---
def create_apollonian_network_graph(num_vertices: int, seed: int) -> Graph:
    return convert_planar_graph_to_graph(create_apollonian_network(num_vertices, seed))


def create_max_planar_graph_graph(num_vertices: int, num_flips: int, seed: int) -> Graph:
    if num_vertices < 3:
        raise ValueError(f"Planar graph should have at least 3 vertices, "
                         f"but parameter given was {num_vertices}.")
    if num_flips < 0:
        raise ValueError("Number of flips can't be negative.")
    return convert_planar_graph_to_graph(create_max_planar_graph(num_vertices, num_flips, seed))


def create_max_one_planar_graph(num_vertices: int, num_flips: int, seed: int) -> Graph:
    """
    Random 1-planar graph: a flipped triangulation with crossing edges added.
    The seeds of both stages are drawn from one generator seeded with ``seed``.
    """
    if num_vertices < 3:
        raise ValueError(f"1-planar graph should have at least 3 vertices, "
                         f"but parameter given was {num_vertices}.")
    if num_flips < 0:
        raise ValueError("Number of flips can't be negative.")

    rng = random.Random(seed)
    planar_graph = create_max_planar_graph(num_vertices, num_flips, rng.randrange(2 ** 31))
    one_planar_graph = create_one_planar_graph(planar_graph, rng.randrange(2 ** 31))
    return convert_planar_graph_to_graph(one_planar_graph)


def _check(graph: PlanarGraph, config: GenerationConfig, phase: str):
    if not config.validate:
        return
    if not graph.is_valid():
        raise RuntimeError(f"{phase} produced an invalid planar graph: {graph.summary()}")


def generate(config: GenerationConfig) -> GenerationResult:
    """
    Run the whole pipeline: Apollonian network -> flips -> (1-planar | dual) ->
    plain graph. Each stage gets its own seed derived from ``config.seed``.
    """
    if config.one_planar and config.dual:
        raise ValueError("one_planar and dual can't be combined: "
                         "the dual needs valid faces, which augmentation breaks.")

    planar_graph = create_apollonian_network(config.num_vertices, config.seed)
    _check(planar_graph, config, "Apollonian network")

    flip_edges(planar_graph, config.num_flips, config.seed + 1)
    planar_graph.name = f"PlanarGraph({config.num_vertices}/flps{config.num_flips}/sd{config.seed})"
    _check(planar_graph, config, "Edge flips")

    if config.one_planar:
        # 增边之后面不再一致，不再做合法性检查
        create_one_planar_graph(planar_graph, config.seed + 2)
    elif config.dual:
        planar_graph = create_dual_planar_graph(planar_graph)
        _check(planar_graph, config, "Dual construction")

    graph = convert_planar_graph_to_graph(planar_graph)
    logger.info("Generated %s -> %s", planar_graph.summary(), graph)
    return GenerationResult(planar_graph, graph)
