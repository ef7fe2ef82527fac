# map_sketch/domain/mechanics/mechanics_graph_store.py
from collections.abc import Mapping

from map_sketch.app.protocols import GraphProvider
from map_sketch.config.models import GraphModel
from map_sketch.domain.entities.geography import Edge, Graph, Node

# -------- Seed graph: downtown Seattle waypoints
# weights are an abstract walking "difficulty", not distances
_SEATTLE_NODES = (
    Node("pike-place", 47.6097, -122.3425),
    Node("pioneer-square", 47.6021, -122.3365),
    Node("waterfront", 47.6062, -122.3390),
    Node("belltown", 47.6150, -122.3425),
    Node("capitol-hill", 47.6205, -122.3212),
    Node("fremont", 47.6517, -122.3517),
    Node("queen-anne", 47.6237, -122.3565),
    Node("south-lake-union", 47.6205, -122.3370),
    Node("denny-triangle", 47.6170, -122.3370),
    Node("international-district", 47.5988, -122.3244),
    Node("first-hill", 47.6080, -122.3244),
    Node("downtown-core", 47.6080, -122.3350),
    Node("seattle-center", 47.6205, -122.3493),
    Node("magnolia", 47.6358, -122.3993),
    Node("ballard", 47.6685, -122.3833),
)

_SEATTLE_EDGES = (
    Edge("e1", "pike-place", "waterfront", 0.5),
    Edge("e2", "pike-place", "downtown-core", 0.3),
    Edge("e3", "pike-place", "belltown", 0.4),
    Edge("e4", "waterfront", "pioneer-square", 0.6),
    Edge("e5", "pioneer-square", "international-district", 0.4),
    Edge("e6", "pioneer-square", "first-hill", 0.5),
    Edge("e7", "downtown-core", "first-hill", 0.4),
    Edge("e8", "downtown-core", "denny-triangle", 0.3),
    Edge("e9", "belltown", "denny-triangle", 0.2),
    Edge("e10", "belltown", "south-lake-union", 0.3),
    Edge("e11", "denny-triangle", "south-lake-union", 0.2),
    Edge("e12", "denny-triangle", "capitol-hill", 0.4),
    Edge("e13", "south-lake-union", "queen-anne", 0.3),
    Edge("e14", "queen-anne", "seattle-center", 0.2),
    Edge("e15", "queen-anne", "magnolia", 0.8),
    Edge("e16", "seattle-center", "fremont", 0.6),
    Edge("e17", "fremont", "ballard", 0.4),
    Edge("e18", "capitol-hill", "first-hill", 0.3),
    Edge("e19", "first-hill", "international-district", 0.3),
)

SEED_GRAPHS = {"seattle": Graph(nodes=_SEATTLE_NODES, edges=_SEATTLE_EDGES)}


def build_graph(name: str = "seattle") -> Graph:
    try:
        return SEED_GRAPHS[name]
    except KeyError:
        raise ValueError(f"Unknown seed graph {name!r}")


def graph_from_records(data: Mapping) -> Graph:
    """Validate a ``{"nodes": [...], "edges": [...]}`` mapping into a Graph."""
    return GraphModel.model_validate(data).to_graph()


def get_node_by_id(node_id: str, graph: Graph) -> Node | None:
    return graph.node(node_id)


def dangling_edges(graph: Graph) -> list[Edge]:
    """
    Edges with an endpoint that resolves to no node.
    Traversal ignores these silently; this is the opt-in way to spot them.
    """
    ids = {n.id for n in graph.nodes}
    return [e for e in graph.edges if e.source not in ids or e.target not in ids]


class StaticGraphProvider(GraphProvider):
    def __init__(self, graph: Graph):
        self._graph = graph

    def graph(self) -> Graph:
        return self._graph


class SeedGraphProvider(StaticGraphProvider):
    def __init__(self, name: str = "seattle"):
        super().__init__(build_graph(name))
