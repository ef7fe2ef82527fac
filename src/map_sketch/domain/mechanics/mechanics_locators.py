import numpy as np

from map_sketch.app.protocols import NodeLocator
from map_sketch.domain.entities.geography import Graph, Node


def _distances(lat: float, lng: float, graph: Graph) -> np.ndarray:
    coords = np.array([(n.lat, n.lng) for n in graph.nodes], dtype=float).reshape(-1, 2)
    dlat, dlng = coords[:, 0] - lat, coords[:, 1] - lng
    with np.errstate(over="ignore", invalid="ignore"):
        return np.sqrt(dlat * dlat + dlng * dlng)


def _first_min(d: np.ndarray, bound: float) -> int | None:
    # Same outcome as a strict `<` scan: NaN never wins, the first of equal minima wins.
    mask = d < bound
    if not mask.any():
        return None
    return int(np.argmin(np.where(mask, d, np.inf)))


def nearest_node(lat: float, lng: float, graph: Graph) -> Node | None:
    if not graph.nodes:
        return None
    i = _first_min(_distances(lat, lng, graph), np.inf)
    return None if i is None else graph.nodes[i]


def nearest_node_within(
    lat: float, lng: float, graph: Graph, max_distance: float = 0.01
) -> Node | None:
    """Nearest node strictly closer than ``max_distance`` degrees (click resolution)."""
    if not graph.nodes:
        return None
    i = _first_min(_distances(lat, lng, graph), max_distance)
    return None if i is None else graph.nodes[i]


class NearestNodeLocator(NodeLocator):
    def locate(self, lat, lng, graph):
        return nearest_node(lat, lng, graph)


class WithinRadiusLocator(NodeLocator):
    def __init__(self, max_distance: float = 0.01):
        self.max_distance = max_distance

    def locate(self, lat, lng, graph):
        return nearest_node_within(lat, lng, graph, self.max_distance)
