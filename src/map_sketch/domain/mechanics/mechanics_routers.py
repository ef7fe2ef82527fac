import math
from collections.abc import Sequence
from dataclasses import dataclass

from map_sketch.app.protocols import PathFinder
from map_sketch.domain.entities.geography import Graph, Node, planar_distance


@dataclass
class _Candidate:
    node: Node
    g: float  # best known cost from start
    f: float  # g + heuristic


def heuristic(a: Node, goal: Node) -> float:
    # degrees vs. abstract edge weights: not admissible in general
    return planar_distance(a.lat, a.lng, goal.lat, goal.lng)


def neighbors(node_id: str, graph: Graph) -> list[Node]:
    out: list[Node] = []
    for e in graph.edges:
        if e.source == node_id:
            n = graph.node(e.target)
            if n is not None:
                out.append(n)
        if e.target == node_id:
            n = graph.node(e.source)
            if n is not None:
                out.append(n)
    return out


def edge_weight(a: str, b: str, graph: Graph) -> float:
    for e in graph.edges:
        if e.joins(a, b):
            return e.weight
    return math.inf


def _reconstruct(goal: Node, came_from: dict[str, Node]) -> list[Node]:
    path = [goal]
    cur = goal
    while cur.id in came_from:
        cur = came_from[cur.id]
        path.append(cur)
    path.reverse()
    return path


def find_path(start: Node, goal: Node, graph: Graph) -> list[Node] | None:
    """
    A* over an undirected weighted graph.

    The open set is a plain list re-sorted by f every step (stable, so ties
    keep insertion order); visited ids are never reopened. Returns the node
    sequence from ``start`` to ``goal`` inclusive, or None once the frontier
    is exhausted. ``start.id == goal.id`` yields ``[start, goal]``.
    """
    if start.id == goal.id:
        return [start, goal]

    open_set = [_Candidate(start, 0.0, heuristic(start, goal))]
    closed: set[str] = set()
    came_from: dict[str, Node] = {}

    while open_set:
        open_set.sort(key=lambda c: c.f)
        current = open_set.pop(0)

        if current.node.id == goal.id:
            return _reconstruct(goal, came_from)

        closed.add(current.node.id)

        for nb in neighbors(current.node.id, graph):
            if nb.id in closed:
                continue
            tentative = current.g + edge_weight(current.node.id, nb.id, graph)

            entry = next((c for c in open_set if c.node.id == nb.id), None)
            if entry is None:
                entry = _Candidate(nb, math.inf, math.inf)
                open_set.append(entry)

            if tentative < entry.g:
                came_from[nb.id] = current.node
                entry.g = tentative
                entry.f = tentative + heuristic(nb, goal)

    return None


def path_cost(path: Sequence[Node], graph: Graph) -> float:
    """Sum of edge weights along ``path``; inf if any consecutive pair is not adjacent."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        if a.id == b.id:
            continue
        total += edge_weight(a.id, b.id, graph)
    return total


class AStarPathFinder(PathFinder):
    def find_path(self, start, goal, graph):
        return find_path(start, goal, graph)
