from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from map_sketch.domain.entities.geography import Graph, Node, PolygonPoint


# ------------- Mechanics --------------------
@runtime_checkable
class GraphProvider(Protocol):
    """
    Responsibilities:
      • Supply the immutable node/edge set for a session.
    The shape is the contract; seed content may be swapped for any graph.
    """

    def graph(self) -> Graph: ...


@runtime_checkable
class NodeLocator(Protocol):
    """
    Responsibilities:
      • Resolve a raw (lat, lng) pair to a node of the graph.
    Returns None when no node qualifies.
    """

    def locate(self, lat: float, lng: float, graph: Graph) -> Node | None: ...


@runtime_checkable
class PathFinder(Protocol):
    """
    Responsibilities:
      • Compute a lowest-cost node sequence between two nodes of a graph.
    Returns None when the goal is not reached. Start and goal are assumed
    to belong to the graph.
    """

    def find_path(self, start: Node, goal: Node, graph: Graph) -> list[Node] | None: ...


@runtime_checkable
class BoundaryBuilder(Protocol):
    """
    Responsibilities:
      • Turn a scattered point multiset into an ordered polygon boundary.
    Closure is implicit: the first point is not repeated at the end.
    """

    def build(self, points: Sequence[PolygonPoint]) -> list[PolygonPoint]: ...
