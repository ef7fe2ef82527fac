# map_sketch/domain/mechanics/mechanics_core.py
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from map_sketch.app.protocols import BoundaryBuilder, NodeLocator, PathFinder
from map_sketch.domain.entities.geography import Graph, Node, PolygonPoint
from map_sketch.domain.mechanics.mechanics_locators import nearest_node
from map_sketch.domain.mechanics.mechanics_routers import path_cost
from map_sketch.io.hooks import NoopHooks, QueryHooks


@dataclass
class Mechanics:
    """Bundles one graph with the components that query it; no per-query state."""

    graph: Graph
    locator: NodeLocator
    path_finder: PathFinder
    boundary_builder: BoundaryBuilder
    hooks: QueryHooks = field(default_factory=NoopHooks)

    def locate(self, lat: float, lng: float) -> Node | None:
        node = self.locator.locate(lat, lng, self.graph)
        self.hooks.locate_query(lat=lat, lng=lng, node_id=node.id if node else None)
        return node

    def snap(self, lat: float, lng: float) -> Node | None:
        """Unbounded nearest node, whatever locator is configured."""
        node = nearest_node(lat, lng, self.graph)
        self.hooks.locate_query(lat=lat, lng=lng, node_id=node.id if node else None)
        return node

    def node(self, node_id: str) -> Node | None:
        return self.graph.node(node_id)

    def find_path(self, start: Node, goal: Node) -> list[Node] | None:
        t0 = time.perf_counter()
        path = self.path_finder.find_path(start, goal, self.graph)
        ms = (time.perf_counter() - t0) * 1000
        self.hooks.path_query(
            start_id=start.id, goal_id=goal.id, path=path, graph=self.graph, ms=ms
        )
        return path

    def route(self, a_lat: float, a_lng: float, b_lat: float, b_lng: float) -> list[Node] | None:
        a, b = self.locate(a_lat, a_lng), self.locate(b_lat, b_lng)
        if a is None or b is None:
            return None
        return self.find_path(a, b)

    def boundary(self, points: Sequence[PolygonPoint]) -> list[PolygonPoint]:
        t0 = time.perf_counter()
        out = self.boundary_builder.build(points)
        self.hooks.boundary_query(
            n_in=len(points), n_out=len(out), ms=(time.perf_counter() - t0) * 1000
        )
        return out

    def cost(self, path: Sequence[Node]) -> float:
        return path_cost(path, self.graph)
