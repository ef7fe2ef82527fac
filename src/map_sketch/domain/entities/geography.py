import math
from dataclasses import dataclass


# Core value types shared by the locator, path finder and hull builder.
# Coordinates are raw degrees treated as a plane (no projection).
@dataclass(frozen=True)
class Node:
    id: str
    lat: float
    lng: float
    type: str | None = None


@dataclass(frozen=True)
class Edge:
    id: str
    source: str  # node id ("from" in graph records)
    target: str  # node id ("to" in graph records)
    weight: float

    def joins(self, a: str, b: str) -> bool:
        return (self.source == a and self.target == b) or (self.source == b and self.target == a)


@dataclass(frozen=True)
class Graph:
    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    def node(self, node_id: str) -> Node | None:
        # first match wins, same as a scan over the node list
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None


@dataclass(frozen=True)
class PolygonPoint:
    lat: float
    lng: float


def planar_distance(a_lat: float, a_lng: float, b_lat: float, b_lng: float) -> float:
    # x * x overflows to inf; x ** 2 raises OverflowError
    dlat, dlng = a_lat - b_lat, a_lng - b_lng
    return math.sqrt(dlat * dlat + dlng * dlng)
