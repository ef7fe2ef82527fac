from dataclasses import dataclass, replace

from map_sketch.domain.entities.geography import Node


@dataclass(frozen=True)
class PathSegment:
    """One leg of a sketched route: the A* path between two consecutive waypoints."""

    id: str
    source: Node
    target: Node
    path: tuple[Node, ...]
    editable: bool = True

    def with_node(self, index: int, node: Node) -> "PathSegment":
        # endpoints are the waypoints themselves
        if index <= 0 or index >= len(self.path) - 1:
            raise IndexError(f"segment {self.id!r}: point {index} is not an interior point")
        nodes = list(self.path)
        nodes[index] = node
        return replace(self, path=tuple(nodes))

    def frozen(self) -> "PathSegment":
        return self if not self.editable else replace(self, editable=False)
