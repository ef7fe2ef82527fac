# map_sketch/services/path_builder.py
from collections.abc import Sequence

from map_sketch.domain.entities.geography import Node
from map_sketch.domain.entities.segments import PathSegment
from map_sketch.domain.mechanics.mechanics_core import Mechanics


class PathBuilder:
    """
    Sketches a route through successive waypoints, one segment per leg.
    Holds no route state; every call rebuilds from its arguments.
    """

    def __init__(self, mechanics: Mechanics):
        self.mechanics = mechanics

    def route_between(
        self, a_lat: float, a_lng: float, b_lat: float, b_lng: float
    ) -> list[Node] | None:
        return self.mechanics.route(a_lat, a_lng, b_lat, b_lng)

    def build_segments(self, waypoints: Sequence[Node]) -> list[PathSegment]:
        # An unreachable waypoint is skipped; the next leg starts from the last reached one.
        segments: list[PathSegment] = []
        if not waypoints:
            return segments

        current = waypoints[0]
        for wp in waypoints[1:]:
            path = self.mechanics.find_path(current, wp)
            if path is None:
                continue
            segments = [s.frozen() for s in segments]
            segments.append(
                PathSegment(
                    id=f"segment-{len(segments) + 1}",
                    source=current,
                    target=wp,
                    path=tuple(path),
                    editable=True,
                )
            )
            current = wp
        return segments

    def move_segment_point(
        self, segment: PathSegment, index: int, lat: float, lng: float
    ) -> PathSegment:
        """Snap (lat, lng) to the nearest node and put it at ``index`` of the segment path."""
        if not 0 < index < len(segment.path) - 1:
            raise IndexError(f"segment {segment.id!r}: point {index} is not an interior point")
        node = self.mechanics.snap(lat, lng)
        if node is None:
            return segment
        return segment.with_node(index, node)
