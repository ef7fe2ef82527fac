import pytest

from map_sketch.domain.entities.geography import Edge, Graph, Node
from map_sketch.domain.mechanics.mechanics_factory import build_mechanics
from map_sketch.io.hooks import NoopHooks
from map_sketch.services.path_builder import PathBuilder

A, B, C, D = (Node("A", 0.0, 0.0), Node("B", 0.0, 1.0), Node("C", 0.0, 2.0), Node("D", 5.0, 5.0))
LINE = Graph(nodes=(A, B, C, D), edges=(Edge("ab", "A", "B", 1.0), Edge("bc", "B", "C", 1.0)))


@pytest.fixture
def builder() -> PathBuilder:
    m = build_mechanics({"graph": {"by": "name", "name": "line"}}, graphs={"line": LINE})
    return PathBuilder(m)


def _ids(nodes):
    return [n.id for n in nodes]


def test_single_leg(builder):
    (seg,) = builder.build_segments([A, C])
    assert seg.id == "segment-1"
    assert (seg.source, seg.target) == (A, C)
    assert _ids(seg.path) == ["A", "B", "C"]
    assert seg.editable


def test_only_last_segment_is_editable(builder):
    segs = builder.build_segments([A, B, C])
    assert [s.id for s in segs] == ["segment-1", "segment-2"]
    assert [s.editable for s in segs] == [False, True]
    assert _ids(segs[1].path) == ["B", "C"]


def test_unreachable_waypoint_is_skipped(builder):
    segs = builder.build_segments([A, D, C])
    assert len(segs) == 1
    assert (segs[0].source, segs[0].target) == (A, C)


def test_too_few_waypoints(builder):
    assert builder.build_segments([]) == []
    assert builder.build_segments([A]) == []


def test_move_segment_point_snaps_to_nearest_node(builder):
    (seg,) = builder.build_segments([A, C])
    moved = builder.move_segment_point(seg, 1, 4.9, 5.1)
    assert _ids(moved.path) == ["A", "D", "C"]
    assert _ids(seg.path) == ["A", "B", "C"]  # original untouched


def test_segment_endpoints_cannot_move(builder):
    (seg,) = builder.build_segments([A, C])
    with pytest.raises(IndexError):
        builder.move_segment_point(seg, 0, 5.0, 5.0)
    with pytest.raises(IndexError):
        builder.move_segment_point(seg, 2, 5.0, 5.0)


def test_route_between_coordinates(builder):
    assert _ids(builder.route_between(0.01, 0.1, -0.01, 1.9)) == ["A", "B", "C"]
    assert builder.route_between(0.0, 0.0, 5.0, 5.0) is None


class LocateTrace(NoopHooks):
    def __init__(self):
        self.located = []

    def locate_query(self, *, lat, lng, node_id):
        self.located.append((lat, lng, node_id))


def test_moving_a_point_is_reported_to_hooks():
    hooks = LocateTrace()
    m = build_mechanics({"graph": {"by": "name", "name": "line"}}, graphs={"line": LINE}, hooks=hooks)
    builder = PathBuilder(m)
    (seg,) = builder.build_segments([A, C])

    builder.move_segment_point(seg, 1, 4.9, 5.1)
    assert hooks.located == [(4.9, 5.1, "D")]
