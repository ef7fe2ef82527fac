import pytest
from pydantic import ValidationError

from map_sketch.config.models import (
    EdgeModel,
    GraphByName,
    GraphByPath,
    GraphBySeed,
    HullConvexModel,
    HullPseudoConcaveModel,
    LocatorNearestModel,
    LocatorWithinRadiusModel,
    MechanicsModel,
    PathFinderAStarModel,
    SketchModel,
)


def test_mechanics_defaults():
    m = MechanicsModel()
    assert isinstance(m.graph, GraphBySeed)
    assert isinstance(m.locator, LocatorNearestModel)
    assert isinstance(m.path_finder, PathFinderAStarModel)
    assert isinstance(m.hull, HullPseudoConcaveModel)
    assert m.hull.threshold == 0.001


def test_discriminated_unions_pick_the_right_model():
    m = MechanicsModel.model_validate(
        {
            "graph": {"by": "path", "file": "graphs/city.json"},
            "locator": {"kind": "within_radius"},
            "hull": {"kind": "convex"},
        }
    )
    assert isinstance(m.graph, GraphByPath) and m.graph.fmt == "json"
    assert isinstance(m.locator, LocatorWithinRadiusModel) and m.locator.max_distance == 0.01
    assert isinstance(m.hull, HullConvexModel)

    named = MechanicsModel.model_validate({"graph": {"by": "name", "name": "campus"}})
    assert named.graph == GraphByName(name="campus")


@pytest.mark.parametrize(
    "bad",
    [
        {"locator": {"kind": "teleport"}},
        {"hull": {"kind": "pseudo_concave", "threshold": 0}},
        {"locator": {"kind": "within_radius", "max_distance": -1}},
        {"graph": {"by": "seed", "name": "atlantis"}},
        {"graph": {"by": "path", "file": "g.xml", "fmt": "graphml"}},
        {"path_finder": {"kind": "astar", "heuristic": "manhattan"}},
    ],
)
def test_invalid_mechanics_config(bad):
    with pytest.raises(ValidationError):
        MechanicsModel.model_validate(bad)


def test_graph_path_is_expanded(monkeypatch):
    monkeypatch.setenv("SKETCH_DATA", "/data")
    ref = GraphByPath(file="$SKETCH_DATA/graph.json")
    assert ref.file == "/data/graph.json"


def test_sketch_model_requires_name_and_forbids_extra():
    with pytest.raises(ValidationError):
        SketchModel.model_validate({})
    with pytest.raises(ValidationError):
        SketchModel.model_validate({"name": "x", "tiles": "osm"})
    s = SketchModel.model_validate({"name": "x", "log": {"sample_every": 10}})
    assert s.run_id == "local" and s.log.sample_every == 10
    with pytest.raises(ValidationError):
        SketchModel.model_validate({"name": "x", "log": {"sample_every": 0}})


def test_edge_model_aliases():
    e = EdgeModel.model_validate({"id": "e", "from": "a", "to": "b", "weight": 0})
    assert (e.source, e.target) == ("a", "b")
    assert e.model_dump(by_alias=True) == {"id": "e", "from": "a", "to": "b", "weight": 0.0}
