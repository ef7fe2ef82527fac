import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from map_sketch.domain.entities.geography import Edge, Graph, Node


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- GRAPH RECORDS ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    lat: float
    lng: float
    type: str | None = None

    def to_node(self) -> Node:
        return Node(id=self.id, lat=self.lat, lng=self.lng, type=self.type)


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    id: str
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    weight: float = Field(ge=0)

    def to_edge(self) -> Edge:
        return Edge(id=self.id, source=self.source, target=self.target, weight=self.weight)


class GraphModel(BaseModel):
    """
    External graph records. Node ids must be unique; edges pointing at
    unknown ids are accepted as-is (traversal skips them).
    """

    model_config = ConfigDict(extra="forbid")
    nodes: list[NodeModel] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self):
        seen: set[str] = set()
        for n in self.nodes:
            if n.id in seen:
                raise ValueError(f"duplicate node id {n.id!r}")
            seen.add(n.id)
        return self

    def to_graph(self) -> Graph:
        return Graph(
            nodes=tuple(n.to_node() for n in self.nodes),
            edges=tuple(e.to_edge() for e in self.edges),
        )


# ----------------- GRAPH REFERENCES ---------------------


class GraphBySeed(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["seed"] = "seed"
    name: Literal["seattle"] = "seattle"


class GraphByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str
    fmt: Literal["json", "pickle"] = "json"
    must_exist: bool = True

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class GraphByName(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["name"] = "name"
    name: str


GraphRef = Annotated[GraphBySeed | GraphByPath | GraphByName, Field(discriminator="by")]


# ----------------- LOCATORS ---------------------


class LocatorNearestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["nearest"] = "nearest"


class LocatorWithinRadiusModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["within_radius"] = "within_radius"
    max_distance: float = Field(default=0.01, gt=0)  # degrees


LocatorUnion = Annotated[
    LocatorNearestModel | LocatorWithinRadiusModel, Field(discriminator="kind")
]

# ----------------- PATH FINDERS ---------------------


class PathFinderAStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"


PathFinderUnion = Annotated[PathFinderAStarModel, Field(discriminator="kind")]

# ----------------- HULL BUILDERS ---------------------


class HullConvexModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["convex"] = "convex"


class HullPseudoConcaveModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["pseudo_concave"] = "pseudo_concave"
    threshold: float = Field(default=0.001, gt=0)  # degrees, ~100 m


HullUnion = Annotated[HullConvexModel | HullPseudoConcaveModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class MechanicsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    graph: GraphRef = Field(default_factory=GraphBySeed)
    locator: LocatorUnion = Field(default_factory=LocatorNearestModel)
    path_finder: PathFinderUnion = Field(default_factory=PathFinderAStarModel)
    hull: HullUnion = Field(default_factory=HullPseudoConcaveModel)


class SketchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    mechanics: MechanicsModel = Field(default_factory=MechanicsModel)
