# map_sketch/domain/mechanics/mechanics_factory.py
from collections.abc import Mapping

from map_sketch.config.models import MechanicsModel
from map_sketch.domain.entities.geography import Graph
from map_sketch.domain.mechanics.mechanics_core import Mechanics
from map_sketch.domain.mechanics.mechanics_graph_store import dangling_edges
from map_sketch.io.hooks import NoopHooks, QueryHooks
from map_sketch.runtime.registries import (
    make_hull_builder,
    make_locator,
    make_path_finder,
    resolve_graph,
)


def build_mechanics(
    cfg: MechanicsModel | Mapping,
    *,
    graphs: Mapping[str, Graph] | None = None,
    hooks: QueryHooks | None = None,
) -> Mechanics:
    model = cfg if isinstance(cfg, MechanicsModel) else MechanicsModel.model_validate(cfg)
    hooks = hooks or NoopHooks()

    graph = resolve_graph(model.graph, deps={"graphs": dict(graphs or {})})
    hooks.graph_loaded(
        nodes=len(graph.nodes), edges=len(graph.edges), dangling=len(dangling_edges(graph))
    )

    return Mechanics(
        graph=graph,
        locator=make_locator(model.locator),
        path_finder=make_path_finder(model.path_finder),
        boundary_builder=make_hull_builder(model.hull),
        hooks=hooks,
    )
