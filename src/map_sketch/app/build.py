# map_sketch/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from map_sketch.config.models import SketchModel
from map_sketch.domain.entities.geography import Graph
from map_sketch.domain.mechanics.mechanics_core import Mechanics
from map_sketch.domain.mechanics.mechanics_factory import build_mechanics
from map_sketch.io.hooks import NoopHooks, QueryHooks
from map_sketch.io.query_logging import QueryLogging  # JSON logs
from map_sketch.services.path_builder import PathBuilder


@dataclass
class App:
    model: SketchModel
    hooks: QueryHooks
    mechanics: Mechanics
    paths: PathBuilder


def build(
    cfg: SketchModel | Mapping,
    *,
    graphs: Mapping[str, Graph] | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, SketchModel) else SketchModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        QueryLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Graph + components
    mechanics = build_mechanics(model.mechanics, graphs=graphs, hooks=hooks)

    # 3) Services
    paths = PathBuilder(mechanics)

    return App(model=model, hooks=hooks, mechanics=mechanics, paths=paths)
