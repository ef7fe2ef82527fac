# runtime/registries.py
import os
from collections.abc import Callable
from typing import Any

from map_sketch.app.protocols import BoundaryBuilder, NodeLocator, PathFinder
from map_sketch.config.models import (
    GraphByName,
    GraphByPath,
    GraphBySeed,
    GraphRef,
    HullConvexModel,
    HullPseudoConcaveModel,
    HullUnion,
    LocatorNearestModel,
    LocatorUnion,
    LocatorWithinRadiusModel,
    PathFinderAStarModel,
    PathFinderUnion,
)
from map_sketch.domain.entities.geography import Graph
from map_sketch.domain.mechanics.mechanics_graph_store import build_graph
from map_sketch.domain.mechanics.mechanics_hulls import ConvexHullBuilder, PseudoConcaveHullBuilder
from map_sketch.domain.mechanics.mechanics_locators import NearestNodeLocator, WithinRadiusLocator
from map_sketch.domain.mechanics.mechanics_routers import AStarPathFinder
from map_sketch.runtime.resources import load_graph_from_path

LocatorFactory = Callable[[LocatorUnion, dict], NodeLocator]
PathFinderFactory = Callable[[PathFinderUnion, dict], PathFinder]
HullFactory = Callable[[HullUnion, dict], BoundaryBuilder]

_locator_registry: dict[str, LocatorFactory] = {}
_path_finder_registry: dict[str, PathFinderFactory] = {}
_hull_registry: dict[str, HullFactory] = {}


def _lookup(registry: dict[str, Any], kind: str, what: str):
    try:
        return registry[kind]
    except KeyError:
        raise ValueError(f"Unknown {what} kind {kind!r}")


# ------------------- Graphs ---------------------------


def resolve_graph(ref: GraphRef | None, *, deps: dict) -> Graph:
    """
    deps can include:
      - 'graphs': dict[str, Graph]  # prebuilt graphs by name
      - 'graph': Graph              # a direct fallback/default
    """
    if ref is None:
        if "graph" in deps:
            return deps["graph"]
        raise ValueError("No graph provided")
    if isinstance(ref, GraphBySeed):
        return build_graph(ref.name)
    if isinstance(ref, GraphByName):
        return deps["graphs"][ref.name]  # raises KeyError if missing
    if isinstance(ref, GraphByPath):
        if not os.path.exists(ref.file):
            if ref.must_exist:
                raise FileNotFoundError(ref.file)
            return Graph()
        return load_graph_from_path(ref.file, ref.fmt)
    raise TypeError(ref)


# ------------------- Locators ---------------------------


def register_locator(kind: str):
    def deco(fn: LocatorFactory):
        _locator_registry[kind] = fn
        return fn

    return deco


def make_locator(cfg: LocatorUnion, *, deps: dict | None = None) -> NodeLocator:
    return _lookup(_locator_registry, cfg.kind, "locator")(cfg, deps or {})


@register_locator("nearest")
def _make_nearest(cfg: LocatorNearestModel, deps):
    return NearestNodeLocator()


@register_locator("within_radius")
def _make_within_radius(cfg: LocatorWithinRadiusModel, deps):
    return WithinRadiusLocator(max_distance=cfg.max_distance)


# --------------------- Path finders  ---------------------


def register_path_finder(kind: str):
    def deco(fn: PathFinderFactory):
        _path_finder_registry[kind] = fn
        return fn

    return deco


def make_path_finder(cfg: PathFinderUnion, *, deps: dict | None = None) -> PathFinder:
    return _lookup(_path_finder_registry, cfg.kind, "path finder")(cfg, deps or {})


@register_path_finder("astar")
def _make_astar(cfg: PathFinderAStarModel, deps):
    return AStarPathFinder()


# ---------------------- Hull builders ----------------------------


def register_hull_builder(kind: str):
    def deco(fn: HullFactory):
        _hull_registry[kind] = fn
        return fn

    return deco


def make_hull_builder(cfg: HullUnion, *, deps: dict | None = None) -> BoundaryBuilder:
    return _lookup(_hull_registry, cfg.kind, "hull")(cfg, deps or {})


@register_hull_builder("convex")
def _make_convex(cfg: HullConvexModel, deps):
    return ConvexHullBuilder()


@register_hull_builder("pseudo_concave")
def _make_pseudo_concave(cfg: HullPseudoConcaveModel, deps):
    return PseudoConcaveHullBuilder(threshold=cfg.threshold)
