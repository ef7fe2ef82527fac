# map_sketch/runtime/resources.py
import json
import pickle
from collections.abc import Mapping
from functools import lru_cache

from map_sketch.domain.entities.geography import Graph
from map_sketch.domain.mechanics.mechanics_graph_store import graph_from_records


@lru_cache(maxsize=8)
def load_graph_from_path(file: str, fmt: str) -> Graph:
    # a missing file raises, so only successful loads are cached
    if fmt == "json":
        with open(file, encoding="utf-8") as f:
            return graph_from_records(json.load(f))
    if fmt == "pickle":
        with open(file, "rb") as f:
            obj = pickle.load(f)
        if isinstance(obj, Graph):
            return obj
        if isinstance(obj, Mapping):
            return graph_from_records(obj)
        raise TypeError(f"{file}: pickled {type(obj).__name__} is not a graph")
    raise ValueError(f"Unsupported graph fmt {fmt!r}")
