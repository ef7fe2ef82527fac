# io/hooks.py
from typing import Protocol


class QueryHooks(Protocol):
    def graph_loaded(self, *, nodes, edges, dangling): ...
    def locate_query(self, *, lat, lng, node_id): ...
    def path_query(self, *, start_id, goal_id, path, graph, ms): ...
    def boundary_query(self, *, n_in, n_out, ms): ...


class NoopHooks:
    def graph_loaded(self, **_):
        pass

    def locate_query(self, **_):
        pass

    def path_query(self, **_):
        pass

    def boundary_query(self, **_):
        pass
