# io/query_logging.py
import json
import logging
import sys

from map_sketch.domain.entities.geography import Graph, Node
from map_sketch.domain.mechanics.mechanics_routers import path_cost
from map_sketch.io.hooks import NoopHooks


def _default_json_logger(name="map_sketch", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class QueryLogging(NoopHooks):
    """
    Structured logs for graph loads and locator / path / boundary queries.
    Per-query records are DEBUG and sampled; misses and loads are INFO.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._queries = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _sampled(self) -> bool:
        self._queries += 1
        return self.debug or (self._queries % self.sample_every) == 0

    # --------------------------------------------------------

    def graph_loaded(self, *, nodes: int, edges: int, dangling: int):
        self._emit("INFO", "graph_loaded", nodes=nodes, edges=edges, dangling=dangling)
        if dangling:
            self._emit("WARNING", "graph_dangling_edges", dangling=dangling)

    def locate_query(self, *, lat: float, lng: float, node_id: str | None):
        if self._sampled():
            self._emit("DEBUG", "locate", lat=lat, lng=lng, node_id=node_id)

    def path_query(
        self,
        *,
        start_id: str,
        goal_id: str,
        path: list[Node] | None,
        graph: Graph,
        ms: float,
    ):
        if path is None:
            self._emit("INFO", "path_absent", start_id=start_id, goal_id=goal_id, ms=ms)
        elif self._sampled():
            # cost only for records that are actually emitted
            self._emit(
                "DEBUG",
                "path_found",
                start_id=start_id,
                goal_id=goal_id,
                length=len(path),
                cost=path_cost(path, graph),
                ms=ms,
            )

    def boundary_query(self, *, n_in: int, n_out: int, ms: float):
        if self._sampled():
            self._emit("DEBUG", "boundary", n_in=n_in, n_out=n_out, ms=ms)
