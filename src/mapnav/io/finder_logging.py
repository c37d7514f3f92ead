# io/finder_logging.py
import json
import logging
import sys

from mapnav.finder.hooks import NoopHooks


def _default_json_logger(name="mapnav", level="INFO"):
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
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class FinderLogging(NoopHooks):
    """
    Structured logs for entity finder queries.
    query_start/query_end go out at INFO, radius passes only in debug mode.
    """

    def __init__(
        self,
        name: str = "mapnav",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.name, self.debug = name, debug
        self.log = logger or _default_json_logger(level=level)
        self.queries = 0

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"app": self.name, **extra}})

    def query_start(self, *, mode, pattern, position, find_more):
        if not find_more:
            self.queries += 1
        pos = None if position is None else [position.lat, position.lon]
        self._emit(
            "INFO",
            "query_start",
            query=self.queries,
            mode=mode,
            pattern=pattern,
            position=pos,
            find_more=find_more,
        )

    def radius_pass(self, *, mode, radius, inner_radius, found, total):
        if self.debug:
            self._emit(
                "DEBUG",
                "radius_pass",
                query=self.queries,
                mode=mode,
                radius=radius,
                inner_radius=inner_radius,
                found=found,
                total=total,
            )

    def query_end(self, *, mode, pattern, results, radius, ms):
        self._emit(
            "INFO",
            "query_end",
            query=self.queries,
            mode=mode,
            pattern=pattern,
            results=results,
            radius=radius,
            ms=round(ms, 3),
        )
