# tests/io/test_finder_logging.py
import logging

from mapnav.domain.entities.geography import Position
from mapnav.domain.entities.map_entities import MapNode
from mapnav.finder.widening import RadiusWideningFinder
from mapnav.io.finder_logging import FinderLogging, _default_json_logger
from mapnav.store.memory import InMemoryMapStore


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)


def _logger(name: str) -> tuple[logging.Logger, _ListHandler]:
    log = logging.getLogger(name)
    log.setLevel(logging.DEBUG)
    h = _ListHandler()
    log.addHandler(h)
    log.propagate = False
    return log, h


def test_queries_are_logged_with_structured_extras():
    log, h = _logger("mapnav.test.info")
    store = InMemoryMapStore([MapNode(id=1, name="Well", pos=Position(0.0, 0.0))])
    f = RadiusWideningFinder(store, hooks=FinderLogging(name="t", logger=log))
    f.find_node("well", Position(0.0, 0.0))
    f.find_more()

    msgs = [r.getMessage() for r in h.records]
    assert msgs == ["query_start", "query_end", "query_start", "query_end"]
    end = h.records[1].extra
    assert end["app"] == "t" and end["mode"] == "node" and end["results"] == 1
    assert end["radius"] == 25.0 and end["query"] == 1
    assert h.records[2].extra["find_more"] is True
    assert h.records[3].extra["query"] == 1


def test_radius_passes_only_in_debug():
    log, h = _logger("mapnav.test.debug")
    f = RadiusWideningFinder(InMemoryMapStore(), hooks=FinderLogging(logger=log, debug=True))
    f.find_way("nothing", Position(10.0, 10.0))
    passes = [r.extra for r in h.records if r.getMessage() == "radius_pass"]
    assert [p["radius"] for p in passes] == [2.0, 4.0, 8.0, 16.0, 25.0]
    assert all(p["found"] == 0 for p in passes)


def test_json_formatter_output(capsys):
    log = _default_json_logger(name="mapnav.test.json", level="INFO")
    log.propagate = False
    FinderLogging(name="json", logger=log).query_end(
        mode="node", pattern="x", results=0, radius=2.0, ms=0.5
    )
    out = capsys.readouterr().out.strip()
    assert '"msg": "query_end"' in out and '"app": "json"' in out
