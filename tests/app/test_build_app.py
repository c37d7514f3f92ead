# tests/app/test_build_app.py
import pytest

from mapnav.app.build import build
from mapnav.config.models import FinderRadiusWideningModel, StoreMemoryModel
from mapnav.domain.entities.geography import Position
from mapnav.domain.entities.map_entities import MapNode
from mapnav.domain.mechanics.route_planners import Route
from mapnav.errors import ConfigurationError
from mapnav.finder.widening import RadiusWideningFinder
from mapnav.runtime.registries import make_finder, make_store


def _cfg():
    return {
        "name": "test",
        "seed": 1,
        "map": {
            "reference": "A",
            "links": [
                {"from": "A", "to": "B", "distance": 5},
                {"from": "B", "to": "C", "distance": 4, "bidirectional": False},
            ],
            "coords": {"C": (0.0, 8.0)},
            "polar": {"B": (4.0, 0.0)},
        },
        "finder": {"kind": "radius_widening", "min_radius": 1.0, "max_radius": 10.0},
    }


def test_build_wires_map_planner_and_finder():
    entities = [MapNode(id=1, name="Fountain", pos=Position(0.001, 0.0))]
    app = build(_cfg(), entities=entities, use_logging=False)

    assert app.map.get_distance("A", "B") == app.map.get_distance("B", "A") == 5
    assert app.map.get_distance("C", "B") is None
    assert app.map.get_straight_line_distance("A", "B") == pytest.approx(4.0)
    assert app.planner.route("A", "C") == Route(["A", "B", "C"], 9)

    assert isinstance(app.finder, RadiusWideningFinder)
    assert (app.finder.get_min_radius(), app.finder.get_max_radius()) == (1.0, 10.0)
    app.finder.find_node("fountain", Position(0.0, 0.0))
    assert [e.id for e in app.finder.get_results()] == [1]


def test_random_destination_is_seeded():
    a = build(_cfg(), use_logging=False)
    b = build(_cfg(), use_logging=False)
    assert [a.random_destination() for _ in range(5)] == [b.random_destination() for _ in range(5)]


def test_registries_reject_unknown_kinds():
    store = make_store(StoreMemoryModel())
    with pytest.raises(ConfigurationError):
        make_finder(FinderRadiusWideningModel.model_construct(kind="quadtree"), store=store)
    with pytest.raises(ConfigurationError):
        make_store(StoreMemoryModel.model_construct(kind="rtree"))
