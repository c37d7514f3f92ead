# tests/store/test_memory_store.py
import math

import pytest

from mapnav.app.protocols import MapDataStore
from mapnav.domain.entities.geography import Position
from mapnav.domain.entities.map_entities import EntityKind, MapEntity, MapNode, MapWay
from mapnav.store.memory import InMemoryMapStore

KM_PER_DEG = 6371.0 * math.pi / 180.0
ORIGIN = Position(0.0, 0.0)


def north(km: float) -> Position:
    return Position(km / KM_PER_DEG, 0.0)


def node(i: int, km: float, name: str | None = None, **attrs) -> MapNode:
    return MapNode(id=i, name=name, pos=north(km), attributes=attrs)


@pytest.fixture
def store() -> InMemoryMapStore:
    s = InMemoryMapStore([node(1, 1.0, "a"), node(2, 5.0, "b"), node(3, 0.0, "c")])
    s.add_way(MapWay(id=1, name="w", nodes=(node(10, 12.0), node(11, 4.0))))
    return s


def test_position_distance_km():
    assert ORIGIN.distance_km(north(30.0)) == pytest.approx(30.0)
    assert Position(0.0, 1.0).distance_km(ORIGIN) == pytest.approx(KM_PER_DEG)


def test_nodes_within_radius_sorted(store: InMemoryMapStore):
    hits = store.entities_within(EntityKind.NODE, ORIGIN, 5.5)
    assert [e.id for _, e in hits] == [3, 1, 2]
    assert [d for d, _ in hits] == pytest.approx([0.0, 1.0, 5.0])
    assert isinstance(store, MapDataStore)


def test_ring_excludes_inner_disk(store: InMemoryMapStore):
    hits = store.entities_within(EntityKind.NODE, ORIGIN, 5.5, inner_radius_km=1.5)
    assert [e.id for _, e in hits] == [2]


def test_way_distance_is_nearest_node(store: InMemoryMapStore):
    assert store.entities_within(EntityKind.WAY, ORIGIN, 3.9) == []
    (d, way), = store.entities_within(EntityKind.WAY, ORIGIN, 4.5)
    assert way.id == 1 and d == pytest.approx(4.0)
    assert way.distance_km(ORIGIN) == pytest.approx(4.0)


def test_kinds_and_ids_are_separate(store: InMemoryMapStore):
    assert len(store) == 4
    assert [n.id for n in store.nodes] == [1, 2, 3]
    assert [w.id for w in store.ways] == [1]
    with pytest.raises(ValueError):
        store.add(node(1, 2.0))


def test_empty_store():
    assert InMemoryMapStore().entities_within(EntityKind.WAY, ORIGIN, 100.0) == []


def test_way_without_nodes_is_rejected():
    with pytest.raises(ValueError):
        MapWay(id=5, name="empty", nodes=())


def test_entity_address():
    n = node(7, 1.0, "Bakery", **{"addr:street": "High Street", "addr:housenumber": "3"})
    assert n.address() == ("High Street", "3")
    assert node(8, 1.0, "x").address() is None


def test_map_entity_is_abstract():
    with pytest.raises(TypeError):
        MapEntity(id=1)
    assert node(1, 1.0).position == north(1.0)
