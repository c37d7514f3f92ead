# store/memory.py
from collections.abc import Iterable

import numpy as np

from mapnav.app.protocols import MapDataStore
from mapnav.domain.entities.geography import EARTH_RADIUS_KM, Position
from mapnav.domain.entities.map_entities import EntityKind, MapEntity, MapNode, MapWay


def haversine_km(lat: np.ndarray, lon: np.ndarray, pos: Position) -> np.ndarray:
    """Great-circle distances from pos to each (lat, lon), degrees in, km out."""
    la1, lo1 = np.radians(lat), np.radians(lon)
    la2, lo2 = np.radians(pos.lat), np.radians(pos.lon)
    a = np.sin((la2 - la1) / 2) ** 2 + np.cos(la1) * np.cos(la2) * np.sin((lo2 - lo1) / 2) ** 2
    return 2 * EARTH_RADIUS_KM * np.arcsin(np.minimum(1.0, np.sqrt(a)))


class _Layer:
    """Entities of one kind with flattened point arrays (ways contribute all their nodes)."""

    def __init__(self):
        self.entities: list[MapEntity] = []
        self._lat: list[float] = []
        self._lon: list[float] = []
        self._owner: list[int] = []
        self._arrays: tuple[np.ndarray, np.ndarray, np.ndarray] | None = None

    def add(self, entity: MapEntity, points: Iterable[Position]) -> None:
        idx = len(self.entities)
        self.entities.append(entity)
        for p in points:
            self._lat.append(p.lat)
            self._lon.append(p.lon)
            self._owner.append(idx)
        self._arrays = None

    def distances(self, pos: Position) -> np.ndarray:
        """Distance of every entity to pos; for ways the nearest node counts."""
        if self._arrays is None:
            self._arrays = (
                np.asarray(self._lat, dtype=float),
                np.asarray(self._lon, dtype=float),
                np.asarray(self._owner, dtype=np.intp),
            )
        lat, lon, owner = self._arrays
        out = np.full(len(self.entities), np.inf)
        if owner.size:
            np.minimum.at(out, owner, haversine_km(lat, lon, pos))
        return out


class InMemoryMapStore(MapDataStore):
    """
    Linear-scan spatial store. Distances are computed for all entities of the
    requested kind on every query, vectorized with numpy.
    Safe for concurrent readers once loading is complete.
    """

    def __init__(self, entities: Iterable[MapEntity] = ()):
        self._layers = {kind: _Layer() for kind in EntityKind}
        self._keys: set[tuple[EntityKind, int]] = set()
        for e in entities:
            self.add(e)

    def add(self, entity: MapEntity) -> None:
        if entity.key in self._keys:
            raise ValueError(f"duplicate {entity.kind.value} id {entity.id}")
        self._keys.add(entity.key)
        points = entity.nodes if isinstance(entity, MapWay) else (entity,)
        self._layers[entity.kind].add(entity, (n.position for n in points))

    def add_node(self, node: MapNode) -> None:
        self.add(node)

    def add_way(self, way: MapWay) -> None:
        self.add(way)

    @property
    def nodes(self) -> list[MapEntity]:
        return list(self._layers[EntityKind.NODE].entities)

    @property
    def ways(self) -> list[MapEntity]:
        return list(self._layers[EntityKind.WAY].entities)

    def __len__(self) -> int:
        return len(self._keys)

    def entities_within(
        self,
        kind: EntityKind,
        position: Position,
        radius_km: float,
        *,
        inner_radius_km: float = 0.0,
    ) -> list[tuple[float, MapEntity]]:
        layer = self._layers[kind]
        d = layer.distances(position)
        if inner_radius_km > 0.0:
            mask = (d > inner_radius_km) & (d <= radius_km)
        else:
            mask = d <= radius_km
        idx = np.flatnonzero(mask)
        idx = idx[np.argsort(d[idx], kind="stable")]
        return [(float(d[i]), layer.entities[i]) for i in idx]
