# domain/entities/map_entities.py
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from mapnav.domain.entities.geography import Position

ADDR_STREET = "addr:street"
ADDR_HOUSENUMBER = "addr:housenumber"


class EntityKind(Enum):
    NODE = "node"
    WAY = "way"


@dataclass(eq=False, kw_only=True)
class MapEntity(ABC):
    id: int
    name: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)

    kind: ClassVar[EntityKind]

    @property
    def key(self) -> tuple[EntityKind, int]:
        # node and way ids live in separate namespaces
        return self.kind, self.id

    @property
    @abstractmethod
    def position(self) -> Position: ...

    def distance_km(self, pos: Position) -> float:
        return self.position.distance_km(pos)

    def address(self) -> tuple[str, str | None] | None:
        """Return (street, housenumber) if the entity carries an address."""
        street = self.attributes.get(ADDR_STREET)
        if street is None:
            return None
        return street, self.attributes.get(ADDR_HOUSENUMBER)


@dataclass(eq=False, kw_only=True)
class MapNode(MapEntity):
    kind: ClassVar[EntityKind] = EntityKind.NODE
    pos: Position

    @property
    def position(self) -> Position:
        return self.pos


@dataclass(eq=False, kw_only=True)
class MapWay(MapEntity):
    kind: ClassVar[EntityKind] = EntityKind.WAY
    nodes: tuple[MapNode, ...]

    def __post_init__(self):
        if not self.nodes:
            raise ValueError(f"way {self.id} has no nodes")
        self.nodes = tuple(self.nodes)
        lat = sum(n.pos.lat for n in self.nodes) / len(self.nodes)
        lon = sum(n.pos.lon for n in self.nodes) / len(self.nodes)
        centroid = Position(lat, lon)
        self._anchor = min(self.nodes, key=lambda n: n.pos.distance_km(centroid)).pos

    @property
    def position(self) -> Position:
        return self._anchor

    def distance_km(self, pos: Position) -> float:
        return min(n.pos.distance_km(pos) for n in self.nodes)


WayFilter = Callable[[MapWay], bool]
