from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from mapnav.domain.entities.geography import Point, Position
from mapnav.domain.entities.map_entities import EntityKind, MapEntity, WayFilter

__all__ = [
    "EntityFinder",
    "MapDataStore",
    "Point",
    "Position",
    "RouteMap",
]


# ------------- Maps --------------------
@runtime_checkable
class RouteMap(Protocol):
    """
    Responsibilities:
      • Enumerate locations and the locations reachable over one link.
      • Report travel distances of links (None if there is no link).
    Consumed by graph search algorithms during node expansion.
    """

    def get_locations(self) -> list[str]: ...
    def get_locations_linked_to(self, from_: str) -> list[str]: ...
    def get_distance(self, from_: str, to: str) -> int | None: ...
    def get_straight_line_distance(self, a: str, b: str) -> float | None: ...
    def get_xy(self, loc: str) -> Point | None: ...


# ------------- Spatial data --------------------
@runtime_checkable
class MapDataStore(Protocol):
    """
    Spatial access to map entities.
    Units: kilometers for radii and returned distances.
    """

    def entities_within(
        self,
        kind: EntityKind,
        position: Position,
        radius_km: float,
        *,
        inner_radius_km: float = 0.0,
    ) -> list[tuple[float, MapEntity]]:
        """Return (distance, entity) pairs with inner < distance <= radius, nearest first."""


# ------------- Entity search --------------------
@runtime_checkable
class EntityFinder(Protocol):
    """
    Incremental search for entities matching a text pattern near a position.
    Each find_* call starts a fresh query; find_more() continues it.
    """

    def find_entity(self, pattern: str, position: Position) -> None: ...
    def find_node(self, pattern: str, position: Position) -> None: ...
    def find_way(
        self, pattern: str, position: Position, way_filter: WayFilter | None = None
    ) -> None: ...
    def find_address(self, pattern: str, position: Position) -> None: ...
    def find_more(self) -> None: ...

    def get_results(self) -> Sequence[MapEntity]: ...
    def get_intermediate_results(self) -> Sequence[MapEntity]: ...
    def select_intermediate_result(self, entity: MapEntity) -> None: ...

    def get_min_radius(self) -> float: ...
    def set_min_radius(self, km: float) -> None: ...
    def get_max_radius(self) -> float: ...
    def set_max_radius(self, km: float) -> None: ...
