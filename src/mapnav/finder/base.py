# finder/base.py
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from mapnav.app.protocols import EntityFinder, MapDataStore
from mapnav.domain.entities.geography import Position
from mapnav.domain.entities.map_entities import MapEntity, WayFilter
from mapnav.errors import ConfigurationError, FinderStateError
from mapnav.finder.hooks import FinderHooks, NoopHooks

DEFAULT_MIN_RADIUS_KM = 2.0
DEFAULT_MAX_RADIUS_KM = 25.0


class Mode(Enum):
    ENTITY = "entity"
    NODE = "node"
    WAY = "way"
    ADDRESS = "address"


@dataclass
class QueryState:
    """Parameters and results of the current query. Owned by one finder."""

    mode: Mode | None = None
    pattern: str = ""
    position: Position | None = None
    way_filter: WayFilter | None = None
    min_radius: float = DEFAULT_MIN_RADIUS_KM
    max_radius: float = DEFAULT_MAX_RADIUS_KM
    radius: float | None = None  # outermost radius searched so far
    intermediate_results: list[MapEntity] = field(default_factory=list)
    results: list[MapEntity] = field(default_factory=list)

    def reset(self, mode: Mode, pattern: str, position: Position, way_filter=None) -> None:
        self.mode, self.pattern, self.position, self.way_filter = (
            mode,
            pattern,
            position,
            way_filter,
        )
        self.radius = None
        self.intermediate_results.clear()
        self.results.clear()


class AbstractEntityFinder(EntityFinder, ABC):
    """
    Base class for entity finders. Keeps the query state and dispatches the
    find_* entry points; subclasses implement find(find_more) against the
    backing store.

    A finder is single-writer and not reentrant: queries on one instance must
    be serialized by the caller. Result lists are live and are cleared by the
    next find_* call; copy them to keep them.
    """

    def __init__(self, storage: MapDataStore, *, hooks: FinderHooks | None = None):
        self._storage = storage
        self._hooks = hooks or NoopHooks()
        self.state = QueryState()

    # ---------------- Configuration -----------------

    def get_min_radius(self) -> float:
        return self.state.min_radius

    def set_min_radius(self, km: float) -> None:
        self.state.min_radius = self._positive("min_radius", km)

    def get_max_radius(self) -> float:
        return self.state.max_radius

    def set_max_radius(self, km: float) -> None:
        self.state.max_radius = self._positive("max_radius", km)

    @staticmethod
    def _positive(name: str, km: float) -> float:
        if not km > 0:
            raise ConfigurationError(f"{name} must be > 0, got {km!r}")
        return float(km)

    def _check_radii(self) -> None:
        s = self.state
        if s.min_radius > s.max_radius:
            raise ConfigurationError(
                f"min_radius {s.min_radius} exceeds max_radius {s.max_radius}"
            )

    # ---------------- Queries -----------------

    def find_entity(self, pattern: str, position: Position) -> None:
        self._start(Mode.ENTITY, pattern, position)

    def find_node(self, pattern: str, position: Position) -> None:
        self._start(Mode.NODE, pattern, position)

    def find_way(
        self, pattern: str, position: Position, way_filter: WayFilter | None = None
    ) -> None:
        self._start(Mode.WAY, pattern, position, way_filter)

    def find_address(self, pattern: str, position: Position) -> None:
        self._start(Mode.ADDRESS, pattern, position)

    def find_more(self) -> None:
        if self.state.mode is None:
            raise FinderStateError("find_more() called before any find_* query")
        self._run(find_more=True)

    def _start(self, mode: Mode, pattern: str, position: Position, way_filter=None) -> None:
        self._check_radii()
        self.state.reset(mode, pattern, position, way_filter)
        self._run(find_more=False)

    def _run(self, *, find_more: bool) -> None:
        s = self.state
        t0 = time.perf_counter()
        self._hooks.query_start(
            mode=s.mode.value, pattern=s.pattern, position=s.position, find_more=find_more
        )
        self.find(find_more)
        self._hooks.query_end(
            mode=s.mode.value,
            pattern=s.pattern,
            results=len(s.results),
            radius=s.radius,
            ms=(time.perf_counter() - t0) * 1000,
        )

    @abstractmethod
    def find(self, find_more: bool) -> None:
        """
        Search the store for the current query and append to the results.

        find_more=False starts at min_radius and widens up to max_radius.
        find_more=True resumes beyond state.radius and may pass max_radius.
        """

    # ---------------- Results -----------------

    def get_ref_position(self) -> Position | None:
        return self.state.position

    def get_results(self) -> list[MapEntity]:
        return self.state.results

    def get_intermediate_results(self) -> list[MapEntity]:
        return self.state.intermediate_results

    def select_intermediate_result(self, entity: MapEntity) -> None:
        self.state.intermediate_results[:] = [entity]

    @property
    def storage(self) -> MapDataStore:
        return self._storage

    @property
    def hooks(self) -> FinderHooks:
        return self._hooks
