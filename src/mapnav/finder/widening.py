# finder/widening.py
from collections.abc import Callable
from fnmatch import fnmatchcase

from mapnav.app.protocols import MapDataStore
from mapnav.domain.entities.geography import Position
from mapnav.domain.entities.map_entities import EntityKind, MapEntity, MapWay
from mapnav.errors import ConfigurationError
from mapnav.finder.base import AbstractEntityFinder, Mode
from mapnav.finder.hooks import FinderHooks

TextMatcher = Callable[[str | None], bool]

_KINDS: dict[Mode, tuple[EntityKind, ...]] = {
    Mode.ENTITY: (EntityKind.NODE, EntityKind.WAY),
    Mode.NODE: (EntityKind.NODE,),
    Mode.WAY: (EntityKind.WAY,),
    Mode.ADDRESS: (EntityKind.NODE, EntityKind.WAY),
}


def text_matcher(pattern: str) -> TextMatcher:
    """
    Case-insensitive name matcher. Patterns with * or ? are globs over the
    whole name, anything else matches as a substring.
    """
    p = pattern.strip().casefold()
    if any(c in p for c in "*?"):
        return lambda text: text is not None and fnmatchcase(text.casefold(), p)
    return lambda text: text is not None and p in text.casefold()


def parse_address(pattern: str) -> tuple[str, str | None]:
    """'Main Street, 12' -> ('Main Street', '12'); 'Main Street' -> ('Main Street', None)"""
    street, sep, number = pattern.rpartition(",")
    if not sep:
        return pattern.strip(), None
    return street.strip(), number.strip() or None


def _street_of(entity: MapEntity) -> str | None:
    if isinstance(entity, MapWay):
        return entity.name
    addr = entity.address()
    return addr[0] if addr else entity.name


class RadiusWideningFinder(AbstractEntityFinder):
    """
    Reference finder working on any MapDataStore.

    Radius policy: a fresh query searches rings min_radius, min_radius*growth,
    ... clamped to max_radius and stops early once batch_size results were
    gathered. find_more() resumes with the next ring and keeps widening up to
    max_radius; once max_radius was searched, each call goes one growth step
    further. Only the new ring is fetched from the store on each pass.
    A selected intermediate result becomes the center of the following passes;
    in address mode it also pins the street.
    """

    def __init__(
        self,
        storage: MapDataStore,
        *,
        growth: float = 2.0,
        batch_size: int = 10,
        hooks: FinderHooks | None = None,
    ):
        super().__init__(storage, hooks=hooks)
        if growth <= 1.0:
            raise ConfigurationError(f"growth must be > 1, got {growth!r}")
        if batch_size < 1:
            raise ConfigurationError(f"batch_size must be >= 1, got {batch_size!r}")
        self.growth, self.batch_size = growth, batch_size
        self._center: Position | None = None
        self._selected: MapEntity | None = None
        self._seen: set[tuple[EntityKind, int]] = set()
        self._match: TextMatcher = text_matcher("")
        self._number: str | None = None

    def select_intermediate_result(self, entity: MapEntity) -> None:
        super().select_intermediate_result(entity)
        self._selected = entity

    # ---------------- Widening loop -----------------

    def find(self, find_more: bool) -> None:
        s = self.state
        if not find_more:
            self._prepare()
        center = self._selected.position if self._selected is not None else s.position

        if find_more and s.radius is not None and center == self._center:
            inner = s.radius
            if s.radius < s.max_radius:
                radius, cap = min(s.radius * self.growth, s.max_radius), s.max_radius
            else:
                radius = cap = s.radius * self.growth
        else:
            inner, radius, cap = 0.0, min(s.min_radius, s.max_radius), s.max_radius
        self._center = center

        gathered = 0
        while True:
            found = self._search_ring(center, inner, radius)
            gathered += found
            s.radius = radius
            self._hooks.radius_pass(
                mode=s.mode.value,
                radius=radius,
                inner_radius=inner,
                found=found,
                total=len(s.results),
            )
            if gathered >= self.batch_size or radius >= cap:
                break
            inner, radius = radius, min(radius * self.growth, cap)

    def _prepare(self) -> None:
        s = self.state
        self._selected = None
        self._center = None
        self._seen.clear()
        if s.mode is Mode.ADDRESS:
            street, self._number = parse_address(s.pattern)
            self._match = text_matcher(street)
        else:
            self._number = None
            self._match = text_matcher(s.pattern)

    def _search_ring(self, center: Position, inner: float, radius: float) -> int:
        s = self.state
        hits: list[tuple[float, MapEntity]] = []
        for kind in _KINDS[s.mode]:
            hits.extend(
                self.storage.entities_within(kind, center, radius, inner_radius_km=inner)
            )
        hits.sort(key=lambda h: h[0])

        found = 0
        for _, e in hits:
            if s.mode is Mode.ADDRESS:
                self._collect_street(e)
            if e.key in self._seen or not self._accept(e):
                continue
            self._seen.add(e.key)
            s.results.append(e)
            found += 1
        return found

    # ---------------- Matching -----------------

    def _accept(self, e: MapEntity) -> bool:
        mode = self.state.mode
        if mode is Mode.ADDRESS:
            return self._accept_address(e)
        if not self._match(e.name):
            return False
        if mode is Mode.WAY and self.state.way_filter is not None:
            return self.state.way_filter(e)
        return True

    def _accept_address(self, e: MapEntity) -> bool:
        addr = e.address()
        if addr is None:
            return False
        street, number = addr
        if self._selected is not None:
            pinned = _street_of(self._selected)
            if pinned is None or street.casefold() != pinned.casefold():
                return False
        elif not self._match(street):
            return False
        if self._number is None:
            return True
        return number is not None and number.casefold() == self._number.casefold()

    def _collect_street(self, e: MapEntity) -> None:
        # candidate streets, until the caller picks one
        if self._selected is not None or not isinstance(e, MapWay):
            return
        inter = self.state.intermediate_results
        if self._match(e.name) and all(x.key != e.key for x in inter):
            inter.append(e)
