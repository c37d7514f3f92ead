# runtime/registries.py
from collections.abc import Callable
from typing import Any

from mapnav.app.protocols import EntityFinder, MapDataStore
from mapnav.config.models import (
    FinderRadiusWideningModel,
    FinderUnion,
    MapModel,
    StoreMemoryModel,
    StoreUnion,
)
from mapnav.domain.map_sld import MapWithSLD
from mapnav.errors import ConfigurationError
from mapnav.finder.widening import RadiusWideningFinder
from mapnav.store.memory import InMemoryMapStore

StoreFactory = Callable[[StoreUnion, dict], MapDataStore]
FinderFactory = Callable[[FinderUnion, dict], EntityFinder]

_store_registry: dict[str, StoreFactory] = {}
_finder_registry: dict[str, FinderFactory] = {}


# ------------------- Maps ---------------------------


def make_map(cfg: MapModel) -> MapWithSLD:
    m = MapWithSLD(reference_location=cfg.reference)
    for link in cfg.links:
        if link.bidirectional:
            m.add_bidirectional_link(link.from_, link.to, link.distance)
        else:
            m.add_unidirectional_link(link.from_, link.to, link.distance)
    for loc, (x, y) in cfg.coords.items():
        m.set_coords(loc, x, y)
    for loc, (dist, bearing) in cfg.polar.items():
        m.set_dist_and_dir_to_ref_location(loc, dist, bearing)
    return m


# ------------------- Stores ---------------------------


def register_store(kind: str):
    def deco(fn: StoreFactory):
        _store_registry[kind] = fn
        return fn

    return deco


def make_store(cfg: StoreUnion, *, deps: dict | None = None) -> MapDataStore:
    try:
        factory = _store_registry[cfg.kind]
    except KeyError:
        raise ConfigurationError(f"Unknown store kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_store("memory")
def _make_memory(cfg: StoreMemoryModel, deps):
    return InMemoryMapStore(deps.get("entities", ()))


# ------------------- Finders ---------------------------


def register_finder(kind: str):
    def deco(fn: FinderFactory):
        _finder_registry[kind] = fn
        return fn

    return deco


def make_finder(cfg: FinderUnion, *, store: MapDataStore, deps: dict[str, Any] | None = None):
    try:
        factory = _finder_registry[cfg.kind]
    except KeyError:
        raise ConfigurationError(f"Unknown finder kind {cfg.kind!r}") from None
    return factory(cfg, {"store": store, **(deps or {})})


@register_finder("radius_widening")
def _make_radius_widening(cfg: FinderRadiusWideningModel, deps):
    finder = RadiusWideningFinder(
        deps["store"],
        growth=cfg.growth,
        batch_size=cfg.batch_size,
        hooks=deps.get("hooks"),
    )
    finder.set_max_radius(cfg.max_radius)
    finder.set_min_radius(cfg.min_radius)
    return finder
