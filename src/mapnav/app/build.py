# mapnav/app/build.py
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from mapnav.app.protocols import MapDataStore
from mapnav.config.models import AppModel
from mapnav.domain.entities.map_entities import MapEntity
from mapnav.domain.map_sld import MapWithSLD
from mapnav.domain.mechanics.route_planners import AStarRoutePlanner
from mapnav.finder.base import AbstractEntityFinder
from mapnav.finder.hooks import NoopHooks
from mapnav.io.finder_logging import FinderLogging
from mapnav.runtime.registries import make_finder, make_map, make_store
from mapnav.runtime.rng import RNGRegistry


@dataclass
class App:
    map: MapWithSLD
    planner: AStarRoutePlanner
    store: MapDataStore
    finder: AbstractEntityFinder
    rng: RNGRegistry

    def random_destination(self) -> str:
        return self.map.randomly_generate_destination(self.rng.stream("destinations"))


def build(
    cfg: AppModel | Mapping,
    *,
    entities: Iterable[MapEntity] = (),
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, AppModel) else AppModel.model_validate(cfg)

    # 1) RNG
    rng_registry = RNGRegistry(model.seed, scenario=model.name)

    # 2) Route map & planner
    route_map = make_map(model.map)
    planner = AStarRoutePlanner(route_map)

    # 3) Spatial data & finder (with hooks)
    hooks = (
        FinderLogging(name=model.name, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )
    store = make_store(model.store, deps={"entities": entities})
    finder = make_finder(model.finder, store=store, deps={"hooks": hooks})

    return App(route_map, planner, store, finder, rng_registry)
