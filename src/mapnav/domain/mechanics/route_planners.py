import heapq
from collections.abc import Callable
from dataclasses import dataclass

from mapnav.app.protocols import RouteMap

Heuristic = Callable[[str], float]


@dataclass(frozen=True)
class Route:
    locations: list[str]
    cost: int


def sld_heuristic(route_map: RouteMap, goal: str) -> Heuristic:
    """
    Straight line distance to goal. Locations without placement score 0,
    which keeps the estimate admissible.
    """

    def h(loc: str) -> float:
        d = route_map.get_straight_line_distance(loc, goal)
        return 0.0 if d is None else d

    return h


class AStarRoutePlanner:
    def __init__(self, route_map: RouteMap, heuristic: Callable[[str], Heuristic] | None = None):
        self.map = route_map
        self._make_h = heuristic or (lambda goal: sld_heuristic(route_map, goal))

    def route(self, start: str, goal: str) -> Route | None:
        locs = set(self.map.get_locations())
        if start not in locs or goal not in locs:
            return None
        h = self._make_h(goal)

        # (f, g, tie, loc); tie keeps insertion order among equal f
        open_set: list[tuple[float, int, int, str]] = [(h(start), 0, 0, start)]
        came_from: dict[str, str | None] = {start: None}
        best_g = {start: 0}
        tie = 0
        while open_set:
            _, g, _, loc = heapq.heappop(open_set)
            if g > best_g[loc]:
                continue  # stale entry
            if loc == goal:
                return Route(self._unwind(came_from, goal), g)
            for nxt in self.map.get_locations_linked_to(loc):
                step = self.map.get_distance(loc, nxt)
                if step is None:
                    continue
                ng = g + step
                if ng < best_g.get(nxt, ng + 1):
                    best_g[nxt], came_from[nxt] = ng, loc
                    tie += 1
                    heapq.heappush(open_set, (ng + h(nxt), ng, tie, nxt))
        return None

    def distance(self, start: str, goal: str) -> int | None:
        r = self.route(start, goal)
        return None if r is None else r.cost

    @staticmethod
    def _unwind(came_from: dict[str, str | None], goal: str) -> list[str]:
        path = [goal]
        while (prev := came_from[path[-1]]) is not None:
            path.append(prev)
        path.reverse()
        return path
