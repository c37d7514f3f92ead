# main.py
import sys

from mapnav.domain.maps.romania import ARAD, BUCHAREST, build_romania_map
from mapnav.domain.mechanics.route_planners import AStarRoutePlanner


def run(start: str = ARAD, goal: str = BUCHAREST):
    m = build_romania_map()
    route = AStarRoutePlanner(m).route(start, goal)
    if route is None:
        print(f"no route from {start} to {goal}", file=sys.stderr)
        return 1
    print(" -> ".join(route.locations), f"({route.cost} km)")
    sld = m.get_straight_line_distance(start, goal)
    if sld is not None:
        print(f"straight line: {sld:.0f} km")
    return 0


if __name__ == "__main__":
    sys.exit(run(*sys.argv[1:3]))
