# domain/map_sld.py
import math

import numpy as np

from mapnav.app.protocols import RouteMap
from mapnav.domain.entities.geography import Point
from mapnav.domain.graph import LabeledGraph
from mapnav.errors import EmptyMapError


class MapWithSLD(RouteMap):
    """
    Map with named locations, distance labeled one-way links, and optional
    2d placement of locations for straight line distances.

    A two-way road is stored as two independent links, so one direction can
    be overwritten (or removed) without touching the other.
    Locations and links may be added and removed at any time; mutation must
    not interleave with searches running on the same map.
    """

    def __init__(self, reference_location: str | None = None):
        # location -> location edges labeled with travel distances
        self._links: LabeledGraph[str, int] = LabeledGraph()
        self._coords: dict[str, Point] = {}
        self.reference_location: str | None = None
        if reference_location is not None:
            self.set_reference_location(reference_location)

    # ---------------- Locations & links -----------------

    def get_locations(self) -> list[str]:
        return self._links.get_vertex_labels()

    def is_location(self, name: str) -> bool:
        return self._links.is_vertex_label(name)

    def get_locations_linked_to(self, from_: str) -> list[str]:
        return self._links.get_successors(from_)

    def get_distance(self, from_: str, to: str) -> int | None:
        """Travel distance of the link from_ -> to, None if they are not linked."""
        return self._links.get(from_, to)

    def add_unidirectional_link(self, from_: str, to: str, distance: int) -> None:
        self._links.set(from_, to, distance)

    def add_bidirectional_link(self, from_: str, to: str, distance: int) -> None:
        self._links.set(from_, to, distance)
        self._links.set(to, from_, distance)

    def remove_unidirectional_link(self, from_: str, to: str) -> None:
        self._links.remove(from_, to)

    def remove_bidirectional_link(self, from_: str, to: str) -> None:
        self._links.remove(from_, to)
        self._links.remove(to, from_)

    def randomly_generate_destination(self, rng: np.random.Generator | None = None) -> str:
        locs = self.get_locations()
        if not locs:
            raise EmptyMapError()
        rng = rng if rng is not None else np.random.default_rng()
        return locs[int(rng.integers(0, len(locs)))]

    # ---------------- Placement -----------------

    def set_coords(self, loc: str, x: float, y: float) -> None:
        self._coords[loc] = Point(float(x), float(y))

    def set_reference_location(self, loc: str) -> None:
        """Declare loc as the origin used by set_dist_and_dir_to_ref_location."""
        self.reference_location = loc
        self.set_coords(loc, 0.0, 0.0)

    def set_dist_and_dir_to_ref_location(self, loc: str, dist: float, bearing: float) -> None:
        """
        Place loc at dist from the origin, seen from there under bearing
        (compass degrees, clockwise from north).
        """
        rad = bearing * math.pi / 180.0
        self._coords[loc] = Point(-math.sin(rad) * dist, math.cos(rad) * dist)

    def get_xy(self, loc: str) -> Point | None:
        return self._coords.get(loc)

    def get_straight_line_distance(self, a: str, b: str) -> float | None:
        """Euclidean distance of the two placements, None if one is unknown."""
        pa, pb = self._coords.get(a), self._coords.get(b)
        if pa is None or pb is None:
            return None
        return pa.distance(pb)

    # ---------------- Reset -----------------

    def clear(self) -> None:
        self._links.clear()
        self._coords.clear()
        self.reference_location = None

    def clear_links(self) -> None:
        """Drop all links but keep the placement of locations."""
        self._links.clear()
