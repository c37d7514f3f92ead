# domain/maps/romania.py
from mapnav.domain.map_sld import MapWithSLD

ARAD = "Arad"
BUCHAREST = "Bucharest"
CRAIOVA = "Craiova"
DOBRETA = "Dobreta"
EFORIE = "Eforie"
FAGARAS = "Fagaras"
GIURGIU = "Giurgiu"
HIRSOVA = "Hirsova"
IASI = "Iasi"
LUGOJ = "Lugoj"
MEHADIA = "Mehadia"
NEAMT = "Neamt"
ORADEA = "Oradea"
PITESTI = "Pitesti"
RIMNICU_VILCEA = "Rimnicu Vilcea"
SIBIU = "Sibiu"
TIMISOARA = "Timisoara"
URZICENI = "Urziceni"
VASLUI = "Vaslui"
ZERIND = "Zerind"

# two-way roads (km)
ROADS: list[tuple[str, str, int]] = [
    (ORADEA, ZERIND, 71),
    (ORADEA, SIBIU, 151),
    (ZERIND, ARAD, 75),
    (ARAD, SIBIU, 140),
    (ARAD, TIMISOARA, 118),
    (TIMISOARA, LUGOJ, 111),
    (LUGOJ, MEHADIA, 70),
    (MEHADIA, DOBRETA, 75),
    (DOBRETA, CRAIOVA, 120),
    (SIBIU, FAGARAS, 99),
    (SIBIU, RIMNICU_VILCEA, 80),
    (RIMNICU_VILCEA, PITESTI, 97),
    (RIMNICU_VILCEA, CRAIOVA, 146),
    (CRAIOVA, PITESTI, 138),
    (FAGARAS, BUCHAREST, 211),
    (PITESTI, BUCHAREST, 101),
    (GIURGIU, BUCHAREST, 90),
    (BUCHAREST, URZICENI, 85),
    (NEAMT, IASI, 87),
    (URZICENI, VASLUI, 142),
    (URZICENI, HIRSOVA, 98),
    (IASI, VASLUI, 92),
    (HIRSOVA, EFORIE, 86),
]

# (straight line distance to Bucharest, bearing seen from Bucharest)
PLACEMENT: dict[str, tuple[float, float]] = {
    ARAD: (366, 117),
    CRAIOVA: (160, 74),
    DOBRETA: (242, 82),
    EFORIE: (161, 282),
    FAGARAS: (176, 142),
    GIURGIU: (77, 25),
    HIRSOVA: (151, 260),
    IASI: (226, 202),
    LUGOJ: (244, 102),
    MEHADIA: (241, 92),
    NEAMT: (234, 181),
    ORADEA: (380, 131),
    PITESTI: (100, 116),
    RIMNICU_VILCEA: (193, 115),
    SIBIU: (253, 123),
    TIMISOARA: (329, 105),
    URZICENI: (80, 247),
    VASLUI: (199, 222),
    ZERIND: (374, 125),
}


def build_romania_map() -> MapWithSLD:
    """Simplified road map of part of Romania, placed around Bucharest."""
    m = MapWithSLD(reference_location=BUCHAREST)
    for a, b, km in ROADS:
        m.add_bidirectional_link(a, b, km)
    for loc, (dist, bearing) in PLACEMENT.items():
        m.set_dist_and_dir_to_ref_location(loc, dist, bearing)
    return m
