from collections.abc import Mapping
from typing import Dict, List, Tuple

import networkx as nx

ROADS = [
    "Alice's House-Bob's House",   "Alice's House-Cabin",
    "Alice's House-Post Office",   "Bob's House-Town Hall",
    "Daria's House-Ernie's House", "Daria's House-Town Hall",
    "Ernie's House-Grete's House", "Grete's House-Farm",
    "Grete's House-Shop",          "Marketplace-Farm",
    "Marketplace-Post Office",     "Marketplace-Shop",
    "Marketplace-Town Hall",       "Shop-Town Hall",
]


class InvalidEdgeFormat(ValueError):
    def __init__(self, edge):
        super().__init__(f"Invalid road descriptor {edge!r}: expected 'From-To'")
        self.edge = edge


class RouteNotFound(LookupError):
    def __init__(self, from_place, to_place):
        super().__init__(f"No route from {from_place!r} to {to_place!r}")
        self.from_place = from_place
        self.to_place = to_place


def parse_edge(edge: str) -> Tuple[str, str]:
    if not isinstance(edge, str):
        raise InvalidEdgeFormat(edge)
    parts = edge.split("-")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise InvalidEdgeFormat(edge)
    return parts[0], parts[1]


def build_graph(edges) -> Dict[str, List[str]]:
    """
    Build an undirected adjacency mapping from "A-B" road descriptors.

    :param edges: Iterable of road descriptors.
    :return: dict place -> list of neighbors, in road order. Repeated roads
             give repeated neighbor entries.
    """
    graph: Dict[str, List[str]] = {}

    def add_edge(from_place, to_place):
        graph.setdefault(from_place, []).append(to_place)

    for from_place, to_place in map(parse_edge, edges):
        add_edge(from_place, to_place)
        add_edge(to_place, from_place)
    return graph


class RoadGraph(Mapping):
    """Read-only road graph shared by states, route finder and robots."""

    def __init__(self, edges):
        self.edges = tuple(edges)
        self._adjacency = {
            place: tuple(neighbors)
            for place, neighbors in build_graph(self.edges).items()
        }
        self.G = nx.MultiGraph()
        self.build_nx_graph()

    def build_nx_graph(self):
        self.G.add_nodes_from(self._adjacency)
        self.G.add_edges_from(parse_edge(edge) for edge in self.edges)

    def __getitem__(self, place):
        return self._adjacency[place]

    def __iter__(self):
        return iter(self._adjacency)

    def __len__(self):
        return len(self._adjacency)

    def __repr__(self):
        return f"RoadGraph(places={len(self)}, roads={self.G.number_of_edges()})"

    @property
    def places(self) -> List[str]:
        return list(self._adjacency)

    def neighbors(self, place) -> Tuple[str, ...]:
        return self._adjacency.get(place, ())

    def has_road(self, from_place, to_place) -> bool:
        return to_place in self.neighbors(from_place)

    def is_connected(self) -> bool:
        if self.G.number_of_nodes() == 0:
            return False
        return nx.is_connected(self.G)

    def distance(self, from_place, to_place) -> int:
        try:
            return nx.shortest_path_length(self.G, source=from_place, target=to_place)
        except (nx.NetworkXNoPath, nx.NodeNotFound):
            raise RouteNotFound(from_place, to_place)


def village_graph() -> RoadGraph:
    return RoadGraph(ROADS)
