import random
from typing import NamedTuple, Optional, Tuple

from utils import random_pick

START_PLACE = "Post Office"


class Parcel(NamedTuple):
    place: str
    address: str


class VillageState:
    """
    Robot position plus the parcels still waiting for delivery.

    States never change after construction; ``move`` returns a new state.
    """

    __slots__ = ("graph", "place", "parcels")

    def __init__(self, graph, place, parcels=()):
        """
        :param graph: RoadGraph the robot drives on
        :param place: Current robot location
        :param parcels: Iterable of Parcel (or (place, address) pairs)
        """
        object.__setattr__(self, "graph", graph)
        object.__setattr__(self, "place", place)
        parcels = (Parcel(*p) for p in parcels)
        # delivered parcels are never part of a state
        object.__setattr__(self, "parcels", tuple(p for p in parcels if p.place != p.address))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (VillageState, (self.graph, self.place, self.parcels))

    def __eq__(self, other):
        if not isinstance(other, VillageState):
            return NotImplemented
        return self.place == other.place and self.parcels == other.parcels

    def __hash__(self):
        return hash((self.place, self.parcels))

    def __repr__(self):
        return f"VillageState(place={self.place!r}, parcels={list(self.parcels)})"

    def move(self, destination):
        if not self.graph.has_road(self.place, destination):
            return self
        parcels = (
            p if p.place != self.place else Parcel(destination, p.address)
            for p in self.parcels
        )
        return VillageState(self.graph, destination, parcels)

    @classmethod
    def random(cls, graph, parcel_count=5, rng: Optional[random.Random] = None, start=START_PLACE):
        """
        Random task: every parcel gets a random address and a random pickup
        place different from that address.
        """
        rng = rng or random.Random()
        places = graph.places
        if parcel_count > 0 and len(places) < 2:
            raise ValueError("Random parcels need at least two places on the map")
        parcels = []
        for _ in range(parcel_count):
            address = random_pick(places, rng)
            place = random_pick(places, rng)
            while place == address:
                place = random_pick(places, rng)
            parcels.append(Parcel(place, address))
        return cls(graph, start, parcels)


def carried(state) -> Tuple[Parcel, ...]:
    return tuple(p for p in state.parcels if p.place == state.place)
