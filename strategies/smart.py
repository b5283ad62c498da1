from typing import List, NamedTuple

from routing import find_route
from strategies.base import Robot, follow

PICK_UP = "Pick Up"
DELIVER = "Delivery"


class PlannedRoute(NamedTuple):
    path: List[str]
    steps: int
    action_type: str


def shortest(routes):
    # min() keeps the first of equal candidates
    return min(routes, key=lambda r: r.steps)


class SmartRobot(Robot):
    """
    Plans one errand at a time over all parcels.

    Pickups always win over deliveries: while any parcel is still lying
    somewhere else, the nearest pickup is chosen even if a delivery would be
    shorter. Only when every parcel is on board does it pick the nearest
    delivery.
    """

    def plan_routes(self, state) -> List[PlannedRoute]:
        routes = []
        for parcel in state.parcels:
            if parcel.place != state.place:
                path = find_route(self.graph, state.place, parcel.place)
                routes.append(PlannedRoute(path, len(path), PICK_UP))
            else:
                path = find_route(self.graph, state.place, parcel.address)
                routes.append(PlannedRoute(path, len(path), DELIVER))
        return routes

    def decide(self, state, memory):
        if len(memory) > 0:
            return follow(memory)

        routes = self.plan_routes(state)
        pickups = [r for r in routes if r.action_type == PICK_UP]
        if pickups:
            best = shortest(pickups)
        else:
            best = shortest(routes)
        return follow(best.path)
