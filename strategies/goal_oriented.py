from routing import find_route
from strategies.base import Robot, follow


class GoalOrientedRobot(Robot):
    def decide(self, state, memory):
        route = memory
        if len(route) == 0:
            parcel = state.parcels[0]
            if parcel.place != state.place:
                route = find_route(self.graph, state.place, parcel.place)
            else:
                route = find_route(self.graph, state.place, parcel.address)
        return follow(route)
