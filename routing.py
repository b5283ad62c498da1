from typing import List

from map_graph import RouteNotFound


def find_route(graph, from_place, to_place) -> List[str]:
    """
    Breadth-first search for the shortest route (by number of roads).

    :param graph: RoadGraph (or any mapping place -> neighbors)
    :param from_place: Start location
    :param to_place: Goal location
    :return: Places to visit in order, excluding ``from_place`` and ending at
             ``to_place``. Empty when already at the goal.
    :raises RouteNotFound: if ``to_place`` cannot be reached
    """
    if from_place == to_place:
        return []

    work = [(from_place, [])]
    seen = {from_place}
    # work grows while we walk it, so index rather than iterate
    i = 0
    while i < len(work):
        at, route = work[i]
        i += 1
        for place in graph.get(at, ()):
            if place == to_place:
                return route + [place]
            if place not in seen:
                seen.add(place)
                work.append((place, route + [place]))

    raise RouteNotFound(from_place, to_place)
