import random

import pytest

from map_graph import RoadGraph, village_graph
from strategies import (MAIL_ROUTE, STRATEGIES, Action, DeadEnd, GoalOrientedRobot, RandomRobot,
                        RouteRobot, SmartRobot, make_robot)
from village_state import Parcel, VillageState


def test_random_robot_picks_a_neighbor():
    graph = village_graph()
    robot = RandomRobot(graph, rng=random.Random(3))
    state = VillageState(graph, "Post Office", [Parcel("Cabin", "Farm")])
    for _ in range(20):
        action = robot(state, None)
        assert action.direction in graph["Post Office"]
        assert action.memory is None


def test_route_robot_follows_and_restarts_mail_route():
    robot = RouteRobot(village_graph())
    state = VillageState(robot.graph, "Post Office", [Parcel("Cabin", "Farm")])

    action = robot(state, ())
    assert action == Action(MAIL_ROUTE[0], MAIL_ROUTE[1:])

    action = robot(state, ("Farm", "Marketplace"))
    assert action == Action("Farm", ("Marketplace",))

    action = robot(state, ("Post Office",))
    assert action.memory == ()
    assert robot(state, action.memory).direction == MAIL_ROUTE[0]


def test_mail_route_is_a_closed_loop():
    graph = village_graph()
    place = "Post Office"
    for step in MAIL_ROUTE:
        assert graph.has_road(place, step), f"No road from {place} to {step}"
        place = step
    assert place == "Post Office"


def test_goal_oriented_goes_to_pickup_first():
    graph = village_graph()
    robot = GoalOrientedRobot(graph)
    state = VillageState(graph, "Post Office", [Parcel("Cabin", "Farm"), Parcel("Shop", "Farm")])
    action = robot(state, [])
    assert action == Action("Alice's House", ("Cabin",))


def test_goal_oriented_delivers_carried_parcel():
    graph = village_graph()
    robot = GoalOrientedRobot(graph)
    state = VillageState(graph, "Cabin", [Parcel("Cabin", "Bob's House")])
    action = robot(state, ())
    assert action == Action("Alice's House", ("Bob's House",))


def test_goal_oriented_keeps_following_memory():
    robot = GoalOrientedRobot(village_graph())
    state = VillageState(robot.graph, "Cabin", [Parcel("Cabin", "Bob's House")])
    assert robot(state, ("Farm",)) == Action("Farm", ())


def test_smart_robot_prefers_pickup_over_shorter_delivery():
    """A carried parcel one road away still loses to a pickup two roads away."""
    graph = RoadGraph(["A-B", "A-C", "C-D"])
    robot = SmartRobot(graph)
    state = VillageState(graph, "A", [Parcel("A", "B"), Parcel("D", "A")])
    action = robot(state, ())
    assert action == Action("C", ("D",)), f"Expected pickup route, got {action}"


def test_smart_robot_picks_nearest_pickup():
    graph = village_graph()
    robot = SmartRobot(graph)
    state = VillageState(graph, "Post Office", [
        Parcel("Grete's House", "Cabin"),
        Parcel("Marketplace", "Cabin"),
    ])
    assert robot(state, ()) == Action("Marketplace", ())


def test_smart_robot_delivers_when_everything_is_carried():
    graph = village_graph()
    robot = SmartRobot(graph)
    state = VillageState(graph, "Post Office", [
        Parcel("Post Office", "Grete's House"),
        Parcel("Post Office", "Cabin"),
    ])
    assert robot(state, ()) == Action("Alice's House", ("Cabin",))


def test_smart_robot_breaks_ties_by_parcel_order():
    graph = RoadGraph(["A-B", "A-C"])
    robot = SmartRobot(graph)
    state = VillageState(graph, "A", [Parcel("C", "A"), Parcel("B", "A")])
    assert robot(state, ()).direction == "C"


def test_robot_calls_are_timed():
    graph = village_graph()
    robot = GoalOrientedRobot(graph)
    state = VillageState(graph, "Cabin", [Parcel("Cabin", "Bob's House")])
    robot(state, ())
    robot(state, ())
    history = robot.time_logger.get_history()
    assert history["GoalOrientedRobot.__call__"]["count"] == 2
    assert "[TIME] GoalOrientedRobot.__call__: called 2 times" in robot.time_logger.report()


def test_none_memory_means_fresh_start():
    robot = RouteRobot(village_graph())
    state = VillageState(robot.graph, "Post Office", [Parcel("Cabin", "Farm")])
    assert robot(state, None).direction == MAIL_ROUTE[0]


def test_make_robot():
    graph = village_graph()
    for name, robot_cls in STRATEGIES.items():
        assert isinstance(make_robot(name, graph, random.Random(0)), robot_cls)
    with pytest.raises(ValueError):
        make_robot("teleporter", graph)


def test_initial_memory():
    graph = village_graph()
    assert RandomRobot(graph).initial_memory() is None
    assert SmartRobot(graph).initial_memory() == ()


def test_random_robot_without_roads_raises_dead_end():
    graph = village_graph()
    robot = RandomRobot(graph, rng=random.Random(0))
    state = VillageState(graph, "Lighthouse", [Parcel("Cabin", "Farm")])
    with pytest.raises(DeadEnd) as excinfo:
        robot(state, None)
    assert excinfo.value.place == "Lighthouse"
