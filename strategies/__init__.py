"""Delivery robot strategies: each is called as ``robot(state, memory)`` and returns an Action."""

from strategies.base import Action, Robot
from strategies.random_robot import DeadEnd, RandomRobot
from strategies.route_robot import MAIL_ROUTE, RouteRobot
from strategies.goal_oriented import GoalOrientedRobot
from strategies.smart import SmartRobot

STRATEGIES = {
    "random": RandomRobot,
    "route": RouteRobot,
    "goal_oriented": GoalOrientedRobot,
    "smart": SmartRobot,
}


def make_robot(name, graph, rng=None):
    try:
        robot_cls = STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown robot {name!r}; choose from {sorted(STRATEGIES)}")
    if robot_cls is RandomRobot:
        return robot_cls(graph, rng=rng)
    return robot_cls(graph)


__all__ = [
    "Action", "Robot", "DeadEnd", "RandomRobot", "RouteRobot", "GoalOrientedRobot",
    "SmartRobot", "MAIL_ROUTE", "STRATEGIES", "make_robot",
]
