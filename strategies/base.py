from abc import ABC, abstractmethod
from typing import Any, NamedTuple, Optional, Tuple

from utils import TimeLogger, log_time

Route = Tuple[str, ...]


class Action(NamedTuple):
    direction: str
    memory: Any = None


class Robot(ABC):
    """
    A delivery strategy. Robots hold no per-run state: everything a robot
    remembers between turns travels in ``memory`` and comes back in the Action.
    """

    def __init__(self, graph):
        self.graph = graph
        self.time_logger = TimeLogger()

    @property
    def name(self):
        return type(self).__name__

    def initial_memory(self) -> Optional[Route]:
        return ()

    @log_time
    def __call__(self, state, memory=None) -> Action:
        if memory is None:
            memory = self.initial_memory()
        return self.decide(state, memory)

    @abstractmethod
    def decide(self, state, memory) -> Action:
        pass


def follow(route) -> Action:
    """First step of ``route`` as the direction, the rest as memory."""
    route = tuple(route)
    return Action(route[0], route[1:])
