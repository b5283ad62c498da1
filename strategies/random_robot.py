import random

from strategies.base import Action, Robot
from utils import random_pick


class DeadEnd(LookupError):
    def __init__(self, place):
        super().__init__(f"No roads lead out of {place!r}")
        self.place = place


class RandomRobot(Robot):
    def __init__(self, graph, rng=None):
        super().__init__(graph)
        self.rng = rng or random.Random()

    def initial_memory(self):
        return None

    def decide(self, state, memory):
        neighbors = self.graph.neighbors(state.place)
        if not neighbors:
            raise DeadEnd(state.place)
        return Action(random_pick(neighbors, self.rng))
