import random
import warnings

from experiment import PARCEL_COUNT, TASK_NUMBER, compare_robots
from map_graph import village_graph
from persistent_group import PGroup
from plot import show_graph_structure
from simulation import run_robot
from strategies import make_robot
from utils import load_config
from village_state import VillageState


def run_comparison(config, graph):
    settings = config.get("compare", {})
    name1, name2 = settings.get("robots", ["smart", "goal_oriented"])
    rng = random.Random(settings.get("seed"))

    robot1 = make_robot(name1, graph, rng)
    robot2 = make_robot(name2, graph, rng)

    results = compare_robots(graph,
                             robot1, robot1.initial_memory(),
                             robot2, robot2.initial_memory(),
                             task_count=settings.get("task_count", TASK_NUMBER),
                             parcel_count=settings.get("parcel_count", PARCEL_COUNT),
                             rng=rng)
    print(f"{name1}: {results['robot1']:.2f} turns on average")
    print(f"{name2}: {results['robot2']:.2f} turns on average")
    print(robot1.time_logger.report())
    print(robot2.time_logger.report())
    return results


def run_demo(graph, rng=None):
    state = VillageState.random(graph, rng=rng)
    robot = make_robot("goal_oriented", graph)
    print(state)
    run_robot(state, robot, robot.initial_memory(), verbose=True)
    return state


def pgroup_demo():
    a = PGroup.empty.add("a")
    ab = a.add("b")
    b = ab.delete("a")

    print(b.has("b"))   # True
    print(a.has("b"))   # False
    print(b.has("a"))   # False


def main():
    config = load_config()
    graph = village_graph()
    if not graph.is_connected():
        warnings.warn("Road graph is not connected; some parcels can never be delivered")

    state = run_demo(graph)
    if config.get("show_graph"):
        show_graph_structure(graph, state)
    run_comparison(config, graph)
    pgroup_demo()


if __name__ == "__main__":
    main()
