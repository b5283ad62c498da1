# ================= robot comparison =============================
import argparse
import random
import time

import numpy as np
import pandas as pd

from map_graph import village_graph
from simulation import run_robot
from strategies import make_robot
from utils import load_config
from village_state import VillageState

# -----------------------------------------------------------------
# Defaults, overridable from config.yaml
# -----------------------------------------------------------------
TASK_NUMBER  = 100          # random tasks per comparison
PARCEL_COUNT = 5            # parcels per task
OUT_CSV      = "benchmark_raw.csv"
# -----------------------------------------------------------------


def generate_tasks(graph, task_count=TASK_NUMBER, parcel_count=PARCEL_COUNT, rng=None):
    rng = rng or random.Random()
    return [VillageState.random(graph, parcel_count, rng) for _ in range(task_count)]


def compare_robots(graph, robot1, memory1, robot2, memory2,
                   task_count=TASK_NUMBER, parcel_count=PARCEL_COUNT, rng=None):
    """
    Run two robots on the same random tasks and average their turn counts.

    :param graph: RoadGraph the tasks are generated on
    :param robot1: First strategy
    :param memory1: Starting memory for robot1
    :param robot2: Second strategy
    :param memory2: Starting memory for robot2
    :param task_count: Number of random tasks
    :param parcel_count: Parcels per task
    :param rng: random.Random used to generate the tasks
    :return: {"robot1": mean turns, "robot2": mean turns}
    """
    if task_count <= 0:
        raise ValueError("task_count must be positive")

    tasks = generate_tasks(graph, task_count, parcel_count, rng)
    turns1, turns2 = [], []
    for task in tasks:
        turns1.append(run_robot(task, robot1, memory1))
        turns2.append(run_robot(task, robot2, memory2))

    return {"robot1": float(np.mean(turns1)), "robot2": float(np.mean(turns2))}


def batch_compare(graph, robots, task_count=TASK_NUMBER, parcel_count=PARCEL_COUNT, seed=None):
    """
    Run every named robot on one shared list of random tasks.

    :param graph: RoadGraph
    :param robots: dict name -> robot, or name -> (robot, memory)
    :param task_count: Number of random tasks
    :param parcel_count: Parcels per task
    :param seed: Seed for the task generator
    :return: DataFrame with one row per (task, robot): task, robot, turns, runtime
    """
    tasks = generate_tasks(graph, task_count, parcel_count, random.Random(seed))

    rows = []
    for name, entry in robots.items():
        robot, memory = entry if isinstance(entry, tuple) else (entry, None)
        for task_id, task in enumerate(tasks):
            t0 = time.perf_counter()
            turns = run_robot(task, robot, memory)
            rows.append({
                "task": task_id,
                "robot": name,
                "turns": turns,
                "runtime": time.perf_counter() - t0,
            })
        print(f"✔ {name:15s} | tasks={task_count} parcels={parcel_count}")

    return pd.DataFrame(rows, columns=["task", "robot", "turns", "runtime"])


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Turn statistics per robot, best (fewest mean turns) first."""
    return (df.groupby("robot")
              .agg(turns_mean=("turns", "mean"),
                   turns_sd=("turns", "std"),
                   turns_min=("turns", "min"),
                   turns_max=("turns", "max"),
                   runtime_mean=("runtime", "mean"))
              .sort_values("turns_mean")
              .reset_index())


def build_robots(names, graph, seed=None):
    rng = random.Random(seed)
    return {name: make_robot(name, graph, rng) for name in names}


def main():
    parser = argparse.ArgumentParser(
        description="Run every configured robot on the same random village tasks")
    parser.add_argument("--config", default="config.yaml", help="YAML config file")
    parser.add_argument("--csv", default=None, help="Write the raw per-task table here")
    parser.add_argument("--plot", action="store_true", help="Plot the results")
    args = parser.parse_args()

    config = load_config(args.config)
    batch = config.get("batch", {})
    names = batch.get("robots", ["random", "route", "goal_oriented", "smart"])
    seed = batch.get("seed")

    graph = village_graph()
    robots = build_robots(names, graph, seed)
    df = batch_compare(graph, robots,
                       task_count=batch.get("task_count", TASK_NUMBER),
                       parcel_count=batch.get("parcel_count", PARCEL_COUNT),
                       seed=seed)

    print("\n=== Turns per robot ===")
    print(summarize(df).round(3).to_string(index=False))
    print("-" * 50)
    for robot in robots.values():
        print(robot.time_logger.report())

    out_csv = args.csv or batch.get("out_csv")
    if out_csv:
        df.to_csv(out_csv, index=False)
        print("Saved raw results to", out_csv)

    if args.plot:
        from plot import plot_mean_turns_per_robot, plot_turn_distribution
        plot_mean_turns_per_robot(df)
        plot_turn_distribution(df)


if __name__ == "__main__":
    main()
