import functools
import random
import time

import yaml


def load_config(path="config.yaml"):
    with open(path, 'r') as file:
        config = yaml.safe_load(file)

    if not isinstance(config, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping at top level")

    for section in ("compare", "batch"):
        if section not in config:
            continue
        if not isinstance(config[section], dict):
            raise ValueError(f"'{section}' must be a mapping in {path}")
        robots = config[section].get("robots")
        if robots is not None and not isinstance(robots, list):
            raise ValueError(f"'{section}.robots' must be a list in {path}")

    compare_robots = config.get("compare", {}).get("robots")
    if compare_robots is not None and len(compare_robots) != 2:
        raise ValueError(f"'compare.robots' must name exactly two robots in {path}")

    return config


def random_pick(sequence, rng=None):
    return (rng or random).choice(sequence)


class TimeLogger:
    def __init__(self):
        self.records = {}

    def log(self, name, duration):
        if name not in self.records:
            self.records[name] = {"count": 0, "total_time": 0.0}
        self.records[name]["count"] += 1
        self.records[name]["total_time"] += duration

    def report(self):
        lines = []
        for name, data in self.records.items():
            avg = data["total_time"] / data["count"]
            lines.append(f"[TIME] {name}: called {data['count']} times, total {data['total_time']:.6f}s, avg {avg:.6f}s")
        return "\n".join(lines)

    def get_history(self):
        return {name: dict(data) for name, data in self.records.items()}


def log_time(method):
    """Record the duration of each call in ``self.time_logger`` under ``ClassName.method``."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        start = time.perf_counter()
        result = method(self, *args, **kwargs)
        duration = time.perf_counter() - start
        if hasattr(self, 'time_logger'):
            self.time_logger.log(f"{type(self).__name__}.{method.__name__}", duration)
        return result
    return wrapper
