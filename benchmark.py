import logging
import time

from dataclasses import dataclass

import numpy as np

from config import BenchmarkConfig
from convex_layers_naive import NaiveHullBuilder
from generators import generate_points
from geometry import Point
from graham_scan import graham_scan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrialResult:
    iterations: int
    pops: int
    seconds: float


@dataclass(frozen=True)
class SizeStats:
    n_points: int
    trials: int
    mean_iterations: float
    std_iterations: float
    mean_pops: float
    std_pops: float
    mean_time: float
    std_time: float


def run_trial(points: list[Point], mode: str = "layers") -> TrialResult:
    """
    Run one trial on a point set.

    In "layers" mode, hulls are peeled off until no points remain and the
    iteration count is the number of layers. In "hull" mode a single hull
    is built and the iteration count is 1 (0 for an empty set).
    """
    start_time = time.perf_counter()

    if mode == "layers":
        builder = NaiveHullBuilder()
        iterations = len(builder.compute_layers(points))
        pops = builder.pops
    elif mode == "hull":
        hull = graham_scan(points)
        iterations = 1 if points else 0
        pops = hull.pops
    else:
        raise ValueError(f"Unknown mode: {mode}")

    return TrialResult(iterations, pops, time.perf_counter() - start_time)


def summarize(n_points: int, results: list[TrialResult]) -> SizeStats:
    iterations = np.array([r.iterations for r in results], dtype=float)
    pops = np.array([r.pops for r in results], dtype=float)
    times = np.array([r.seconds for r in results], dtype=float)

    return SizeStats(
        n_points=n_points,
        trials=len(results),
        mean_iterations=float(np.mean(iterations)),
        std_iterations=float(np.std(iterations)),
        mean_pops=float(np.mean(pops)),
        std_pops=float(np.std(pops)),
        mean_time=float(np.mean(times)),
        std_time=float(np.std(times)),
    )


class Benchmark:
    """
    Repeated trials over a range of point set sizes. Every trial gets
    a fresh random point set; trial seeds are drawn from a master generator
    seeded with `config.seed`, so a run is reproducible.
    """
    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.total_time: float = 0.0

    def run_size(self, n_points: int, rng: np.random.Generator) -> SizeStats:
        seeds = rng.integers(0, 2**32, size=self.config.trials)

        results = []
        for seed in seeds:
            trial_rng = np.random.default_rng(seed)
            points = generate_points(self.config, n_points, trial_rng)
            results.append(run_trial(points, self.config.mode))

        stats = summarize(n_points, results)
        logger.info(
            "N=%d: %.2f iterations, %.2f pops, %.6f s per trial",
            n_points,
            stats.mean_iterations,
            stats.mean_pops,
            stats.mean_time,
        )
        return stats

    def run(self) -> list[SizeStats]:
        logger.info(
            "Running %d trials per size, %s distribution, %s coordinates, %s mode",
            self.config.trials,
            self.config.distribution,
            self.config.coordinate_type,
            self.config.mode,
        )
        start_time = time.perf_counter()

        rng = np.random.default_rng(self.config.seed)
        stats = [self.run_size(n, rng) for n in self.config.sizes]

        self.total_time = time.perf_counter() - start_time
        logger.info("Benchmark finished in %.3f s", self.total_time)
        return stats


def format_report(stats: list[SizeStats], config: BenchmarkConfig, total_time: float | None = None) -> str:
    iterations_label = "Layers" if config.mode == "layers" else "Hulls"
    header = (
        f"{'N':>8} {iterations_label:>10} {'± std':>9} {'Pops':>12} {'± std':>10}"
        f" {'Time (ms)':>12} {'± std':>10}"
    )

    report = f"""
{'='*len(header)}
GRAHAM SCAN BENCHMARK
{'='*len(header)}
Distribution: {config.distribution}
Coordinates:  {config.coordinate_type}
Mode:         {config.mode}
Trials:       {config.trials}
Seed:         {config.seed}

{header}
{'-'*len(header)}
"""
    for s in stats:
        report += (
            f"{s.n_points:>8d} {s.mean_iterations:>10.2f} {s.std_iterations:>9.2f}"
            f" {s.mean_pops:>12.2f} {s.std_pops:>10.2f}"
            f" {s.mean_time * 1000:>12.4f} {s.std_time * 1000:>10.4f}\n"
        )

    if total_time is not None:
        report += f"\nTotal execution time: {total_time:.3f} s\n"
    report += f"{'='*len(header)}\n"
    return report
