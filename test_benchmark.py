import math

import numpy as np
import pytest

from benchmark import Benchmark, SizeStats, TrialResult, format_report, run_trial, summarize
from config import BenchmarkConfig
from generators import disk_points, generate_points, uniform_points
from geometry import Point


@pytest.fixture
def rng():
    return np.random.default_rng(42)


def test_uniform_float_points(rng):
    points = uniform_points(500, -2.0, 3.0, rng)
    assert len(points) == 500
    assert all(-2.0 <= p.x < 3.0 and -2.0 <= p.y < 3.0 for p in points)
    assert all(type(p.x) is float for p in points)


def test_uniform_int_points(rng):
    points = uniform_points(500, 0, 10, rng, integer=True)
    assert all(0 <= p.x <= 10 and 0 <= p.y <= 10 for p in points)
    assert all(type(p.x) is int and type(p.y) is int for p in points)
    assert {p.x for p in points} == set(range(11))


def test_disk_float_points(rng):
    points = disk_points(1000, 2.5, rng, center=(1.0, -1.0))
    assert len(points) == 1000
    assert all(math.hypot(p.x - 1.0, p.y + 1.0) <= 2.5 for p in points)
    # uniform in area: about a quarter of the points fall in the inner half radius
    inner = sum(math.hypot(p.x - 1.0, p.y + 1.0) <= 1.25 for p in points)
    assert 180 < inner < 320


def test_disk_int_points(rng):
    points = disk_points(300, 7, rng, integer=True, center=(100, 100))
    assert len(points) == 300
    assert all(type(p.x) is int for p in points)
    assert all((p.x - 100) ** 2 + (p.y - 100) ** 2 <= 49 for p in points)


def test_disk_small_radius(rng):
    points = disk_points(5, 0.5, rng, integer=True)
    assert points == [Point(0, 0)] * 5


def test_generate_points_dispatch(rng):
    config = BenchmarkConfig(distribution="disk", coordinate_type="int", radius=3)
    points = generate_points(config, 50, rng)
    assert len(points) == 50
    assert all(p.x * p.x + p.y * p.y <= 9 for p in points)


def test_generation_is_reproducible():
    config = BenchmarkConfig()
    a = generate_points(config, 20, np.random.default_rng(1))
    b = generate_points(config, 20, np.random.default_rng(1))
    assert a == b


def test_run_trial_layers():
    points = [Point(x, y) for x, y in [(0, 0), (6, 0), (6, 6), (0, 6), (2, 2), (4, 2), (4, 4), (2, 4), (3, 3)]]
    result = run_trial(points, "layers")
    assert result.iterations == 3
    assert result.pops > 0
    assert result.seconds >= 0


def test_run_trial_hull():
    points = [Point(x, y) for x, y in [(0, 0), (2, 0), (1, 1), (2, 2), (0, 2)]]
    result = run_trial(points, "hull")
    assert result.iterations == 1
    assert result.pops == 1
    assert run_trial([], "hull").iterations == 0


def test_run_trial_unknown_mode():
    with pytest.raises(ValueError):
        run_trial([], "tree")


def test_summarize():
    results = [TrialResult(2, 4, 0.5), TrialResult(4, 8, 1.5)]
    stats = summarize(10, results)
    assert stats == SizeStats(
        n_points=10,
        trials=2,
        mean_iterations=3.0,
        std_iterations=1.0,
        mean_pops=6.0,
        std_pops=2.0,
        mean_time=1.0,
        std_time=0.5,
    )


@pytest.mark.parametrize("distribution", ["uniform", "disk"])
@pytest.mark.parametrize("coordinate_type", ["float", "int"])
@pytest.mark.parametrize("mode", ["layers", "hull"])
def test_benchmark_run(distribution, coordinate_type, mode):
    config = BenchmarkConfig(
        sizes=(0, 10, 50),
        trials=4,
        distribution=distribution,
        coordinate_type=coordinate_type,
        high=100.0,
        radius=50.0,
        mode=mode,
    )
    benchmark = Benchmark(config)
    stats = benchmark.run()

    assert [s.n_points for s in stats] == [0, 10, 50]
    assert all(s.trials == 4 for s in stats)
    assert stats[0].mean_iterations == 0
    assert stats[0].mean_pops == 0
    if mode == "hull":
        assert stats[2].mean_iterations == 1
        assert stats[2].std_iterations == 0
    else:
        assert stats[2].mean_iterations > stats[1].mean_iterations >= 1
    assert benchmark.total_time > 0


def test_benchmark_is_reproducible():
    config = BenchmarkConfig(sizes=(30,), trials=5, seed=3)
    a = Benchmark(config).run()[0]
    b = Benchmark(config).run()[0]
    assert (a.mean_iterations, a.std_iterations, a.mean_pops) == (b.mean_iterations, b.std_iterations, b.mean_pops)


def test_format_report():
    config = BenchmarkConfig(sizes=(10,), trials=2)
    stats = [summarize(10, [TrialResult(2, 4, 0.5), TrialResult(4, 8, 1.5)])]
    report = format_report(stats, config, total_time=2.0)

    assert "GRAHAM SCAN BENCHMARK" in report
    assert "Layers" in report
    assert "Distribution: uniform" in report
    lines = [line.split() for line in report.splitlines()]
    assert ["10", "3.00", "1.00", "6.00", "2.00", "1000.0000", "500.0000"] in lines
    assert "Total execution time: 2.000 s" in report


def test_disk_int_points_large_radius(rng):
    radius = 5 * 10**9
    points = disk_points(200, radius, rng, integer=True)
    assert len(points) == 200
    assert all(p.x * p.x + p.y * p.y <= radius * radius for p in points)
    assert max(abs(p.x) for p in points) > 3 * 10**9
