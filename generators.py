import math

import numpy as np

from config import BenchmarkConfig
from geometry import Point


def uniform_points(
    n: int,
    low: float,
    high: float,
    rng: np.random.Generator,
    integer: bool = False
) -> list[Point]:
    """
    Points uniformly distributed in the square [low, high)^2,
    or on the integer lattice [low, high]^2 if `integer` is set.
    """
    if integer:
        xs = rng.integers(math.ceil(low), math.floor(high), size=n, endpoint=True)
        ys = rng.integers(math.ceil(low), math.floor(high), size=n, endpoint=True)
    else:
        xs = rng.uniform(low, high, size=n)
        ys = rng.uniform(low, high, size=n)

    # tolist() gives python numbers, so integer orientation tests cannot overflow
    return [Point(x, y) for x, y in zip(xs.tolist(), ys.tolist())]


def disk_points(
    n: int,
    radius: float,
    rng: np.random.Generator,
    integer: bool = False,
    center: tuple[float, float] = (0.0, 0.0)
) -> list[Point]:
    """
    Points uniformly distributed inside a disk.

    Float coordinates are sampled directly (r = R * sqrt(u)).
    Integer coordinates are lattice points within the radius, found by
    rejection sampling from the bounding square.
    """
    cx, cy = center
    if not integer:
        angle = rng.uniform(0, 2 * np.pi, size=n)
        r = radius * np.sqrt(rng.uniform(0, 1, size=n))
        xs = cx + r * np.cos(angle)
        ys = cy + r * np.sin(angle)
        return [Point(x, y) for x, y in zip(xs.tolist(), ys.tolist())]

    bound = math.floor(radius)
    cx, cy = round(cx), round(cy)
    points = []
    while len(points) < n:
        # ~pi/4 of the square is accepted
        batch = max(2 * (n - len(points)), 16)
        # python ints, so squaring large radii cannot overflow int64
        xs = rng.integers(-bound, bound, size=batch, endpoint=True).tolist()
        ys = rng.integers(-bound, bound, size=batch, endpoint=True).tolist()
        for x, y in zip(xs, ys):
            if len(points) == n:
                break
            if x * x + y * y <= radius * radius:
                points.append(Point(cx + x, cy + y))
    return points
