from typing import Iterable

from geometry import Point
from graham_scan import graham_scan


class NaiveHullBuilder:
    """
    Convex layers by repeated peeling: build the hull of the remaining
    points, remove its vertices, repeat until nothing is left.
    Time complexity: O(k*n*log(n)) for k layers.
    """
    def __init__(self):
        self.pops: int = 0

    def compute_layers(self, points: Iterable[Point]) -> list[list[Point]]:
        preprocessed_points = set(points)
        self.pops = 0

        layers = []
        while preprocessed_points:
            hull = graham_scan(preprocessed_points)
            layers.append(list(hull))
            self.pops += hull.pops

            for point in hull:
                preprocessed_points.discard(point)

        return layers
