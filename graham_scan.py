from dataclasses import dataclass
from typing import Iterable

from geometry import Point, is_strictly_convex, orientation, polar_order


@dataclass(frozen=True)
class HullResult:
    """
    Hull boundary in counterclockwise order, starting at the lowest
    (then leftmost) point, and the number of points popped off the stack
    during the scan.
    """
    boundary: tuple[Point, ...]
    pops: int = 0

    def __iter__(self):
        return iter(self.boundary)

    def __len__(self):
        return len(self.boundary)


def graham_scan(points: Iterable[Point]) -> HullResult:
    """
    Graham scan for convex hull. Time complexity: O(n*log(n)).

    Collinear points on hull edges and duplicate points are dropped, so the
    boundary is strictly convex. If all points lie on one line,
    the boundary is the two endpoints of that line; if all points are equal,
    it is that single point.
    """
    points = sorted(points)
    n = len(points)
    if n == 0:
        return HullResult(())

    # points[0] has the lowest y (then x) and is a hull vertex
    p0 = points[0]
    points[1:] = sorted(points[1:], key=polar_order(p0))

    k1 = 1
    while k1 < n and points[k1] == p0:
        k1 += 1
    if k1 == n:
        return HullResult((p0,))

    k2 = k1 + 1
    while k2 < n and orientation(p0, points[k1], points[k2]) == 0:
        k2 += 1

    # points[k2 - 1] is the farthest point of the first collinear run
    stack = [p0, points[k2 - 1]]
    pops = 0
    for q in points[k2:]:
        while len(stack) >= 2 and orientation(stack[-2], stack[-1], q) <= 0:
            stack.pop()
            pops += 1
        stack.append(q)

    result = HullResult(tuple(stack), pops)
    assert is_strictly_convex(result.boundary), f'Hull is not strictly convex: {result.boundary}'
    return result


def compute_hull(points: Iterable[Point]) -> list[Point]:
    return list(graham_scan(points).boundary)
