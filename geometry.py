from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Sequence

Number = int | float


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Equality is exact coordinate equality. Ordering (`<`) is the primary
    order used by the scan: lowest y first, ties broken by lowest x.
    Integer coordinates give exact results; floats can misclassify
    nearly collinear triples.
    """
    x: Number
    y: Number

    def __lt__(self, other):
        return compare(self, other) < 0


def compare(a: Point, b: Point) -> int:
    """
    Primary order: by y, then by x.
    """
    if a.y < b.y:
        return -1
    if a.y > b.y:
        return 1
    if a.x < b.x:
        return -1
    if a.x > b.x:
        return 1
    return 0


def equals(a: Point, b: Point) -> bool:
    return a.x == b.x and a.y == b.y


def orientation(a: Point, b: Point, c: Point) -> Number:
    """
    Cross product of segments ab and ac.
    Positive for a counterclockwise turn a -> b -> c, negative for clockwise,
    zero if the points are collinear.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def squared_distance(a: Point, b: Point) -> Number:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def polar_order(reference: Point) -> Callable[[Point], object]:
    """
    Sort key ordering points by polar angle around `reference`,
    counterclockwise starting from the positive x direction.

    Angles are compared with the orientation test only. Points in the same
    direction from `reference` are ordered by distance, closer first, so
    copies of `reference` itself come before everything else.
    """
    def upper(p: Point) -> bool:
        dy = p.y - reference.y
        return dy > 0 or dy == 0 and p.x >= reference.x

    def polar_compare(p: Point, q: Point) -> int:
        p_upper, q_upper = upper(p), upper(q)
        if p_upper != q_upper:
            return -1 if p_upper else 1

        turn = orientation(reference, p, q)
        if turn > 0:
            return -1
        if turn < 0:
            return 1

        # same direction
        dp = squared_distance(reference, p)
        dq = squared_distance(reference, q)
        return (dp > dq) - (dp < dq)

    return cmp_to_key(polar_compare)


def is_strictly_convex(boundary: Sequence[Point]) -> bool:
    """
    Check that every consecutive (cyclic) triple of the boundary turns
    counterclockwise. Points and segments are trivially convex.
    """
    n = len(boundary)
    if n <= 2:
        return True

    for i in range(n):
        if orientation(boundary[i], boundary[(i + 1) % n], boundary[(i + 2) % n]) <= 0:
            return False
    return True
