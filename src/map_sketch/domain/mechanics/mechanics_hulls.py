import math
from collections.abc import Sequence

from map_sketch.app.protocols import BoundaryBuilder
from map_sketch.domain.entities.geography import PolygonPoint

# ~100 m in degrees
EXPANSION_THRESHOLD = 0.001


def cross(o: PolygonPoint, a: PolygonPoint, b: PolygonPoint) -> float:
    """Signed z of (a - o) x (b - o) with lng as x and lat as y; > 0 is a left turn."""
    return (a.lng - o.lng) * (b.lat - o.lat) - (a.lat - o.lat) * (b.lng - o.lng)


def convex_hull(points: Sequence[PolygonPoint]) -> list[PolygonPoint]:
    """Andrew's monotone chain. Counter-clockwise, collinear points removed."""
    if len(points) < 3:
        return list(points)

    pts = sorted(points, key=lambda p: (p.lng, p.lat))

    lower: list[PolygonPoint] = []
    for p in pts:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: list[PolygonPoint] = []
    for p in reversed(pts):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    # each chain ends where the other starts
    return lower[:-1] + upper[:-1]


def point_segment_distance(p: PolygonPoint, a: PolygonPoint, b: PolygonPoint) -> float:
    dx, dy = b.lng - a.lng, b.lat - a.lat
    px, py = p.lng - a.lng, p.lat - a.lat
    len_sq = dx * dx + dy * dy
    if len_sq == 0:
        return math.sqrt(px * px + py * py)

    t = (px * dx + py * dy) / len_sq
    if t < 0:
        cx, cy = a.lng, a.lat
    elif t > 1:
        cx, cy = b.lng, b.lat
    else:
        cx, cy = a.lng + t * dx, a.lat + t * dy
    ex, ey = p.lng - cx, p.lat - cy
    return math.sqrt(ex * ex + ey * ey)


def expand_hull(
    hull: Sequence[PolygonPoint],
    points: Sequence[PolygonPoint],
    threshold: float = EXPANSION_THRESHOLD,
) -> list[PolygonPoint]:
    """
    Splice non-hull points lying within ``threshold`` of a hull edge into the boundary.

    Membership is exact (lat, lng) equality. The insert position is the index
    of the nearest edge's end vertex in the unexpanded hull, applied to the
    growing boundary, so several points near one edge land in reverse input
    order and later edges shift. Points farther than ``threshold`` from every
    edge are dropped. Not a true concave hull; the result may self-intersect.
    """
    out = list(hull)
    on_hull = {(p.lat, p.lng) for p in hull}
    n = len(hull)

    for p in points:
        if (p.lat, p.lng) in on_hull:
            continue

        best, insert_at = math.inf, -1
        for i in range(n):
            j = (i + 1) % n
            d = point_segment_distance(p, hull[i], hull[j])
            if d < best and d < threshold:
                best, insert_at = d, j

        if insert_at != -1:
            out.insert(insert_at, p)

    return out


def build_boundary(
    points: Sequence[PolygonPoint], threshold: float = EXPANSION_THRESHOLD
) -> list[PolygonPoint]:
    """
    Pseudo-concave boundary of a scattered point set.

    Fewer than 3 points come back unchanged. Otherwise the convex hull, with
    nearby interior points spliced in when there are any candidates.
    """
    if len(points) < 3:
        return list(points)

    hull = convex_hull(points)
    if len(points) > len(hull) and len(hull) >= 3:
        return expand_hull(hull, points, threshold)
    return hull


class ConvexHullBuilder(BoundaryBuilder):
    def build(self, points):
        return convex_hull(points)


class PseudoConcaveHullBuilder(BoundaryBuilder):
    def __init__(self, threshold: float = EXPANSION_THRESHOLD):
        self.threshold = threshold

    def build(self, points):
        return build_boundary(points, self.threshold)
