"""
Lunar Collision Detection

Tests the lander's unrotated bounding box against the terrain polyline
using the parametric line-segment intersection test.

Entities take part through small capability protocols instead of a
shared drawable base class:
- HasBoundingBox: anything exposing bounding_box() -> (left, top, w, h)
- HasPolyline: anything exposing points -> [(x, y), ...]
"""

from typing import Iterable, List, NamedTuple, Optional, Protocol, Sequence, Tuple

Point = Tuple[float, float]
Box = Tuple[float, float, float, float]


class HasBoundingBox(Protocol):
    def bounding_box(self) -> Box: ...


class HasPolyline(Protocol):
    @property
    def points(self) -> Sequence[Point]: ...


class Collision(NamedTuple):
    """First terrain segment touched by the lander."""
    index: int   # index of the segment's start point
    start: Point
    end: Point


def lines_intersect(x1, y1, x2, y2, x3, y3, x4, y4) -> bool:
    """
    Check whether segment (x1, y1)-(x2, y2) meets segment (x3, y3)-(x4, y4).

    uA and uB are the fractional positions of the crossing point along
    each segment; the segments meet when both lie in [0, 1]. Touching at
    an endpoint counts. Parallel or coincident segments (zero
    denominator) never intersect.
    """
    den = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if den == 0:
        return False

    u_a = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / den
    u_b = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / den

    return 0 <= u_a <= 1 and 0 <= u_b <= 1


def box_edges(left, top, width, height) -> List[Tuple[Point, Point]]:
    """Edges of an axis-aligned box: top, right, bottom, left."""
    right = left + width
    bottom = top + height
    return [
        ((left, top), (right, top)),
        ((right, top), (right, bottom)),
        ((right, bottom), (left, bottom)),
        ((left, bottom), (left, top)),
    ]


def segment_hits_box(start: Point, end: Point, box: Box) -> bool:
    """True if the terrain segment crosses or touches any edge of box."""
    x1, y1 = start
    x2, y2 = end
    for (x3, y3), (x4, y4) in box_edges(*box):
        if lines_intersect(x1, y1, x2, y2, x3, y3, x4, y4):
            return True
    return False


def find_collision(box: Box, points: Iterable[Point]) -> Optional[Collision]:
    """
    Scan terrain segments left to right for the first one touching box.

    Args:
        box: (left, top, width, height)
        points: Terrain polyline

    Returns:
        Collision for the first hit segment, or None
    """
    it = iter(points)
    prev = next(it, None)
    for index, pt in enumerate(it):
        if segment_hits_box(prev, pt, box):
            return Collision(index, prev, pt)
        prev = pt
    return None


def check_collision(body: HasBoundingBox, ground: HasPolyline) -> Optional[Collision]:
    """find_collision() for objects exposing the capability protocols."""
    return find_collision(body.bounding_box(), ground.points)
