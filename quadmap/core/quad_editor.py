"""
Quad Editor
Pan, scale and handle drags expressed as deltas in rect space.
Every edit returns a new Quad; the input quad is never modified.
"""

from typing import Iterable, List, Tuple

from .errors import ShapeError
from .rect_space import RectSpace
from .types import Point, Quad, as_point, as_quad

# Corner i moves with (du, dv); neighbours follow along the shared edges
CORNER_CHANGES = {
    0: ((0, 1, 1), (1, 0, 1), (3, 1, 0)),
    1: ((1, 1, 1), (0, 0, 1), (2, 1, 0)),
    2: ((2, 1, 1), (1, 1, 0), (3, 0, 1)),
    3: ((3, 1, 1), (0, 1, 0), (2, 0, 1)),
}

# Edge i joins corners i and i+1; top/bottom move in v, right/left in u
EDGE_CHANGES = {
    0: ((0, 0, 1), (1, 0, 1)),
    1: ((1, 1, 0), (2, 1, 0)),
    2: ((2, 0, 1), (3, 0, 1)),
    3: ((3, 1, 0), (0, 1, 0)),
}


def move_in_rect(space: RectSpace, point, du: float, dv: float) -> Point:
    """Shift an image-space point by (du, dv) measured in rect space"""
    u, v = space.to_rect(point)
    return space.to_image(Point(u + du, v + dv))


def rect_delta(space: RectSpace, start, end) -> Tuple[float, float]:
    """Rect-space delta between two image-space positions"""
    u0, v0 = space.to_rect(start)
    u1, v1 = space.to_rect(end)
    return u1 - u0, v1 - v0


def apply_rect_changes(
    quad,
    changes: Iterable[Tuple[int, float, float]],
    rect_width: float = 1.0,
    rect_height: float = 1.0
) -> Quad:
    """
    Move quad corners by rect-space deltas

    Args:
        quad: Current image-space quad
        changes: (corner_index, du, dv) triples, all evaluated against the input quad
        rect_width: Width of the rect space
        rect_height: Height of the rect space

    Returns:
        New quad
    """
    quad = as_quad(quad)
    space = RectSpace(quad, rect_width, rect_height)

    corners: List[Point] = list(quad)
    for index, du, dv in changes:
        if not 0 <= index < 4:
            raise ShapeError(f"Corner index must be 0..3, got {index}")
        corners[index] = move_in_rect(space, corners[index], du, dv)

    return Quad(*corners)


def pan(quad, du: float, dv: float, rect_width: float = 1.0, rect_height: float = 1.0) -> Quad:
    return apply_rect_changes(
        quad, [(i, du, dv) for i in range(4)], rect_width, rect_height
    )


def scale(quad, d: float, rect_width: float = 1.0, rect_height: float = 1.0) -> Quad:
    """Grow (or shrink, d < 0) the quad away from corner 0"""
    return apply_rect_changes(
        quad, [(1, d, 0.0), (2, d, d), (3, 0.0, d)], rect_width, rect_height
    )


def drag_edge(quad, edge: int, du: float, dv: float,
              rect_width: float = 1.0, rect_height: float = 1.0) -> Quad:
    if edge not in EDGE_CHANGES:
        raise ShapeError(f"Edge index must be 0..3, got {edge}")
    changes = [(i, du * mu, dv * mv) for i, mu, mv in EDGE_CHANGES[edge]]
    return apply_rect_changes(quad, changes, rect_width, rect_height)


def drag_corner(quad, corner: int, du: float, dv: float,
                rect_width: float = 1.0, rect_height: float = 1.0) -> Quad:
    if corner not in CORNER_CHANGES:
        raise ShapeError(f"Corner index must be 0..3, got {corner}")
    changes = [(i, du * mu, dv * mv) for i, mu, mv in CORNER_CHANGES[corner]]
    return apply_rect_changes(quad, changes, rect_width, rect_height)


def edge_midpoints(quad) -> Tuple[Point, ...]:
    """Image-space midpoint of each edge (edge i joins corner i and i+1)"""
    quad = as_quad(quad)
    midpoints = []
    for i in range(4):
        a = as_point(quad[i])
        b = as_point(quad[(i + 1) % 4])
        midpoints.append(Point((a.x + b.x) / 2, (a.y + b.y) / 2))
    return tuple(midpoints)
