"""
Rect Space
Bidirectional mapping between an image-space quad and a W x H rectangle
"""

import logging
from typing import Any, Dict, Optional

from .errors import ConfigError
from .homography import apply_homography, homography_from_4_points
from .linear_solver import LinearSolver
from .types import Mat3, Point, Quad, as_quad

logger = logging.getLogger(__name__)


def rect_corners(width: float = 1.0, height: float = 1.0) -> Quad:
    """Canonical rectangle in TL, TR, BR, BL order"""
    return Quad(
        Point(0.0, 0.0),
        Point(float(width), 0.0),
        Point(float(width), float(height)),
        Point(0.0, float(height)),
    )


class RectSpace:
    """
    Immutable adapter between image space and rect (UV) space.

    Corner k of the rectangle maps onto quad[k], so the quad must be given in
    the same winding as (0,0), (W,0), (W,H), (0,H). Any change to the quad
    means building a new RectSpace.
    """

    __slots__ = ('_quad', '_width', '_height', '_rect_to_image', '_image_to_rect')

    def __init__(
        self,
        quad,
        rect_width: float = 1.0,
        rect_height: float = 1.0,
        solver: Optional[LinearSolver] = None,
        max_condition: Optional[float] = None
    ):
        quad = as_quad(quad)
        forward, inverse = homography_from_4_points(
            rect_corners(rect_width, rect_height),
            quad,
            solver=solver,
            max_condition=max_condition
        )
        object.__setattr__(self, '_quad', quad)
        object.__setattr__(self, '_width', float(rect_width))
        object.__setattr__(self, '_height', float(rect_height))
        object.__setattr__(self, '_rect_to_image', forward)
        object.__setattr__(self, '_image_to_rect', inverse)
        logger.debug(f"RectSpace built for quad {[tuple(p) for p in quad]}")

    def __setattr__(self, name, value):
        raise AttributeError("RectSpace is immutable")

    @classmethod
    def from_config(cls, quad, config: Dict[str, Any]) -> 'RectSpace':
        """Build using rect dimensions and conditioning bound from a config dict"""
        rect = config.get('rect') or {}
        geometry = config.get('geometry') or {}
        try:
            width = float(rect.get('width', 1.0))
            height = float(rect.get('height', 1.0))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid rect dimensions: {e}") from e
        return cls(
            quad,
            rect_width=width,
            rect_height=height,
            max_condition=geometry.get('max_condition')
        )

    @property
    def quad(self) -> Quad:
        return self._quad

    @property
    def rect_width(self) -> float:
        return self._width

    @property
    def rect_height(self) -> float:
        return self._height

    @property
    def rect_to_image(self) -> Mat3:
        return self._rect_to_image

    @property
    def image_to_rect(self) -> Mat3:
        return self._image_to_rect

    @property
    def rect_corners(self) -> Quad:
        return rect_corners(self._width, self._height)

    def to_rect(self, point) -> Point:
        """Image space -> rect space"""
        return apply_homography(self._image_to_rect, point)

    def to_image(self, point) -> Point:
        """Rect space -> image space"""
        return apply_homography(self._rect_to_image, point)

    def __repr__(self):
        return (
            f"RectSpace(quad={[tuple(p) for p in self._quad]}, "
            f"rect={self._width:g}x{self._height:g})"
        )
