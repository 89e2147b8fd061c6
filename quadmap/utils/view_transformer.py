import numpy as np

from ..core.errors import PointAtInfinityError
from ..core.linear_solver import EPS
from ..core.rect_space import RectSpace


class ViewTransformer:
    def __init__(self, space: RectSpace, direction: str = 'to_rect'):
        """
        Initialize view transformer

        Args:
            space: Rect space built from the image quad
            direction: 'to_rect' (image -> rect) or 'to_image' (rect -> image)
        """
        if direction not in ('to_rect', 'to_image'):
            raise ValueError(f"Invalid direction: {direction}")
        self.space = space
        self.direction = direction
        self.m = space.image_to_rect if direction == 'to_rect' else space.rect_to_image

    @classmethod
    def from_quad(cls, quad, rect_width: float = 1.0, rect_height: float = 1.0,
                  direction: str = 'to_rect') -> 'ViewTransformer':
        return cls(RectSpace(quad, rect_width, rect_height), direction)

    def transform_points(self, points) -> np.ndarray:
        """
        Transform points between image and rect coordinate systems

        Args:
            points: Array (or nested sequence) of points [N, 2]

        Returns:
            Transformed points [N, 2]
        """
        points = np.asarray(points)
        if points.size == 0:
            return points

        reshaped_points = points.astype(np.float64).reshape(-1, 2)
        homogeneous = np.hstack([reshaped_points, np.ones((len(reshaped_points), 1))])
        transformed = homogeneous @ self.matrix.T

        w = transformed[:, 2:3]
        if np.any(np.abs(w) < EPS):
            raise PointAtInfinityError("Point mapped to infinity (w ~ 0)")
        return transformed[:, :2] / w

    @property
    def matrix(self) -> np.ndarray:
        """Active homography as a 3x3 array"""
        return self.m.to_array()
