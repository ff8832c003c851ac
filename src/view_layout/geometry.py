"""Geometric primitives and point-to-rectangle distance."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point:
    """A point in view coordinates."""

    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in view coordinates.

    Width and height must be non-negative; use ``Rect.from_corners`` to
    build a rect from two arbitrary corners.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect size must be non-negative, got width={self.width}, "
                f"height={self.height}. Use Rect.from_corners() for unordered corners."
            )

    @classmethod
    def from_corners(cls, x0: float, y0: float, x1: float, y1: float) -> Rect:
        """Create a Rect spanning two opposite corners, in any order."""
        return cls(min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0))

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def closest_point(self, point: Point) -> Point:
        """Nearest point on or inside the rect to ``point``."""
        if self.contains(point.x, point.y):
            return point

        cx = self.x
        if point.x > self.right:
            cx = self.right
        elif point.x > self.x:
            cx = point.x

        cy = self.y
        if point.y > self.bottom:
            cy = self.bottom
        elif point.y > self.y:
            cy = point.y

        return Point(cx, cy)

    def distance_to(self, point: Point) -> float:
        return distance_to_point(self, point)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


def distance_to_point(rect: Rect, point: Point) -> float:
    """Euclidean distance from ``point`` to the nearest point of ``rect``.

    Points inside the rect or on its boundary are at distance 0. A
    zero-size rect behaves as a single point.
    """
    if rect.contains(point.x, point.y):
        return 0.0
    closest = rect.closest_point(point)
    return math.sqrt((closest.y - point.y) ** 2 + (closest.x - point.x) ** 2)


def distances_to_points(rect: Rect, points) -> np.ndarray:
    """Vectorized ``distance_to_point`` for an (N, 2) array of x, y pairs."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(
            f"Expected an (N, 2) array of points, got shape {arr.shape}."
        )
    # Clamping into [x, right] x [y, bottom] gives the nearest point, and
    # contained points clamp onto themselves.
    cx = np.clip(arr[:, 0], rect.x, rect.right)
    cy = np.clip(arr[:, 1], rect.y, rect.bottom)
    return np.sqrt((cy - arr[:, 1]) ** 2 + (cx - arr[:, 0]) ** 2)


def center_rect(rect: Rect) -> Rect:
    """A 1x1 rect at half the width and the full height, in local coordinates.

    Typically used as the anchor rect for a popover presented from the
    bottom center of a view.
    """
    return Rect(rect.width / 2, rect.height, 1, 1)
