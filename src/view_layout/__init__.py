"""view-layout: Auto Layout shortcuts and geometry helpers for view trees."""

from ._version import __version__
from .geometry import (
    Point,
    Size,
    Rect,
    center_rect,
    distance_to_point,
    distances_to_points,
)
from .hierarchy import (
    ViewLike,
    iter_subviews,
    recursive_subviews,
    remove_subviews,
    view_distance_to_point,
)
from .constraints import (
    DEFAULT_MARGIN,
    Attribute,
    Axis,
    AutoLayout,
    Constraint,
    LayoutEngine,
)

__all__ = [
    "__version__",
    "Point",
    "Size",
    "Rect",
    "center_rect",
    "distance_to_point",
    "distances_to_points",
    "ViewLike",
    "iter_subviews",
    "recursive_subviews",
    "remove_subviews",
    "view_distance_to_point",
    "DEFAULT_MARGIN",
    "Attribute",
    "Axis",
    "AutoLayout",
    "Constraint",
    "LayoutEngine",
]
