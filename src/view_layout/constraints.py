"""Auto Layout shortcuts expressed as constraint descriptions.

The helpers here only describe constraints; solving them is the job of
the host toolkit, reached through a ``LayoutEngine`` adapter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Protocol, Sequence

from .geometry import Size

logger = logging.getLogger(__name__)


# Defaults
DEFAULT_MARGIN = 0.0
VIEW_PLACEHOLDER = "view"  # name bound to the view in add_visual_format_constraints


class Attribute(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    WIDTH = "width"
    HEIGHT = "height"
    CENTER_X = "center_x"
    CENTER_Y = "center_y"


class Axis(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Constraint:
    """``item.attribute == to_item.to_attribute + constant``.

    When ``to_item`` is None the constraint pins the attribute to
    ``constant`` alone (a fixed width or height).
    """

    item: Any
    attribute: Attribute
    to_item: Any = None
    to_attribute: Attribute | None = None
    constant: float = 0.0

    def to_dict(self) -> dict:
        d = {"attribute": self.attribute.value, "constant": self.constant}
        if self.to_attribute is not None:
            d["toAttribute"] = self.to_attribute.value
        return d


class LayoutEngine(Protocol):
    """Adapter onto the host toolkit's constraint system."""

    def activate(self, constraints: Sequence[Any]) -> None: ...

    def constraints_with_visual_format(
        self,
        format: str,
        metrics: Mapping[str, float] | None,
        views: Mapping[str, Any],
    ) -> list: ...


class AutoLayout:
    """Convenience constraint helpers bound to one layout engine.

    Every helper returns the constraints it activated.
    """

    def __init__(self, engine: LayoutEngine, margin: float = DEFAULT_MARGIN) -> None:
        self._engine = engine
        self._margin = margin

    @property
    def margin(self) -> float:
        return self._margin

    def _activate(self, constraints: list) -> list:
        if constraints:
            self._engine.activate(constraints)
            logger.debug("Activated %d constraints", len(constraints))
        return constraints

    def _superview(self, view: Any, action: str) -> Any | None:
        superview = getattr(view, "superview", None)
        if superview is None:
            logger.warning("Cannot %s: %r has no superview", action, view)
        return superview

    # --- centering ---

    def center_on_x_axis(self, view: Any) -> list[Constraint]:
        superview = self._superview(view, "center on x axis")
        if superview is None:
            return []
        return self._activate([
            Constraint(view, Attribute.CENTER_X, superview, Attribute.CENTER_X),
        ])

    def center_on_y_axis(self, view: Any) -> list[Constraint]:
        superview = self._superview(view, "center on y axis")
        if superview is None:
            return []
        return self._activate([
            Constraint(view, Attribute.CENTER_Y, superview, Attribute.CENTER_Y),
        ])

    # --- sizing ---

    def set_height(self, view: Any, height: float) -> list[Constraint]:
        _check_dimension("height", height)
        return self._activate([Constraint(view, Attribute.HEIGHT, constant=height)])

    def set_width(self, view: Any, width: float) -> list[Constraint]:
        _check_dimension("width", width)
        return self._activate([Constraint(view, Attribute.WIDTH, constant=width)])

    def set_content_size(self, view: Any, size: Size) -> list[Constraint]:
        _check_dimension("width", size.width)
        _check_dimension("height", size.height)
        return self._activate([
            Constraint(view, Attribute.WIDTH, constant=size.width),
            Constraint(view, Attribute.HEIGHT, constant=size.height),
        ])

    # --- pinning to superview edges ---

    def fill_width_of_superview(
        self, view: Any, margin: float | None = None
    ) -> list[Constraint]:
        """Pin left and right edges to the superview, inset by ``margin``."""
        superview = self._superview(view, "fill width of superview")
        if superview is None:
            return []
        m = self._margin if margin is None else margin
        return self._activate([
            Constraint(view, Attribute.LEFT, superview, Attribute.LEFT, m),
            Constraint(view, Attribute.RIGHT, superview, Attribute.RIGHT, -m),
        ])

    def fill_height_of_superview(
        self, view: Any, margin: float | None = None
    ) -> list[Constraint]:
        """Pin top and bottom edges to the superview, inset by ``margin``."""
        superview = self._superview(view, "fill height of superview")
        if superview is None:
            return []
        m = self._margin if margin is None else margin
        return self._activate([
            Constraint(view, Attribute.TOP, superview, Attribute.TOP, m),
            Constraint(view, Attribute.BOTTOM, superview, Attribute.BOTTOM, -m),
        ])

    def fill_superview(
        self,
        view: Any,
        axis: Axis | None = None,
        margin: float | None = None,
    ) -> list[Constraint]:
        """Pin to the superview along one axis, or both when ``axis`` is None."""
        if axis is None:
            return (
                self.fill_width_of_superview(view, margin)
                + self.fill_height_of_superview(view, margin)
            )
        if not isinstance(axis, Axis):
            raise TypeError(
                f"axis must be an Axis or None, got {type(axis).__name__}."
            )
        if axis is Axis.HORIZONTAL:
            return self.fill_width_of_superview(view, margin)
        return self.fill_height_of_superview(view, margin)

    # --- visual format language ---

    def add_visual_format_constraints(self, view: Any, format: str) -> list:
        """Apply a VFL string in which the view is named ``view``.

        e.g. ``"|-20-[view]-20-|"`` or ``"V:|-(>=16)-[view(>36)]"``.
        """
        return self.add_constraints(format, views={VIEW_PLACEHOLDER: view})

    def add_constraints(
        self,
        format: str,
        views: Mapping[str, Any],
        metrics: Mapping[str, float] | None = None,
    ) -> list:
        """Parse ``format`` with the engine and activate the result."""
        if not isinstance(format, str) or not format.strip():
            raise ValueError("Visual format must be a non-empty string.")
        if not views:
            raise ValueError(
                "views must name at least one view referenced by the format."
            )
        bad_keys = [k for k in views if not isinstance(k, str)]
        if bad_keys:
            raise TypeError(f"views keys must be strings, got {bad_keys[:5]}")
        constraints = self._engine.constraints_with_visual_format(
            format, metrics, dict(views)
        )
        return self._activate(list(constraints))

    def __repr__(self) -> str:
        return f"AutoLayout(engine={self._engine!r}, margin={self._margin})"


def _check_dimension(name: str, value: float) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}.")
