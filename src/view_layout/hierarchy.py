"""View-tree helpers: typed descendant search and subview removal.

A view is anything exposing ``subviews`` (an ordered sequence of child
views). ``remove_subviews`` additionally needs ``remove_from_superview()``
on each child, and ``view_distance_to_point`` needs a ``frame`` Rect.

Traversal assumes an acyclic tree that is not mutated while it is being
walked. Neither is checked.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Protocol, Sequence, runtime_checkable

from .geometry import Point, Rect, distance_to_point

logger = logging.getLogger(__name__)


ViewTest = Callable[[Any], bool]


@runtime_checkable
class ViewLike(Protocol):
    """The subset of a host view the helpers rely on."""

    @property
    def subviews(self) -> Sequence[Any]: ...

    @property
    def superview(self) -> Any | None: ...

    @property
    def frame(self) -> Rect: ...

    def remove_from_superview(self) -> None: ...


def iter_subviews(
    root: Any,
    kind: type | tuple[type, ...] | None = None,
    passing_test: ViewTest | None = None,
) -> Iterator[Any]:
    """Yield descendants of ``root`` in pre-order, filtered by type and test.

    Every child is descended into whether or not it matched itself.
    """
    for view in root.subviews:
        if kind is None or isinstance(view, kind):
            if passing_test is None or passing_test(view):
                yield view
        yield from iter_subviews(view, kind, passing_test)


def recursive_subviews(
    root: Any,
    kind: type | tuple[type, ...] | None = None,
    passing_test: ViewTest | None = None,
) -> list:
    """Collect all descendants of ``root`` that are ``kind`` and pass the test.

    Parameters
    ----------
    root : view
        Any object with a ``subviews`` sequence.
    kind : type or tuple of types, optional
        Only descendants that are instances of ``kind`` are returned.
        Non-matching descendants are skipped, but their own subviews are
        still searched.
    passing_test : callable, optional
        ``fn(view) -> bool``, only called on views matching ``kind``.
        Defaults to accepting everything.

    Returns
    -------
    list
        Matches in pre-order, preserving sibling order. Empty for a leaf.
    """
    return list(iter_subviews(root, kind, passing_test))


def remove_subviews(view: Any) -> int:
    """Detach every direct subview of ``view``. Returns how many were removed."""
    # snapshot: removal mutates view.subviews
    children = list(view.subviews)
    for child in children:
        child.remove_from_superview()
    logger.debug("Removed %d subviews from %r", len(children), view)
    return len(children)


def view_distance_to_point(view: Any, point: Point) -> float:
    """Distance from ``point`` to the nearest point of ``view.frame``."""
    return distance_to_point(view.frame, point)
