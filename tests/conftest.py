"""Shared test fixtures for view-layout."""

from __future__ import annotations

import pytest

from view_layout.geometry import Rect


class FakeView:
    """Minimal in-memory view: a frame plus parent/child links."""

    def __init__(self, name: str, frame: Rect | None = None) -> None:
        self.name = name
        self.frame = frame if frame is not None else Rect(0, 0, 0, 0)
        self.subviews: list[FakeView] = []
        self.superview: FakeView | None = None

    def add_subview(self, view: FakeView) -> FakeView:
        view.superview = self
        self.subviews.append(view)
        return view

    def remove_from_superview(self) -> None:
        if self.superview is not None:
            self.superview.subviews.remove(self)
            self.superview = None

    def __repr__(self) -> str:
        return f"FakeView({self.name!r})"


class Label(FakeView):
    pass


class Button(FakeView):
    pass


class RecordingEngine:
    """Layout engine double that records activations instead of solving."""

    def __init__(self, vfl_result: list | None = None) -> None:
        self.active: list = []
        self.vfl_calls: list[tuple] = []
        self._vfl_result = vfl_result if vfl_result is not None else ["vfl-constraint"]

    def activate(self, constraints) -> None:
        self.active.extend(constraints)

    def constraints_with_visual_format(self, format, metrics, views):
        self.vfl_calls.append((format, metrics, views))
        return list(self._vfl_result)


@pytest.fixture
def engine():
    return RecordingEngine()


@pytest.fixture
def view_tree():
    """root -> [a: Label, b: FakeView -> [c: Label, d: Button], e: Button]"""
    root = FakeView("root", Rect(0, 0, 320, 480))
    a = root.add_subview(Label("a", Rect(10, 10, 100, 20)))
    b = root.add_subview(FakeView("b", Rect(0, 40, 320, 200)))
    c = b.add_subview(Label("c"))
    d = b.add_subview(Button("d"))
    e = root.add_subview(Button("e"))
    return {"root": root, "a": a, "b": b, "c": c, "d": d, "e": e}


@pytest.fixture
def pinned_view():
    parent = FakeView("parent", Rect(0, 0, 200, 200))
    return parent.add_subview(FakeView("child", Rect(0, 0, 50, 50)))
