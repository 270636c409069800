"""SceneFacade: one-call helpers for populating a scene.

The facade owns exactly one scene: either the one injected by the caller
or a fresh one from the factory. Passing the same scene to several facades
is how callers share it; there is no global instance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scenectl.domain.shapes import Drawable, Triangle, TriangleAdapter
from scenectl.domain.structure import ColorDecorator

if TYPE_CHECKING:
    from rich.console import Console

    from scenectl.domain.factory import SceneFactory
    from scenectl.domain.scene import Scene


class SceneFacade:
    def __init__(self, factory: SceneFactory, scene: Scene | None = None) -> None:
        self._factory = factory
        self._scene = scene if scene is not None else factory.create_scene()

    @property
    def scene(self) -> Scene:
        return self._scene

    def _place(self, drawable: Drawable, color: str | None) -> Drawable:
        if color is not None:
            drawable = ColorDecorator(drawable, color)
        drawable.add_to_scene(self._scene)
        return drawable

    def add_point(self, x: float, y: float, color: str | None = None) -> Drawable:
        return self._place(self._factory.create_point(x, y), color)

    def add_line(
        self,
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
        color: str | None = None,
    ) -> Drawable:
        start = self._factory.create_point(start_x, start_y)
        end = self._factory.create_point(end_x, end_y)
        return self._place(self._factory.create_line(start, end), color)

    def add_circle(
        self,
        center_x: float,
        center_y: float,
        radius: float,
        color: str | None = None,
    ) -> Drawable:
        center = self._factory.create_point(center_x, center_y)
        return self._place(self._factory.create_circle(center, radius), color)

    def add_triangle(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
        color: str | None = None,
    ) -> Drawable:
        adapter = TriangleAdapter(Triangle(x1, y1, x2, y2, x3, y3))
        return self._place(adapter, color)

    def draw_scene(self, console: Console | None = None) -> None:
        self._scene.draw(console)
