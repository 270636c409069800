"""Abstract factory per scene style, plus the style registry.

Factories are stateless. Built-in styles produce identical shape data and
differ only in the label they stamp on the scenes they create. Plugins can
contribute further styles through the ``register_scene_styles`` hook.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import ClassVar

from scenectl.domain.scene import Scene
from scenectl.domain.shapes import Circle, Line, Point


class SceneFactory(ABC):
    """Creation interface for shapes and scenes of one style."""

    style: ClassVar[str] = ""

    @property
    @abstractmethod
    def label(self) -> str:
        """Human label printed in the scene header (e.g. 'Цветная')."""
        ...

    def create_point(self, x: float, y: float) -> Point:
        return Point(x, y)

    def create_line(self, start: Point, end: Point) -> Line:
        return Line(start, end)

    def create_circle(self, center: Point, radius: float) -> Circle:
        return Circle(center, radius)

    def create_scene(self) -> Scene:
        return Scene(self.label)


class ColorSceneFactory(SceneFactory):
    style = "color"

    @property
    def label(self) -> str:
        return "Цветная"


class BlackWhiteSceneFactory(SceneFactory):
    style = "bw"

    @property
    def label(self) -> str:
        return "Черно-белая"


SCENE_STYLES: dict[str, type[SceneFactory]] = {
    ColorSceneFactory.style: ColorSceneFactory,
    BlackWhiteSceneFactory.style: BlackWhiteSceneFactory,
}


def get_factory(
    style: str,
    extra: Mapping[str, type[SceneFactory]] | None = None,
) -> SceneFactory:
    """Instantiate the factory registered for *style*.

    Built-in styles win over *extra* (plugin-provided) registrations.

    Raises:
        KeyError: If no factory is registered for *style*.
    """
    registry = {**(extra or {}), **SCENE_STYLES}
    factory_cls = registry.get(style)
    if factory_cls is None:
        known = ", ".join(sorted(registry))
        msg = f"Unknown scene style {style!r} (known: {known})"
        raise KeyError(msg)
    return factory_cls()
