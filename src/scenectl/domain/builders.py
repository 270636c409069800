"""Builders for the canned demo scenes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from scenectl.domain.facade import SceneFacade
from scenectl.domain.shapes import Triangle, TriangleAdapter
from scenectl.domain.structure import ColorDecorator, CompositeDrawable

if TYPE_CHECKING:
    from scenectl.domain.factory import SceneFactory
    from scenectl.domain.scene import Scene


@dataclass(frozen=True)
class Palette:
    """Fill colors used by the decorated demo scenes."""

    point: str = "Красный"
    line: str = "Синий"
    circle: str = "Зеленый"
    triangle: str = "Желтый"


def build_primitive_scene(
    factory: SceneFactory,
    origin: tuple[float, float],
    end: tuple[float, float],
    radius: float,
) -> Scene:
    """Scene of a point, a line from it to *end*, and a circle around it."""
    scene = factory.create_scene()
    point = factory.create_point(*origin)
    line = factory.create_line(point, factory.create_point(*end))
    circle = factory.create_circle(point, radius)
    point.add_to_scene(scene)
    line.add_to_scene(scene)
    circle.add_to_scene(scene)
    return scene


class TestSceneBuilder:
    """Assemble the reference scene used by clone and export demos."""

    __test__ = False  # not a pytest test class

    def __init__(self, factory: SceneFactory) -> None:
        self._factory = factory

    def build_test_scene(self) -> Scene:
        scene = self._factory.create_scene()

        point = self._factory.create_point(1, 1)
        line = self._factory.create_line(point, self._factory.create_point(4, 5))
        circle = self._factory.create_circle(point, 3)

        composite = CompositeDrawable([point, line, circle])
        composite.add_to_scene(scene)
        return scene


class DecoratedSceneBuilder:
    """Build colored variants of the test shapes, directly and through a facade."""

    def __init__(self, factory: SceneFactory, palette: Palette | None = None) -> None:
        self._factory = factory
        self._palette = palette or Palette()

    def build_decorated_composite(self) -> CompositeDrawable:
        point = self._factory.create_point(1, 1)
        line = self._factory.create_line(point, self._factory.create_point(4, 5))
        circle = self._factory.create_circle(point, 3)
        triangle = TriangleAdapter(Triangle(0, 0, 3, 0, 1.5, 2.5))

        return CompositeDrawable(
            [
                ColorDecorator(point, self._palette.point),
                ColorDecorator(line, self._palette.line),
                ColorDecorator(circle, self._palette.circle),
                ColorDecorator(triangle, self._palette.triangle),
            ]
        )

    def build_facade_scene(self, scene: Scene | None = None) -> Scene:
        facade = SceneFacade(self._factory, scene)
        facade.add_point(1, 1, self._palette.point)
        facade.add_line(0, 0, 3, 3, self._palette.line)
        facade.add_circle(5, 5, 2, self._palette.circle)
        facade.add_triangle(0, 0, 4, 0, 2, 3, self._palette.triangle)
        return facade.scene
