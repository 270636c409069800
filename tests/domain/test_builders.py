"""Tests for the demo scene builders and SceneFacade."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from rich.console import Console

from scenectl.domain.builders import (
    DecoratedSceneBuilder,
    Palette,
    TestSceneBuilder,
    build_primitive_scene,
)
from scenectl.domain.facade import SceneFacade
from scenectl.domain.factory import BlackWhiteSceneFactory, ColorSceneFactory
from scenectl.domain.scene import Scene
from scenectl.domain.shapes import Drawable, Point
from scenectl.domain.structure import ColorDecorator, CompositeDrawable
from scenectl.output.console import get_output

DrawLines = Callable[[Drawable], list[str]]


def _scene_lines(scene: Scene, console: Console) -> list[str]:
    scene.draw(console)
    return get_output(console).splitlines()


class TestPrimitiveScene:
    def test_color_basic_scene(self, console: Console) -> None:
        scene = build_primitive_scene(ColorSceneFactory(), (2, 3), (5, 7), 4)
        assert _scene_lines(scene, console) == [
            "Рисуем Цветная сцену:",
            "Рисуем точку в координатах (2, 3)",
            "Рисуем линию от (2, 3) до (5, 7)",
            "Рисуем круг с центром в (2, 3) и радиусом 4",
        ]


class TestTestSceneBuilder:
    def test_build_test_scene(self, console: Console) -> None:
        scene = TestSceneBuilder(ColorSceneFactory()).build_test_scene()
        assert len(scene) == 1
        assert isinstance(scene.objects[0], CompositeDrawable)
        assert _scene_lines(scene, console) == [
            "Рисуем Цветная сцену:",
            "Рисуем композитный элемент:",
            "Рисуем точку в координатах (1, 1)",
            "Рисуем линию от (1, 1) до (4, 5)",
            "Рисуем круг с центром в (1, 1) и радиусом 3",
        ]

    def test_uses_factory_label(self) -> None:
        scene = TestSceneBuilder(BlackWhiteSceneFactory()).build_test_scene()
        assert scene.header() == "Рисуем Черно-белая сцену:"


class TestDecoratedSceneBuilder:
    def test_decorated_composite(self, draw_lines: DrawLines) -> None:
        composite = DecoratedSceneBuilder(ColorSceneFactory()).build_decorated_composite()
        assert len(composite) == 4
        assert all(isinstance(child, ColorDecorator) for child in composite.children)
        assert draw_lines(composite) == [
            "Рисуем композитный элемент:",
            "Рисуем точку в координатах (1, 1)",
            "Закрашиваем объект цветом: Красный",
            "Рисуем линию от (1, 1) до (4, 5)",
            "Закрашиваем объект цветом: Синий",
            "Рисуем круг с центром в (1, 1) и радиусом 3",
            "Закрашиваем объект цветом: Зеленый",
            "Рисуем треугольник с вершинами (0, 0), (3, 0), (1.5, 2.5)",
            "Закрашиваем объект цветом: Желтый",
        ]

    def test_custom_palette(self, draw_lines: DrawLines) -> None:
        palette = Palette(point="Белый")
        composite = DecoratedSceneBuilder(ColorSceneFactory(), palette).build_decorated_composite()
        assert draw_lines(composite)[2] == "Закрашиваем объект цветом: Белый"

    def test_facade_scene(self, console: Console) -> None:
        scene = DecoratedSceneBuilder(ColorSceneFactory()).build_facade_scene()
        assert _scene_lines(scene, console) == [
            "Рисуем Цветная сцену:",
            "Рисуем точку в координатах (1, 1)",
            "Закрашиваем объект цветом: Красный",
            "Рисуем линию от (0, 0) до (3, 3)",
            "Закрашиваем объект цветом: Синий",
            "Рисуем круг с центром в (5, 5) и радиусом 2",
            "Закрашиваем объект цветом: Зеленый",
            "Рисуем треугольник с вершинами (0, 0), (4, 0), (2, 3)",
            "Закрашиваем объект цветом: Желтый",
        ]

    def test_facade_scene_into_injected_scene(self) -> None:
        shared = Scene("Цветная")
        result = DecoratedSceneBuilder(ColorSceneFactory()).build_facade_scene(shared)
        assert result is shared
        assert len(shared) == 4


class TestSceneFacade:
    def test_creates_scene_from_factory(self) -> None:
        facade = SceneFacade(BlackWhiteSceneFactory())
        assert facade.scene.style_label == "Черно-белая"

    def test_uncolored_shape_is_not_decorated(self) -> None:
        facade = SceneFacade(ColorSceneFactory())
        added = facade.add_point(1, 2)
        assert added == Point(1, 2)
        assert facade.scene.objects == (added,)

    def test_colored_shape_is_decorated(self) -> None:
        facade = SceneFacade(ColorSceneFactory())
        added = facade.add_circle(0, 0, 1, "Синий")
        assert isinstance(added, ColorDecorator)
        assert added.fill_color == "Синий"

    def test_facades_share_injected_scene(self) -> None:
        shared = Scene("Цветная")
        SceneFacade(ColorSceneFactory(), shared).add_point(1, 1)
        SceneFacade(ColorSceneFactory(), shared).add_line(0, 0, 1, 1)
        assert len(shared) == 2

    def test_draw_scene(self, console: Console) -> None:
        facade = SceneFacade(ColorSceneFactory())
        facade.add_triangle(0, 0, 4, 0, 2, 3)
        facade.draw_scene(console)
        assert get_output(console).splitlines()[-1] == (
            "Рисуем треугольник с вершинами (0, 0), (4, 0), (2, 3)"
        )

    @pytest.mark.parametrize("color", [None, "Желтый"])
    def test_add_triangle_returns_placed_object(self, color: str | None) -> None:
        facade = SceneFacade(ColorSceneFactory())
        added = facade.add_triangle(0, 0, 1, 0, 0, 1, color)
        assert facade.scene.objects[-1] is added
