"""Tests for scene factories and the style registry."""

from __future__ import annotations

import pytest

from scenectl.domain.factory import (
    SCENE_STYLES,
    BlackWhiteSceneFactory,
    ColorSceneFactory,
    SceneFactory,
    get_factory,
)
from scenectl.domain.shapes import Circle, Line, Point


class _SepiaFactory(SceneFactory):
    style = "sepia"

    @property
    def label(self) -> str:
        return "Сепия"


class TestFactories:
    @pytest.mark.parametrize(
        ("factory", "label"),
        [(ColorSceneFactory(), "Цветная"), (BlackWhiteSceneFactory(), "Черно-белая")],
    )
    def test_scene_label(self, factory: SceneFactory, label: str) -> None:
        scene = factory.create_scene()
        assert scene.style_label == label
        assert len(scene) == 0

    def test_styles_share_shape_data(self) -> None:
        color, bw = ColorSceneFactory(), BlackWhiteSceneFactory()
        assert color.create_point(2, 3) == bw.create_point(2, 3)
        start, end = Point(0, 0), Point(1, 1)
        assert color.create_line(start, end) == bw.create_line(start, end) == Line(start, end)
        assert color.create_circle(start, 4) == Circle(start, 4)

    def test_each_scene_is_new(self) -> None:
        factory = ColorSceneFactory()
        assert factory.create_scene() is not factory.create_scene()


class TestGetFactory:
    def test_builtin_styles(self) -> None:
        assert set(SCENE_STYLES) == {"color", "bw"}
        assert isinstance(get_factory("color"), ColorSceneFactory)
        assert isinstance(get_factory("bw"), BlackWhiteSceneFactory)

    def test_unknown_style(self) -> None:
        with pytest.raises(KeyError, match="Unknown scene style 'neon'"):
            get_factory("neon")

    def test_extra_styles(self) -> None:
        assert get_factory("sepia", {"sepia": _SepiaFactory}).label == "Сепия"

    def test_builtin_wins_over_extra(self) -> None:
        factory = get_factory("color", {"color": _SepiaFactory})
        assert isinstance(factory, ColorSceneFactory)
