"""Tests for SceneService."""

from __future__ import annotations

from pathlib import Path

import pluggy
import pytest

from scenectl.config.settings import SceneSettings
from scenectl.domain.factory import SceneFactory
from scenectl.plugins.manager import PluginManager
from scenectl.services.scene import SceneService

hookimpl = pluggy.HookimplMarker("scenectl")

TEST_SCENE_BODY = [
    "Рисуем композитный элемент:",
    "Рисуем точку в координатах (1, 1)",
    "Рисуем линию от (1, 1) до (4, 5)",
    "Рисуем круг с центром в (1, 1) и радиусом 3",
]


class _NeonFactory(SceneFactory):
    style = "neon"

    @property
    def label(self) -> str:
        return "Неоновая"


class _NeonPlugin:
    @hookimpl
    def register_scene_styles(self) -> dict[str, type[SceneFactory]]:
        return {"neon": _NeonFactory}


class _RenderCounter:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, int]] = []

    @hookimpl
    def post_render(self, op: str, style: str, line_count: int) -> None:
        self.calls.append((op, style, line_count))


class _BrokenRenderPlugin:
    @hookimpl
    def post_render(self, op: str, style: str, line_count: int) -> None:
        msg = "plugin exploded"
        raise RuntimeError(msg)


class _AbstractStylePlugin:
    @hookimpl
    def register_scene_styles(self) -> dict[str, type[SceneFactory]]:
        return {"half": SceneFactory}


class _RaisingStylePlugin:
    @hookimpl
    def register_scene_styles(self) -> dict[str, type[SceneFactory]]:
        msg = "style registry unavailable"
        raise RuntimeError(msg)


@pytest.fixture
def service(settings: SceneSettings) -> SceneService:
    return SceneService(settings)


def _with_plugins(settings: SceneSettings, *plugins: object) -> SceneService:
    manager = PluginManager()
    for plugin in plugins:
        manager.register_plugin(plugin)
    return SceneService(settings, manager)


class TestDrawBasic:
    def test_default_draws_every_builtin_style(self, service: SceneService) -> None:
        result = service.draw_basic()
        assert result.ok
        assert result.data["styles"] == ["color", "bw"]
        assert result.data["lines"] == [
            "Рисуем Цветная сцену:",
            "Рисуем точку в координатах (2, 3)",
            "Рисуем линию от (2, 3) до (5, 7)",
            "Рисуем круг с центром в (2, 3) и радиусом 4",
            "Рисуем Черно-белая сцену:",
            "Рисуем точку в координатах (1, 1)",
            "Рисуем линию от (1, 1) до (3, 4)",
            "Рисуем круг с центром в (1, 1) и радиусом 2",
        ]

    def test_single_style(self, service: SceneService) -> None:
        result = service.draw_basic(["bw"])
        assert result.data["lines"][0] == "Рисуем Черно-белая сцену:"
        assert result.data["lines"][1] == "Рисуем точку в координатах (2, 3)"

    def test_unknown_style(self, service: SceneService) -> None:
        result = service.draw_basic(["color", "neon"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_STYLE"
        assert result.error.detail == {"style": "neon"}


class TestDrawScenes:
    def test_draw_test(self, service: SceneService) -> None:
        result = service.draw_test()
        assert result.ok
        assert result.data["style"] == "color"
        assert result.data["label"] == "Цветная"
        assert result.data["object_count"] == 1
        assert result.data["lines"] == ["Рисуем Цветная сцену:", *TEST_SCENE_BODY]

    def test_draw_test_bw(self, service: SceneService) -> None:
        result = service.draw_test("bw")
        assert result.data["lines"][0] == "Рисуем Черно-белая сцену:"

    def test_unknown_style(self, service: SceneService) -> None:
        result = service.draw_test("neon")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_STYLE"
        assert "Unknown scene style 'neon'" in result.error.message

    def test_default_style_from_config(self, tmp_path: Path) -> None:
        (tmp_path / "scenectl.toml").write_text('[scene]\ndefault_style = "bw"\n')
        result = SceneService(SceneSettings.from_cli(start_dir=tmp_path)).draw_test()
        assert result.data["style"] == "bw"

    def test_draw_decorated(self, service: SceneService) -> None:
        result = service.draw_decorated()
        assert result.ok
        assert result.data["object_count"] == 4
        assert result.data["lines"][0] == "Рисуем композитный элемент:"
        assert result.data["lines"][-1] == "Закрашиваем объект цветом: Желтый"
        assert len(result.data["lines"]) == 9

    def test_draw_decorated_uses_palette(self, tmp_path: Path) -> None:
        (tmp_path / "scenectl.toml").write_text('[palette]\ntriangle = "Оранжевый"\n')
        result = SceneService(SceneSettings.from_cli(start_dir=tmp_path)).draw_decorated()
        assert result.data["lines"][-1] == "Закрашиваем объект цветом: Оранжевый"

    def test_draw_facade(self, service: SceneService) -> None:
        result = service.draw_facade("bw")
        assert result.ok
        assert result.data["object_count"] == 4
        assert result.data["lines"][:3] == [
            "Рисуем Черно-белая сцену:",
            "Рисуем точку в координатах (1, 1)",
            "Закрашиваем объект цветом: Красный",
        ]


class TestCloneScene:
    def test_clone_matches_original(self, service: SceneService) -> None:
        result = service.clone_scene()
        assert result.ok
        assert result.data["identical"] is True
        assert result.data["shared_objects"] == 0
        assert result.data["lines"] == result.data["clone_lines"]
        assert result.data["clone_lines"][1:] == TEST_SCENE_BODY


class TestExportXml:
    def test_export(self, service: SceneService) -> None:
        result = service.export_xml()
        assert result.ok
        assert result.data["tag_count"] == 3
        assert result.data["lines"] == [
            '<Point x="1" y="1" />',
            '<Line startX="1" startY="1" endX="4" endY="5" />',
            '<Circle cx="1" cy="1" radius="3" />',
        ]
        assert result.data["content"] == "\n".join(result.data["lines"]) + "\n"


class TestMeasureMemory:
    def test_reports_allocations(self, service: SceneService) -> None:
        result = service.measure_memory()
        assert result.ok
        assert result.data["label"] == "test scene"
        assert result.data["object_count"] == 1
        assert result.data["node_count"] == 4
        assert result.data["net_bytes"] >= 0
        assert result.data["peak_bytes"] >= result.data["net_bytes"]


class TestListStyles:
    def test_builtins(self, service: SceneService) -> None:
        result = service.list_styles()
        assert result.data["default"] == "color"
        assert result.data["items"] == [
            {"style": "color", "label": "Цветная", "source": "builtin"},
            {"style": "bw", "label": "Черно-белая", "source": "builtin"},
        ]

    def test_plugin_styles_listed(self, settings: SceneSettings) -> None:
        result = _with_plugins(settings, _NeonPlugin()).list_styles()
        assert result.data["items"][-1] == {"style": "neon", "label": "Неоновая", "source": "plugin"}


class TestPlugins:
    def test_plugin_style_draws(self, settings: SceneSettings) -> None:
        result = _with_plugins(settings, _NeonPlugin()).draw_test("neon")
        assert result.ok
        assert result.data["lines"][0] == "Рисуем Неоновая сцену:"

    def test_plugin_style_in_basic(self, settings: SceneSettings) -> None:
        result = _with_plugins(settings, _NeonPlugin()).draw_basic(["neon"])
        assert result.ok
        assert result.data["lines"][0] == "Рисуем Неоновая сцену:"

    def test_post_render_receives_line_count(self, settings: SceneSettings) -> None:
        counter = _RenderCounter()
        _with_plugins(settings, counter).draw_test()
        assert counter.calls == [("draw_test", "color", 5)]

    def test_post_render_per_basic_style(self, settings: SceneSettings) -> None:
        counter = _RenderCounter()
        _with_plugins(settings, counter).draw_basic()
        assert counter.calls == [("draw_basic", "color", 4), ("draw_basic", "bw", 4)]

    def test_plugin_failure_is_warning(self, settings: SceneSettings) -> None:
        result = _with_plugins(settings, _BrokenRenderPlugin()).draw_test()
        assert result.ok
        assert result.warnings == ["post_render hook failed for draw_test"]

    def test_abstract_plugin_style_is_unknown(self, settings: SceneSettings) -> None:
        result = _with_plugins(settings, _AbstractStylePlugin()).draw_test("half")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_STYLE"

    def test_abstract_plugin_style_not_listed(self, settings: SceneSettings) -> None:
        result = _with_plugins(settings, _AbstractStylePlugin(), _NeonPlugin()).list_styles()
        assert result.ok
        assert [item["style"] for item in result.data["items"]] == ["color", "bw", "neon"]

    def test_raising_style_hook_keeps_other_styles(self, settings: SceneSettings) -> None:
        result = _with_plugins(settings, _RaisingStylePlugin(), _NeonPlugin()).draw_test("neon")
        assert result.ok
        assert result.data["lines"][0] == "Рисуем Неоновая сцену:"
