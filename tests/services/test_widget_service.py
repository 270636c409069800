"""Tests for WidgetService."""

from __future__ import annotations

from scenectl.config.settings import SceneSettings
from scenectl.services.widgets import WidgetService, build_demo_window


class TestBuildDemoWindow:
    def test_print_button_is_chained_to_window(self) -> None:
        window, print_button = build_demo_window()
        frame = print_button.next_handler
        assert frame is not None
        assert frame in window.children


class TestRunDemo:
    def test_layout(self, settings: SceneSettings) -> None:
        result = WidgetService(settings).run_demo()
        assert result.ok
        assert result.op == "widgets_demo"
        assert (result.data["width"], result.data["height"]) == (44, 7)
        layout = result.data["layout"]
        assert len(layout) == 14
        assert layout[4] == "++ Login ****++ Password ********++*******++"
        assert layout[6] == "++       *OK*++          *Verify*++*Print*++"
        assert layout[1] == ""

    def test_events(self, settings: SceneSettings) -> None:
        result = WidgetService(settings).run_demo()
        assert result.data["events"] == [
            "Button pressed",
            "Button press first handler",
            "Button press second handler",
            "MainWin handler",
        ]
        assert result.data["handled"] is False
