"""Tests for config models: defaults and validation."""

import pytest
from pydantic import ValidationError

from scenectl.config.models import OutputConfig, PaletteConfig, SceneConfig


class TestSectionDefaults:
    def test_scene(self) -> None:
        assert SceneConfig().default_style == "color"

    def test_palette(self) -> None:
        palette = PaletteConfig()
        assert (palette.point, palette.line, palette.circle, palette.triangle) == (
            "Красный",
            "Синий",
            "Зеленый",
            "Желтый",
        )

    def test_sparse_override(self) -> None:
        palette = PaletteConfig(circle="Белый")
        assert palette.circle == "Белый"
        assert palette.point == "Красный"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            SceneConfig().default_style = "bw"  # type: ignore[misc]


class TestOutputConfig:
    def test_default_width(self) -> None:
        assert OutputConfig().width == 120

    def test_width_lower_bound(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(width=39)
