"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, scenectl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- scenectl.toml sections ---


class SceneConfig(BaseModel):
    """[scene] section."""

    model_config = {"frozen": True}

    default_style: str = "color"


class PaletteConfig(BaseModel):
    """[palette] section: fill colors for the decorated demos."""

    model_config = {"frozen": True}

    point: str = "Красный"
    line: str = "Синий"
    circle: str = "Зеленый"
    triangle: str = "Желтый"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
