"""Shared pytest fixtures and test helpers for scenectl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

from scenectl.config.settings import SceneSettings
from scenectl.domain.shapes import Drawable
from scenectl.output.console import create_console, get_output
from scenectl.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test from an empty directory with no scenectl env overrides.

    Also restores root logging and telemetry state, which CLI invocations
    reconfigure globally.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("SCENECTL_CONFIG", "SCENECTL_SCENE__DEFAULT_STYLE", "SCENECTL_OUTPUT__WIDTH"):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> SceneSettings:
    """Default settings, no config file."""
    return SceneSettings.from_cli()


@pytest.fixture
def console() -> Console:
    """Colorless StringIO-backed console."""
    return create_console(no_color=True)


@pytest.fixture
def draw_lines() -> Callable[[Drawable], list[str]]:
    """Return a helper that draws a drawable and returns its output lines."""

    def _draw(drawable: Drawable) -> list[str]:
        console = create_console(no_color=True)
        drawable.draw(console)
        return get_output(console).splitlines()

    return _draw
